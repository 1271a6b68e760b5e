"""
tests.test_preferences

Accept-Language parsing into ordered language preferences.
"""

from __future__ import annotations

import pytest

from ssr_first.i18n.preferences import LanguagePreference, parse_accept_language


def test_single_tag_defaults_to_full_quality() -> None:
    assert parse_accept_language("de") == (LanguagePreference(tag="de", quality=1.0),)


def test_sorted_by_quality_with_stable_ties() -> None:
    prefs = parse_accept_language("fr;q=0.5, en-GB, de;q=0.9, en, it;q=0.5")
    assert [p.tag for p in prefs] == ["en-GB", "en", "de", "fr", "it"]
    assert [p.quality for p in prefs] == [1.0, 1.0, 0.9, 0.5, 0.5]


def test_region_and_primary_subtags() -> None:
    (pref,) = parse_accept_language("EN-de")
    assert pref.primary == "en"
    assert pref.region == "de"
    assert parse_accept_language("en")[0].region is None


@pytest.mark.parametrize("header", [None, "", "   ", ",,,"])
def test_empty_header_yields_no_preferences(header: str | None) -> None:
    assert parse_accept_language(header) == ()


def test_malformed_entries_are_dropped() -> None:
    prefs = parse_accept_language("en;q=abc, de;q=1.5, 123, fr-;q=0.3, it;q, es;q=0.2")
    assert [p.tag for p in prefs] == ["es"]


def test_wildcard_and_unknown_parameters() -> None:
    prefs = parse_accept_language("*;q=0.1, de;level=1")
    assert [p.tag for p in prefs] == ["de", "*"]
    assert prefs[1].is_wildcard
