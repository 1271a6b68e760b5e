"""
tests.test_resolver

Locale resolution: override cookie first, then browser negotiation, then the default.
"""

from __future__ import annotations

import pytest

from ssr_first.i18n.locales import DEFAULT_LOCALE, SupportedLocale
from ssr_first.i18n.preferences import parse_accept_language
from ssr_first.i18n.resolver import LocaleOverride, ResolutionSource, resolve, select

HEADERS = [
    "",
    "de",
    "fr",
    "en-DE",
    "fr, de;q=0.1",
    "en-US;q=0.8, de;q=0.9",
    "*",
    "ja, zh;q=0.9, en;q=0.0",
]


def test_default_locale_is_german_and_supported() -> None:
    assert DEFAULT_LOCALE is SupportedLocale.DE


@pytest.mark.parametrize(
    ("header", "expected", "source"),
    [
        ("de", SupportedLocale.DE, ResolutionSource.BROWSER),
        ("fr", SupportedLocale.DE, ResolutionSource.DEFAULT),
        ("en-DE", SupportedLocale.EN, ResolutionSource.BROWSER),
        ("en-US, de;q=0.5", SupportedLocale.EN, ResolutionSource.BROWSER),
        ("fr, en;q=0.3", SupportedLocale.EN, ResolutionSource.BROWSER),
        ("de;q=0.2, en-GB;q=0.7", SupportedLocale.EN, ResolutionSource.BROWSER),
        ("en;q=0, fr", SupportedLocale.DE, ResolutionSource.DEFAULT),
        ("*", SupportedLocale.DE, ResolutionSource.DEFAULT),
        ("", SupportedLocale.DE, ResolutionSource.DEFAULT),
    ],
)
def test_browser_negotiation(header: str, expected: SupportedLocale, source: ResolutionSource) -> None:
    resolution = resolve(None, parse_accept_language(header))
    assert resolution.active is expected
    assert resolution.source is source
    assert resolution.persist is None


@pytest.mark.parametrize("locale", list(SupportedLocale))
@pytest.mark.parametrize("header", HEADERS)
def test_override_dominates_browser_preferences(locale: SupportedLocale, header: str) -> None:
    resolution = resolve(LocaleOverride(locale), parse_accept_language(header))
    assert resolution.active is locale
    assert resolution.source is ResolutionSource.OVERRIDE
    assert resolution.persist is None


@pytest.mark.parametrize("locale", list(SupportedLocale))
@pytest.mark.parametrize("header", HEADERS)
def test_select_then_resolve_is_stable(locale: SupportedLocale, header: str) -> None:
    override = select(locale)
    # Simulate the next request: the override comes back via its cookie value.
    restored = LocaleOverride.from_cookie(override.to_cookie())
    assert resolve(restored, parse_accept_language(header)).active is locale


@pytest.mark.parametrize("value", [None, "", "fr", "english", "d e"])
def test_unrecognised_cookie_is_no_override(value: str | None) -> None:
    assert LocaleOverride.from_cookie(value) is None


def test_cookie_values_are_case_insensitive() -> None:
    assert LocaleOverride.from_cookie(" EN ") == LocaleOverride(SupportedLocale.EN)
