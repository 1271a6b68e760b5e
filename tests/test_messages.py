"""
tests.test_messages

Message catalogues and the localised language selector.
"""

from __future__ import annotations

import pytest

from ssr_first.i18n.locales import SupportedLocale
from ssr_first.i18n.messages import CATALOGUE, language_selector, translate


def test_login_heading_per_locale() -> None:
    assert translate(SupportedLocale.DE, "login") == "Anmelden"
    assert translate(SupportedLocale.EN, "login") == "Login"


def test_catalogues_cover_the_same_keys() -> None:
    assert CATALOGUE[SupportedLocale.DE].keys() == CATALOGUE[SupportedLocale.EN].keys()


def test_parameters_and_unknown_keys() -> None:
    assert translate(SupportedLocale.EN, "logged_in_as", name="Alice") == "Logged in as Alice"
    assert translate(SupportedLocale.EN, "no_such_key") == "no_such_key"


@pytest.mark.parametrize(
    ("active", "labels", "selected"),
    [
        (SupportedLocale.DE, {"de": "Deutsch", "en": "Englisch"}, "Deutsch"),
        (SupportedLocale.EN, {"de": "German", "en": "English"}, "English"),
    ],
)
def test_language_selector_is_labelled_in_active_locale(
    active: SupportedLocale, labels: dict[str, str], selected: str
) -> None:
    selector = language_selector(active)
    assert selector["label"] == "Language"
    assert {o["value"]: o["label"] for o in selector["options"]} == labels
    assert [o["label"] for o in selector["options"] if o["selected"]] == [selected]
