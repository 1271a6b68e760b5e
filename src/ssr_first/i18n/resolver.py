"""
ssr_first.i18n.resolver

Locale resolution: override first, then browser negotiation, then the default.

Responsibilities:
- Represent a user's explicit language choice (`LocaleOverride`).
- Resolve the active locale for one request (`resolve`).
- Produce the override for an explicit selection (`select`).

Both functions are pure; the HTTP layer owns reading and writing the cookie.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ssr_first.i18n.locales import DEFAULT_LOCALE, SupportedLocale
from ssr_first.i18n.preferences import LocalePreference


@dataclass(frozen=True, slots=True)
class LocaleOverride:
    locale: SupportedLocale

    @classmethod
    def from_cookie(cls, value: str | None) -> LocaleOverride | None:
        # An unrecognised cookie value counts as "no override yet".
        locale = SupportedLocale.from_code(value)
        return cls(locale) if locale is not None else None

    def to_cookie(self) -> str:
        return self.locale.value


class ResolutionSource(str, enum.Enum):
    OVERRIDE = "override"
    BROWSER = "browser"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Resolution:
    active: SupportedLocale
    source: ResolutionSource
    persist: LocaleOverride | None = None


def negotiate(browser_prefs: LocalePreference) -> SupportedLocale | None:
    """
    First supported primary subtag in preference order; region is ignored.
    """
    for pref in browser_prefs:
        # q=0 marks a language as not acceptable.
        if pref.quality <= 0.0 or pref.is_wildcard:
            continue
        locale = SupportedLocale.from_code(pref.primary)
        if locale is not None:
            return locale
    return None


def resolve(override: LocaleOverride | None, browser_prefs: LocalePreference) -> Resolution:
    if override is not None:
        return Resolution(active=override.locale, source=ResolutionSource.OVERRIDE)

    negotiated = negotiate(browser_prefs)
    if negotiated is not None:
        return Resolution(active=negotiated, source=ResolutionSource.BROWSER)

    return Resolution(active=DEFAULT_LOCALE, source=ResolutionSource.DEFAULT)


def select(locale: SupportedLocale) -> LocaleOverride:
    return LocaleOverride(locale)


# --- Module Notes -----------------------------------------------------------
# Inference is never sticky: `persist` stays None unless the caller went through
# `select`, in which case the caller writes the returned override itself.
