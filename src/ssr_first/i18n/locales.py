"""
ssr_first.i18n.locales

The fixed set of locales the UI can render.

Responsibilities:
- Define `SupportedLocale` and the default locale.
- Map arbitrary codes (cookie values, path params, subtags) onto the set.
- Provide locale display names as seen from every supported locale.
"""

from __future__ import annotations

import enum


class SupportedLocale(str, enum.Enum):
    DE = "de"
    EN = "en"

    @classmethod
    def from_code(cls, code: str | None) -> SupportedLocale | None:
        """
        Case-insensitive lookup; unknown or empty codes yield `None` instead of raising.
        """
        if not code:
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


DEFAULT_LOCALE = SupportedLocale.DE

if DEFAULT_LOCALE not in SupportedLocale:
    raise RuntimeError("default locale must be a supported locale")


# DISPLAY_NAMES[viewer][locale]: how `locale` is called when the UI is shown in `viewer`.
DISPLAY_NAMES: dict[SupportedLocale, dict[SupportedLocale, str]] = {
    SupportedLocale.DE: {
        SupportedLocale.DE: "Deutsch",
        SupportedLocale.EN: "Englisch",
    },
    SupportedLocale.EN: {
        SupportedLocale.DE: "German",
        SupportedLocale.EN: "English",
    },
}


def display_name(locale: SupportedLocale, *, viewer: SupportedLocale) -> str:
    return DISPLAY_NAMES[viewer][locale]


# --- Module Notes -----------------------------------------------------------
# Adding a locale means adding an enum member, a DISPLAY_NAMES row/column and a
# catalogue in `i18n.messages`; the resolver picks it up automatically.
