"""
ssr_first.i18n.messages

Translation catalogue and language selector state handed to the page renderer.

Responsibilities:
- Look up UI strings per `SupportedLocale` with fallback to the default locale.
- Describe the navigation language selector for the active locale.
"""

from __future__ import annotations

from typing import Any

from ssr_first.i18n.locales import DEFAULT_LOCALE, SupportedLocale, display_name

# The selector's accessible label does not follow the active locale.
SELECTOR_LABEL = "Language"

CATALOGUE: dict[SupportedLocale, dict[str, str]] = {
    SupportedLocale.DE: {
        "login": "Anmelden",
        "logout": "Abmelden",
        "username": "Benutzername",
        "password": "Passwort",
        "home": "Startseite",
        "imprint": "Impressum",
        "privacy": "Datenschutzerklärung",
        "not_logged_in": "Nicht angemeldet",
        "logged_in_as": "Angemeldet als {name}",
        "invalid_credentials": "Benutzername oder Passwort ungültig",
        "redirecting": "Weiterleitung …",
        "not_found": "Seite nicht gefunden",
    },
    SupportedLocale.EN: {
        "login": "Login",
        "logout": "Logout",
        "username": "Username",
        "password": "Password",
        "home": "Home",
        "imprint": "Imprint",
        "privacy": "Privacy Declaration",
        "not_logged_in": "Not logged in",
        "logged_in_as": "Logged in as {name}",
        "invalid_credentials": "Invalid username or password",
        "redirecting": "Redirecting …",
        "not_found": "Page not found",
    },
}


def translate(locale: SupportedLocale, key: str, **params: Any) -> str:
    template = CATALOGUE.get(locale, {}).get(key)
    if template is None:
        template = CATALOGUE[DEFAULT_LOCALE].get(key, key)
    return template.format(**params) if params else template


def language_selector(active: SupportedLocale) -> dict[str, Any]:
    return {
        "label": SELECTOR_LABEL,
        "options": [
            {
                "value": locale.value,
                "label": display_name(locale, viewer=active),
                "selected": locale is active,
            }
            for locale in SupportedLocale
        ],
    }
