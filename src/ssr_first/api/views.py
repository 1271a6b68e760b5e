"""
ssr_first.api.views

Page context handed to the page-rendering layer.

Responsibilities:
- Combine the resolved locale, auth state and translated strings into one
  JSON-serialisable view model per page.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ssr_first.auth.credentials import CredentialStore
from ssr_first.auth.models import AuthSession
from ssr_first.i18n.locales import SupportedLocale
from ssr_first.i18n.messages import language_selector, translate

FOOTER_LINKS = (("imprint", "/imprint"), ("privacy", "/privacy"))


class PageContext(BaseModel):
    locale: SupportedLocale
    title: str
    heading: str
    language_selector: dict[str, Any]
    user: dict[str, Any]
    footer: list[dict[str, str]]
    details: dict[str, Any] = {}


def _user_block(
    locale: SupportedLocale, session: AuthSession, store: CredentialStore
) -> dict[str, Any]:
    if not session.is_authenticated:
        return {"authenticated": False, "label": translate(locale, "not_logged_in")}
    account = store.get(session.subject or "")
    name = account.display_name if account is not None else session.subject
    return {
        "authenticated": True,
        "name": name,
        "label": translate(locale, "logged_in_as", name=name),
    }


def page_context(
    *,
    locale: SupportedLocale,
    heading_key: str,
    site_title: str,
    session: AuthSession,
    store: CredentialStore,
    **details: Any,
) -> PageContext:
    return PageContext(
        locale=locale,
        title=site_title,
        heading=translate(locale, heading_key),
        language_selector=language_selector(locale),
        user=_user_block(locale, session, store),
        footer=[{"label": translate(locale, key), "href": href} for key, href in FOOTER_LINKS],
        details=details,
    )


# --- Module Notes -----------------------------------------------------------
# Markup is the renderer's job; this model is everything it needs to know about
# locale and authentication for one page.
