"""
ssr_first.api.routers.lang

Explicit language selection.

Responsibilities:
- Turn a user's language choice into a persisted override cookie.
- Remember the choice on the account when the user is logged in.
- Send the user back to the page they switched from.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse, Response
from starlette.status import HTTP_303_SEE_OTHER

from ssr_first.api.deps import settings_dep
from ssr_first.auth.credentials import CredentialStore
from ssr_first.auth.deps import get_auth_session, get_credential_store
from ssr_first.auth.gate import ROOT_PATH, is_safe_redirect
from ssr_first.auth.models import AuthSession
from ssr_first.i18n.locales import SupportedLocale
from ssr_first.i18n.resolver import select
from ssr_first.observability.logging import get_logger
from ssr_first.settings import Settings

log = get_logger(__name__)

router = APIRouter(prefix="/lang", tags=["i18n"])


def return_path(request: Request, next_url: str | None) -> str:
    """
    `next` wins, then a same-host referer; the login page (with its `orig_url`)
    is a valid place to come back to.
    """
    candidate = next_url
    if candidate is None:
        referer = request.headers.get("referer")
        if referer:
            parts = urlsplit(referer)
            if not parts.netloc or parts.netloc == request.url.netloc:
                candidate = f"{parts.path}?{parts.query}" if parts.query else parts.path
    if candidate and is_safe_redirect(candidate, allow_login=True):
        return candidate
    return ROOT_PATH


@router.api_route("/{code}", methods=["GET", "POST"])
async def select_language(
    code: str,
    request: Request,
    next_url: str | None = Query(default=None, alias="next"),
    session: AuthSession = Depends(get_auth_session),
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(settings_dep),
) -> Response:
    response = RedirectResponse(return_path(request, next_url), status_code=HTTP_303_SEE_OTHER)

    locale = SupportedLocale.from_code(code)
    if locale is None:
        log.info("i18n.unsupported_selection", code=code)
        return response

    override = select(locale)
    response.set_cookie(
        settings.lang_cookie_name,
        override.to_cookie(),
        max_age=settings.lang_cookie_max_age,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    if session.is_authenticated and session.subject:
        store.set_preferred_locale(session.subject, locale)
    log.info("i18n.locale_selected", locale=locale.value, authenticated=session.is_authenticated)
    return response
