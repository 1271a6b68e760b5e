"""
ssr_first.api.routers.session

Login and logout endpoints.

Responsibilities:
- Serve the login page context (with its own resolved locale).
- Run the credential check, issue the session cookie and redirect back to the
  validated `orig_url`.
- Clear the session on logout.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.status import HTTP_303_SEE_OTHER, HTTP_401_UNAUTHORIZED

from ssr_first.api.deps import resolution_dep, settings_dep
from ssr_first.api.views import PageContext, page_context
from ssr_first.auth.credentials import CredentialStore
from ssr_first.auth.deps import get_auth_session, get_credential_store
from ssr_first.auth.gate import LOGIN_PATH, ORIG_URL_PARAM, complete_login
from ssr_first.auth.jwt import JwtConfig, issue_token
from ssr_first.auth.models import AuthSession
from ssr_first.i18n.messages import translate
from ssr_first.i18n.resolver import Resolution, select
from ssr_first.observability.logging import get_logger
from ssr_first.settings import Settings

log = get_logger(__name__)

router = APIRouter(tags=["session"])


@router.get(LOGIN_PATH, response_model=PageContext)
async def login_page(
    orig_url: str | None = Query(default=None, alias=ORIG_URL_PARAM),
    resolution: Resolution = Depends(resolution_dep),
    session: AuthSession = Depends(get_auth_session),
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(settings_dep),
) -> PageContext | Response:
    if session.is_authenticated:
        return RedirectResponse(complete_login(orig_url), status_code=HTTP_303_SEE_OTHER)

    return page_context(
        locale=resolution.active,
        heading_key="login",
        site_title=settings.site_title,
        session=session,
        store=store,
        orig_url=orig_url,
        labels={
            "username": translate(resolution.active, "username"),
            "password": translate(resolution.active, "password"),
            "submit": translate(resolution.active, "login"),
        },
    )


@router.post(LOGIN_PATH)
async def login(
    request: Request,
    username: str = Form(default=""),
    password: str = Form(default=""),
    orig_url_form: str | None = Form(default=None, alias=ORIG_URL_PARAM),
    resolution: Resolution = Depends(resolution_dep),
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(settings_dep),
) -> Response:
    orig_url = orig_url_form or request.query_params.get(ORIG_URL_PARAM)

    account = store.verify(username, password)
    if account is None:
        log.warning("auth.login_failed", username=username)
        context = page_context(
            locale=resolution.active,
            heading_key="login",
            site_title=settings.site_title,
            session=get_auth_session(request),
            store=store,
            orig_url=orig_url,
            error=translate(resolution.active, "invalid_credentials"),
        )
        return JSONResponse(context.model_dump(mode="json"), status_code=HTTP_401_UNAUTHORIZED)

    ttl = timedelta(minutes=settings.session_ttl_minutes)
    token, _ = issue_token(cfg=JwtConfig.from_settings(settings), subject=account.username, ttl=ttl)
    target = complete_login(orig_url)

    response = RedirectResponse(target, status_code=HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=int(ttl.total_seconds()),
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    # The account's stored language wins over whatever the browser used so far.
    if account.preferred_locale is not None:
        override = select(account.preferred_locale)
        response.set_cookie(
            settings.lang_cookie_name,
            override.to_cookie(),
            max_age=settings.lang_cookie_max_age,
            secure=settings.cookie_secure,
            samesite="lax",
        )
    log.info("auth.login_succeeded", username=account.username, target=target)
    return response


@router.post("/logout")
async def logout(
    session: AuthSession = Depends(get_auth_session),
    settings: Settings = Depends(settings_dep),
) -> Response:
    response = RedirectResponse(LOGIN_PATH, status_code=HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name, samesite="lax")
    if session.is_authenticated:
        log.info("auth.logout", username=session.subject)
    return response


# --- Module Notes -----------------------------------------------------------
# Credential checking lives behind `CredentialStore`; this router only owns the
# redirect and cookie contract around it.
