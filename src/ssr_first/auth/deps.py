"""
ssr_first.auth.deps

Helpers and FastAPI dependencies for authentication state.

Responsibilities:
- Extract the session token from the session cookie or a bearer header.
- Expose the request's `AuthSession` and the credential store to routes.
"""

from __future__ import annotations

from fastapi import Request

from ssr_first.auth.credentials import CredentialStore
from ssr_first.auth.jwt import JwtConfig, session_from_token
from ssr_first.auth.models import ANONYMOUS, AuthSession
from ssr_first.settings import Settings

_BEARER_PREFIX = "bearer "


def session_token(request: Request, settings: Settings) -> str | None:
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    header = request.headers.get("authorization", "")
    if header.lower().startswith(_BEARER_PREFIX):
        return header[len(_BEARER_PREFIX) :].strip() or None
    return None


def read_session(request: Request, settings: Settings) -> AuthSession:
    return session_from_token(
        cfg=JwtConfig.from_settings(settings),
        token=session_token(request, settings),
    )


def get_auth_session(request: Request) -> AuthSession:
    # Populated by `AuthGateMiddleware`; routes mounted without it see anonymous.
    return getattr(request.state, "auth", ANONYMOUS)


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credential_store  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# The cookie wins over the header: browsers always send the cookie, the header is
# for scripted clients.
