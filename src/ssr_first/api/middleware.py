"""
ssr_first.api.middleware

HTTP adapters for the auth gate and the locale resolver.

Responsibilities:
- `AuthGateMiddleware`: attach the request's `AuthSession` and redirect anonymous
  requests for protected paths to the login page.
- `LocaleMiddleware`: resolve the active locale from the override cookie and
  `Accept-Language`, and attach it to the request.

Order (outermost first): request context -> auth gate -> locale. A redirected
request never reaches locale-dependent code; the login page it lands on is a
fresh request with its own resolution.
"""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.status import HTTP_303_SEE_OTHER

from ssr_first.auth.deps import read_session
from ssr_first.auth.gate import RedirectToLogin, authorize
from ssr_first.i18n.preferences import parse_accept_language
from ssr_first.i18n.resolver import LocaleOverride, Resolution, resolve
from ssr_first.observability.logging import get_logger
from ssr_first.settings import Settings

log = get_logger(__name__)


def resolve_request(request: Request, settings: Settings) -> Resolution:
    override = LocaleOverride.from_cookie(request.cookies.get(settings.lang_cookie_name))
    prefs = parse_accept_language(request.headers.get("accept-language"))
    return resolve(override, prefs)


def _raw_path(request: Request) -> str | None:
    # `request.url.path` is percent-decoded; the raw form keeps %3F/%23 inside segments.
    raw = request.scope.get("raw_path")
    if not raw:
        return None
    # Some servers (and httpx's ASGI transport) include the query string here.
    return raw.decode("latin-1").split("?", 1)[0]


class AuthGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        session = read_session(request, self.settings)
        request.state.auth = session

        decision = authorize(
            session,
            request.url.path,
            request.url.query,
            public_paths=self.settings.public_paths,
            raw_path=_raw_path(request),
        )
        if isinstance(decision, RedirectToLogin):
            log.info("auth.redirect_to_login", orig_url=decision.orig_url)
            return RedirectResponse(decision.location, status_code=HTTP_303_SEE_OTHER)

        if session.is_authenticated:
            structlog.contextvars.bind_contextvars(subject=session.subject)
        return await call_next(request)


class LocaleMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        resolution = resolve_request(request, self.settings)
        request.state.locale = resolution
        structlog.contextvars.bind_contextvars(
            locale=resolution.active.value,
            locale_source=resolution.source.value,
        )

        response: Response = await call_next(request)

        response.headers["content-language"] = resolution.active.value
        response.headers.add_vary_header("Accept-Language")
        response.headers.add_vary_header("Cookie")
        return response
