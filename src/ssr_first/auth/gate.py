"""
ssr_first.auth.gate

Authentication gate: redirect now, resume after login.

Responsibilities:
- Decide whether a request may proceed or must be redirected to the login page.
- Encode the originally requested URL into the login redirect (`orig_url`).
- Validate `orig_url` after login so it can never become an open redirect.

The two halves are connected only by the `orig_url` query parameter that the
client carries through the login round trip; no pending state is kept.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from ssr_first.auth.models import AuthSession
from ssr_first.observability.logging import get_logger

log = get_logger(__name__)

LOGIN_PATH = "/login"
ROOT_PATH = "/"
ORIG_URL_PARAM = "orig_url"

# Reachable while anonymous. Prefix entries end with "/".
DEFAULT_PUBLIC_PATHS: frozenset[str] = frozenset(
    {
        LOGIN_PATH,
        "/logout",
        "/imprint",
        "/privacy",
        "/healthz",
        "/lang/",
        "/static/",
        "/favicon.ico",
    }
)


@dataclass(frozen=True, slots=True)
class Allow:
    pass


@dataclass(frozen=True, slots=True)
class RedirectToLogin:
    orig_url: str

    @property
    def location(self) -> str:
        return login_redirect_url(self.orig_url)


GateDecision = Allow | RedirectToLogin

ALLOW = Allow()


def login_redirect_url(orig_url: str) -> str:
    # Keep "/" readable; everything else (?, &, =, %, ...) is percent-encoded.
    return f"{LOGIN_PATH}?{ORIG_URL_PARAM}={quote(orig_url, safe='/')}"


def is_public_path(path: str, extra: Iterable[str] = ()) -> bool:
    for public in (*DEFAULT_PUBLIC_PATHS, *extra):
        if public.endswith("/") and public != ROOT_PATH:
            if path.startswith(public):
                return True
        elif path == public:
            return True
    return False


def authorize(
    session: AuthSession,
    requested_path: str,
    query: str = "",
    *,
    public_paths: Iterable[str] = (),
    raw_path: str | None = None,
) -> GateDecision:
    """
    `requested_path` is the decoded path used for public-path matching;
    `raw_path` is the path as the client sent it (still percent-encoded), so an
    encoded `%3F` or `%23` in a segment survives the login round trip.
    """
    if session.is_authenticated:
        return ALLOW
    if is_public_path(requested_path, public_paths):
        return ALLOW

    path = raw_path or requested_path
    orig_url = f"{path}?{query}" if query else path
    return RedirectToLogin(orig_url=orig_url)


def is_safe_redirect(target: str | None, *, allow_login: bool = False) -> bool:
    """
    Only same-origin relative paths pass; anything that a browser could read as
    another host (`//evil`, `/\\evil`, `https://evil`) is rejected.
    """
    if not target or not isinstance(target, str):
        return False
    if not target.startswith("/"):
        return False
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in target):
        return False

    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return False
    # Browsers read "\" as "/" in paths; query values may legitimately hold "//".
    if "//" in parts.path or "\\" in parts.path:
        return False
    # Landing on the login page again after logging in would be a dead end.
    return allow_login or parts.path != LOGIN_PATH


def complete_login(orig_url: str | None) -> str:
    if orig_url is None:
        return ROOT_PATH
    if not is_safe_redirect(orig_url):
        log.warning("auth.orig_url_rejected", orig_url=orig_url)
        return ROOT_PATH
    return orig_url


# --- Module Notes -----------------------------------------------------------
# `is_safe_redirect` also guards the language switch return target; both are
# client-controlled redirect destinations.
