"""
ssr_first.auth.jwt

Session token issuing and validation.

Responsibilities:
- Issue short-lived JWTs at successful login (stored in the session cookie).
- Decode and validate JWTs with strict claim requirements (iss/aud/exp/iat/sub).
- Map any token into an `AuthSession`, degrading to anonymous on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from ssr_first.auth.models import ANONYMOUS, AuthSession
from ssr_first.observability.logging import get_logger
from ssr_first.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    issuer: str
    audience: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            secret=settings.jwt_secret,
        )


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    subject: str,
    ttl: timedelta = timedelta(hours=1),
) -> tuple[str, datetime]:
    """
    Returns the encoded token and its expiry, so the cookie can share it.
    """
    now = datetime.now(tz=UTC)
    expires_at = now + ttl
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg), expires_at


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


def session_from_token(*, cfg: JwtConfig, token: str | None) -> AuthSession:
    if not token:
        return ANONYMOUS
    try:
        payload = decode_and_validate(cfg=cfg, token=token)
    except JwtValidationError as e:
        # Expired or tampered sessions are simply anonymous again.
        log.debug("session.token_rejected", reason=str(e))
        return ANONYMOUS

    subject = str(payload.get("sub", ""))
    if not subject:
        return ANONYMOUS
    return AuthSession.authenticated(subject)


# --- Module Notes -----------------------------------------------------------
# Expiry is the only server-side notion of logout besides deleting the cookie;
# there is no session table to revoke from.
