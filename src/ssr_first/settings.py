"""
ssr_first.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (JWT secret, demo account password hashes).
- Offer a cached settings instance for dependency injection.

Supported locales and the default locale are code constants (see
`ssr_first.i18n.locales`), not settings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ssr_first.auth.passwords import hash_password


class AccountSeed(BaseModel):
    """
    Demo account used by the in-memory credential store; the password is
    stored as a passlib hash (see `ssr_first.auth.passwords`).
    """

    username: str
    password_hash: str = Field(repr=False)
    display_name: str = ""
    preferred_locale: str | None = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SSR_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "ssr-first"
    log_level: str = "INFO"
    # JSON for log shipping; plain console rendering is easier to read locally.
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    site_title: str = "Leptos SSR First"

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "ssr-first"
    jwt_audience: str = "ssr-first-web"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)
    session_cookie_name: str = "session"
    session_ttl_minutes: int = Field(default=60, ge=1, le=24 * 60)

    # Locale override cookie
    lang_cookie_name: str = "lang"
    lang_cookie_max_age: int = 60 * 60 * 24 * 365

    cookie_secure: bool = False

    # Paths reachable without a session, in addition to the built-in ones.
    public_paths: list[str] = Field(default_factory=list)

    accounts: list[AccountSeed] = Field(
        default_factory=lambda: [
            AccountSeed(
                username="demo",
                password_hash=hash_password("demo"),
                display_name="Demo User",
            )
        ],
        repr=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `accounts` exists only for the demo credential store; a real deployment plugs a
# different `CredentialStore` into `create_app`.
