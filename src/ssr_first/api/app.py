"""
ssr_first.api.app

FastAPI app factory for the ssr-first gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Wire the credential store and settings onto `app.state`.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ssr_first import __version__
from ssr_first.api.middleware import AuthGateMiddleware, LocaleMiddleware
from ssr_first.api.routers.health import router as health_router
from ssr_first.api.routers.lang import router as lang_router
from ssr_first.api.routers.pages import router as pages_router
from ssr_first.api.routers.session import router as session_router
from ssr_first.auth.credentials import CredentialStore, InMemoryCredentialStore
from ssr_first.observability.logging import configure_logging, get_logger
from ssr_first.observability.middleware import RequestContextMiddleware
from ssr_first.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, credential_store: CredentialStore | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        if settings.env == "prod" and settings.jwt_secret == Settings.model_fields["jwt_secret"].default:
            log.warning("startup.default_jwt_secret")
        yield
        log.info("shutdown")

    app = FastAPI(
        lifespan=lifespan,
        title=settings.site_title,
        version=__version__,
        docs_url="/docs" if settings.env != "prod" else None,
        openapi_url="/openapi.json" if settings.env != "prod" else None,
    )
    app.state.settings = settings
    app.state.credential_store = credential_store or InMemoryCredentialStore(settings.accounts)

    # add_middleware wraps: the last one added runs first.
    app.add_middleware(LocaleMiddleware, settings=settings)
    app.add_middleware(AuthGateMiddleware, settings=settings)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(session_router)
    app.include_router(lang_router)
    app.include_router(pages_router)

    return app


# --- Module Notes -----------------------------------------------------------
# With docs enabled, "/docs" and "/openapi.json" sit behind the gate like any other
# page; add them to `public_paths` to browse them anonymously.
