"""
ssr_first.api.routers.pages

Page context endpoints for the site's pages.

Responsibilities:
- Home (protected), imprint and privacy (public) page contexts.
- A catch-all that answers 404 for unknown paths once the gate let them through.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_404_NOT_FOUND

from ssr_first.api.deps import resolution_dep, settings_dep
from ssr_first.api.views import PageContext, page_context
from ssr_first.auth.credentials import CredentialStore
from ssr_first.auth.deps import get_auth_session, get_credential_store
from ssr_first.auth.models import AuthSession
from ssr_first.i18n.resolver import Resolution
from ssr_first.settings import Settings

router = APIRouter(tags=["pages"])


def _page(heading_key: str):
    async def endpoint(
        resolution: Resolution = Depends(resolution_dep),
        session: AuthSession = Depends(get_auth_session),
        store: CredentialStore = Depends(get_credential_store),
        settings: Settings = Depends(settings_dep),
    ) -> PageContext:
        return page_context(
            locale=resolution.active,
            heading_key=heading_key,
            site_title=settings.site_title,
            session=session,
            store=store,
        )

    return endpoint


router.add_api_route("/", _page("home"), methods=["GET"], response_model=PageContext)
router.add_api_route("/imprint", _page("imprint"), methods=["GET"], response_model=PageContext)
router.add_api_route("/privacy", _page("privacy"), methods=["GET"], response_model=PageContext)


@router.get("/{path:path}", include_in_schema=False)
async def not_found(
    path: str,
    resolution: Resolution = Depends(resolution_dep),
    session: AuthSession = Depends(get_auth_session),
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(settings_dep),
) -> JSONResponse:
    context = page_context(
        locale=resolution.active,
        heading_key="not_found",
        site_title=settings.site_title,
        session=session,
        store=store,
        path=f"/{path}",
    )
    return JSONResponse(context.model_dump(mode="json"), status_code=HTTP_404_NOT_FOUND)


# --- Module Notes -----------------------------------------------------------
# Include this router last: the catch-all would shadow anything registered after it.
