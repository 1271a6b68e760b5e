"""
ssr_first.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the settings the app was created with.
- Provide the request's locale resolution.
"""

from __future__ import annotations

from fastapi import Depends, Request

from ssr_first.api.middleware import resolve_request
from ssr_first.i18n.resolver import Resolution
from ssr_first.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set in `create_app`, so tests constructing their own Settings are honoured.
    return request.app.state.settings  # type: ignore[attr-defined]


def resolution_dep(request: Request, settings: Settings = Depends(settings_dep)) -> Resolution:
    resolution = getattr(request.state, "locale", None)
    if resolution is None:
        resolution = resolve_request(request, settings)
    return resolution
