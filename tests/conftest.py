"""
tests.conftest

Shared fixtures: an app built from test settings and an httpx client over ASGI.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from ssr_first.api.app import create_app
from ssr_first.auth.passwords import hash_password
from ssr_first.settings import AccountSeed, Settings

BASE_URL = "http://test"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        jwt_secret="test-secret-with-at-least-32-bytes",
        accounts=[
            AccountSeed(username="alice", password_hash=hash_password("secret"), display_name="Alice"),
            AccountSeed(
                username="bob",
                password_hash=hash_password("hunter2"),
                display_name="Bob",
                preferred_locale="en",
            ),
        ],
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx ASGITransport does not run lifespan events; drive the app's lifespan explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as c:
            yield c
