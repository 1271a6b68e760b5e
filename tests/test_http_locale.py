"""
tests.test_http_locale

Browser-language and language-switch scenarios over HTTP.
"""

from __future__ import annotations

import httpx
import pytest

GERMAN_LOGIN = "Anmelden"
ENGLISH_LOGIN = "Login"


def _selected(page: dict) -> str:
    (label,) = [o["label"] for o in page["language_selector"]["options"] if o["selected"]]
    return label


def _option(page: dict, value: str) -> str:
    (label,) = [o["label"] for o in page["language_selector"]["options"] if o["value"] == value]
    return label


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("accept_language", "locale", "heading"),
    [
        ("de", "de", GERMAN_LOGIN),
        ("fr", "de", GERMAN_LOGIN),
        ("en-DE", "en", ENGLISH_LOGIN),
        (None, "de", GERMAN_LOGIN),
    ],
)
async def test_login_page_follows_browser_language(
    client: httpx.AsyncClient, accept_language: str | None, locale: str, heading: str
) -> None:
    headers = {"accept-language": accept_language} if accept_language else {}

    r = await client.get("/", headers=headers)
    assert r.status_code == 303
    assert r.headers["location"] == "/login?orig_url=/"

    r = await client.get(r.headers["location"], headers=headers)
    assert r.status_code == 200
    page = r.json()
    assert page["locale"] == locale
    assert page["heading"] == heading
    assert page["title"] == "Leptos SSR First"
    assert page["language_selector"]["label"] == "Language"
    assert r.headers["content-language"] == locale
    assert "Accept-Language" in r.headers["vary"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("browser", "switch_to", "before", "after"),
    [
        ("de", "en", ("Deutsch", "Englisch", GERMAN_LOGIN), ("English", "German", ENGLISH_LOGIN)),
        ("en", "de", ("English", "German", ENGLISH_LOGIN), ("Deutsch", "Englisch", GERMAN_LOGIN)),
    ],
)
async def test_selected_language_survives_reload(
    client: httpx.AsyncClient,
    browser: str,
    switch_to: str,
    before: tuple[str, str, str],
    after: tuple[str, str, str],
) -> None:
    headers = {"accept-language": browser}

    page = (await client.get("/login?orig_url=/", headers=headers)).json()
    assert (_selected(page), _option(page, switch_to), page["heading"]) == before

    r = await client.post(
        f"/lang/{switch_to}",
        headers={**headers, "referer": "http://test/login?orig_url=/"},
    )
    assert r.status_code == 303
    assert r.headers["location"] == "/login?orig_url=/"
    assert r.cookies.get("lang") == switch_to

    # Reload twice with the unchanged browser header; the override cookie wins.
    for _ in range(2):
        page = (await client.get(r.headers["location"], headers=headers)).json()
        other = "de" if switch_to == "en" else "en"
        assert (_selected(page), _option(page, other), page["heading"]) == after
        assert page["locale"] == switch_to


@pytest.mark.asyncio
async def test_unrecognised_override_cookie_falls_back_to_browser(client: httpx.AsyncClient) -> None:
    r = await client.get("/login", headers={"accept-language": "en-GB", "cookie": "lang=fr"})
    assert r.json()["locale"] == "en"


@pytest.mark.asyncio
async def test_unsupported_selection_changes_nothing(client: httpx.AsyncClient) -> None:
    r = await client.get("/lang/fr", params={"next": "/imprint"})
    assert r.status_code == 303
    assert r.headers["location"] == "/imprint"
    assert "lang" not in r.cookies


@pytest.mark.asyncio
@pytest.mark.parametrize("next_url", ["https://evil.example/", "//evil.example", "imprint"])
async def test_switch_never_redirects_off_site(client: httpx.AsyncClient, next_url: str) -> None:
    r = await client.get("/lang/en", params={"next": next_url})
    assert r.headers["location"] == "/"


@pytest.mark.asyncio
async def test_switch_ignores_foreign_referer(client: httpx.AsyncClient) -> None:
    r = await client.get("/lang/en", headers={"referer": "https://evil.example/phish"})
    assert r.headers["location"] == "/"


@pytest.mark.asyncio
async def test_public_pages_are_localised_without_login(client: httpx.AsyncClient) -> None:
    r = await client.get("/imprint", headers={"accept-language": "de"})
    assert r.status_code == 200
    page = r.json()
    assert page["heading"] == "Impressum"
    assert page["user"] == {"authenticated": False, "label": "Nicht angemeldet"}
    assert [link["href"] for link in page["footer"]] == ["/imprint", "/privacy"]

    r = await client.get("/privacy", headers={"accept-language": "en"})
    assert r.json()["heading"] == "Privacy Declaration"
