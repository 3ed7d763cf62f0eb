"""
Pytest configuration and shared fixtures for the TVDB client tests.

The ``tvdb_server`` fixture runs an in-process fake of the TVDB v4 API built
with ``aiohttp.web``. It accepts one API key, issues one bearer token and
answers a handful of routes with canned payloads in the API's wire format.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from tvdb.services.request_manager import RequestManager

# Keep the developer's environment out of settings tests
for _key in [key for key in os.environ if key.startswith("TVDB_")]:
    del os.environ[_key]

API_KEY = "test-api-key"  # pragma: allowlist secret
PIN = "1234"
TOKEN = "test-bearer-token"  # pragma: allowlist secret

REQUESTS_KEY = web.AppKey("requests", list)


SERIES_PAYLOAD: dict[str, Any] = {
    "id": 121361,
    "name": "Game of Thrones",
    "slug": "game-of-thrones",
    "image": "https://artworks.thetvdb.com/banners/posters/121361-1.jpg",
    "firstAired": "2011-04-17",
    "lastAired": "2019-05-19",
    "nextAired": "",
    "score": 1234567,
    "status": {"id": 2, "name": "Ended", "recordType": "series", "keepUpdated": False},
    "originalCountry": "usa",
    "originalLanguage": "eng",
    "defaultSeasonType": 1,
    "isOrderRandomized": False,
    "lastUpdated": "2023-01-01 00:00:00",
    "averageRuntime": 60,
    "episodes": None,
    "overview": "Seven noble families fight for control of Westeros.",
    "year": "2011",
}

EPISODE_PAYLOAD: dict[str, Any] = {
    "id": 3254641,
    "seriesId": 121361,
    "name": "Winter Is Coming",
    "aired": "2011-04-17",
    "runtime": 62,
    "seasonNumber": 1,
    "number": 1,
    "image": "https://artworks.thetvdb.com/banners/episodes/121361/3254641.jpg",
    "isMovie": 0,
    "finaleType": None,
}

UPDATES_PAYLOAD: list[dict[str, Any]] = [
    {
        "recordType": "series",
        "recordId": 121361,
        "method": "update",
        "methodInt": 2,
        "entityType": "series",
        "timeStamp": 1700000000,
        "seriesId": 121361,
        "extraInfo": "",
        "userId": 1,
        "mergeToId": 0,
        "mergeToEntityType": "",
    }
]

SEARCH_PAYLOAD: list[dict[str, Any]] = [
    {
        "objectID": "series-121361",
        "name": "Game of Thrones",
        "type": "series",
        "tvdb_id": "121361",
        "year": "2011",
        "country": "usa",
        "image_url": "https://artworks.thetvdb.com/banners/posters/121361-1.jpg",
        "name_translated": "",
        "network": "HBO",
        "overview": "",
        "primary_language": "eng",
        "primary_type": "series",
        "status": "Ended",
    }
]


def _authorized(request: web.Request) -> bool:
    return request.headers.get("Authorization") == f"Bearer {TOKEN}"


def _ok(data: Any) -> web.Response:
    return web.json_response({"status": "success", "data": data})


def _unauthorized() -> web.Response:
    return web.json_response(
        {"status": "failure", "message": "Unauthorized", "data": None},
        status=401,
    )


def create_fake_tvdb_app() -> web.Application:
    """Build the fake TVDB application.

    ``app[REQUESTS_KEY]`` records ``(method, path, query, headers)`` for every
    request so tests can assert on what the client sent.
    """
    app = web.Application()
    app[REQUESTS_KEY] = []

    @web.middleware
    async def record_requests(request: web.Request, handler: Any) -> web.StreamResponse:
        request.app[REQUESTS_KEY].append(
            (request.method, request.path, dict(request.query), dict(request.headers))
        )
        return await handler(request)

    app.middlewares.append(record_requests)

    async def login(request: web.Request) -> web.Response:
        body = await request.json()
        if body.get("apikey") != API_KEY:
            return _unauthorized()
        if "pin" in body and body["pin"] != PIN:
            return _unauthorized()
        return _ok({"token": TOKEN})

    async def series(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        if request.match_info["id"] != str(SERIES_PAYLOAD["id"]):
            return web.json_response(
                {"status": "failure", "message": "NotFoundException", "data": None},
                status=404,
            )
        return _ok(SERIES_PAYLOAD)

    async def series_episodes(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        return _ok({"series": SERIES_PAYLOAD, "episodes": [EPISODE_PAYLOAD]})

    async def episode(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        return _ok(EPISODE_PAYLOAD)

    async def search(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        return _ok(SEARCH_PAYLOAD)

    async def updates(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        return _ok(UPDATES_PAYLOAD)

    async def echo(request: web.Request) -> web.Response:
        return _ok({"query": dict(request.query)})

    async def not_json(request: web.Request) -> web.Response:
        return web.Response(text="<html>maintenance</html>", content_type="text/html")

    async def bad_gateway(request: web.Request) -> web.Response:
        return web.Response(text="Bad Gateway", status=502)

    async def no_envelope(request: web.Request) -> web.Response:
        return web.json_response({"status": "success"})

    async def slow(request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return _ok({})

    app.router.add_post("/login", login)
    app.router.add_get("/series/{id}", series)
    app.router.add_get("/series/{id}/episodes/{season_type}", series_episodes)
    app.router.add_get("/episodes/{id}", episode)
    app.router.add_get("/search", search)
    app.router.add_get("/updates", updates)
    app.router.add_get("/echo", echo)
    app.router.add_get("/not-json", not_json)
    app.router.add_get("/bad-gateway", bad_gateway)
    app.router.add_get("/no-envelope", no_envelope)
    app.router.add_get("/slow", slow)
    return app


@pytest_asyncio.fixture
async def tvdb_server() -> AsyncIterator[TestServer]:
    """Run the fake TVDB API on a local port."""
    server = TestServer(create_fake_tvdb_app())
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def base_url(tvdb_server: TestServer) -> str:
    return str(tvdb_server.make_url("/")).rstrip("/")


@pytest_asyncio.fixture
async def request_manager(base_url: str) -> AsyncIterator[RequestManager]:
    """Dispatcher pointed at the fake TVDB server."""
    manager = RequestManager(base_url=base_url, timeout=5)
    try:
        yield manager
    finally:
        await manager.close()


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def pin() -> str:
    return PIN


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def recorded_requests(tvdb_server: TestServer) -> list[tuple[str, str, dict[str, str], dict[str, str]]]:
    """Requests the fake server has received, in arrival order."""
    return tvdb_server.app[REQUESTS_KEY]
