"""Tests for the request dispatcher."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from tvdb.services.request_manager import RequestManager, build_query
from tvdb.shared.errors import (
    DecodeError,
    ErrorCode,
    RequestTimeoutError,
    StatusError,
    TransportError,
)


class TestBuildQuery:
    def test_none_values_are_dropped(self) -> None:
        assert build_query({"page": None, "type": "series"}) == {"type": "series"}

    def test_values_are_stringified(self) -> None:
        assert build_query({"page": 0, "strict": True, "year": 2011}) == {
            "page": "0",
            "strict": "true",
            "year": "2011",
        }

    def test_empty(self) -> None:
        assert build_query(None) == {}


class TestRequestManagerConfig:
    def test_base_url_trailing_slash(self) -> None:
        manager = RequestManager(base_url="https://example.test/v4/")

        assert manager.url_for("/series/1") == "https://example.test/v4/series/1"

    def test_default_headers(self) -> None:
        manager = RequestManager(headers={"X-Trace": "abc"})

        assert manager.headers["Accept"] == "application/json"
        assert manager.headers["X-Trace"] == "abc"
        assert "User-Agent" in manager.headers

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self) -> None:
        session = MagicMock(spec=aiohttp.ClientSession)
        session.closed = False
        session.close = AsyncMock()
        manager = RequestManager(session=session)

        await manager.close()

        session.close.assert_not_awaited()


class TestRequestManagerDispatch:
    """Dispatch against the fake TVDB server."""

    @pytest.mark.asyncio
    async def test_returns_envelope_data(self, request_manager: RequestManager) -> None:
        # Given / When
        data = await request_manager.get("/echo", params={"page": 2, "type": None})

        # Then: None parameters are omitted from the query string
        assert data == {"query": {"page": "2"}}

    @pytest.mark.asyncio
    async def test_bearer_token_header(
        self,
        request_manager: RequestManager,
        recorded_requests: list,
    ) -> None:
        await request_manager.get("/echo", token="abc")

        _, path, _, headers = recorded_requests[-1]
        assert path == "/echo"
        assert headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_no_token_no_authorization_header(
        self,
        request_manager: RequestManager,
        recorded_requests: list,
    ) -> None:
        await request_manager.get("/echo")

        _, _, _, headers = recorded_requests[-1]
        assert "Authorization" not in headers

    @pytest.mark.asyncio
    async def test_post_json_body(
        self,
        request_manager: RequestManager,
        recorded_requests: list,
        api_key: str,
        token: str,
    ) -> None:
        body = {"apikey": api_key}

        data = await request_manager.post("/login", body=body)

        assert data == {"token": token}
        _, _, _, headers = recorded_requests[-1]
        assert headers["Content-Type"] == "application/json"
        assert headers["Content-Length"] == str(len(json.dumps(body).encode("utf-8")))

    @pytest.mark.asyncio
    async def test_error_status_carries_envelope(self, request_manager: RequestManager) -> None:
        with pytest.raises(StatusError) as exc_info:
            await request_manager.get("/series/121361")

        assert exc_info.value.status_code == 401
        assert exc_info.value.code == ErrorCode.API_AUTHENTICATION_FAILED
        assert exc_info.value.response["message"] == "Unauthorized"

    @pytest.mark.asyncio
    async def test_non_json_error_status_carries_text(
        self, request_manager: RequestManager
    ) -> None:
        with pytest.raises(StatusError) as exc_info:
            await request_manager.get("/bad-gateway")

        assert exc_info.value.status_code == 502
        assert exc_info.value.code == ErrorCode.API_SERVER_ERROR
        assert exc_info.value.response == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_unknown_route_is_404(self, request_manager: RequestManager) -> None:
        with pytest.raises(StatusError) as exc_info:
            await request_manager.get("/nowhere")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_non_json_success_is_decode_error(
        self, request_manager: RequestManager
    ) -> None:
        with pytest.raises(DecodeError) as exc_info:
            await request_manager.get("/not-json")

        assert exc_info.value.body == "<html>maintenance</html>"

    @pytest.mark.asyncio
    async def test_missing_data_member_is_decode_error(
        self, request_manager: RequestManager
    ) -> None:
        with pytest.raises(DecodeError):
            await request_manager.get("/no-envelope")

    @pytest.mark.asyncio
    async def test_timeout(self, base_url: str) -> None:
        # Given: a 1 ms budget against a route that answers after a second
        manager = RequestManager(base_url=base_url, timeout=0.001)

        # When / Then
        try:
            with pytest.raises(RequestTimeoutError) as exc_info:
                await manager.get("/slow")
        finally:
            await manager.close()

        assert exc_info.value.timeout == 0.001
        assert exc_info.value.code == ErrorCode.API_TIMEOUT

    @pytest.mark.asyncio
    async def test_connection_refused_is_transport_error(self) -> None:
        # Port 9 (discard) is not served on the loopback interface
        manager = RequestManager(base_url="http://127.0.0.1:9", timeout=5)

        try:
            with pytest.raises(TransportError) as exc_info:
                await manager.get("/series/1")
        finally:
            await manager.close()

        assert exc_info.value.code == ErrorCode.NETWORK_ERROR
        assert isinstance(exc_info.value.original_error, (aiohttp.ClientError, OSError))

    @pytest.mark.asyncio
    async def test_failed_call_is_logged_as_warning(
        self,
        request_manager: RequestManager,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level("DEBUG", logger="tvdb.services.request_manager"):
            with pytest.raises(StatusError):
                await request_manager.get("/series/121361", token="leaked-token")

        records = [r for r in caplog.records if r.name == "tvdb.services.request_manager"]
        assert any(r.levelname == "WARNING" and "401" in r.getMessage() for r in records)
        assert all("leaked-token" not in r.getMessage() for r in records)


class TestInjectedSession:
    """A caller-supplied ClientSession still gets the manager's options."""

    @pytest.mark.asyncio
    async def test_timeout_applies(self, base_url: str) -> None:
        # Given: a plain session without any timeout of its own
        async with aiohttp.ClientSession() as session:
            manager = RequestManager(base_url=base_url, timeout=0.001, session=session)

            # When / Then
            with pytest.raises(RequestTimeoutError):
                await manager.get("/slow")

    @pytest.mark.asyncio
    async def test_default_headers_apply(
        self, base_url: str, recorded_requests: list
    ) -> None:
        async with aiohttp.ClientSession() as session:
            manager = RequestManager(base_url=base_url, session=session)

            await manager.get("/echo")

        _, _, _, headers = recorded_requests[-1]
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == manager.headers["User-Agent"]
        assert "aiohttp" not in headers["User-Agent"]

    @pytest.mark.asyncio
    async def test_close_keeps_injected_session(self, base_url: str) -> None:
        async with aiohttp.ClientSession() as session:
            manager = RequestManager(base_url=base_url, session=session)

            await manager.close()
            data = await manager.get("/echo")

            assert data == {"query": {}}
            assert not session.closed
            assert await manager._get_session() is session
