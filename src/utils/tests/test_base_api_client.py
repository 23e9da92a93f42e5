"""
Unit tests for BaseAPIClient.

aiohttp.ClientSession is replaced with a small in-memory fake so no sockets are opened.
"""

from unittest.mock import patch

import aiohttp
import pytest

from utils.base_api_client import APIResponse, BaseAPIClient

pytestmark = pytest.mark.unit


class FakeResponse:
    def __init__(self, status: int, reason: str | None, body: str):
        self.status = status
        self.reason = reason
        self._body = body

    async def text(self, errors: str = "strict") -> str:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.mark.asyncio
async def test_fetch_success():
    session = FakeSession(FakeResponse(200, "OK", '{"Schedules": []}'))
    with patch("utils.base_api_client.aiohttp.ClientSession", return_value=session):
        result = await BaseAPIClient()._core_async_fetch(
            "https://example.com/api", headers={"Accept": "application/json"}
        )

    assert result == APIResponse(
        status=200, reason="OK", text='{"Schedules": []}', url="https://example.com/api"
    )
    assert result.ok
    url, kwargs = session.calls[0]
    assert url == "https://example.com/api"
    assert kwargs == {"headers": {"Accept": "application/json"}, "params": None}


@pytest.mark.asyncio
async def test_fetch_error_status_is_returned_not_raised():
    session = FakeSession(FakeResponse(503, None, "down for maintenance"))
    with patch("utils.base_api_client.aiohttp.ClientSession", return_value=session):
        result = await BaseAPIClient()._core_async_fetch("https://example.com/api")

    assert result.status == 503
    assert result.reason == ""
    assert result.text == "down for maintenance"
    assert not result.ok
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_fetch_explicit_timeout():
    session = FakeSession(FakeResponse(200, "OK", "[]"))
    with patch("utils.base_api_client.aiohttp.ClientSession", return_value=session):
        await BaseAPIClient()._core_async_fetch("https://example.com/api", timeout=5)

    _, kwargs = session.calls[0]
    assert kwargs["timeout"] == aiohttp.ClientTimeout(total=5)


@pytest.mark.asyncio
async def test_fetch_transport_error_propagates():
    session = FakeSession(error=aiohttp.ClientConnectionError("Connection refused"))
    with (
        patch("utils.base_api_client.aiohttp.ClientSession", return_value=session),
        pytest.raises(aiohttp.ClientConnectionError),
    ):
        await BaseAPIClient()._core_async_fetch("https://example.com/api")


@pytest.mark.parametrize("status,ok", [(200, True), (204, True), (299, True), (301, False), (404, False)])
def test_api_response_ok(status, ok):
    assert APIResponse(status=status, reason="", text="", url="u").ok is ok
