"""Tests for the asynchronous page fetcher.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made; timeouts and connection failures are injected as side effects.
- The overall deadline is exercised against a local server that drips its
  body one byte at a time, since no single read ever times out.
"""

from __future__ import annotations

import asyncio
import time
from typing import AsyncIterator

import httpx
import pytest
import respx

from infsite.config import Settings
from infsite.errors import FetchError
from infsite.scraper.fetcher import fetch_page
from infsite.scraper.models import RawPage

_HTML = "<html><head><title>Fetched</title></head><body>Hello</body></html>"


@pytest.fixture()
def settings() -> Settings:
    return Settings(anthropic_api_key="", fetch_timeout=10.0, fetch_max_redirects=5)


@pytest.fixture()
async def drip_server_url() -> AsyncIterator[str]:
    """URL of a local server that sends one body byte every 0.2 s for 10 s."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await reader.readuntil(b"\r\n\r\n")
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/html\r\n"
            b"Content-Length: 50\r\n\r\n"
        )
        try:
            for _ in range(50):
                writer.write(b"x")
                await writer.drain()
                await asyncio.sleep(0.2)
        except ConnectionError:
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield f"http://127.0.0.1:{port}/"
    finally:
        server.close()


class TestFetchPage:
    @respx.mock
    async def test_successful_fetch_returns_raw_page(self, settings: Settings) -> None:
        respx.get("https://example.com/").mock(return_value=httpx.Response(200, text=_HTML))

        raw = await fetch_page("https://example.com/", settings)

        assert isinstance(raw, RawPage)
        assert raw.url == "https://example.com/"
        assert raw.final_url == "https://example.com/"
        assert raw.status_code == 200
        assert raw.html == _HTML

    @respx.mock
    async def test_sends_browser_user_agent(self, settings: Settings) -> None:
        route = respx.get("https://example.com/").mock(
            return_value=httpx.Response(200, text=_HTML)
        )

        await fetch_page("https://example.com/", settings)

        sent = route.calls.last.request
        assert sent.headers["User-Agent"] == settings.user_agent
        assert "Mozilla/5.0" in sent.headers["User-Agent"]

    @respx.mock
    async def test_follows_redirects(self, settings: Settings) -> None:
        respx.get("https://example.com/old").mock(
            return_value=httpx.Response(301, headers={"Location": "https://example.com/new"})
        )
        respx.get("https://example.com/new").mock(return_value=httpx.Response(200, text=_HTML))

        raw = await fetch_page("https://example.com/old", settings)

        assert raw.final_url == "https://example.com/new"
        assert raw.html == _HTML

    @respx.mock
    async def test_redirect_loop_raises_fetch_error(self, settings: Settings) -> None:
        respx.get("https://loop.example.com/").mock(
            return_value=httpx.Response(302, headers={"Location": "https://loop.example.com/"})
        )

        with pytest.raises(FetchError) as excinfo:
            await fetch_page("https://loop.example.com/", settings)

        assert isinstance(excinfo.value.__cause__, httpx.TooManyRedirects)

    @respx.mock
    @pytest.mark.parametrize("status", [403, 404, 500, 503])
    async def test_error_status_raises_fetch_error(self, settings: Settings, status: int) -> None:
        respx.get("https://example.com/").mock(return_value=httpx.Response(status))

        with pytest.raises(FetchError) as excinfo:
            await fetch_page("https://example.com/", settings)

        assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)
        assert excinfo.value.status_code == 400

    @respx.mock
    async def test_timeout_raises_fetch_error(self, settings: Settings) -> None:
        respx.get("https://slow.example.com/").mock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(FetchError):
            await fetch_page("https://slow.example.com/", settings)

    @respx.mock
    async def test_connection_error_raises_fetch_error(self, settings: Settings) -> None:
        respx.get("https://down.example.com/").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        with pytest.raises(FetchError) as excinfo:
            await fetch_page("https://down.example.com/", settings)

        assert "blocking automated access" in excinfo.value.message

    @pytest.mark.parametrize("url", ["https://☃.com", "https://a..b.cé/"])
    async def test_unencodable_host_raises_fetch_error(self, settings: Settings, url: str) -> None:
        with respx.mock(assert_all_called=False):
            with pytest.raises(FetchError) as excinfo:
                await fetch_page(url, settings)

        assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)
        assert excinfo.value.status_code == 400

    async def test_slow_drip_body_hits_overall_deadline(self, drip_server_url: str) -> None:
        settings = Settings(anthropic_api_key="", fetch_timeout=1.0, fetch_max_redirects=5)

        started = time.monotonic()
        with pytest.raises(FetchError) as excinfo:
            await fetch_page(drip_server_url, settings)
        elapsed = time.monotonic() - started

        assert isinstance(excinfo.value.__cause__, asyncio.TimeoutError)
        assert elapsed < 5.0
