"""Asynchronous HTTP fetcher for the page being analysed."""

from __future__ import annotations

import asyncio
import logging

import httpx

from infsite.config import Settings, settings as default_settings
from infsite.errors import FetchError
from infsite.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.fetch_timeout,
        follow_redirects=True,
        max_redirects=settings.fetch_max_redirects,
    )


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    response = await client.get(url)
    response.raise_for_status()
    return response


async def fetch_page(url: str, settings: Settings | None = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Uses a browser-like ``User-Agent`` to get past trivial bot blocking and
    follows at most ``settings.fetch_max_redirects`` redirects.  httpx's own
    timeout bounds each connect/read step; the whole request, redirects and
    body included, is additionally bounded by ``settings.fetch_timeout``.

    Raises:
        FetchError: On any transport failure, timeout, redirect-limit
            exhaustion, unencodable host or non-2xx status.  The underlying
            exception is chained.
    """
    settings = settings or default_settings

    try:
        async with _client(settings) as client:
            response = await asyncio.wait_for(_get(client, url), settings.fetch_timeout)
            html = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Fetch error for %s: %s", url, exc)
        raise FetchError() from exc
    except asyncio.TimeoutError as exc:
        logger.warning("Fetch of %s exceeded %.1fs", url, settings.fetch_timeout)
        raise FetchError() from exc

    return RawPage(
        url=url,
        html=html,
        status_code=response.status_code,
        final_url=str(response.url),
    )
