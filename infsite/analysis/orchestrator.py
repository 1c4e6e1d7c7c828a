"""Site analysis pipeline.

``analyze`` drives a single request through:

    validate → normalize → fetch → extract → summarize (or synthesize)

Client-input failures raise the matching :mod:`infsite.errors` exception.
A summarizer failure is logged and absorbed: the request still succeeds with
a locally synthesized (basic tier) result.
"""

from __future__ import annotations

import logging

from infsite.analysis.fallback import synthesize
from infsite.analysis.models import Analysis
from infsite.analysis.summarizer import summarize
from infsite.config import Settings, settings as default_settings
from infsite.errors import InvalidUrlError, MissingUrlError, SummarizerError
from infsite.scraper.extractor import extract_content
from infsite.scraper.fetcher import fetch_page
from infsite.scraper.urls import is_valid_url, normalize_url

logger = logging.getLogger(__name__)


def resolve_url(raw_url: object) -> str:
    """Return the normalized HTTP(S) form of *raw_url*.

    Raises:
        MissingUrlError: If *raw_url* is empty or not a string.
        InvalidUrlError: If it cannot be normalized to an ``http``/``https`` URL.
    """
    if not isinstance(raw_url, str) or not raw_url:
        raise MissingUrlError()
    normalized = normalize_url(raw_url)
    if not normalized or not is_valid_url(normalized):
        raise InvalidUrlError()
    return normalized


async def analyze(raw_url: object, settings: Settings | None = None) -> Analysis:
    """Fetch *raw_url*, extract its content and describe the site.

    Returns:
        An :class:`~infsite.analysis.models.Analysis` whose ``tier`` is
        ``"ai"`` when the summarizer answered and ``"basic"`` otherwise.

    Raises:
        MissingUrlError, InvalidUrlError, FetchError: Client-input failures.
    """
    settings = settings or default_settings
    url = resolve_url(raw_url)

    logger.info("Analyzing: %s", url)
    raw = await fetch_page(url, settings)
    extracted = extract_content(raw.html, url)

    if not settings.has_summarizer:
        logger.info("Basic analysis for %s (no summarizer credential)", url)
        return Analysis(result=synthesize(extracted), tier="basic")

    try:
        result = await summarize(extracted, settings)
    except SummarizerError as exc:
        logger.warning("AI analysis error for %s: %s", url, exc)
        logger.info("Basic analysis for %s (summarizer failed)", url)
        return Analysis(result=synthesize(extracted), tier="basic")

    logger.info("AI analysis for %s", url)
    return Analysis(result=result, tier="ai")
