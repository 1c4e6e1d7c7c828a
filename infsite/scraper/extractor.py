"""Content extraction: turns fetched HTML into :class:`ExtractedContent`."""

from __future__ import annotations

import logging
import re
from typing import List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from infsite.scraper.models import ExtractedContent, PageMetadata

logger = logging.getLogger(__name__)

_NON_CONTENT_TAGS = ["script", "style", "noscript", "iframe", "svg"]

# Order matters only for tie-breaking: an equally long later match never wins.
_CONTENT_SELECTORS = [
    "main",
    "article",
    '[role="main"]',
    ".content",
    "#content",
    ".main",
]

MAX_HEADINGS = 10
MAX_HEADING_LENGTH = 200
MIN_MAIN_CONTENT_LENGTH = 100
MAX_CONTENT_LENGTH = 8000

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _parse(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("HTML parser rejected markup, treating as empty: %s", exc)
        return BeautifulSoup("", "html.parser")


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    """Return the ``content`` attribute of the first matching ``<meta>`` tag."""
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    content = tag.get("content")
    return content if isinstance(content, str) else ""


def _extract_metadata(soup: BeautifulSoup, url: str) -> PageMetadata:
    title = "".join(tag.get_text() for tag in soup.find_all("title")).strip()
    return PageMetadata(
        title=title or _meta_content(soup, property="og:title"),
        description=(
            _meta_content(soup, name="description")
            or _meta_content(soup, property="og:description")
        ),
        url=url,
    )


def _extract_headings(soup: BeautifulSoup) -> List[str]:
    headings: List[str] = []
    for tag in soup.find_all(["h1", "h2", "h3"]):
        text = tag.get_text().strip()
        if text and len(text) < MAX_HEADING_LENGTH:
            headings.append(text)
    return headings[:MAX_HEADINGS]


def _main_content(soup: BeautifulSoup) -> str:
    """Return the longest text found under the candidate content selectors."""
    best = ""
    for selector in _CONTENT_SELECTORS:
        text = "".join(tag.get_text() for tag in soup.select(selector))
        if len(text) > len(best):
            best = text
    return best


def _document_text(soup: BeautifulSoup) -> str:
    """Return the text of ``<body>``, or of everything outside ``<head>``.

    Mutates *soup*; call only after metadata and headings are extracted.
    """
    if soup.body is not None:
        return soup.body.get_text()
    for tag in soup(["head", "title"]):
        tag.decompose()
    return soup.get_text()


def clean_text(text: str, limit: int = MAX_CONTENT_LENGTH) -> str:
    """Collapse whitespace runs to single spaces, trim, and cap at *limit*."""
    return _WHITESPACE_RE.sub(" ", text).strip()[:limit]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(html: str, url: str) -> ExtractedContent:
    """Extract metadata, headings and a bounded plain-text body from *html*.

    Never raises on malformed markup: an empty or minimal document yields
    empty metadata and headings and a possibly empty content string.
    """
    soup = _parse(html)

    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()

    metadata = _extract_metadata(soup, url)
    headings = _extract_headings(soup)

    content = _main_content(soup)
    if len(content) < MIN_MAIN_CONTENT_LENGTH:
        content = _document_text(soup)

    return ExtractedContent(
        metadata=metadata,
        headings=headings,
        content=clean_text(content),
    )
