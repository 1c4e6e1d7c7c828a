"""Scraper package — URL normalisation, page fetch & content extraction."""

from infsite.scraper.extractor import extract_content
from infsite.scraper.fetcher import fetch_page
from infsite.scraper.models import ExtractedContent, PageMetadata, RawPage
from infsite.scraper.urls import is_valid_url, normalize_url

__all__ = [
    "extract_content",
    "fetch_page",
    "is_valid_url",
    "normalize_url",
    "ExtractedContent",
    "PageMetadata",
    "RawPage",
]
