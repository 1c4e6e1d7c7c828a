"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int
    final_url: str = ""


@dataclass(frozen=True)
class PageMetadata:
    """Title, description and source URL of a fetched page."""

    title: str
    description: str
    url: str


@dataclass(frozen=True)
class ExtractedContent:
    """Salient text extracted from a :class:`RawPage`.

    ``headings`` holds at most 10 entries and ``content`` at most 8000
    characters of whitespace-collapsed text.
    """

    metadata: PageMetadata
    headings: List[str] = field(default_factory=list)
    content: str = ""
