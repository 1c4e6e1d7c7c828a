"""Local (basic tier) synthesis of an :class:`AnalysisResult`.

Used whenever the summarizer is unavailable: no API key configured, or the
call failed.  Built purely from extracted metadata and headings.
"""

from __future__ import annotations

from infsite.analysis.models import AnalysisResult
from infsite.scraper.models import ExtractedContent

DEFAULT_ABOUT = "A website that provides various content and services."
DEFAULT_PURPOSE = "This website serves as an online platform for information and services."
DEFAULT_FEATURES = ["Content publishing", "User interaction", "Information sharing"]
DEFAULT_USER_ACTIONS = ["Browse content", "Read information", "Navigate pages"]

MAX_FEATURES = 5


def synthesize(extracted: ExtractedContent) -> AnalysisResult:
    """Return a basic-tier analysis for *extracted*."""
    metadata = extracted.metadata
    prefix = f"{metadata.title}: " if metadata.title else ""
    features = extracted.headings[:MAX_FEATURES] or DEFAULT_FEATURES

    return AnalysisResult(
        about=prefix + (metadata.description or DEFAULT_ABOUT),
        purpose=DEFAULT_PURPOSE,
        features=list(features),
        user_actions=list(DEFAULT_USER_ACTIONS),
        metadata=metadata,
    )
