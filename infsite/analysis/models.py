"""Response models for the analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from infsite.scraper.models import PageMetadata

Tier = Literal["ai", "basic"]


class SummaryPayload(BaseModel):
    """The JSON object the summarizer is asked to return."""

    model_config = ConfigDict(populate_by_name=True)

    about: str
    purpose: str
    features: List[str]
    user_actions: List[str] = Field(alias="userActions")


class AnalysisResult(SummaryPayload):
    """Normalized description of a site, returned by ``POST /api/analyze``."""

    metadata: PageMetadata


@dataclass
class Analysis:
    """An :class:`AnalysisResult` plus the tier that produced it."""

    result: AnalysisResult
    tier: Tier
