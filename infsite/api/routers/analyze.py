"""Site analysis endpoint.

Routes
------
POST /api/analyze    Body: {"url": "example.com"}    → analyze

Responses
---------
200  AnalysisResult JSON; the ``X-Analysis-Tier`` header is ``ai`` or ``basic``.
400  {"error": "..."} for a missing / invalid URL or an unfetchable site.
500  {"error": "..."} for anything unexpected.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from infsite.analysis import analyze
from infsite.analysis.models import AnalysisResult
from infsite.api.deps import get_settings
from infsite.config import Settings
from infsite.errors import AnalysisError

logger = logging.getLogger(__name__)

router = APIRouter()

TIER_HEADER = "X-Analysis-Tier"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    url: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_endpoint(
    response: Response,
    body: Optional[AnalyzeRequest] = None,
    settings: Settings = Depends(get_settings),
):
    """Fetch the page at ``body.url`` and describe the site."""
    raw_url = body.url if body is not None else None
    try:
        analysis = await analyze(raw_url, settings)
    except AnalysisError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception:
        logger.exception("Server error while analyzing %r", raw_url)
        return JSONResponse(
            status_code=AnalysisError.status_code,
            content={"error": AnalysisError.message},
        )

    response.headers[TIER_HEADER] = analysis.tier
    return analysis.result
