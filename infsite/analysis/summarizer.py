"""AI-tier summarization through the Anthropic Messages API.

The page's metadata, headings and a content sample are embedded in a single
user prompt asking for a JSON object with ``about``, ``purpose``,
``features`` and ``userActions``.  The text blocks of the reply are joined,
stripped of any code-fence wrapping, parsed and validated.

Every failure mode — transport errors, non-2xx responses, non-JSON answers,
answers of the wrong shape — surfaces as :class:`SummarizerError` so the
orchestrator can fall back to local synthesis.
"""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any

import httpx
from pydantic import ValidationError

from infsite.analysis.models import AnalysisResult, SummaryPayload
from infsite.config import Settings, settings as default_settings
from infsite.errors import SummarizerError
from infsite.scraper.models import ExtractedContent, PageMetadata

logger = logging.getLogger(__name__)

CONTENT_SAMPLE_LENGTH = 3000

_CODE_FENCE_RE = re.compile(r"```json\n?|\n?```")

_PROMPT_TEMPLATE = """\
Analyze this website and provide a structured response.

Website URL: {url}
Title: {title}
Meta Description: {description}

Main Headings:
{headings}

Content Sample:
{content}

Based on this information, provide:
1. A concise description of what the website is about (2-3 sentences)
2. The primary purpose of the website
3. 3-5 key features or main topics covered
4. 3-5 things users can do on this website

Return ONLY valid JSON (no markdown, no backticks) with this structure:
{{
    "about": "description here",
    "purpose": "purpose here",
    "features": ["feature1", "feature2", "feature3"],
    "userActions": ["action1", "action2", "action3"]
}}"""


# ---------------------------------------------------------------------------
# Prompt / response helpers
# ---------------------------------------------------------------------------

def build_prompt(extracted: ExtractedContent) -> str:
    """Return the user prompt describing *extracted* to the summarizer."""
    metadata = extracted.metadata
    return _PROMPT_TEMPLATE.format(
        url=metadata.url,
        title=metadata.title,
        description=metadata.description,
        headings="\n".join(extracted.headings),
        content=extracted.content[:CONTENT_SAMPLE_LENGTH],
    )


def extract_text(payload: Any) -> str:
    """Concatenate the ``text`` blocks of a Messages API response body."""
    if not isinstance(payload, dict):
        raise SummarizerError("Summarizer response is not a JSON object")
    text = ""
    for block in payload.get("content") or []:
        if isinstance(block, dict) and block.get("type") == "text":
            text += str(block.get("text", ""))
    return text


def strip_code_fences(text: str) -> str:
    """Remove ```` ```json ```` / ```` ``` ```` wrapping from *text*."""
    return _CODE_FENCE_RE.sub("", text).strip()


def parse_analysis(text: str, metadata: PageMetadata) -> AnalysisResult:
    """Parse the summarizer's raw answer and attach *metadata*.

    Raises:
        SummarizerError: If *text* is not JSON or lacks a required field.
    """
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        raise SummarizerError(f"Invalid JSON from summarizer: {exc}") from exc
    try:
        payload = SummaryPayload.model_validate(data)
    except ValidationError as exc:
        raise SummarizerError(f"Summarizer response did not match schema: {exc}") from exc
    return AnalysisResult(**payload.model_dump(), metadata=metadata)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def summarize(
    extracted: ExtractedContent,
    settings: Settings | None = None,
) -> AnalysisResult:
    """Ask the summarizer to describe *extracted* and return the parsed result.

    Raises:
        SummarizerError: On any failure; the underlying cause is chained.
    """
    settings = settings or default_settings
    if not settings.has_summarizer:
        raise SummarizerError("ANTHROPIC_API_KEY is not configured")

    request_body = {
        "model": settings.anthropic_model,
        "max_tokens": settings.anthropic_max_tokens,
        "messages": [{"role": "user", "content": build_prompt(extracted)}],
    }
    headers = {
        "Content-Type": "application/json",
        "x-api-key": settings.anthropic_api_key,
        "anthropic-version": settings.anthropic_version,
    }

    start = time.perf_counter()
    try:
        async with httpx.AsyncClient(timeout=settings.summarizer_timeout) as client:
            response = await client.post(
                f"{settings.anthropic_base_url.rstrip('/')}/v1/messages",
                headers=headers,
                json=request_body,
            )
            response.raise_for_status()
            payload = response.json()
    except httpx.HTTPError as exc:
        raise SummarizerError(f"Summarizer request failed: {exc}") from exc
    except ValueError as exc:
        raise SummarizerError(f"Summarizer returned a non-JSON body: {exc}") from exc

    text = extract_text(payload)
    logger.info(
        "Summarized %s in %.2fs",
        extracted.metadata.url,
        time.perf_counter() - start,
    )
    logger.debug("Summarizer response: %s", text)
    return parse_analysis(text, extracted.metadata)
