"""Exception taxonomy for the InfSite analysis pipeline.

Client-input failures (:class:`MissingUrlError`, :class:`InvalidUrlError`,
:class:`FetchError`) carry the user-facing message and HTTP status the API
layer responds with.  :class:`SummarizerError` never reaches a caller: the
orchestrator absorbs it and falls back to local synthesis.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures that terminate an analysis request."""

    message = "An error occurred while analyzing the website. Please try again."
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingUrlError(AnalysisError):
    message = "URL is required"
    status_code = 400


class InvalidUrlError(AnalysisError):
    message = "Invalid URL provided"
    status_code = 400


class FetchError(AnalysisError):
    message = (
        "Unable to fetch website content. The site may be blocking automated "
        "access or is unreachable."
    )
    status_code = 400


class SummarizerError(Exception):
    """The external summarizer failed or returned an unusable answer."""
