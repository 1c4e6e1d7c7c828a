"""Centralised settings for the InfSite backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The settings object is handed to :func:`infsite.api.app.create_app` and to the
analysis pipeline explicitly; nothing downstream reads the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    static_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("STATIC_DIR", "public"))
    )
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))

    # ------------------------------------------------------------------
    # Summarizer (Anthropic Messages API)
    # ------------------------------------------------------------------
    anthropic_api_key: str = field(
        default_factory=lambda: os.environ.get("ANTHROPIC_API_KEY", "")
    )
    anthropic_model: str = field(
        default_factory=lambda: os.environ.get(
            "ANTHROPIC_MODEL", "claude-sonnet-4-20250514"
        )
    )
    anthropic_max_tokens: int = field(
        default_factory=lambda: int(os.environ.get("ANTHROPIC_MAX_TOKENS", "1000"))
    )
    anthropic_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "ANTHROPIC_BASE_URL", "https://api.anthropic.com"
        )
    )
    anthropic_version: str = field(
        default_factory=lambda: os.environ.get("ANTHROPIC_VERSION", "2023-06-01")
    )
    summarizer_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SUMMARIZER_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Page fetcher
    # ------------------------------------------------------------------
    fetch_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FETCH_TIMEOUT", "10.0"))
    )
    fetch_max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("FETCH_MAX_REDIRECTS", "5"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("FETCH_USER_AGENT", _BROWSER_UA)
    )

    @property
    def has_summarizer(self) -> bool:
        """``True`` when an API key for the summarizer is configured."""
        return bool(self.anthropic_api_key.strip())


# Module-level singleton — the CLI and ``create_app()`` default to it:
#   from infsite.config import settings
settings = Settings()
