"""InfSite CLI — entry-point for running and exercising the backend.

Usage:
    infsite --help

Commands:
    serve    → run the HTTP API with uvicorn
    analyze  → analyse one URL and print the JSON result
    scrape   → fetch + extract one URL without summarization
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional

import typer

from infsite.config import settings
from infsite.errors import AnalysisError
from infsite.logging_setup import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="infsite",
    help="InfSite backend CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to LOG_LEVEL or INFO)."
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or settings.log_level)


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (default: HOST)."),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: PORT or 3000)."),
    reload: bool = typer.Option(False, help="Reload on source changes (development)."),
) -> None:
    """Run the InfSite HTTP API."""
    import uvicorn  # noqa: PLC0415

    bind_host = host or settings.host
    bind_port = port or settings.port

    logger.info("InfSite backend server running on port %s", bind_port)
    logger.info("API endpoint: http://localhost:%s/api/analyze", bind_port)
    uvicorn.run(
        "infsite.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


# ---------------------------------------------------------------------------
# One-shot analysis
# ---------------------------------------------------------------------------
@app.command("analyze")
def analyze_cmd(
    url: str = typer.Argument(..., help="URL (or bare domain) to analyse."),
) -> None:
    """Analyse a URL and print the AnalysisResult JSON to stdout."""
    from infsite.analysis import analyze  # noqa: PLC0415

    try:
        analysis = asyncio.run(analyze(url, settings))
    except AnalysisError as exc:
        typer.echo(f"[analyze] {exc.message}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[analyze] Tier: {analysis.tier}", err=True)
    typer.echo(json.dumps(analysis.result.model_dump(mode="json", by_alias=True), indent=2))


@app.command("scrape")
def scrape(
    url: str = typer.Argument(..., help="URL (or bare domain) to scrape."),
) -> None:
    """Fetch a URL and print the extracted metadata, headings and text."""
    from infsite.analysis.orchestrator import resolve_url  # noqa: PLC0415
    from infsite.scraper import extract_content, fetch_page  # noqa: PLC0415

    try:
        normalized = resolve_url(url)
        typer.echo(f"[scrape] Fetching {normalized!r} …")
        raw = asyncio.run(fetch_page(normalized, settings))
    except AnalysisError as exc:
        typer.echo(f"[scrape] {exc.message}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[scrape] HTTP {raw.status_code} — extracting content …")
    extracted = extract_content(raw.html, normalized)

    typer.echo(f"[scrape] Title       : {extracted.metadata.title or '(none)'}")
    typer.echo(f"[scrape] Description : {extracted.metadata.description or '(none)'}")
    typer.echo(f"[scrape] Headings    : {len(extracted.headings)}")
    for heading in extracted.headings:
        typer.echo(f"  - {heading}")
    typer.echo("")
    typer.echo(extracted.content)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
