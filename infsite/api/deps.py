"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from infsite.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the :class:`Settings` the application was created with."""
    return request.app.state.settings
