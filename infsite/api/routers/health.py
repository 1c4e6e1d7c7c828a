"""Liveness probe.

Routes
------
GET /api/health    → {"status": "ok", "message": "InfSite API is running"}
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "message": "InfSite API is running"}
