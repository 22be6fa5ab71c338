# File: backend/app/api/v1/health.py
# Version: v0.1.0
"""
Healthcheck router.

- GET /health        -> {"status": "ok"}
- GET /health/tools  -> which optional enrichment tools are usable here
"""
from __future__ import annotations

import shutil

from fastapi import APIRouter

from backend.app.core.config import settings
from backend.app.core.interaction import enrichment

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Return a minimal health payload."""
    return {"status": "ok"}


@router.get("/health/tools")
def tools() -> dict[str, bool]:
    return {
        "viennarna": enrichment.RNA is not None,
        "rnahybridBinary": shutil.which(settings.RNAHYBRID_BINARY) is not None,
        "rnahybridApiConfigured": bool(settings.RNAHYBRID_API_URL),
    }
