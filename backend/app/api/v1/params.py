# File: backend/app/api/v1/params.py
# Version: v0.1.0
"""
Parameters API.

Endpoints:
- GET /params/prediction -> default PredictionParameters plus the allowed values
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from backend.app.core.config import settings
from backend.app.core.interaction.constants import (
    MISMATCH_PENALTY_MAX,
    MISMATCH_PENALTY_MIN,
    SEED_REGIONS,
    WOBBLE_SCORES,
)
from backend.app.core.interaction.parameters import PredictionParameters

router = APIRouter(prefix="/params", tags=["params"])


@router.get("/prediction")
def get_prediction_defaults() -> Dict[str, Any]:
    return {
        "defaults": PredictionParameters().model_dump(),
        "choices": {
            "seedRegion": list(SEED_REGIONS),
            "guWobble": list(WOBBLE_SCORES),
            "algorithm": ["standard", "rnafold", "rnahybrid"],
            "mismatchPenalty": {"min": MISMATCH_PENALTY_MIN, "max": MISMATCH_PENALTY_MAX},
        },
        "maxTargetLength": settings.MAX_TARGET_LENGTH,
        "maxScanCells": settings.MAX_SCAN_CELLS,
    }
