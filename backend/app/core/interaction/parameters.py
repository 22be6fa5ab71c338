# File: backend/app/core/interaction/parameters.py
# Version: v0.1.0
"""
Pydantic model for interaction prediction parameters.

Keys are camelCase so the same JSON works for the HTTP API, the CLI and
stored predictions.

Usage:
    from backend.app.core.interaction.parameters import PredictionParameters
"""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, Field, conint

from .constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_GU_WOBBLE,
    DEFAULT_MISMATCH_PENALTY,
    DEFAULT_SCORE_THRESHOLD,
    DEFAULT_SEED_REGION,
    MISMATCH_PENALTY_MAX,
    MISMATCH_PENALTY_MIN,
    SEED_REGIONS,
    WOBBLE_SCORES,
)

SeedRegion = Literal["2-7", "2-8", "1-7"]
Algorithm = Literal["standard", "rnafold", "rnahybrid"]
GuWobbleMode = Literal["allowed", "penalty", "disallowed"]


class PredictionParameters(BaseModel):
    seedRegion: SeedRegion = Field(DEFAULT_SEED_REGION, description="1-based inclusive seed range on the miRNA")
    scoreThreshold: int = Field(
        DEFAULT_SCORE_THRESHOLD,
        description="Advisory threshold for clients; not enforced by the predictor",
    )
    algorithm: Algorithm = Field(DEFAULT_ALGORITHM, description="standard | rnafold | rnahybrid")
    mismatchPenalty: conint(ge=MISMATCH_PENALTY_MIN, le=MISMATCH_PENALTY_MAX) = Field(
        DEFAULT_MISMATCH_PENALTY, description="Score subtracted per mismatch"
    )
    guWobble: GuWobbleMode = Field(DEFAULT_GU_WOBBLE, description="Scoring of G:U wobble pairs")

    model_config = {"frozen": True}

    @property
    def seed_bounds(self) -> Tuple[int, int]:
        """Seed region as 0-based half-open [start, end) along the 3'->5' query."""
        start, end = SEED_REGIONS[self.seedRegion]
        return start - 1, end

    @property
    def wobble_score(self) -> int:
        return WOBBLE_SCORES[self.guWobble]
