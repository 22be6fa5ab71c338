# File: backend/app/core/interaction/scoring.py
# Version: v0.1.0
"""
Score normalization and heuristic thermodynamic figures.

The 0-100 score divides the raw window score by `len(query) * 5`, the value
of a fully complementary window *without* seed bonus. Seed bonuses can push
the ratio above 100; the result is clamped.

`free_energy_estimate` and `accessibility_estimate` are monotone proxies of
the normalized score. They are NOT physical ΔG or accessibility values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import (
    COMPLEMENT_SCORE,
    MFE_ACCESSIBILITY_SCALE,
    MFE_HIGH_MAX,
    MFE_MEDIUM_MAX,
    MFE_SCORE_SCALE,
    STABILITY_HIGH_MIN,
    STABILITY_MEDIUM_MIN,
)


@dataclass(frozen=True)
class ThermoEstimate:
    free_energy: float
    stability: str
    accessibility: float


def _clamp(a: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, a))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def normalize_score(raw_score: int, query_length: int) -> int:
    """Map a raw window score onto [0, 100]."""
    if query_length <= 0:
        return 0
    pct = raw_score / (query_length * COMPLEMENT_SCORE) * 100
    return int(_clamp(_round_half_up(pct), 0, 100))


def stability_label(score: int) -> str:
    if score >= STABILITY_HIGH_MIN:
        return "High"
    if score >= STABILITY_MEDIUM_MIN:
        return "Medium"
    return "Low"


def free_energy_estimate(score: int) -> float:
    """Placeholder kcal/mol figure: -(score/10) - 10, more negative for better scores."""
    return -(score / 10) - 10


def accessibility_estimate(score: int) -> float:
    """0.5 + score/200, rounded to 2 decimals; lies in [0.5, 1.0]."""
    return round(0.5 + score / 200, 2)


def estimate_thermodynamics(score: int) -> ThermoEstimate:
    return ThermoEstimate(
        free_energy=free_energy_estimate(score),
        stability=stability_label(score),
        accessibility=accessibility_estimate(score),
    )


# --- MFE-based figures (external tools) ----------------------------------------------------------

def score_from_mfe(mfe: float) -> int:
    """0-100 score from a minimum free energy: |mfe| / 25 kcal/mol, clamped."""
    return int(_clamp(_round_half_up(abs(mfe) / MFE_SCORE_SCALE * 100), 0, 100))


def stability_from_mfe(mfe: float) -> str:
    if mfe < MFE_HIGH_MAX:
        return "High"
    if mfe < MFE_MEDIUM_MAX:
        return "Medium"
    return "Low"


def accessibility_from_mfe(mfe: float) -> float:
    return round(_clamp(0.5 + abs(mfe) / MFE_ACCESSIBILITY_SCALE, 0.0, 1.0), 2)
