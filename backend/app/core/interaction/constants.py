# File: backend/app/core/interaction/constants.py
# Version: v0.1.0
"""
Constants and defaults for the interaction prediction engine.

Score contributions are per aligned position. The seed bonus is added on top
of the complementary contribution for positions inside the seed region.
"""

from __future__ import annotations

RNA_ALPHABET = frozenset("AUGC")

COMPLEMENT_SCORE = 5
SEED_COMPLEMENT_BONUS = 2

# Contribution of a G:U wobble pair by `guWobble` mode
WOBBLE_SCORES = {
    "allowed": 3,
    "penalty": 1,
    "disallowed": 0,
}

# 1-based inclusive seed ranges along the 3'->5' query traversal
SEED_REGIONS = {
    "2-7": (2, 7),
    "2-8": (2, 8),
    "1-7": (1, 7),
}

SEED_MATCH_LABELS = {
    "2-7": "Perfect (positions 2-7)",
    "2-8": "Extended (positions 2-8)",
    "1-7": "Alternative (positions 1-7)",
}

DEFAULT_SEED_REGION = "2-7"
DEFAULT_MISMATCH_PENALTY = 3
DEFAULT_GU_WOBBLE = "allowed"
DEFAULT_ALGORITHM = "standard"
DEFAULT_SCORE_THRESHOLD = 50

MISMATCH_PENALTY_MIN = 1
MISMATCH_PENALTY_MAX = 5

# Stability label cut-offs on the normalized 0-100 score
STABILITY_HIGH_MIN = 70
STABILITY_MEDIUM_MIN = 40

# The standard path does not detect gaps; it reports a single bulge
STANDARD_BULGES = 1
STANDARD_LOCAL_STRUCTURE = "Unpaired region"

# Free-energy based labels for the external tools (kcal/mol)
MFE_HIGH_MAX = -20.0
MFE_MEDIUM_MAX = -10.0
MFE_SCORE_SCALE = 25.0
MFE_ACCESSIBILITY_SCALE = 40.0

DEFAULT_MAX_TARGET_LENGTH = 20000
# Upper bound on pair comparisons per scan: len(q) * (len(t) - len(q) + 1)
DEFAULT_MAX_SCAN_CELLS = 2_000_000
DEFAULT_ENRICHMENT_TIMEOUT_S = 10.0
