# File: backend/app/core/interaction/complementarity.py
# Version: v0.1.0
"""
Base-pair classification between a miRNA base and a target base.
"""

from __future__ import annotations

from enum import Enum


class PairClass(str, Enum):
    COMPLEMENT = "complement"
    WOBBLE = "wobble"
    MISMATCH = "mismatch"


_COMPLEMENT_PAIRS = frozenset({("A", "U"), ("U", "A"), ("G", "C"), ("C", "G")})
_WOBBLE_PAIRS = frozenset({("G", "U"), ("U", "G")})

# Symbols used on the middle line of a rendered alignment
PAIR_SYMBOLS = {
    PairClass.COMPLEMENT: "|",
    PairClass.WOBBLE: "o",
    PairClass.MISMATCH: " ",
}


def classify_pair(query_base: str, target_base: str) -> PairClass:
    """Watson-Crick pair, G:U wobble, or mismatch (anything else)."""
    pair = (query_base, target_base)
    if pair in _COMPLEMENT_PAIRS:
        return PairClass.COMPLEMENT
    if pair in _WOBBLE_PAIRS:
        return PairClass.WOBBLE
    return PairClass.MISMATCH
