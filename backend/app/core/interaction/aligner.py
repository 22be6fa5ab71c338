# File: backend/app/core/interaction/aligner.py
# Version: v0.1.0
"""
Sliding-window complementarity search.

The miRNA is read 3'->5' (reversed) and laid against every window of the
lncRNA read 5'->3'. Each position is classified by `classify_pair` and
scored:

- complementary pair:   +5 (+2 more inside the seed region)
- G:U wobble:           +3 / +1 / +0 for allowed / penalty / disallowed
- mismatch:             -mismatchPenalty

The window with the strictly highest score wins; ties keep the lowest offset.
A winner is always returned, even when every window scores <= 0.

Coordinates
-----------
- Offsets are 0-based; the binding site is [offset, offset + len(query)).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterator, Tuple

from .alignments import render_alignment
from .complementarity import PairClass, classify_pair
from .constants import COMPLEMENT_SCORE, SEED_COMPLEMENT_BONUS
from .errors import SequenceTooShortError
from .parameters import PredictionParameters


@dataclass(frozen=True)
class AlignmentWindow:
    offset: int
    score: int
    pairs: Tuple[PairClass, ...]
    seed_matches: int

    @property
    def complementary_pairs(self) -> int:
        return self.pairs.count(PairClass.COMPLEMENT)

    @property
    def wobble_pairs(self) -> int:
        return self.pairs.count(PairClass.WOBBLE)

    @property
    def mismatches(self) -> int:
        return self.pairs.count(PairClass.MISMATCH)


@dataclass(frozen=True)
class BestMatch:
    """Winning window plus its rendered three-line alignment."""
    offset: int
    end: int
    raw_score: int
    pairs: Tuple[PairClass, ...]
    complementary_pairs: int
    wobble_pairs: int
    mismatches: int
    alignment: str


def score_window(query: str, window: str, params: PredictionParameters, offset: int = 0) -> AlignmentWindow:
    """Score one target window (same length as `query`) against the reversed query."""
    n = len(query)
    seed_start, seed_end = params.seed_bounds
    seed_end = min(seed_end, n)
    wobble = params.wobble_score

    pairs = []
    score = 0
    seed_matches = 0
    for j in range(n):
        cls = classify_pair(query[n - 1 - j], window[j])
        pairs.append(cls)
        if cls is PairClass.COMPLEMENT:
            score += COMPLEMENT_SCORE
            if seed_start <= j < seed_end:
                seed_matches += 1
        elif cls is PairClass.WOBBLE:
            score += wobble
        else:
            score -= params.mismatchPenalty
    score += SEED_COMPLEMENT_BONUS * seed_matches
    return AlignmentWindow(offset=offset, score=score, pairs=tuple(pairs), seed_matches=seed_matches)


def iter_windows(query: str, target: str, params: PredictionParameters) -> Iterator[AlignmentWindow]:
    """Yield scored windows for offsets 0..len(target)-len(query), left to right."""
    n = len(query)
    for i in range(len(target) - n + 1):
        yield score_window(query, target[i : i + n], params, offset=i)


def _keep_better(best: AlignmentWindow, candidate: AlignmentWindow) -> AlignmentWindow:
    # strict improvement only: equal scores keep the earlier offset
    return candidate if candidate.score > best.score else best


def scan(query: str, target: str, params: PredictionParameters) -> AlignmentWindow:
    """
    Return the best-scoring window.

    Raises:
        SequenceTooShortError: the target is shorter than the query.
    """
    if len(target) < len(query):
        raise SequenceTooShortError(
            f"lncRNA sequence ({len(target)} nt) is shorter than the miRNA sequence "
            f"({len(query)} nt); the miRNA cannot be placed at any offset"
        )
    return reduce(_keep_better, iter_windows(query, target, params))


def find_best_match(query: str, target: str, params: PredictionParameters) -> BestMatch:
    """Scan all offsets and render the winning alignment. Inputs must be normalized."""
    best = scan(query, target, params)
    n = len(query)
    window = target[best.offset : best.offset + n]
    return BestMatch(
        offset=best.offset,
        end=best.offset + n,
        raw_score=best.score,
        pairs=best.pairs,
        complementary_pairs=best.complementary_pairs,
        wobble_pairs=best.wobble_pairs,
        mismatches=best.mismatches,
        alignment=render_alignment(query, window, best.pairs),
    )
