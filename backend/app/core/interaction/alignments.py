# File: backend/app/core/interaction/alignments.py
# Version: v0.1.0
"""
ASCII alignment rendering for miRNA–lncRNA duplexes.

Layout (labels are padded to the same width so columns line up):

    miRNA  3' UCUAGUACGACCGUCGAAGU 5'
              ||||| |o||  |||||| |
    lncRNA 5' AGAUCCUGCUAAGAGCUUAA 3'

`summarize_alignment` reads the same layout back and counts pair symbols.
It also reads curated record alignments, which may use a narrower pad on the
symbol line and '-' gap characters for bulges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .complementarity import PAIR_SYMBOLS, PairClass

MIRNA_LABEL = "miRNA  3' "
LNCRNA_LABEL = "lncRNA 5' "
_PAD = " " * len(MIRNA_LABEL)


@dataclass(frozen=True)
class AlignmentSummary:
    complementary_pairs: int
    wobble_pairs: int
    mismatches: int
    bulges: int


def render_alignment(query: str, window: str, pairs: Sequence[PairClass]) -> str:
    """
    Render the three-line alignment.

    Args:
        query: miRNA 5'->3' (it is printed reversed, 3'->5').
        window: lncRNA substring at the winning offset, 5'->3'.
        pairs: classification per aligned position (len == len(query)).
    """
    symbols = "".join(PAIR_SYMBOLS[p] for p in pairs)
    return "\n".join(
        [
            f"{MIRNA_LABEL}{query[::-1]} 5'",
            f"{_PAD}{symbols}",
            f"{LNCRNA_LABEL}{window} 3'",
        ]
    )


def _strip_end_label(seq_part: str, label: str) -> str:
    s = seq_part.rstrip()
    if s.endswith(label):
        s = s[: -len(label)]
    return s.strip()


def summarize_alignment(text: str) -> AlignmentSummary:
    """
    Count '|' (complementary), 'o' (G:U) and ' ' (mismatch) symbols and '-' gaps.

    Returns all-zero counts when `text` does not have three lines.
    """
    lines = (text or "").split("\n")
    if len(lines) < 3:
        return AlignmentSummary(0, 0, 0, 0)
    mirna_line, match_line, lncrna_line = lines[0], lines[1], lines[2]

    start = mirna_line.find("3'")
    start = start + 3 if start >= 0 else len(MIRNA_LABEL)
    mirna_seq = _strip_end_label(mirna_line[start:], "5'")
    t_start = lncrna_line.find("5'")
    lncrna_seq = _strip_end_label(lncrna_line[t_start + 3 :] if t_start >= 0 else lncrna_line, "3'")

    # curated records pad the symbol line less than the sequence lines
    sym_start = min(start, max(0, len(match_line) - len(mirna_seq)))
    symbols = match_line[sym_start : sym_start + len(mirna_seq)].ljust(len(mirna_seq))
    complementary = symbols.count("|")
    wobble = symbols.count("o")
    mismatches = sum(1 for ch, base in zip(symbols, mirna_seq) if ch not in "|o" and base != "-")
    bulges = mirna_seq.count("-") + lncrna_seq.count("-")
    return AlignmentSummary(
        complementary_pairs=complementary,
        wobble_pairs=wobble,
        mismatches=mismatches,
        bulges=bulges,
    )
