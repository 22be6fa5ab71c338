# File: backend/app/core/interaction/sequence.py
# Version: v0.1.0
"""
RNA sequence normalization.

Inputs are accepted case-insensitively and returned uppercased. Leading and
trailing whitespace (e.g. the newline of a pasted line) is removed before
validation; whitespace inside the sequence is an invalid character. Only the
RNA alphabet A/U/G/C is valid; DNA 'T' is rejected rather than silently
transcribed so that users notice they pasted the wrong strand type.

Size checks bound the work of the sliding-window scan, which compares
len(q) * (len(t) - len(q) + 1) base pairs.
"""

from __future__ import annotations

from .constants import RNA_ALPHABET
from .errors import InvalidSequenceError, SequenceTooLongError


def normalize_sequence(raw: str, label: str = "sequence") -> str:
    """
    Validate and uppercase an RNA sequence.

    Args:
        raw: user-supplied nucleotide string (surrounding whitespace is ignored).
        label: name used in error messages (e.g. "miRNA sequence").

    Returns:
        Uppercased sequence over A/U/G/C.

    Raises:
        InvalidSequenceError: empty input or a character outside A/U/G/C.
    """
    seq = (raw or "").strip().upper()
    if not seq:
        raise InvalidSequenceError(f"{label} is empty")
    for pos, base in enumerate(seq, start=1):
        if base not in RNA_ALPHABET:
            raise InvalidSequenceError(
                f"{label} contains invalid character '{base}' at position {pos} "
                "(allowed: A, U, G, C)"
            )
    return seq


def check_target_length(target: str, max_len: int, label: str = "lncRNA sequence") -> None:
    if max_len > 0 and len(target) > max_len:
        raise SequenceTooLongError(
            f"{label} length {len(target)} exceeds the maximum of {max_len} nt"
        )


def scan_cells(query_len: int, target_len: int) -> int:
    """Number of pair comparisons a full sliding-window scan performs."""
    return query_len * max(0, target_len - query_len + 1)


def check_scan_size(query: str, target: str, max_cells: int) -> None:
    """
    Reject inputs whose scan would exceed `max_cells` pair comparisons.

    Raises:
        SequenceTooLongError: the product is over the cap (0 disables the check).
    """
    cells = scan_cells(len(query), len(target))
    if max_cells > 0 and cells > max_cells:
        raise SequenceTooLongError(
            f"miRNA ({len(query)} nt) x lncRNA ({len(target)} nt) scan needs {cells} comparisons; "
            f"the maximum is {max_cells}. Shorten the lncRNA fragment around the expected site"
        )
