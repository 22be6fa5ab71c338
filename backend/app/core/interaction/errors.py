# File: backend/app/core/interaction/errors.py
# Version: v0.1.0
"""
Exception types for the miRNA–lncRNA interaction engine.

- InteractionInputError and its subclasses are caller errors (HTTP 400).
- EnrichmentError is recoverable: the predictor catches it and falls back
  to the sliding-window result.
"""

from __future__ import annotations


class InteractionError(Exception):
    pass


class InteractionInputError(InteractionError, ValueError):
    """Raised for anything the caller can fix by changing the request."""


class InvalidSequenceError(InteractionInputError):
    pass


class SequenceTooShortError(InteractionInputError):
    pass


class SequenceTooLongError(InteractionInputError):
    pass


class InvalidParametersError(InteractionInputError):
    pass


class EnrichmentError(InteractionError):
    """An external folding/hybridization step failed or is unavailable."""
