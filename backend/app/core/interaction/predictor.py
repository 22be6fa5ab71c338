# File: backend/app/core/interaction/predictor.py
# Version: v0.1.0
"""
Prediction assembler: sequence checks -> sliding-window search -> scoring ->
optional enrichment with an external RNA tool.

Flow
----
1) Normalize miRNA/lncRNA, enforce the lncRNA length cap, len(lncRNA) >= len(miRNA)
   and the scan-size cap.
   These raise InteractionInputError subclasses (caller errors).
2) Build the standard result from the best sliding-window match.
3) For algorithm "rnafold"/"rnahybrid", run the enrichment strategy in a worker
   thread bounded by `timeout`. Its fields override the standard ones; anything
   it leaves out (or gets inconsistent) keeps the standard value.
   Enrichment problems of any kind are logged and the standard result is returned.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from backend.app.core.config import settings

from .aligner import BestMatch, find_best_match
from .constants import SEED_MATCH_LABELS, STANDARD_BULGES, STANDARD_LOCAL_STRUCTURE
from .enrichment import Enricher, PartialPrediction, build_enricher
from .errors import EnrichmentError, InvalidParametersError, SequenceTooShortError
from .parameters import PredictionParameters
from .schemas import BindingDetails, PredictionResult, Thermodynamics
from .scoring import estimate_thermodynamics, normalize_score
from .sequence import check_scan_size, check_target_length, normalize_sequence

log = logging.getLogger(__name__)

ParamsLike = Union[PredictionParameters, Mapping[str, Any], None]


def coerce_parameters(params: ParamsLike) -> PredictionParameters:
    if params is None:
        return PredictionParameters()
    if isinstance(params, PredictionParameters):
        return params
    try:
        return PredictionParameters.model_validate(dict(params))
    except ValidationError as exc:
        raise InvalidParametersError(f"Invalid prediction parameters: {exc}") from exc


def standard_result(
    query: str,
    target: str,
    best: BestMatch,
    params: PredictionParameters,
    mirna_name: Optional[str] = None,
    lncrna_name: Optional[str] = None,
) -> PredictionResult:
    score = normalize_score(best.raw_score, len(query))
    thermo = estimate_thermodynamics(score)
    return PredictionResult(
        score=score,
        mirnaName=mirna_name,
        mirnaSequence=query,
        lncrnaName=lncrna_name,
        lncrnaSequence=target,
        alignment=best.alignment,
        bindingStart=best.offset,
        bindingEnd=best.end,
        bindingDetails=BindingDetails(
            seedMatch=SEED_MATCH_LABELS[params.seedRegion],
            complementaryPairs=best.complementary_pairs,
            mismatches=best.mismatches,
            guWobblePairs=best.wobble_pairs,
            bulges=STANDARD_BULGES,
        ),
        thermodynamics=Thermodynamics(
            freeEnergy=thermo.free_energy,
            stabilityScore=thermo.stability,
            accessibility=thermo.accessibility,
            localStructure=STANDARD_LOCAL_STRUCTURE,
        ),
    )


def merge_partial(standard: PredictionResult, partial: PartialPrediction) -> PredictionResult:
    """
    Overlay a partial enrichment result on the standard one.

    Binding coordinates are taken only when they cover exactly len(miRNA) nt
    inside the lncRNA; pair counts only when they add up to len(miRNA).
    """
    q_len = len(standard.mirnaSequence)
    t_len = len(standard.lncrnaSequence)
    data = standard.model_dump()
    details = data["bindingDetails"]
    thermo = data["thermodynamics"]

    if partial.score is not None:
        data["score"] = int(max(0, min(100, partial.score)))

    start, end = partial.binding_start, partial.binding_end
    if start is not None and end is not None:
        if 0 <= start and end <= t_len and end - start == q_len:
            data["bindingStart"], data["bindingEnd"] = start, end
        else:
            log.info("Ignoring %s binding site [%s, %s): width must be %d nt", partial.source, start, end, q_len)

    counts = (partial.complementary_pairs, partial.mismatches, partial.gu_wobble_pairs)
    if all(c is not None for c in counts):
        if sum(counts) == q_len:
            details["complementaryPairs"], details["mismatches"], details["guWobblePairs"] = counts
        else:
            log.info("Ignoring %s pair counts %s: they do not add up to %d", partial.source, counts, q_len)
    if partial.bulges is not None:
        details["bulges"] = partial.bulges
    if partial.seed_match:
        details["seedMatch"] = partial.seed_match

    if partial.free_energy is not None:
        thermo["freeEnergy"] = partial.free_energy
    if partial.stability:
        thermo["stabilityScore"] = partial.stability
    if partial.accessibility is not None:
        thermo["accessibility"] = max(0.0, min(1.0, partial.accessibility))
    if partial.local_structure:
        thermo["localStructure"] = partial.local_structure

    return PredictionResult.model_validate(data)


def run_enricher(enricher: Enricher, query: str, target: str, timeout: float) -> PartialPrediction:
    """Run `enricher.enrich` in a worker thread; raise EnrichmentError on timeout."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="enrich")
    try:
        future = executor.submit(enricher.enrich, query, target)
        try:
            return future.result(timeout=timeout)
        except FuturesTimeout as exc:
            future.cancel()
            raise EnrichmentError(f"{enricher.name} did not finish within {timeout:.1f}s") from exc
    finally:
        # a timed-out call keeps running in the background; don't wait for it
        executor.shutdown(wait=False)


def _default_enricher(algorithm: str, timeout: float) -> Optional[Enricher]:
    return build_enricher(
        algorithm,
        api_url=settings.RNAHYBRID_API_URL,
        binary=settings.RNAHYBRID_BINARY,
        dataset=settings.RNAHYBRID_DATASET,
        timeout=timeout,
    )


def predict_interaction(
    mirna_sequence: str,
    lncrna_sequence: str,
    params: ParamsLike = None,
    *,
    enricher: Optional[Enricher] = None,
    timeout: Optional[float] = None,
    max_target_length: Optional[int] = None,
    max_scan_cells: Optional[int] = None,
    mirna_name: Optional[str] = None,
    lncrna_name: Optional[str] = None,
) -> PredictionResult:
    """
    Predict the best binding site of a miRNA on a lncRNA fragment.

    Args:
        mirna_sequence: miRNA 5'->3' (A/U/G/C, any case).
        lncrna_sequence: lncRNA fragment 5'->3'; must be at least as long as the miRNA.
        params: PredictionParameters or a dict of its camelCase keys (defaults if None).
        enricher: strategy for non-standard algorithms; built from settings when omitted.
        timeout: seconds to wait for the enricher (settings.ENRICHMENT_TIMEOUT_S by default).
        max_target_length: lncRNA length cap (settings.MAX_TARGET_LENGTH by default).
        max_scan_cells: cap on len(q) * (len(t) - len(q) + 1) (settings.MAX_SCAN_CELLS by default).

    Raises:
        InvalidSequenceError, SequenceTooLongError, SequenceTooShortError, InvalidParametersError
    """
    p = coerce_parameters(params)
    query = normalize_sequence(mirna_sequence, "miRNA sequence")
    target = normalize_sequence(lncrna_sequence, "lncRNA sequence")
    cap = settings.MAX_TARGET_LENGTH if max_target_length is None else max_target_length
    check_target_length(target, cap)
    if len(target) < len(query):
        raise SequenceTooShortError(
            f"lncRNA sequence ({len(target)} nt) must be at least as long as the miRNA sequence ({len(query)} nt)"
        )
    check_scan_size(query, target, settings.MAX_SCAN_CELLS if max_scan_cells is None else max_scan_cells)

    best = find_best_match(query, target, p)
    log.debug("Best window offset=%d raw=%d (len %d vs %d)", best.offset, best.raw_score, len(query), len(target))
    result = standard_result(query, target, best, p, mirna_name, lncrna_name)

    if p.algorithm == "standard":
        return result

    wait = settings.ENRICHMENT_TIMEOUT_S if timeout is None else timeout
    strategy = enricher or _default_enricher(p.algorithm, wait)
    if strategy is None:
        return result

    try:
        partial = run_enricher(strategy, query, target, wait)
        if partial.is_empty():
            raise EnrichmentError(f"{strategy.name} returned no usable fields")
        merged = merge_partial(result, partial)
    except Exception as exc:  # enrichment is best-effort; fall back to the standard result
        log.warning("%s enrichment failed, using standard prediction: %s", p.algorithm, exc)
        return result

    log.info("Prediction enriched by %s", partial.source or strategy.name)
    return merged
