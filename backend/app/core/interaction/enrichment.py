# File: backend/app/core/interaction/enrichment.py
# Version: v0.1.0
"""
Optional enrichment of predictions with external RNA tools.

Strategies
----------
- ViennaCofoldEnricher ("rnafold"): ViennaRNA Python bindings. Cofolds
  miRNA & lncRNA for the duplex MFE/structure, and averages the unpaired
  probability of the lncRNA (partition function) as accessibility.
- RNAhybridApiEnricher ("rnahybrid"): RNAhybrid web API over HTTP (httpx).
- RNAhybridLocalEnricher ("rnahybrid"): local `RNAhybrid` binary run on
  FASTA files written with Biopython.
- FallbackChain: tries strategies in order, first usable result wins.

Every strategy returns a PartialPrediction: fields it could not determine
stay None and are filled from the sliding-window result by the predictor.
Any failure is raised as EnrichmentError; the predictor never lets it reach
the caller.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import httpx
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from .complementarity import PairClass, classify_pair
from .errors import EnrichmentError
from .scoring import accessibility_from_mfe, score_from_mfe, stability_from_mfe

try:
    # ViennaRNA Python bindings
    import RNA  # type: ignore
except Exception as exc:  # pragma: no cover - import guard
    RNA = None  # handled in ViennaCofoldEnricher.enrich
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None

log = logging.getLogger(__name__)

# Cofold and the partition function are cubic in length. A worker thread that
# misses the enrichment timeout keeps running until ViennaRNA returns, so both
# bounds keep one call within DEFAULT_ENRICHMENT_TIMEOUT_S; longer inputs are
# left to the standard path.
COFOLD_MAX_TOTAL_LEN = 1000
ACCESSIBILITY_MAX_LEN = 800

RNAHYBRID_OPTIONS = {
    "hitNumber": 1,
    "maxTargetLength": 0,
    "energy": -10,
    "helix": 2,
    "maxInternalLoop": 4,
    "maxBulgeLoop": 2,
    "maxMismatch": 3,
}


@dataclass
class PartialPrediction:
    """Fields an external tool managed to determine; None means "use the standard value".

    The three-line alignment always comes from the sliding-window scan; tool
    diagrams and dot-brackets go to `local_structure`.
    """
    score: Optional[int] = None
    binding_start: Optional[int] = None
    binding_end: Optional[int] = None
    seed_match: Optional[str] = None
    complementary_pairs: Optional[int] = None
    mismatches: Optional[int] = None
    gu_wobble_pairs: Optional[int] = None
    bulges: Optional[int] = None
    free_energy: Optional[float] = None
    stability: Optional[str] = None
    accessibility: Optional[float] = None
    local_structure: Optional[str] = None
    source: str = ""

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self) if f.name != "source")


class Enricher(ABC):
    name: str = "enricher"

    @abstractmethod
    def enrich(self, query: str, target: str) -> PartialPrediction:
        """Return a partial prediction or raise EnrichmentError."""


# --- Dot-bracket helpers -------------------------------------------------------------------------

def dotbracket_pairs(structure: str) -> List[Tuple[int, int]]:
    """Return (i, j) index pairs (i < j) for a dot-bracket string."""
    stack: List[int] = []
    pairs: List[Tuple[int, int]] = []
    for k, c in enumerate(structure):
        if c == "(":
            stack.append(k)
        elif c == ")":
            if not stack:
                raise EnrichmentError(f"Unbalanced structure at position {k}")
            pairs.append((stack.pop(), k))
    if stack:
        raise EnrichmentError("Unbalanced structure: unclosed '('")
    return sorted(pairs)


def _count_runs(flags: Sequence[bool]) -> int:
    runs = 0
    prev = False
    for f in flags:
        if f and not prev:
            runs += 1
        prev = f
    return runs


@dataclass(frozen=True)
class DuplexCounts:
    complementary_pairs: int
    gu_wobble_pairs: int
    mismatches: int
    bulges: int
    target_span: Optional[Tuple[int, int]]


def duplex_counts(query: str, target: str, structure: str) -> DuplexCounts:
    """
    Classify intermolecular pairs of a cofold structure over `query + target`.

    Unpaired (or intramolecularly paired) miRNA bases count as mismatches, so
    complementary + wobble + mismatches == len(query). Bulges are runs of
    miRNA bases without a partner between the first and last duplex pair.
    """
    n = len(query)
    complementary = wobble = 0
    partnered = [False] * n
    t_positions: List[int] = []
    for i, j in dotbracket_pairs(structure):
        if i < n <= j:
            t = j - n
            cls = classify_pair(query[i], target[t])
            if cls is PairClass.COMPLEMENT:
                complementary += 1
            elif cls is PairClass.WOBBLE:
                wobble += 1
            partnered[i] = True
            t_positions.append(t)

    paired_idx = [k for k, p in enumerate(partnered) if p]
    bulges = 0
    if paired_idx:
        inner = partnered[paired_idx[0] : paired_idx[-1] + 1]
        bulges = _count_runs([not p for p in inner])
    span = (min(t_positions), max(t_positions) + 1) if t_positions else None
    return DuplexCounts(
        complementary_pairs=complementary,
        gu_wobble_pairs=wobble,
        mismatches=n - complementary - wobble,
        bulges=bulges,
        target_span=span,
    )


# --- ViennaRNA -----------------------------------------------------------------------------------

class ViennaCofoldEnricher(Enricher):
    name = "rnafold"

    def _cofold(self, query: str, target: str) -> Tuple[str, float]:
        md = RNA.md()
        fc = RNA.fold_compound(f"{query}&{target}", md)
        structure, mfe = fc.mfe_dimer()
        structure = structure.replace("&", "")
        if len(structure) != len(query) + len(target):
            raise EnrichmentError(
                f"Unexpected cofold structure length {len(structure)} for {len(query)}+{len(target)} nt"
            )
        return structure, float(mfe)

    def _mean_unpaired_probability(self, target: str) -> Optional[float]:
        n = len(target)
        if n > ACCESSIBILITY_MAX_LEN:
            return None
        fc = RNA.fold_compound(target, RNA.md())
        fc.pf()
        bpp = fc.bpp()  # 1-based upper triangle
        paired = [0.0] * (n + 1)
        for i in range(1, n + 1):
            row = bpp[i]
            for j in range(i + 1, n + 1):
                p = row[j]
                if p:
                    paired[i] += p
                    paired[j] += p
        unpaired = sum(max(0.0, 1.0 - paired[k]) for k in range(1, n + 1))
        return round(unpaired / n, 2)

    def enrich(self, query: str, target: str) -> PartialPrediction:
        if RNA is None:
            raise EnrichmentError(
                "ViennaRNA (Python bindings) is not installed; install the 'ViennaRNA' package"
            ) from _IMPORT_ERROR
        if len(query) + len(target) > COFOLD_MAX_TOTAL_LEN:
            raise EnrichmentError(
                f"Cofold skipped: {len(query) + len(target)} nt exceeds {COFOLD_MAX_TOTAL_LEN} nt"
            )
        structure, mfe = self._cofold(query, target)
        counts = duplex_counts(query, target, structure)
        n = len(query)
        return PartialPrediction(
            score=score_from_mfe(mfe),
            complementary_pairs=counts.complementary_pairs,
            mismatches=counts.mismatches,
            gu_wobble_pairs=counts.gu_wobble_pairs,
            bulges=counts.bulges,
            free_energy=round(mfe, 2),
            stability=stability_from_mfe(mfe),
            accessibility=self._mean_unpaired_probability(target),
            local_structure=f"{structure[:n]}&{structure[n:]}",
            source=self.name,
        )


# --- RNAhybrid -----------------------------------------------------------------------------------

@dataclass(frozen=True)
class RNAhybridHit:
    mfe: float
    p_value: Optional[float]
    position: Optional[int]  # 1-based start on the target
    diagram: Tuple[str, ...]  # four hybrid lines, may be empty


_MFE_RE = re.compile(r"^\s*mfe:\s*(-?\d+(?:\.\d+)?)")
_PVALUE_RE = re.compile(r"^\s*p-value:\s*([0-9.eE+-]+)")
_POSITION_RE = re.compile(r"^\s*position\s+(\d+)")
_END_LABEL_RE = re.compile(r"\s*[35]'\s*$")
_LABEL_WIDTH = len("target 5' ")


def parse_rnahybrid_output(text: str) -> RNAhybridHit:
    """
    Parse the default (human-readable) output of `RNAhybrid -b 1`.

    Raises:
        EnrichmentError: no `mfe:` line present.
    """
    lines = text.splitlines()
    mfe: Optional[float] = None
    p_value: Optional[float] = None
    position: Optional[int] = None
    diagram: Tuple[str, ...] = ()
    for k, line in enumerate(lines):
        m_mfe = _MFE_RE.match(line)
        m_pv = _PVALUE_RE.match(line)
        m_pos = _POSITION_RE.match(line)
        if mfe is None and m_mfe:
            mfe = float(m_mfe.group(1))
        elif p_value is None and m_pv:
            try:
                p_value = float(m_pv.group(1))
            except ValueError:
                p_value = None
        elif position is None and m_pos:
            position = int(m_pos.group(1))
        elif not diagram and line.startswith("target 5'") and k + 3 < len(lines):
            diagram = tuple(lines[k : k + 4])
    if mfe is None:
        raise EnrichmentError("Malformed RNAhybrid output: no 'mfe:' line")
    return RNAhybridHit(mfe=mfe, p_value=p_value, position=position, diagram=diagram)


def hybrid_diagram_counts(diagram: Sequence[str]) -> Optional[DuplexCounts]:
    """
    Count pairs in an RNAhybrid diagram:

        target 5' U      A       A 3'      <- unpaired target
                     GAUG UCUCAGG          <- paired target
                     CUAC AGAGUCC          <- paired miRNA
        miRNA  3'  AUC   G       U 5'      <- unpaired miRNA
    """
    if len(diagram) != 4:
        return None
    rows = [_END_LABEL_RE.sub("", line)[_LABEL_WIDTH:] for line in diagram]
    width = max(len(r) for r in rows)
    t_free, t_pair, q_pair, q_free = (r.ljust(width) for r in rows)

    complementary = wobble = mismatches = 0
    paired_cols: List[int] = []
    gap_cols: List[bool] = []
    target_len = 0
    for c in range(width):
        if t_pair[c] != " " and q_pair[c] != " ":
            cls = classify_pair(q_pair[c], t_pair[c])
            if cls is PairClass.COMPLEMENT:
                complementary += 1
            elif cls is PairClass.WOBBLE:
                wobble += 1
            else:
                mismatches += 1
            paired_cols.append(c)
            target_len += 1
            gap_cols.append(False)
            continue
        if q_free[c] != " ":
            mismatches += 1
        if t_free[c] != " ":
            target_len += 1
        # one-sided unpaired column = bulge position
        gap_cols.append((q_free[c] != " ") != (t_free[c] != " "))

    bulges = 0
    if paired_cols:
        bulges = _count_runs(gap_cols[paired_cols[0] : paired_cols[-1] + 1])
    return DuplexCounts(
        complementary_pairs=complementary,
        gu_wobble_pairs=wobble,
        mismatches=mismatches,
        bulges=bulges,
        target_span=(0, target_len),
    )


def partial_from_hybrid(hit: RNAhybridHit, source: str) -> PartialPrediction:
    counts = hybrid_diagram_counts(hit.diagram)
    partial = PartialPrediction(
        score=score_from_mfe(hit.mfe),
        seed_match="Based on RNAhybrid prediction",
        free_energy=hit.mfe,
        stability=stability_from_mfe(hit.mfe),
        accessibility=accessibility_from_mfe(hit.mfe),
        local_structure="\n".join(hit.diagram) if hit.diagram else "Based on RNAhybrid prediction",
        source=source,
    )
    if counts is not None:
        partial.complementary_pairs = counts.complementary_pairs
        partial.gu_wobble_pairs = counts.gu_wobble_pairs
        partial.mismatches = counts.mismatches
        partial.bulges = counts.bulges
        if hit.position is not None and counts.target_span is not None:
            partial.binding_start = hit.position - 1
            partial.binding_end = hit.position - 1 + counts.target_span[1]
    return partial


class RNAhybridApiEnricher(Enricher):
    name = "rnahybrid-api"

    def __init__(self, url: str, timeout: float, client: Optional[httpx.Client] = None) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def _post(self, payload: dict) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.url, json=payload, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, json=payload)

    def enrich(self, query: str, target: str) -> PartialPrediction:
        payload = {"query": query, "target": target, "options": RNAHYBRID_OPTIONS}
        try:
            resp = self._post(payload)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise EnrichmentError(f"RNAhybrid API request failed: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("mfe"), (int, float)):
            raise EnrichmentError("RNAhybrid API returned no numeric 'mfe'")

        mfe = float(data["mfe"])
        n = len(query)
        matches = int(data.get("matches") or 0)
        gu = int(data.get("guPairs") or 0)
        partial = PartialPrediction(
            score=score_from_mfe(mfe),
            seed_match="Based on RNAhybrid prediction",
            complementary_pairs=matches,
            gu_wobble_pairs=gu,
            mismatches=max(0, n - matches - gu),
            bulges=int(data.get("bulges") or 0),
            free_energy=mfe,
            stability=stability_from_mfe(mfe),
            accessibility=accessibility_from_mfe(mfe),
            local_structure=data.get("alignment") or "Based on RNAhybrid prediction",
            source=self.name,
        )
        start = data.get("targetStart")
        end = data.get("targetEnd")
        if isinstance(start, int) and isinstance(end, int) and start >= 1:
            partial.binding_start = start - 1
            partial.binding_end = end
        return partial


class RNAhybridLocalEnricher(Enricher):
    name = "rnahybrid-local"

    def __init__(self, binary: str, dataset: str, timeout: float) -> None:
        self.binary = binary
        self.dataset = dataset
        self.timeout = timeout

    def enrich(self, query: str, target: str) -> PartialPrediction:
        exe = shutil.which(self.binary)
        if exe is None:
            raise EnrichmentError(f"RNAhybrid binary '{self.binary}' not found on PATH")

        with tempfile.TemporaryDirectory(prefix="rnahybrid_") as tmp:
            q_path = Path(tmp) / "mirna.fa"
            t_path = Path(tmp) / "lncrna.fa"
            SeqIO.write([SeqRecord(Seq(query), id="miRNA", description="")], q_path, "fasta")
            SeqIO.write([SeqRecord(Seq(target), id="lncRNA", description="")], t_path, "fasta")
            cmd = [exe, "-s", self.dataset, "-q", str(q_path), "-t", str(t_path), "-b", "1"]
            log.debug("Running %s", " ".join(cmd))
            try:
                proc = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout, check=True)
            except subprocess.TimeoutExpired as exc:
                raise EnrichmentError(f"RNAhybrid timed out after {self.timeout:.0f}s") from exc
            except (subprocess.CalledProcessError, OSError) as exc:
                raise EnrichmentError(f"RNAhybrid failed: {exc}") from exc

        hit = parse_rnahybrid_output(proc.stdout)
        return partial_from_hybrid(hit, self.name)


class FallbackChain(Enricher):
    """Try each strategy in turn; raise only when all of them failed."""

    def __init__(self, name: str, strategies: Sequence[Enricher]) -> None:
        self.name = name
        self.strategies = list(strategies)

    def enrich(self, query: str, target: str) -> PartialPrediction:
        errors: List[str] = []
        for strategy in self.strategies:
            try:
                return strategy.enrich(query, target)
            except EnrichmentError as exc:
                log.info("%s unavailable, trying next strategy: %s", strategy.name, exc)
                errors.append(f"{strategy.name}: {exc}")
        raise EnrichmentError("; ".join(errors) or f"No strategies configured for {self.name}")


def build_enricher(
    algorithm: str,
    *,
    api_url: str = "",
    binary: str = "RNAhybrid",
    dataset: str = "3utr_human",
    timeout: float = 10.0,
) -> Optional[Enricher]:
    """Return the strategy for `algorithm`, or None for the standard path."""
    if algorithm == "rnafold":
        return ViennaCofoldEnricher()
    if algorithm == "rnahybrid":
        strategies: List[Enricher] = []
        if api_url:
            strategies.append(RNAhybridApiEnricher(api_url, timeout))
        strategies.append(RNAhybridLocalEnricher(binary, dataset, timeout))
        return FallbackChain("rnahybrid", strategies)
    return None
