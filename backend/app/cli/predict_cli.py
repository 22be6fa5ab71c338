# File: backend/app/cli/predict_cli.py
# Version: v0.1.0
"""
CLI for miRNA–lncRNA interaction prediction.

- Sequences come from --mirna/--lncrna (raw) or --mirna-fasta/--lncrna-fasta
  (single-record FASTA). DNA input is not transcribed; use U, not T.
- Prints the three-line alignment and a summary; --json-out writes the full result.

Usage:
    python -m backend.app.cli.predict_cli \
        --mirna UGAAGCUGCCAGCAUGAUCUA \
        --lncrna-fasta backend/data/input/blil1.fasta \
        [--seed-region 2-7] [--mismatch-penalty 3] [--gu-wobble allowed] \
        [--algorithm standard] [--timeout 10] [--json-out result.json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from Bio import SeqIO

from backend.app.core.interaction.constants import SEED_REGIONS, WOBBLE_SCORES
from backend.app.core.interaction.errors import InteractionInputError
from backend.app.core.interaction.predictor import predict_interaction

log = logging.getLogger("predict_cli")


# ---------- IO helpers ----------

def read_single_fasta(path: Path) -> Tuple[str, str]:
    """Return (name, sequence). Enforces exactly one FASTA record."""
    records = list(SeqIO.parse(str(path), "fasta"))
    if len(records) != 1:
        raise ValueError(f"Expected exactly one FASTA record in {path}, found {len(records)}.")
    rec = records[0]
    return rec.id or "sequence", str(rec.seq)


def _resolve(raw: Optional[str], fasta: Optional[Path], what: str) -> Tuple[Optional[str], str]:
    if raw and fasta:
        raise ValueError(f"Give either --{what} or --{what}-fasta, not both.")
    if fasta:
        return read_single_fasta(fasta)
    if raw:
        return None, raw
    raise ValueError(f"Missing {what} sequence: use --{what} or --{what}-fasta.")


# ---------- Main ----------

def main(argv: Optional[list] = None) -> int:
    p = argparse.ArgumentParser(description="Predict miRNA binding on a lncRNA fragment")
    p.add_argument("--mirna", help="miRNA sequence 5'->3'")
    p.add_argument("--mirna-fasta", type=Path)
    p.add_argument("--lncrna", help="lncRNA sequence 5'->3'")
    p.add_argument("--lncrna-fasta", type=Path)
    p.add_argument("--seed-region", choices=list(SEED_REGIONS), default="2-7")
    p.add_argument("--mismatch-penalty", type=int, default=3)
    p.add_argument("--gu-wobble", choices=list(WOBBLE_SCORES), default="allowed")
    p.add_argument("--algorithm", choices=["standard", "rnafold", "rnahybrid"], default="standard")
    p.add_argument("--timeout", type=float, default=None, help="Seconds to wait for rnafold/rnahybrid")
    p.add_argument("--json-out", type=Path)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        mirna_name, mirna = _resolve(args.mirna, args.mirna_fasta, "mirna")
        lncrna_name, lncrna = _resolve(args.lncrna, args.lncrna_fasta, "lncrna")
        params = {
            "seedRegion": args.seed_region,
            "mismatchPenalty": args.mismatch_penalty,
            "guWobble": args.gu_wobble,
            "algorithm": args.algorithm,
        }
        result = predict_interaction(
            mirna,
            lncrna,
            params,
            timeout=args.timeout,
            mirna_name=mirna_name,
            lncrna_name=lncrna_name,
        )
    except (InteractionInputError, ValueError, OSError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        return 2

    d = result.bindingDetails
    t = result.thermodynamics
    print(result.alignment)
    print(
        f"score={result.score} site=[{result.bindingStart},{result.bindingEnd}) "
        f"pairs={d.complementaryPairs} gu={d.guWobblePairs} mismatches={d.mismatches} "
        f"dG={t.freeEnergy:.2f} stability={t.stabilityScore} accessibility={t.accessibility:.2f}"
    )

    if args.json_out:
        args.json_out.parent.mkdir(parents=True, exist_ok=True)
        args.json_out.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        log.info("Wrote %s", args.json_out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
