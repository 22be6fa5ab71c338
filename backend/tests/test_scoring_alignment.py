# File: backend/tests/test_scoring_alignment.py
# Version: v0.1.0
"""
Tests for score normalization, heuristic thermodynamics and alignment text.
"""

from __future__ import annotations

import pytest

from backend.app.core.interaction.aligner import find_best_match
from backend.app.core.interaction.alignments import render_alignment, summarize_alignment
from backend.app.core.interaction.complementarity import PairClass
from backend.app.core.interaction.parameters import PredictionParameters
from backend.app.core.interaction.scoring import (
    accessibility_estimate,
    accessibility_from_mfe,
    estimate_thermodynamics,
    free_energy_estimate,
    normalize_score,
    score_from_mfe,
    stability_from_mfe,
    stability_label,
)


def test_normalize_score_clamps():
    assert normalize_score(26, 4) == 100
    assert normalize_score(-12, 4) == 0
    assert normalize_score(0, 0) == 0


def test_normalize_score_rounds_half_up():
    # 1 / 40 * 100 = 2.5
    assert normalize_score(1, 8) == 3


@pytest.mark.parametrize(
    "score,label",
    [(100, "High"), (70, "High"), (69, "Medium"), (40, "Medium"), (39, "Low"), (0, "Low")],
)
def test_stability_bands(score, label):
    assert stability_label(score) == label


def test_heuristic_thermo_figures():
    assert free_energy_estimate(0) == pytest.approx(-10.0)
    assert free_energy_estimate(55) == pytest.approx(-15.5)
    assert accessibility_estimate(0) == 0.5
    assert accessibility_estimate(60) == pytest.approx(0.8)
    t = estimate_thermodynamics(80)
    assert t.stability == "High"
    assert t.free_energy == pytest.approx(-18.0)
    assert t.accessibility == pytest.approx(0.9)


def test_mfe_based_figures():
    assert score_from_mfe(-12.5) == 50
    assert score_from_mfe(-40.0) == 100
    assert stability_from_mfe(-25.0) == "High"
    assert stability_from_mfe(-15.0) == "Medium"
    assert stability_from_mfe(-5.0) == "Low"
    assert accessibility_from_mfe(-8.0) == pytest.approx(0.7)
    assert accessibility_from_mfe(-60.0) == 1.0


def test_render_alignment_layout():
    pairs = [PairClass.COMPLEMENT, PairClass.WOBBLE, PairClass.MISMATCH, PairClass.COMPLEMENT]
    text = render_alignment("AGCU", "AUAA", pairs)
    lines = text.split("\n")
    assert lines[0] == "miRNA  3' UCGA 5'"
    assert lines[1] == "          |o |"
    assert lines[2] == "lncRNA 5' AUAA 3'"
    # symbol column k sits under base k of both sequences
    assert lines[0].index("UCGA") == lines[2].index("AUAA") == 10


def test_summary_matches_rendered_counts():
    params = PredictionParameters()
    best = find_best_match("UGAAGCUGCCAGCAUGAUCUA", "CCGAUCAUGCUGGCAGCUUCAGG", params)
    s = summarize_alignment(best.alignment)
    assert s.complementary_pairs == best.complementary_pairs
    assert s.wobble_pairs == best.wobble_pairs
    assert s.mismatches == best.mismatches
    assert s.bulges == 0


def test_summary_counts_gap_characters_as_bulges():
    text = (
        "miRNA 3' AUCUAGUAG--GUCGUA 5'\n"
        "       | | ||| | |||||| \n"
        "lncRNA 5' UGAUGUUC--CAGGAU 3'"
    )
    s = summarize_alignment(text)
    assert (s.complementary_pairs, s.wobble_pairs, s.mismatches, s.bulges) == (12, 0, 4, 4)


def test_summary_of_malformed_text_is_zero():
    s = summarize_alignment("just one line")
    assert (s.complementary_pairs, s.wobble_pairs, s.mismatches, s.bulges) == (0, 0, 0, 0)
