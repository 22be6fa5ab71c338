# File: backend/tests/test_predict_cli.py
# Version: v0.1.0
"""CLI smoke tests (no subprocess; main() is called directly)."""
import json

from backend.app.cli.predict_cli import main


def test_cli_raw_sequences(capsys):
    assert main(["--mirna", "AAAA", "--lncrna", "CUUUUC"]) == 0
    out = capsys.readouterr().out
    assert "miRNA  3' AAAA 5'" in out
    assert "score=100" in out
    assert "site=[1,5)" in out


def test_cli_fasta_and_json_out(tmp_path, capsys):
    mir = tmp_path / "mir.fa"
    lnc = tmp_path / "lnc.fa"
    mir.write_text(">ath-miR167a\nUGAAGCUGCCAGCAUGAUCUA\n", encoding="utf-8")
    lnc.write_text(">lnc-frag1\nGGUAGAUCAUGCUG\nGCAGCUUCAGG\n", encoding="utf-8")
    out_json = tmp_path / "out" / "result.json"

    rc = main(["--mirna-fasta", str(mir), "--lncrna-fasta", str(lnc), "--json-out", str(out_json)])
    assert rc == 0
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["mirnaName"] == "ath-miR167a"
    assert data["lncrnaName"] == "lnc-frag1"
    assert data["score"] == 100
    assert data["bindingStart"] == 2


def test_cli_invalid_sequence_exits_2(capsys):
    assert main(["--mirna", "AXGU", "--lncrna", "UUUUUU"]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_cli_missing_input_exits_2(capsys):
    assert main(["--mirna", "AAAA"]) == 2
