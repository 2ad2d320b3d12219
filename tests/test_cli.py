"""
Project: QSummary
File Created: 2026-10-17
File Name: test_cli.py
Description:
    Tests for the qsummary command-line entry point.
"""

import pandas as pd
import pytest

from qsummary.cli import build_parser, main


@pytest.fixture
def scores_csv(tmp_path):
    path = tmp_path / "scores.csv"
    pd.DataFrame(
        {
            "pvalues": [0.001, 0.02, 0.2, None],
            "qvalues": [0.01, 0.03, 0.25, None],
            "lfdr": [0.005, 0.02, 0.3, None],
        }
    ).to_csv(path, index=False)
    return path


class TestMain:
    def test_prints_summary(self, scores_csv, capsys):
        code = main([str(scores_csv), "--pi0", "0.8", "--cuts", "0.01", "0.05"])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Call: scores.csv"
        assert lines[2] == "pi0:\t0.8"
        assert lines[7].split() == ["p-value", "1", "2"]

    def test_call_and_digits(self, scores_csv, capsys):
        code = main([str(scores_csv), "--pi0", "0.666666", "--digits", "2", "--call", "qvalue(p)"])

        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("Call: qvalue(p)\n")
        assert "pi0:\t0.67\n" in out

    def test_empty_cuts(self, scores_csv, capsys):
        assert main([str(scores_csv), "--pi0", "0.8", "--cuts"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[6:9] == ["p-value", "q-value", "local FDR"]

    def test_missing_pi0_value(self, scores_csv, capsys):
        assert main([str(scores_csv), "--pi0", "nan"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "pi0" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.csv"), "--pi0", "0.8"]) == 2
        assert "ERROR" in capsys.readouterr().err

    def test_missing_column(self, tmp_path, capsys):
        path = tmp_path / "bad.csv"
        pd.DataFrame({"pvalues": [0.1], "qvalues": [0.1]}).to_csv(path, index=False)

        assert main([str(path), "--pi0", "0.8"]) == 2
        assert "lfdr" in capsys.readouterr().err


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["scores.csv", "--pi0", "0.5"])
        assert args.cuts == [0.0001, 0.001, 0.01, 0.025, 0.05, 0.10, 1]
        assert args.digits == 7
        assert args.call is None

    def test_pi0_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["scores.csv"])
