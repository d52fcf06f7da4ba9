"""Tests for the liquidation-poa command line."""

import os
import subprocess
import sys

import pandas as pd

from liquidation_poa.main_simulation import main

SMALL_RUN = ["--runs", "2", "--positions", "15", "--keepers", "5", "--seed", "1"]


def test_full_comparison_report(capsys):
    assert main(SMALL_RUN) == 0
    out = capsys.readouterr().out
    labels = ["Transparent", "Noise-Based", "IPFE Only", "FairRAI 60/40", "FairRAI 50/50", "Keeper Pool 70/30"]
    positions = [out.index(f"Strategy: {label}") for label in labels]
    assert positions == sorted(positions)
    assert out.count("Price of Anarchy:") == 6
    assert "Interpretation:" in out


def test_strategy_subset(capsys):
    assert main(SMALL_RUN + ["--strategies", "KEEPER_POOL", "transparent"]) == 0
    out = capsys.readouterr().out
    assert out.index("Strategy: Keeper Pool 70/30") < out.index("Strategy: Transparent")
    assert "Strategy: IPFE Only" not in out


def test_invalid_arguments_exit_with_2(capsys):
    assert main(["--runs", "0"]) == 2
    assert "Error:" in capsys.readouterr().err
    assert main(["--strategies", "NOPE"]) == 2
    assert main(["--plots"]) == 2


def test_output_dir_writes_csvs(tmp_path):
    assert main(SMALL_RUN + ["--strategies", "IPFE", "FAIR_RAI", "--output-dir", str(tmp_path)]) == 0
    runs = pd.read_csv(tmp_path / "run_results.csv")
    reports = pd.read_csv(tmp_path / "strategy_reports.csv")
    assert len(runs) == 4
    assert list(runs["run"]) == [1, 2, 1, 2]
    assert "keeper_profits" not in runs.columns
    assert list(reports["strategy"]) == ["IPFE Only", "FairRAI 60/40"]


def test_plots_are_written(tmp_path):
    assert main(SMALL_RUN + ["--strategies", "TRANSPARENT", "KEEPER_POOL",
                             "--output-dir", str(tmp_path), "--plots"]) == 0
    pngs = [f for f in os.listdir(tmp_path) if f.endswith(".png")]
    assert "poa_by_strategy.png" in pngs
    assert len(pngs) > 1


def test_cli_help():
    proc = subprocess.run(
        [sys.executable, "-m", "liquidation_poa.main_simulation", "--help"],
        check=True, capture_output=True, text=True,
    )
    assert "--strategies" in proc.stdout
