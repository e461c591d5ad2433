"""
CLI tests for run_advisory.py (single-sample and batch modes).
Run from project root: python -m pytest tests/test_run_advisory.py -v
"""

import sys
from pathlib import Path

import pandas as pd

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import run_advisory


def test_single_sample(capsys):
    code = run_advisory.main([
        "--soil", "loamy_soil", "--crop", "wheat",
        "-N", "100", "-P", "30", "-K", "300", "--ph", "8", "--humidity", "90",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert "[WARN] Soil pH (Alkaline)" in out
    assert "Your soil pH of 8 is too alkaline" in out
    assert "[OK  ] Wheat on Loamy Soil" in out
    assert "Overall: Needs attention (3 favorable, 3 advisory)" in out


def test_single_sample_validation_error(capsys):
    code = run_advisory.main(["--soil", "clay_soil", "--crop", "rice", "-N", "10"])
    out = capsys.readouterr().out
    assert code == 2
    assert "ERROR: phosphorous: Must be a number" in out


def test_batch_mode(tmp_path, capsys):
    samples = tmp_path / "samples.csv"
    samples.write_text(
        "soil_type,crop_type,nitrogen,phosphorous,potassium,ph,humidity\n"
        "clay_soil,rice,200,15,150,6.5,60\n"
        ",rice,200,15,150,6.5,60\n"
    )
    out_path = tmp_path / "report.csv"
    code = run_advisory.main(["--csv", str(samples), "--out", str(out_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Evaluated: 1, rejected: 1" in out

    report = pd.read_csv(out_path)
    assert len(report) == 7
    assert report["error"].dropna().tolist() == ["soil_type: Please select a soil type"]


def test_batch_mode_missing_file(tmp_path, capsys):
    """A missing samples file is reported on stdout with a non-zero exit code."""
    code = run_advisory.main(["--csv", str(tmp_path / "nope.csv")])
    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("ERROR:")


def test_batch_mode_missing_columns(tmp_path, capsys):
    samples = tmp_path / "samples.csv"
    samples.write_text("soil_type,crop_type\nclay_soil,rice\n")
    code = run_advisory.main(["--csv", str(samples)])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR: Missing sample columns" in out


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
