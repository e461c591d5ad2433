"""
Tabular reports for recommendations (pandas).

- recommendations_to_frame / summarize: one evaluated sample → table + counts.
- load_samples: read a samples CSV (normalizes column names, checks required columns).
- evaluate_frame: validate and evaluate every row; invalid rows are reported
  with an 'error' column instead of aborting the batch.
"""

import logging
import pandas as pd
from pathlib import Path

from soil_advisor.advisor import evaluate, validate_sample
from soil_advisor.config import (
    RAW_DATA_DIR,
    SAMPLES_FNAME,
    INPUT_FIELDS,
    COLUMN_ALIASES,
)
from soil_advisor.models import Classification, Recommendation, ValidationError

log = logging.getLogger(__name__)

REPORT_COLUMNS = ["step", "parameter", "classification", "message", "action"]
BATCH_COLUMNS  = ["sample"] + INPUT_FIELDS + REPORT_COLUMNS + ["error"]


def recommendations_to_frame(recommendations: list[Recommendation]) -> pd.DataFrame:
    """One row per recommendation, in evaluation order (step 1-6)."""
    rows = []
    for step, rec in enumerate(recommendations, 1):
        rows.append({"step": step, **rec.to_dict()})
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize(recommendations: list[Recommendation]) -> dict:
    """Counts of favorable/advisory findings and an overall status label."""
    advisory = sum(1 for r in recommendations if r.classification is Classification.ADVISORY)
    favorable = len(recommendations) - advisory
    return {
        "favorable": favorable,
        "advisory":  advisory,
        "status":    "Good" if advisory == 0 else "Needs attention",
        "advisory_parameters": [
            r.parameter for r in recommendations if r.classification is Classification.ADVISORY
        ],
    }


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Strip/lower-case headers and map common variants (e.g. 'soilType', 'N') to field names."""
    cols = [c.strip() for c in df.columns]
    renames = {}
    for c in cols:
        key = c.lower()
        renames[c] = COLUMN_ALIASES.get(key, key)
    return df.set_axis(cols, axis=1).rename(columns=renames)


def load_samples(csv_path: Path | None = None) -> pd.DataFrame:
    """
    Load soil samples from CSV.
    Expects columns: soil_type, crop_type, nitrogen, phosphorous, potassium, ph, humidity.
    Rows are kept as-is (including blanks); validation happens per row in evaluate_frame.
    """
    path = csv_path or (RAW_DATA_DIR / SAMPLES_FNAME)
    if not path.exists():
        raise FileNotFoundError(
            f"Samples file not found at {path}. "
            f"Expected a CSV with columns: {INPUT_FIELDS}"
        )
    df = _normalize_columns(pd.read_csv(path))
    missing = [c for c in INPUT_FIELDS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing sample columns: {missing}. Available: {list(df.columns)}")
    return df[INPUT_FIELDS]


def evaluate_frame(samples: pd.DataFrame) -> pd.DataFrame:
    """
    Evaluate every sample row. Output is long format: six rows per valid sample,
    one row with 'error' set per invalid sample. 'sample' is the source row index.
    """
    rows = []
    n_invalid = 0
    for idx, raw in samples.iterrows():
        raw = raw.to_dict()
        base = {"sample": idx, **{f: raw.get(f) for f in INPUT_FIELDS}}
        try:
            sample = validate_sample(raw)
        except ValidationError as exc:
            n_invalid += 1
            log.warning("Sample %s rejected: %s", idx, exc)
            rows.append({**base, "error": str(exc)})
            continue
        for step, rec in enumerate(evaluate(sample), 1):
            rows.append({**base, "step": step, **rec.to_dict(), "error": None})

    log.info("Evaluated %d sample(s), %d rejected.", len(samples) - n_invalid, n_invalid)
    return pd.DataFrame(rows, columns=BATCH_COLUMNS)


def save_report(report: pd.DataFrame, out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    report.to_csv(out_path, index=False)
    log.info("Report saved to %s (%d rows).", out_path, len(report))
    return out_path
