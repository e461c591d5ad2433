"""
Command-line advisor: evaluate one sample from flags, or a CSV of samples into a report.
Run from project root:
    python run_advisory.py --soil loamy_soil --crop wheat -N 100 -P 30 -K 300 --ph 8 --humidity 90
    python run_advisory.py --csv data/raw/soil_samples.csv
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from soil_advisor.config import ensure_dirs, REPORTS_DIR, REPORT_FNAME
from soil_advisor.advisor import evaluate, validate_sample
from soil_advisor.models import ValidationError
from soil_advisor.report import evaluate_frame, load_samples, save_report, summarize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Soil amendment and crop growth recommendations from a soil test."
    )
    parser.add_argument("--csv",      type=Path, default=None, help="Samples CSV for batch mode")
    parser.add_argument("--out",      type=Path, default=None, help="Report CSV path (batch mode)")
    parser.add_argument("--soil",     default=None, help="Soil type identifier, e.g. loamy_soil")
    parser.add_argument("--crop",     default=None, help="Crop identifier, e.g. wheat")
    parser.add_argument("-N", "--nitrogen",    default=None, help="Nitrogen (PPM)")
    parser.add_argument("-P", "--phosphorous", default=None, help="Phosphorous (PPM)")
    parser.add_argument("-K", "--potassium",   default=None, help="Potassium (PPM)")
    parser.add_argument("--ph",       default=None, help="Soil pH (0-14)")
    parser.add_argument("--humidity", default=None, help="Humidity (%%, 0-100)")
    return parser


def run_single(args) -> int:
    raw = {
        "soil_type":   args.soil,
        "crop_type":   args.crop,
        "nitrogen":    args.nitrogen,
        "phosphorous": args.phosphorous,
        "potassium":   args.potassium,
        "ph":          args.ph,
        "humidity":    args.humidity,
    }
    try:
        sample = validate_sample(raw)
    except ValidationError as exc:
        print(f"ERROR: {exc}")
        return 2

    recommendations = evaluate(sample)
    print("Soil Amendment & Crop Growth Advisor")
    print("=" * 50)
    for rec in recommendations:
        marker = "OK  " if rec.is_favorable else "WARN"
        print(f"\n[{marker}] {rec.parameter}")
        print(f"  {rec.message}")
        print(f"  Action: {rec.action}")

    summary = summarize(recommendations)
    print(f"\nOverall: {summary['status']} "
          f"({summary['favorable']} favorable, {summary['advisory']} advisory)")
    return 0


def run_batch(args) -> int:
    ensure_dirs()
    try:
        df = load_samples(args.csv)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return 1
    print(f"Loaded {len(df)} sample(s) from {args.csv}")
    report = evaluate_frame(df)
    out = args.out or (REPORTS_DIR / REPORT_FNAME)
    save_report(report, out)

    errors = report[report["error"].notna()]
    print(f"  Evaluated: {len(df) - len(errors)}, rejected: {len(errors)}")
    for _, row in errors.iterrows():
        print(f"    row {row['sample']}: {row['error']}")
    print(f"Report saved to {out}")
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)
    if args.csv is not None:
        return run_batch(args)
    return run_single(args)


if __name__ == "__main__":
    sys.exit(main())
