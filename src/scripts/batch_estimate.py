# src/scripts/batch_estimate.py
"""
Estimate premiums for every row of a CSV/Parquet file.

Input columns (snake_case or camelCase):
  home_value, state, home_type, coverage_level, deductible

Output = input columns + annual_premium, monthly_premium, warnings, error.
A row with an invalid rating factor keeps going: its premiums stay empty and
`error` names the field.

Usage:
  python -m src.scripts.batch_estimate --in_path data/inputs.csv

Optional:
  python -m src.scripts.batch_estimate --in_path data/inputs.csv \
    --out_path reports/estimates.parquet --clamp
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from src.estimator.service import estimate_from_input
from src.pricing.errors import ValidationError
from src.utils.config import configure_logging, get_app_config, get_paths
from src.utils.io import read_df, write_df

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = ["annual_premium", "monthly_premium", "warnings", "error"]


def estimate_frame(df: pd.DataFrame, clamp: bool = False) -> pd.DataFrame:
    """
    Estimate each row of df. Returns a copy with OUTPUT_COLUMNS appended.
    """
    rows: List[Dict[str, Any]] = []
    for record in df.to_dict(orient="records"):
        try:
            resp, warnings = estimate_from_input(record, clamp=clamp)
        except ValidationError as e:
            rows.append({"annual_premium": None, "monthly_premium": None, "warnings": "", "error": str(e)})
            continue
        rows.append(
            {
                "annual_premium": resp.annual_premium,
                "monthly_premium": resp.monthly_premium,
                "warnings": "; ".join(warnings),
                "error": "",
            }
        )

    results = pd.DataFrame(rows, columns=OUTPUT_COLUMNS, index=df.index)
    results["annual_premium"] = results["annual_premium"].astype("Int64")
    results["monthly_premium"] = results["monthly_premium"].astype("Int64")

    out = df.drop(columns=[c for c in OUTPUT_COLUMNS if c in df.columns])
    return pd.concat([out, results], axis=1)


def _default_out_path(in_path: Path) -> Path:
    return get_paths().reports_dir / f"{in_path.stem}_estimates.csv"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Estimate homeowners premiums for every row of a CSV/Parquet file.")
    p.add_argument("--in_path", type=str, required=True, help="Input CSV/Parquet of rating inputs")
    p.add_argument(
        "--out_path", type=str, default=None, help="Output CSV/Parquet. Default: reports/<stem>_estimates.csv"
    )
    p.add_argument("--clamp", action="store_true", help="Clip home values into [50,000, 5,000,000]")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = get_app_config()
    configure_logging(cfg.log_level)

    in_path = Path(args.in_path)
    out_path = Path(args.out_path) if args.out_path else _default_out_path(in_path)

    df = read_df(in_path)
    out = estimate_frame(df, clamp=args.clamp or cfg.clamp_home_value)
    write_df(out, out_path)

    n_err = int((out["error"] != "").sum())
    if n_err:
        logger.warning("%d of %d rows failed validation", n_err, len(out))

    print(f"[OK] Estimates saved : {out_path}")
    print(f"Rows: {len(out)} | Priced: {len(out) - n_err} | Errors: {n_err}")


if __name__ == "__main__":
    main()
