# src/scripts/estimate.py
"""
Estimate a homeowners premium from the command line.

Usage:
  python -m src.scripts.estimate --home_value 350000 --state TX

Optional:
  python -m src.scripts.estimate --home_value 200000 --state FL \
    --home_type mobile --coverage_level premium --deductible 500 \
    --clamp --out_path reports/estimate.json

Omitted options fall back to the form defaults (350000, TX, single-family,
standard, 1000).
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

from src.estimator.content import COVERAGE_LEVEL_LABELS, HOME_TYPE_LABELS, TITLE
from src.estimator.service import estimate_from_input_dict
from src.pricing.config import COVERAGE_LEVELS, DEDUCTIBLES, HOME_TYPES
from src.pricing.errors import ValidationError
from src.utils.config import configure_logging, get_app_config
from src.utils.io import write_json


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Estimate an annual and monthly homeowners insurance premium.")
    p.add_argument("--home_value", type=str, default=None, help="Home value in USD (e.g., 350000)")
    p.add_argument("--state", type=str, default=None, help="Two-letter state code (e.g., TX)")
    p.add_argument("--home_type", type=str, default=None, help=f"One of: {', '.join(HOME_TYPES)}")
    p.add_argument("--coverage_level", type=str, default=None, help=f"One of: {', '.join(COVERAGE_LEVELS)}")
    p.add_argument(
        "--deductible", type=str, default=None, help=f"One of: {', '.join(str(d) for d in DEDUCTIBLES)}"
    )
    p.add_argument("--clamp", action="store_true", help="Clip home value into [50,000, 5,000,000]")
    p.add_argument("--base_rate_per_thousand", type=float, default=None, help="Override the base rate")
    p.add_argument("--out_path", type=str, default=None, help="Write the full estimate as JSON")
    return p


def _raw_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    fields = ["home_value", "state", "home_type", "coverage_level", "deductible"]
    return {f: getattr(args, f) for f in fields if getattr(args, f) is not None}


def render(out: Dict[str, Any]) -> str:
    inputs = out["inputs"]
    lines = [
        TITLE,
        "",
        f"Estimated Monthly Cost : {out['monthly_display']} per month",
        f"Annual Cost            : {out['annual_display']}",
        f"Home Value             : {out['home_value_display']}",
        f"Home Type              : {HOME_TYPE_LABELS.get(inputs['home_type'], inputs['home_type'])}",
        f"Coverage Level         : {COVERAGE_LEVEL_LABELS.get(inputs['coverage_level'], inputs['coverage_level'])}",
        "",
        "Coverage Level Summary",
    ]
    lines += [f"  - {item}" for item in out["coverage_summary"]]
    lines += ["", "Coverage Details"]
    width = max(len(row["label"]) for row in out["coverage_details"])
    for row in out["coverage_details"]:
        status = "Included" if row["included"] else "Not Included"
        lines.append(f"  {row['label'].ljust(width)}  {status}")
    lines += ["", out["disclaimer"]]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = get_app_config()
    configure_logging(cfg.log_level)

    try:
        out = estimate_from_input_dict(
            _raw_from_args(args),
            clamp=args.clamp or cfg.clamp_home_value,
            rate_overrides={"base_rate_per_thousand": args.base_rate_per_thousand},
        )
    except ValidationError as e:
        parser.error(str(e))

    for w in out["warnings"]:
        print(f"[WARN] {w}", file=sys.stderr)

    print(render(out))

    if args.out_path:
        write_json(out, args.out_path)
        print(f"[OK] Estimate saved: {args.out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
