# src/estimator/service.py
"""
End-to-end estimate service.

Single source of truth:
- raw input dict -> runtime input builder -> RatingInput
- RatingInput -> pricing -> premium
- premium + coverage tables + formatting -> EstimateResponse
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

from src.estimator.content import DISCLAIMER
from src.estimator.schemas import EstimateResponse
from src.features.runtime import build_rating_input
from src.pricing.config import DEFAULT_RATE_TABLE, RateTable
from src.pricing.coverage import coverage_details, coverage_summary
from src.pricing.errors import ValidationError
from src.pricing.quote import RatingInput, estimate, normalize_home_value
from src.utils.formatting import format_number, format_usd

logger = logging.getLogger(__name__)

SUPPORTED_RATE_OVERRIDES = ("base_rate_per_thousand",)


def merge_rate_overrides(overrides: Dict[str, Any], base: RateTable) -> RateTable:
    """
    Derive a RateTable with user overrides applied; base is never mutated.
    Supported keys:
      base_rate_per_thousand (finite, > 0; otherwise ValidationError)
    """
    changes: Dict[str, float] = {}
    for k in SUPPORTED_RATE_OVERRIDES:
        v = overrides.get(k)
        if v is None:
            continue
        try:
            rate = float(v)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(k, v) from None
        # Rates must be finite and positive
        if not math.isfinite(rate) or rate <= 0:
            raise ValidationError(k, v)
        changes[k] = rate
    if not changes:
        return base
    return replace(base, **changes)


def build_response(rating_input: RatingInput, table: Optional[RateTable] = None) -> EstimateResponse:
    """
    Price a RatingInput and attach display metadata.
    Raises src.pricing.errors.ValidationError for out-of-enum factors.
    """
    result = estimate(rating_input, table=table)
    level = rating_input.coverage_level

    return EstimateResponse(
        inputs=rating_input.to_dict(),
        annual_premium=result.annual_premium,
        monthly_premium=result.monthly_premium,
        annual_display=format_usd(result.annual_premium),
        monthly_display=format_usd(result.monthly_premium),
        home_value_display=f"${format_number(normalize_home_value(rating_input.home_value))}",
        coverage_summary=coverage_summary(level),
        coverage_details=[row.to_dict() for row in coverage_details(level)],
        disclaimer=DISCLAIMER,
    )


def estimate_from_input(
    raw: Dict[str, Any],
    *,
    clamp: bool = False,
    rate_overrides: Optional[Dict[str, Any]] = None,
    rate_table: Optional[RateTable] = None,
) -> Tuple[EstimateResponse, list[str]]:
    """
    Full estimate:
      raw dict -> RatingInput -> premium -> EstimateResponse
    Returns (EstimateResponse, warnings).
    """
    built = build_rating_input(raw, clamp=clamp)

    base_table = rate_table or DEFAULT_RATE_TABLE
    table = merge_rate_overrides(rate_overrides or {}, base_table)

    resp = build_response(built.rating_input, table=table)
    logger.info(
        "Estimate state=%s home_type=%s coverage=%s deductible=%s -> annual=%d monthly=%d",
        built.rating_input.state,
        built.rating_input.home_type,
        built.rating_input.coverage_level,
        built.rating_input.deductible,
        resp.annual_premium,
        resp.monthly_premium,
    )
    return resp, built.warnings


def estimate_from_input_dict(
    raw: Dict[str, Any],
    *,
    clamp: bool = False,
    rate_overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Convenience: returns a JSON-ready dict and includes warnings.
    """
    resp, warnings = estimate_from_input(raw, clamp=clamp, rate_overrides=rate_overrides)
    out = resp.to_dict()
    out["warnings"] = warnings
    return out
