# src/pricing/quote.py
"""
Premium estimation.

Provides:
- RatingInput / PremiumResult value objects
- rating factor validation
- annual + monthly premium calculation

annual  = round((home_value / 1000) * base_rate * state * home_type * coverage * deductible)
monthly = round(annual / 12)

Rounding is half-up, and monthly is derived from the already-rounded annual.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from numbers import Real
from typing import Any, Dict, Optional

import numpy as np

from src.pricing.config import (
    COVERAGE_LEVELS,
    DEDUCTIBLES,
    DEFAULT_RATE_TABLE,
    HOME_TYPES,
    STATES,
    RateTable,
)
from src.pricing.errors import ValidationError


@dataclass(frozen=True)
class RatingInput:
    home_value: Any
    state: str
    home_type: str
    coverage_level: str
    deductible: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PremiumResult:
    annual_premium: int
    monthly_premium: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(x: float) -> int:
    """
    Round to the nearest integer, ties going up (1898.5 -> 1899, 158.5 -> 159).
    """
    return int(np.floor(x + 0.5))


def normalize_home_value(value: Any) -> float:
    """
    Non-numeric, non-finite, missing or negative home values become 0,
    as do integers too large for a float.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return 0.0
    try:
        v = float(value)
    except OverflowError:
        return 0.0
    if not math.isfinite(v) or v < 0:
        return 0.0
    return v


def validate_rating_input(rating_input: RatingInput) -> None:
    """
    Check every enumerated rating factor; raise ValidationError on the first offender.
    """
    checks = (
        ("state", rating_input.state, STATES),
        ("home_type", rating_input.home_type, HOME_TYPES),
        ("coverage_level", rating_input.coverage_level, COVERAGE_LEVELS),
        ("deductible", rating_input.deductible, DEDUCTIBLES),
    )
    for field, value, allowed in checks:
        if isinstance(value, bool) or value not in allowed:
            raise ValidationError(field, value, allowed)


def estimate(rating_input: RatingInput, table: Optional[RateTable] = None) -> PremiumResult:
    """
    Estimate annual and monthly premium for a single rating input.
    """
    table = table or DEFAULT_RATE_TABLE
    validate_rating_input(rating_input)

    home_value = normalize_home_value(rating_input.home_value)

    raw = (
        (home_value / 1000)
        * table.base_rate_per_thousand
        * table.state_factor(rating_input.state)
        * table.home_type_multipliers[rating_input.home_type]
        * table.coverage_multipliers[rating_input.coverage_level]
        * table.deductible_multipliers[rating_input.deductible]
    )

    annual = round_half_up(raw)
    monthly = round_half_up(annual / 12)
    return PremiumResult(annual_premium=annual, monthly_premium=monthly)
