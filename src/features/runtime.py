# src/features/runtime.py
"""
Runtime input builder for the estimator.

Goal:
- Convert a raw request record (dict from JSON, CLI args or a CSV row) into the
  RatingInput expected by src.pricing.quote.estimate.

Transforms (kept permissive; the pricing core does the strict enum checks):
- Accept camelCase (homeValue, homeType, coverageLevel) or snake_case keys
- Fields absent from the record fall back to the form defaults
- Parse home_value like an integer form field (leading digits, no exponents);
  unparseable/negative/too large -> 0
- Normalize case/whitespace of categoricals
- Parse deductible strings ("1000", "$1,000") to int
- Optionally clip home_value into the form bounds
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from src.estimator.content import DEFAULT_INPUT, HOME_VALUE_MAX, HOME_VALUE_MIN
from src.pricing.quote import RatingInput

logger = logging.getLogger(__name__)

# snake_case field -> accepted aliases
FIELD_ALIASES: Dict[str, tuple[str, ...]] = {
    "home_value": ("home_value", "homeValue"),
    "state": ("state",),
    "home_type": ("home_type", "homeType"),
    "coverage_level": ("coverage_level", "coverageLevel"),
    "deductible": ("deductible",),
}

_MISSING = object()

_INT_PREFIX = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class RuntimeBuildResult:
    rating_input: RatingInput
    warnings: List[str]


def _is_blank(val: Any) -> bool:
    if val is None or val is pd.NA:
        return True
    if isinstance(val, (float, np.floating)) and math.isnan(val):
        return True
    return isinstance(val, str) and val.strip() == ""


def _lookup(raw: Dict[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        if key in raw:
            return raw[key]
    return _MISSING


def _strip_currency(s: str) -> str:
    return s.strip().replace("$", "").replace(",", "").replace("_", "")


def _as_float_sized(v: int) -> Optional[int]:
    # Integers beyond float range cannot be priced
    try:
        float(v)
    except OverflowError:
        return None
    return v


def _parse_home_value(val: Any) -> Optional[int]:
    """
    Integer form-field semantics: leading integer digits only
    ("425000.9" -> 425000, "1e6" -> 1, "12abc" -> 12), anything else -> None.
    """
    if isinstance(val, bool):
        return None
    if isinstance(val, (int, np.integer)):
        return _as_float_sized(int(val))
    if isinstance(val, (float, np.floating)):
        return int(val) if math.isfinite(val) else None
    if isinstance(val, str):
        m = _INT_PREFIX.match(_strip_currency(val))
        if not m:
            return None
        try:
            return _as_float_sized(int(m.group(0)))
        except ValueError:  # beyond the interpreter's int digit limit
            return None
    return None


def _parse_deductible(val: Any) -> Any:
    """
    Return an int when val is a whole-number amount; otherwise return val unchanged.
    """
    if isinstance(val, bool):
        return val
    if isinstance(val, (int, np.integer)):
        return int(val)
    if isinstance(val, (float, np.floating)):
        return int(val) if math.isfinite(val) and float(val).is_integer() else val
    if isinstance(val, str):
        try:
            f = float(_strip_currency(val))
        except ValueError:
            return val.strip()
        return int(f) if math.isfinite(f) and f.is_integer() else val.strip()
    return val


def _normalize_code(val: Any, upper: bool) -> Any:
    if not isinstance(val, str):
        return val
    text = val.strip()
    return text.upper() if upper else text.lower()


def build_rating_input(raw: Dict[str, Any], clamp: bool = False) -> RuntimeBuildResult:
    """
    Build a RatingInput from a raw record.

    raw: dict of raw fields (API body, CLI args, CSV row)
    clamp: clip home_value into [HOME_VALUE_MIN, HOME_VALUE_MAX]
    """
    warnings: List[str] = []
    values: Dict[str, Any] = {}

    for field in FIELD_ALIASES:
        val = _lookup(raw, field)
        if val is _MISSING:
            val = DEFAULT_INPUT[field]
            warnings.append(f"{field} not provided; using default {val!r}.")
        elif field != "home_value" and _is_blank(val):
            val = DEFAULT_INPUT[field]
            warnings.append(f"{field} is empty; using default {val!r}.")
        values[field] = val

    # Home value: invalid -> 0 (a $0 estimate, never an error)
    raw_hv = values["home_value"]
    home_value = None if _is_blank(raw_hv) else _parse_home_value(raw_hv)
    if home_value is None:
        warnings.append(f"Could not parse home_value={raw_hv!r}; set to 0.")
        home_value = 0
    elif home_value < 0:
        warnings.append(f"Negative home_value={home_value}; set to 0.")
        home_value = 0

    if clamp:
        clipped = int(np.clip(home_value, HOME_VALUE_MIN, HOME_VALUE_MAX))
        if clipped != home_value:
            warnings.append(f"home_value={home_value} clipped to {clipped}.")
            home_value = clipped

    rating_input = RatingInput(
        home_value=home_value,
        state=_normalize_code(values["state"], upper=True),
        home_type=_normalize_code(values["home_type"], upper=False),
        coverage_level=_normalize_code(values["coverage_level"], upper=False),
        deductible=_parse_deductible(values["deductible"]),
    )

    if warnings:
        logger.debug("Built rating input with %d warning(s): %s", len(warnings), warnings)

    return RuntimeBuildResult(rating_input=rating_input, warnings=warnings)
