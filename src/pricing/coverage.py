# src/pricing/coverage.py
"""
Static coverage metadata per coverage level.

- coverage_summary: four display bullets per tier
- coverage_details: fixed six-row (label, included) table

"standard" and "premium" share the same inclusion table; the tiers differ only
in price.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from src.pricing.config import COVERAGE_LEVELS
from src.pricing.errors import ValidationError

COVERAGE_FEATURES = (
    "Dwelling Coverage",
    "Other Structures",
    "Personal Property",
    "Liability Protection",
    "Medical Payments",
    "Additional Living Expenses",
)

_INCLUDED: Dict[str, frozenset[str]] = {
    "basic": frozenset({"Dwelling Coverage", "Liability Protection"}),
    "standard": frozenset(COVERAGE_FEATURES),
    "premium": frozenset(COVERAGE_FEATURES),
}

_SUMMARY: Dict[str, Tuple[str, ...]] = {
    "basic": (
        "Dwelling protection only",
        "Fire & weather damage",
        "Basic liability",
        "Lowest premium",
    ),
    "standard": (
        "Dwelling + contents",
        "Personal property coverage",
        "Standard liability",
        "Additional living expenses",
    ),
    "premium": (
        "Full replacement cost",
        "Extended coverage limits",
        "Umbrella liability",
        "Maximum protection",
    ),
}


@dataclass(frozen=True)
class CoverageRow:
    label: str
    included: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "included": self.included}


@dataclass(frozen=True)
class CoverageProfile:
    level: str
    summary: Tuple[str, ...]
    details: Tuple[CoverageRow, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "summary": list(self.summary),
            "details": [row.to_dict() for row in self.details],
        }


def _check_level(level: str) -> None:
    if level not in COVERAGE_LEVELS:
        raise ValidationError("coverage_level", level, COVERAGE_LEVELS)


def coverage_details(level: str) -> List[CoverageRow]:
    _check_level(level)
    included = _INCLUDED[level]
    return [CoverageRow(label=label, included=label in included) for label in COVERAGE_FEATURES]


def coverage_summary(level: str) -> List[str]:
    _check_level(level)
    return list(_SUMMARY[level])


def coverage_profile(level: str) -> CoverageProfile:
    return CoverageProfile(
        level=level,
        summary=tuple(coverage_summary(level)),
        details=tuple(coverage_details(level)),
    )
