# src/pricing/config.py
"""
Rate table configuration.

Illustrative (not actuarial) rating factors for a homeowners estimate:
- base_rate_per_thousand: premium per $1,000 of home value
- state multipliers (unlisted states fall back to default_state_multiplier)
- home type / coverage level / deductible multipliers (total over their enums)

The default table is built once at import and never mutated. Use
dataclasses.replace() to derive a variant table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC",
)

HOME_TYPES = ("single-family", "condo", "townhouse", "mobile")
COVERAGE_LEVELS = ("basic", "standard", "premium")
DEDUCTIBLES = (500, 1000, 2500, 5000)

DEFAULT_STATE_MULTIPLIER = 1.00


def _frozen(d: Mapping) -> Mapping:
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class RateTable:
    base_rate_per_thousand: float = 3.50
    default_state_multiplier: float = DEFAULT_STATE_MULTIPLIER

    state_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {
                "FL": 1.85,
                "LA": 1.75,
                "TX": 1.55,
                "OK": 1.50,
                "KS": 1.45,
                "MS": 1.40,
                "AL": 1.35,
                "CA": 1.30,
                "CO": 1.25,
            }
        )
    )
    home_type_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {"single-family": 1.00, "condo": 0.75, "townhouse": 0.85, "mobile": 1.45}
        )
    )
    coverage_multipliers: Mapping[str, float] = field(
        default_factory=lambda: _frozen({"basic": 0.75, "standard": 1.00, "premium": 1.35})
    )
    deductible_multipliers: Mapping[int, float] = field(
        default_factory=lambda: _frozen({500: 1.20, 1000: 1.00, 2500: 0.85, 5000: 0.70})
    )

    def __post_init__(self) -> None:
        # Callers may pass plain dicts; store read-only views so the table stays constant.
        for name in (
            "state_multipliers",
            "home_type_multipliers",
            "coverage_multipliers",
            "deductible_multipliers",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _frozen(value))

    def state_factor(self, state: str) -> float:
        """Multiplier for a state code, falling back to the default for unlisted codes."""
        return float(self.state_multipliers.get(state, self.default_state_multiplier))


DEFAULT_RATE_TABLE = RateTable()
