# src/estimator/schemas.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class EstimateResponse:
    inputs: Dict[str, Any]
    annual_premium: int
    monthly_premium: int
    annual_display: str
    monthly_display: str
    home_value_display: str
    coverage_summary: List[str]
    coverage_details: List[Dict[str, Any]]
    disclaimer: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputs": dict(self.inputs),
            "annual_premium": self.annual_premium,
            "monthly_premium": self.monthly_premium,
            "annual_display": self.annual_display,
            "monthly_display": self.monthly_display,
            "home_value_display": self.home_value_display,
            "coverage_summary": list(self.coverage_summary),
            "coverage_details": [dict(d) for d in self.coverage_details],
            "disclaimer": self.disclaimer,
        }
