# src/estimator/content.py
"""
Static display content for the estimator form: labels, bounds, defaults and
disclaimer copy. Pure data; the API and CLIs render it.
"""

from __future__ import annotations

from typing import Any, Dict

from src.pricing.config import COVERAGE_LEVELS, DEDUCTIBLES, HOME_TYPES, STATES
from src.utils.formatting import format_usd

TITLE = "Homeowners Insurance Cost Estimator (2026)"
SUBTITLE = "Get an instant estimate of your homeowners insurance premium"

HOME_TYPE_LABELS: Dict[str, str] = {
    "single-family": "Single Family",
    "condo": "Condo",
    "townhouse": "Townhouse",
    "mobile": "Mobile Home",
}

COVERAGE_LEVEL_LABELS: Dict[str, str] = {
    "basic": "Basic (Dwelling Only)",
    "standard": "Standard (HO-3)",
    "premium": "Premium (HO-5)",
}

HOME_VALUE_MIN = 50_000
HOME_VALUE_MAX = 5_000_000
HOME_VALUE_STEP = 10_000

DEFAULT_INPUT: Dict[str, Any] = {
    "home_value": 350_000,
    "state": "TX",
    "home_type": "single-family",
    "coverage_level": "standard",
    "deductible": 1000,
}

DISCLAIMER = (
    "This tool provides an informational estimate of homeowners insurance costs "
    "based on common rating factors such as home value, location, home type, "
    "coverage level, and deductible. The figures shown are estimates only. "
    "Actual insurance premiums vary based on home age, construction materials, "
    "claims history, and insurer criteria. Contact licensed providers for "
    "accurate quotes."
)

FOOTER_NOTES = ("Estimates only", "Actual premiums vary", "Free to use")


def form_options() -> Dict[str, Any]:
    """
    Everything a form renderer needs: choices with labels, bounds and defaults.
    """
    return {
        "title": TITLE,
        "subtitle": SUBTITLE,
        "states": list(STATES),
        "home_types": [{"value": v, "label": HOME_TYPE_LABELS[v]} for v in HOME_TYPES],
        "coverage_levels": [{"value": v, "label": COVERAGE_LEVEL_LABELS[v]} for v in COVERAGE_LEVELS],
        "deductibles": [{"value": d, "label": format_usd(d)} for d in DEDUCTIBLES],
        "home_value": {"min": HOME_VALUE_MIN, "max": HOME_VALUE_MAX, "step": HOME_VALUE_STEP},
        "defaults": dict(DEFAULT_INPUT),
        "disclaimer": DISCLAIMER,
        "footer": list(FOOTER_NOTES),
    }
