# src/api/app.py
"""
FastAPI service for the Homeowners Insurance Cost Estimator (thin API wrapper).

Endpoints:
- GET  /health
- GET  /options           -> form choices, labels, bounds, defaults
- GET  /coverage/{level}  -> coverage summary + inclusion table
- POST /estimate          -> annual/monthly premium + display metadata (+ warnings)

Run locally:
  uvicorn src.api.app:app --reload

The API layer stays thin:
- validates request shape
- calls src.estimator.service
- maps ValidationError -> 422 with the offending field
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from src.estimator.content import form_options
from src.estimator.service import estimate_from_input_dict
from src.pricing.coverage import coverage_profile
from src.pricing.errors import ValidationError as RatingValidationError
from src.utils.config import configure_logging, get_app_config

logger = logging.getLogger(__name__)

_CONFIG = get_app_config()

app = FastAPI(title=_CONFIG.api_title, version=_CONFIG.api_version)


@app.on_event("startup")
def _startup() -> None:
    configure_logging(_CONFIG.log_level)


# -----------------------------
# Schemas
# -----------------------------
class EstimateRequest(BaseModel):
    # Omitted fields fall back to the form defaults (see src.estimator.content)
    home_value: Optional[Union[float, str]] = None
    state: Optional[str] = None
    home_type: Optional[str] = None
    coverage_level: Optional[str] = None
    deductible: Optional[Union[int, str]] = None

    # Behaviour switches
    clamp: Optional[bool] = None

    # Optional rate override
    base_rate_per_thousand: Optional[float] = Field(default=None, gt=0)


class CoverageRowModel(BaseModel):
    label: str
    included: bool


class EstimateResponseModel(BaseModel):
    inputs: Dict[str, Any]
    annual_premium: int
    monthly_premium: int
    annual_display: str
    monthly_display: str
    home_value_display: str
    coverage_summary: List[str]
    coverage_details: List[CoverageRowModel]
    disclaimer: str
    warnings: List[str] = Field(default_factory=list)


class CoverageResponse(BaseModel):
    level: str
    summary: List[str]
    details: List[CoverageRowModel]


def _unprocessable(err: RatingValidationError) -> HTTPException:
    logger.info("Rejected request: %s", err)
    return HTTPException(status_code=422, detail=err.to_dict())


# -----------------------------
# Routes
# -----------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "version": _CONFIG.api_version}


@app.get("/options")
def options() -> Dict[str, Any]:
    return form_options()


@app.get("/coverage/{level}", response_model=CoverageResponse)
def coverage(level: str) -> CoverageResponse:
    try:
        profile = coverage_profile(level)
    except RatingValidationError as e:
        raise _unprocessable(e) from e
    return CoverageResponse(**profile.to_dict())


@app.post("/estimate", response_model=EstimateResponseModel)
def estimate(req: EstimateRequest) -> EstimateResponseModel:
    # Only forward fields the caller actually sent so defaults apply to the rest
    raw = req.model_dump(
        exclude_unset=True,
        include={"home_value", "state", "home_type", "coverage_level", "deductible"},
    )
    clamp = _CONFIG.clamp_home_value if req.clamp is None else req.clamp

    try:
        out = estimate_from_input_dict(
            raw,
            clamp=clamp,
            rate_overrides={"base_rate_per_thousand": req.base_rate_per_thousand},
        )
    except RatingValidationError as e:
        raise _unprocessable(e) from e

    return EstimateResponseModel(**out)
