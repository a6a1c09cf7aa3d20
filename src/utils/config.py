from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_TRUTHY = {"1", "true", "yes"}


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    reports_dir: Path


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/src/utils/config.py
    """
    return Path(__file__).resolve().parents[2]


def get_paths() -> ProjectPaths:
    root = get_project_root()
    return ProjectPaths(
        root=root,
        reports_dir=root / "reports",
    )


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    api_title: str
    api_version: str
    clamp_home_value: bool


def get_app_config() -> AppConfig:
    """
    Runtime settings for the API and scripts, read from environment variables.

    Env:
      LOG_LEVEL         (default: INFO)
      API_TITLE         (default: Homeowners Insurance Cost Estimator)
      API_VERSION       (default: 0.1.0)
      CLAMP_HOME_VALUE  (default: false) clip home value into the form bounds
    """
    return AppConfig(
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        api_title=_env("API_TITLE", "Homeowners Insurance Cost Estimator")
        or "Homeowners Insurance Cost Estimator",
        api_version=_env("API_VERSION", "0.1.0") or "0.1.0",
        clamp_home_value=(_env("CLAMP_HOME_VALUE", "false") or "false").lower() in _TRUTHY,
    )


def configure_logging(level: Optional[str] = None) -> None:
    lvl = level or get_app_config().log_level
    logging.basicConfig(
        level=getattr(logging, lvl.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
