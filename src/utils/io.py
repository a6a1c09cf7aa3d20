"""File helpers for the estimate scripts (JSON reports, CSV/Parquet batches)."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Union

import pandas as pd

SUPPORTED_TABLE_SUFFIXES = (".csv", ".parquet")


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_json(obj: Any, path: Union[str, Path]) -> None:
    path = Path(path)
    ensure_dir(path.parent)

    if hasattr(obj, "to_dict"):
        payload = obj.to_dict()
    elif is_dataclass(obj):
        payload = asdict(obj)
    else:
        payload = obj

    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def read_df(path: Union[str, Path]) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suf = path.suffix.lower()
    if suf == ".csv":
        # Keep raw strings; the runtime builder does the parsing
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suf == ".parquet":
        return pd.read_parquet(path)
    raise ValueError(f"Unsupported table format: {suf} (expected one of {SUPPORTED_TABLE_SUFFIXES})")


def write_df(df: pd.DataFrame, path: Union[str, Path]) -> None:
    path = Path(path)
    ensure_dir(path.parent)

    suf = path.suffix.lower()
    if suf == ".csv":
        df.to_csv(path, index=False)
        return
    if suf == ".parquet":
        df.to_parquet(path, index=False)
        return
    raise ValueError(f"Unsupported table format: {suf} (expected one of {SUPPORTED_TABLE_SUFFIXES})")
