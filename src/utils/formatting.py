"""Display formatting for estimate results (en-US, whole dollars)."""

from __future__ import annotations

from typing import Union

from src.pricing.quote import round_half_up

Number = Union[int, float]


def format_number(n: Number) -> str:
    """350000 -> '350,000'"""
    return f"{round_half_up(n):,}"


def format_usd(n: Number) -> str:
    """1899 -> '$1,899', -25 -> '-$25'"""
    v = round_half_up(n)
    if v < 0:
        return f"-${-v:,}"
    return f"${v:,}"
