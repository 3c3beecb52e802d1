"""Null-safe numeric helpers for sparse statistical feeds."""

from __future__ import annotations

import math
from typing import Any

from locationdata.common.constants import CBS_NULL_SENTINELS


def parse_number(value: Any) -> float | None:
    """Coerce a raw cell to a float, or ``None`` when it carries no number.

    ``None``, blanks, CBS's ``'.'`` sentinel, non-numeric strings, booleans and
    non-finite values all become ``None``; nothing here raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip()
        if cleaned.lower() in CBS_NULL_SENTINELS:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def original_value(value: Any) -> int | float | str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        return value
    return None


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _usable_denominator(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value != 0


def share_of(value: float | None, denominator: float | None) -> float | None:
    """``value`` as a percentage of ``denominator``."""
    if value is None or not _usable_denominator(denominator):
        return None
    return value * 100 / denominator


def count_from_percentage(percentage: float | None, population: float | None) -> int | None:
    if percentage is None or not _usable_denominator(population):
        return None
    return round_half_up(percentage * population / 100)
