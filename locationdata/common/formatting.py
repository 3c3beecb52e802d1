"""Dutch (nl-NL) display formatting for exported indicator rows."""

from __future__ import annotations

from typing import Any

from locationdata.common.numbers import parse_number

EMPTY_DISPLAY = "-"


def format_number(value: float | None, unit: str | None = None, *, max_fraction_digits: int = 2) -> str:
    if value is None:
        return EMPTY_DISPLAY

    rounded = round(value, max_fraction_digits)
    text = f"{abs(rounded):,.{max_fraction_digits}f}"
    integer_part, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    formatted = integer_part.replace(",", ".")
    if fraction:
        formatted = f"{formatted},{fraction}"
    if rounded < 0:
        formatted = f"-{formatted}"

    if unit == "%":
        return f"{formatted}%"
    if unit:
        return f"{formatted} {unit}"
    return formatted


def format_value(value: Any) -> str:
    """Format a verbatim source cell; numeric strings are formatted as numbers."""
    if value is None:
        return EMPTY_DISPLAY
    if isinstance(value, str):
        number = parse_number(value)
        return value if number is None else format_number(number, max_fraction_digits=3)
    number = parse_number(value)
    if number is None:
        return str(value)
    return format_number(number, max_fraction_digits=3)
