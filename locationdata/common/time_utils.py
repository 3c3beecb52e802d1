"""Timestamps and CBS period codes."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def utc_timestamp_iso(now: datetime | None = None) -> str:
    return (now or utc_now()).isoformat(timespec="milliseconds")


def generate_run_id(now: datetime | None = None) -> str:
    return (now or utc_now()).strftime("run-%Y%m%dT%H%M%S%fZ")


def period_code(year: int) -> str:
    """CBS ``Perioden`` code for a full calendar year, e.g. ``2023 -> "2023JJ00"``."""
    return f"{year}JJ00"
