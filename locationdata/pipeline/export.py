"""CSV and JSON export of location reports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from locationdata.common.fs import write_csv, write_json
from locationdata.pipeline.multi_level import LocationReport, UnifiedRow

ROW_HEADERS = [
    "source",
    "level",
    "key",
    "title",
    "value",
    "absolute",
    "relative",
    "unit",
    "score",
    "value_display",
    "absolute_display",
    "relative_display",
]


def _serialize_row(row: UnifiedRow) -> dict:
    out = {}
    payload = row.to_dict()
    for key in ROW_HEADERS:
        value = payload.get(key)
        out[key] = "" if value is None else value
    return out


def write_rows_csv(path: Path, rows: Iterable[UnifiedRow]) -> Path:
    write_csv(path, ROW_HEADERS, [_serialize_row(row) for row in rows])
    return path


def write_report_json(path: Path, report: LocationReport) -> Path:
    write_json(path, report.to_dict())
    return path
