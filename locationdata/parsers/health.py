"""Gezondheid per wijk en buurt parser: percentages with implied head counts."""

from __future__ import annotations

from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.normalizers.health import HEALTH_KEY_MAP, METADATA_KEYS, readable_key
from locationdata.parsers.rules import FieldRule, ParseContext, build_dataset, percentage_of_population, text

SOURCE = "health"

HEALTH_RULES: tuple[FieldRule, ...] = tuple(
    FieldRule(key, text) if key in METADATA_KEYS else FieldRule(key, percentage_of_population(key), "%")
    for key in HEALTH_KEY_MAP
)


def parse_health(
    record: RawRecord,
    total_population: float | None,
    *,
    fetched_at: str | None = None,
) -> ParsedDataset:
    return build_dataset(
        SOURCE,
        HEALTH_RULES,
        record,
        ParseContext(total_population=total_population),
        title_for=readable_key,
        fetched_at=fetched_at,
    )
