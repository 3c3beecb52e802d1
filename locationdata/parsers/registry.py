"""Source name to parser lookup.

Demographics takes only the record; the other sources also need the
population resolved from the demographics record of the same level.
"""

from __future__ import annotations

from typing import Callable

from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.parsers.demographics import parse_demographics
from locationdata.parsers.health import parse_health
from locationdata.parsers.livability import parse_livability
from locationdata.parsers.safety import parse_safety

SourceParser = Callable[..., ParsedDataset]

PARSERS: dict[str, SourceParser] = {
    "demographics": parse_demographics,
    "health": parse_health,
    "livability": parse_livability,
    "safety": parse_safety,
}


def parse_source(
    source: str,
    record: RawRecord,
    total_population: float | None = None,
    *,
    fetched_at: str | None = None,
) -> ParsedDataset:
    if source not in PARSERS:
        raise KeyError(f"Unknown source: {source}")
    if source == "demographics":
        return parse_demographics(record, fetched_at=fetched_at)
    return PARSERS[source](record, total_population, fetched_at=fetched_at)
