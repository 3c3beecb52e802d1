"""Veiligheidsmonitor / leefbaarheid parser.

Every field is read as a share of residents and gets an implied head count,
scale scores and report grades included.
"""

from __future__ import annotations

from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.normalizers.livability import LIVABILITY_KEY_MAP, readable_key
from locationdata.parsers.rules import FieldRule, ParseContext, build_dataset, percentage_of_population

SOURCE = "livability"

LIVABILITY_RULES: tuple[FieldRule, ...] = tuple(
    FieldRule(key, percentage_of_population(key), "%") for key in LIVABILITY_KEY_MAP
)


def parse_livability(
    record: RawRecord,
    total_population: float | None,
    *,
    fetched_at: str | None = None,
) -> ParsedDataset:
    return build_dataset(
        SOURCE,
        LIVABILITY_RULES,
        record,
        ParseContext(total_population=total_population),
        title_for=readable_key,
        fetched_at=fetched_at,
    )
