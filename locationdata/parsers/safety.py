"""Politie geregistreerde misdrijven parser.

Unlike the CBS parsers this one is driven by the record, not a fixed table:
every crime-code key becomes an incident count keyed ``Crime_<code>``, and
anything else is carried as text.
"""

from __future__ import annotations

from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.normalizers.safety import crime_key, extract_crime_code, is_crime_key, normalize_safety_key
from locationdata.parsers.rules import FieldRule, ParseContext, build_dataset, count_share, text

SOURCE = "safety"


def _read_as(raw_key: str):
    def source_value(record: RawRecord, _context: ParseContext):
        return record.get(raw_key)

    return source_value


def safety_rules(record: RawRecord) -> list[FieldRule]:
    """One rule per record key. ``"1.1.1"`` and ``"Crime_1.1.1"`` share a key; the first one wins."""
    rules: list[FieldRule] = []
    seen: set[str] = set()
    for raw_key in record:
        if not is_crime_key(raw_key):
            rules.append(FieldRule(raw_key, text))
            continue
        key = crime_key(extract_crime_code(raw_key))
        if key in seen:
            continue
        seen.add(key)
        rules.append(
            FieldRule(
                key,
                count_share(raw_key),
                "%",
                source_value=_read_as(raw_key),
            )
        )
    return rules


def parse_safety(
    record: RawRecord,
    total_population: float | None,
    *,
    fetched_at: str | None = None,
) -> ParsedDataset:
    return build_dataset(
        SOURCE,
        safety_rules(record),
        record,
        ParseContext(total_population=total_population),
        title_for=normalize_safety_key,
        fetched_at=fetched_at,
    )
