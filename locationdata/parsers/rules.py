"""Declarative field rules shared by the source parsers.

Each parser is a table of ``FieldRule`` rows. A rule's ``derive`` callable
receives the raw record and a ``ParseContext`` and returns the
``(absolute, relative)`` pair for that field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from locationdata.common.models import DatasetMetadata, ParsedDataset, ParsedValue, RawRecord
from locationdata.common.numbers import count_from_percentage, original_value, parse_number, share_of
from locationdata.common.time_utils import utc_timestamp_iso

Figures = tuple[float | None, float | None]
Derive = Callable[[RawRecord, "ParseContext"], Figures]


@dataclass(frozen=True)
class ParseContext:
    total_population: float | None = None
    denominators: Mapping[str, float | None] = field(default_factory=dict)

    def denominator(self, name: str) -> float | None:
        if name == "population":
            return self.total_population
        return self.denominators.get(name)


@dataclass(frozen=True)
class FieldRule:
    raw_key: str
    derive: Derive
    unit: str | None = None
    # Where the original value comes from when it is not ``record[raw_key]``.
    source_value: Callable[[RawRecord, ParseContext], Any] | None = None


def text(_record: RawRecord, _context: ParseContext) -> Figures:
    return None, None


def absolute_only(raw_key: str) -> Derive:
    def derive(record: RawRecord, _context: ParseContext) -> Figures:
        return parse_number(record.get(raw_key)), None

    return derive


def relative_only(raw_key: str) -> Derive:
    def derive(record: RawRecord, _context: ParseContext) -> Figures:
        return None, parse_number(record.get(raw_key))

    return derive


def count_share(raw_key: str, denominator: str = "population") -> Derive:
    """Raw count, with its share of the named denominator as the relative figure."""

    def derive(record: RawRecord, context: ParseContext) -> Figures:
        count = parse_number(record.get(raw_key))
        return count, share_of(count, context.denominator(denominator))

    return derive


def percentage_of_population(raw_key: str) -> Derive:
    """Source percentage, with the implied head count as the absolute figure."""

    def derive(record: RawRecord, context: ParseContext) -> Figures:
        percentage = parse_number(record.get(raw_key))
        return count_from_percentage(percentage, context.total_population), percentage

    return derive


def build_dataset(
    source: str,
    rules: Iterable[FieldRule],
    record: RawRecord,
    context: ParseContext,
    *,
    title_for: Callable[[str], str],
    fetched_at: str | None = None,
) -> ParsedDataset:
    indicators: dict[str, ParsedValue] = {}
    for rule in rules:
        absolute, relative = rule.derive(record, context)
        raw = rule.source_value(record, context) if rule.source_value else record.get(rule.raw_key)
        indicators[rule.raw_key] = ParsedValue(
            title=title_for(rule.raw_key),
            original_value=original_value(raw),
            absolute=absolute,
            relative=relative,
            unit=rule.unit,
        )
    return ParsedDataset(
        indicators=indicators,
        metadata=DatasetMetadata(source=source, fetched_at=fetched_at or utc_timestamp_iso()),
    )
