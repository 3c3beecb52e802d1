"""Parse, score and flatten one location across its geographic levels."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Iterator, Mapping

from locationdata.common.config_loader import ScoringOverrides
from locationdata.common.constants import LEVELS, NATIONAL_LEVEL, SOURCES
from locationdata.common.formatting import format_number, format_value
from locationdata.common.logging import default_logger, log_event
from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.common.scoring import apply_scoring_to_dataset, summarize_scores
from locationdata.common.time_utils import utc_timestamp_iso
from locationdata.parsers.demographics import total_population
from locationdata.parsers.registry import parse_source

RawLevels = Mapping[str, Mapping[str, RawRecord]]


@dataclass(frozen=True)
class UnifiedRow:
    source: str
    level: str
    key: str
    title: str
    value: Any
    absolute: float | None
    relative: float | None
    unit: str | None
    score: int | None
    value_display: str
    absolute_display: str
    relative_display: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LocationReport:
    """Parsed datasets per source and level.

    National datasets are unscored; every other level is scored against the
    national dataset of the same source.
    """

    datasets: dict[str, dict[str, ParsedDataset]] = field(default_factory=dict)
    populations: dict[str, float | None] = field(default_factory=dict)

    def dataset(self, source: str, level: str) -> ParsedDataset | None:
        return self.datasets.get(source, {}).get(level)

    def iter_datasets(self) -> Iterator[tuple[str, str, ParsedDataset]]:
        for source in SOURCES:
            levels = self.datasets.get(source, {})
            for level in LEVELS:
                if level in levels:
                    yield source, level, levels[level]

    def rows(self) -> list[UnifiedRow]:
        rows: list[UnifiedRow] = []
        for source, level, dataset in self.iter_datasets():
            for key, value in dataset.indicators.items():
                if value.absolute is None and value.relative is None:
                    continue
                absolute_unit = None if value.unit == "%" else value.unit
                rows.append(
                    UnifiedRow(
                        source=source,
                        level=level,
                        key=key,
                        title=value.title,
                        value=value.original_value,
                        absolute=value.absolute,
                        relative=value.relative,
                        unit=value.unit,
                        score=value.calculated_score,
                        value_display=format_value(value.original_value),
                        absolute_display=format_number(value.absolute, absolute_unit),
                        relative_display=format_number(value.relative, "%"),
                    )
                )
        return rows

    def score_summary(self) -> dict[str, dict[str, dict[str, int]]]:
        summary: dict[str, dict[str, dict[str, int]]] = {}
        for source, level, dataset in self.iter_datasets():
            if level == NATIONAL_LEVEL:
                continue
            summary.setdefault(source, {})[level] = summarize_scores(dataset)
        return summary

    def to_dict(self) -> dict[str, Any]:
        return {
            "datasets": {
                source: {level: dataset.to_dict() for level, dataset in levels.items()}
                for source, levels in self.datasets.items()
            },
            "populations": dict(self.populations),
            "score_summary": self.score_summary(),
        }


def build_location_report(
    raw: RawLevels,
    overrides: ScoringOverrides | None = None,
    *,
    fetched_at: str | None = None,
    logger: logging.Logger | None = None,
) -> LocationReport:
    logger = logger or default_logger()
    fetched_at = fetched_at or utc_timestamp_iso()
    overrides = overrides or ScoringOverrides.empty()

    demographics = raw.get("demographics", {})
    populations = {level: total_population(record) for level, record in demographics.items()}

    parsed: dict[str, dict[str, ParsedDataset]] = {}
    for source in SOURCES:
        levels = raw.get(source) or {}
        for level in LEVELS:
            record = levels.get(level)
            if record is None:
                continue
            dataset = parse_source(source, record, populations.get(level), fetched_at=fetched_at)
            parsed.setdefault(source, {})[level] = dataset
            log_event(
                logger,
                "parsed source record",
                stage="parse",
                source=source,
                level=level,
                status="ok",
                indicators_in=len(record),
                indicators_out=len(dataset),
            )

    scored: dict[str, dict[str, ParsedDataset]] = {}
    for source, levels in parsed.items():
        national = levels.get(NATIONAL_LEVEL)
        scored[source] = {}
        for level, dataset in levels.items():
            if level == NATIONAL_LEVEL:
                scored[source][level] = dataset
                continue
            scored[source][level] = apply_scoring_to_dataset(dataset, national, source, overrides)
            log_event(
                logger,
                "scored dataset",
                stage="score",
                source=source,
                level=level,
                status="ok" if national is not None else "no_baseline",
                indicators_in=len(dataset),
                indicators_out=len(dataset),
            )

    return LocationReport(datasets=scored, populations=populations)
