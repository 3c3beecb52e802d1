"""CBS OData (v3 ``UntypedDataSet``) fetch stage with fail-soft level handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from locationdata.common.constants import LEVELS, NATIONAL_CODES, NATIONAL_LEVEL, SOURCES
from locationdata.common.errors import StageError
from locationdata.common.http import HttpClient, HttpRequestError
from locationdata.common.logging import default_logger, log_event, log_warning
from locationdata.common.numbers import parse_number


@dataclass(frozen=True)
class ODataDataset:
    table_id: str
    base_url: str
    default_period: str
    region_field: str = "WijkenEnBuurten"
    extra_filters: tuple[tuple[str, str], ...] = ()


DATASETS: dict[str, ODataDataset] = {
    "demographics": ODataDataset(
        table_id="84583NED",
        base_url="https://opendata.cbs.nl/ODataApi/odata/84583NED/UntypedDataSet",
        default_period="2023JJ00",
    ),
    "health": ODataDataset(
        table_id="50120NED",
        base_url="https://dataderden.cbs.nl/ODataApi/odata/50120NED/UntypedDataSet",
        default_period="2022JJ00",
        # All ages, point estimates only.
        extra_filters=(("Leeftijd", "20300"), ("Marges", "MW00000")),
    ),
    "livability": ODataDataset(
        table_id="85146NED",
        base_url="https://opendata.cbs.nl/ODataApi/odata/85146NED/UntypedDataSet",
        default_period="2023JJ00",
        region_field="RegioS",
    ),
    "safety": ODataDataset(
        table_id="47018NED",
        base_url="https://dataderden.cbs.nl/ODataApi/odata/47018NED/UntypedDataSet",
        default_period="2024JJ00",
    ),
}


@dataclass
class LevelFetchResult:
    records: dict[str, dict] = field(default_factory=dict)
    codes: dict[str, str] = field(default_factory=dict)
    failed_levels: list[str] = field(default_factory=list)


def build_filter(dataset: ODataDataset, code: str, period: str) -> str:
    clauses = [f"startswith({dataset.region_field},'{code}')", f"Perioden eq '{period}'"]
    clauses.extend(f"{name} eq '{value}'" for name, value in dataset.extra_filters)
    return " and ".join(clauses)


def _remap_safety_rows(rows: list[dict]) -> dict[str, int]:
    """Pivot one row per crime type into ``{SoortMisdrijf: registered crimes}``."""
    remapped: dict[str, int] = {}
    for row in rows:
        crime_code = str(row.get("SoortMisdrijf") or "").strip()
        if not crime_code:
            continue
        count = parse_number(row.get("GeregistreerdeMisdrijven_1"))
        remapped[crime_code] = int(count) if count is not None else 0
    return remapped


def fetch_record(client: HttpClient, source: str, code: str, period: str | None = None) -> dict:
    if source not in DATASETS:
        raise StageError(f"Unknown source: {source}")
    dataset = DATASETS[source]
    rows = client.get_odata_rows(
        dataset.base_url,
        params={"$filter": build_filter(dataset, code, period or dataset.default_period)},
    )
    if source == "safety":
        return _remap_safety_rows(rows)
    if not rows:
        return {}
    return dict(rows[0])


def _fetch_national(client: HttpClient, source: str, period: str | None) -> tuple[str | None, dict]:
    error: HttpRequestError | None = None
    for code in NATIONAL_CODES:
        try:
            record = fetch_record(client, source, code, period)
        except HttpRequestError as exc:
            error = exc
            continue
        if record:
            return code, record
    if error is not None:
        raise error
    return None, {}


def fetch_multi_level(
    client: HttpClient,
    source: str,
    codes: Mapping[str, str | None],
    period: str | None = None,
    *,
    logger: logging.Logger | None = None,
) -> LevelFetchResult:
    """Fetch the national level plus each level in ``codes`` that has a code.

    A failing level is logged and left out. ``StageError`` is raised only when
    every attempted level fails.
    """
    logger = logger or default_logger()
    result = LevelFetchResult()
    attempted = 0

    for level in LEVELS:
        if level != NATIONAL_LEVEL and not codes.get(level):
            continue
        attempted += 1
        try:
            if level == NATIONAL_LEVEL:
                code, record = _fetch_national(client, source, period)
            else:
                code = codes[level]
                record = fetch_record(client, source, code, period)
        except HttpRequestError as exc:
            result.failed_levels.append(level)
            log_warning(
                logger,
                f"fetch failed: {exc}",
                stage="fetch",
                source=source,
                level=level,
                event="LEVEL_FETCH_FAILED",
                status="failed",
                error_code=exc.error_code,
            )
            continue

        if not record:
            log_warning(
                logger,
                "no rows for level",
                stage="fetch",
                source=source,
                level=level,
                event="LEVEL_EMPTY",
                status="empty",
            )
            continue

        result.records[level] = record
        result.codes[level] = code
        log_event(
            logger,
            f"fetched {code}",
            stage="fetch",
            source=source,
            level=level,
            status="ok",
            indicators_out=len(record),
        )

    if attempted and len(result.failed_levels) == attempted:
        raise StageError(f"All levels failed for source {source}")
    return result


def fetch_location(
    client: HttpClient,
    codes: Mapping[str, str | None],
    *,
    sources: tuple[str, ...] = SOURCES,
    periods: Mapping[str, str] | None = None,
    logger: logging.Logger | None = None,
) -> tuple[dict[str, dict[str, dict]], dict[str, list[str]]]:
    """Fetch every source for one location.

    Returns the raw ``{source: {level: record}}`` tree and the failed levels per
    source. A source that fails outright is recorded with all its levels failed.
    """
    logger = logger or default_logger()
    periods = periods or {}
    raw: dict[str, dict[str, dict]] = {}
    failures: dict[str, list[str]] = {}

    for source in sources:
        try:
            fetched = fetch_multi_level(client, source, codes, periods.get(source), logger=logger)
        except StageError as exc:
            failures[source] = [level for level in LEVELS if level == NATIONAL_LEVEL or codes.get(level)]
            log_warning(
                logger,
                str(exc),
                stage="fetch",
                source=source,
                event="SOURCE_FETCH_FAILED",
                status="failed",
                error_code=exc.error_code,
            )
            continue
        raw[source] = fetched.records
        if fetched.failed_levels:
            failures[source] = list(fetched.failed_levels)

    if not raw:
        raise StageError("Every source failed to fetch")
    return raw, failures
