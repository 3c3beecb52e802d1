"""Config-driven scoring of indicators against a reference baseline."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from locationdata.common.config_loader import ScoringOverrides
from locationdata.common.models import ParsedDataset, ParsedValue, Score, ScoringConfig

DEFAULT_SCORING_CONFIG = ScoringConfig()


def create_scoring_config(override: Mapping | None = None) -> ScoringConfig:
    if not override:
        return DEFAULT_SCORING_CONFIG
    return replace(DEFAULT_SCORING_CONFIG, **dict(override))


def _comparison_figure(value: ParsedValue, config: ScoringConfig) -> float | None:
    if config.comparison_type == "relatief":
        return value.relative
    return value.absolute


def calculate_score(
    value: ParsedValue,
    national: ParsedValue | None,
    override: Mapping | None = None,
) -> Score | None:
    """Classify ``value`` as -1 (below band), 0 (within) or 1 (above) its baseline.

    The baseline is ``base_value`` when configured, otherwise the same figure
    of the national value. The band is ``baseline +/- |baseline| * margin%``
    with inclusive edges. ``None`` means the indicator cannot be scored.
    """
    config = create_scoring_config(override)

    comparison = _comparison_figure(value, config)
    if comparison is None:
        return None

    baseline = config.base_value
    if baseline is None:
        if national is None:
            return None
        baseline = _comparison_figure(national, config)
        if baseline is None:
            return None

    margin_value = abs(baseline) * (config.margin / 100)
    lower = baseline - margin_value
    upper = baseline + margin_value

    if comparison < lower:
        raw_score = -1
    elif comparison > upper:
        raw_score = 1
    else:
        raw_score = 0

    if config.direction == "negative":
        return -raw_score
    return raw_score


def score_value(
    value: ParsedValue,
    national: ParsedValue | None,
    override: Mapping | None = None,
) -> ParsedValue:
    return replace(
        value,
        scoring=create_scoring_config(override),
        calculated_score=calculate_score(value, national, override),
    )


def apply_scoring_to_dataset(
    location: ParsedDataset,
    national: ParsedDataset | None,
    source: str,
    overrides: ScoringOverrides | None = None,
) -> ParsedDataset:
    source_overrides = overrides.for_source(source) if overrides is not None else {}
    scored: dict[str, ParsedValue] = {}

    for key, location_value in location.indicators.items():
        national_value = national.get(key) if national is not None else None
        scored[key] = score_value(location_value, national_value, source_overrides.get(key))

    return ParsedDataset(indicators=scored, metadata=location.metadata)


def summarize_scores(dataset: ParsedDataset) -> dict[str, int]:
    summary = {"below": 0, "within": 0, "above": 0, "unscored": 0}
    labels = {-1: "below", 0: "within", 1: "above"}
    for value in dataset.indicators.values():
        summary[labels.get(value.calculated_score, "unscored")] += 1
    return summary
