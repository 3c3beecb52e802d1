import pytest

from locationdata.common.config_loader import ScoringOverrides
from locationdata.common.models import DatasetMetadata, ParsedDataset, ParsedValue, ScoringConfig
from locationdata.common.scoring import (
    DEFAULT_SCORING_CONFIG,
    apply_scoring_to_dataset,
    calculate_score,
    create_scoring_config,
    score_value,
    summarize_scores,
)


def _value(relative=None, absolute=None):
    return ParsedValue(title="x", original_value=relative, absolute=absolute, relative=relative)


def _dataset(source="health", **values):
    return ParsedDataset(
        indicators=dict(values),
        metadata=DatasetMetadata(source=source, fetched_at="2026-01-01T00:00:00.000+00:00"),
    )


def test_default_config():
    assert DEFAULT_SCORING_CONFIG == ScoringConfig("relatief", 20.0, None, "positive")
    assert create_scoring_config(None) == DEFAULT_SCORING_CONFIG
    assert create_scoring_config({"margin": 5}).margin == 5
    assert create_scoring_config({"margin": 5}).direction == "positive"


@pytest.mark.parametrize(
    ("relative", "expected"),
    [(8.0, 0), (12.0, 0), (7.99, -1), (12.01, 1), (10.0, 0)],
)
def test_band_edges_are_inclusive(relative, expected):
    assert calculate_score(_value(relative), _value(10.0)) == expected


@pytest.mark.parametrize(
    ("relative", "positive", "negative"),
    [(80.0, 0, 0), (120.0, 0, 0), (79.9, -1, 1), (120.1, 1, -1), (100.0, 0, 0)],
)
def test_hundred_baseline_band(relative, positive, negative):
    national = _value(100.0)
    assert calculate_score(_value(relative), national) == positive
    assert calculate_score(_value(relative), national, {"direction": "negative"}) == negative


def test_negative_direction_inverts_score():
    national = _value(10.0)
    override = {"direction": "negative"}
    assert calculate_score(_value(15.0), national, override) == -1
    assert calculate_score(_value(5.0), national, override) == 1
    assert calculate_score(_value(10.0), national, override) == 0


def test_unscorable_without_baseline():
    assert calculate_score(_value(10.0), None) is None
    assert calculate_score(_value(10.0), _value(None)) is None
    assert calculate_score(_value(None), _value(10.0)) is None


def test_base_value_replaces_national_baseline():
    override = {"base_value": 50, "margin": 10}
    assert calculate_score(_value(56.0), None, override) == 1
    assert calculate_score(_value(55.0), _value(99.0), override) == 0


def test_absolute_comparison_reads_absolute_figures():
    override = {"comparison_type": "absoluut"}
    assert calculate_score(_value(relative=1.0, absolute=200), _value(relative=1.0, absolute=100), override) == 1
    assert calculate_score(_value(relative=1.0), _value(relative=1.0, absolute=100), override) is None


def test_negative_baseline_uses_absolute_band_width():
    assert calculate_score(_value(-9.0), _value(-10.0)) == 0
    assert calculate_score(_value(-13.0), _value(-10.0)) == -1


def test_zero_margin_and_zero_baseline():
    assert calculate_score(_value(0.0), _value(0.0)) == 0
    assert calculate_score(_value(0.1), _value(0.0)) == 1
    assert calculate_score(_value(10.0), _value(10.0), {"margin": 0}) == 0


def test_score_value_returns_new_value():
    original = _value(15.0)
    scored = score_value(original, _value(10.0), {"direction": "negative"})
    assert scored is not original
    assert original.calculated_score is None
    assert scored.calculated_score == -1
    assert scored.scoring.direction == "negative"


def test_apply_scoring_joins_on_key_and_uses_overrides():
    location = _dataset(Roker_11=_value(30.0), Sporters_6=_value(30.0), Extra_99=_value(1.0))
    national = _dataset(Roker_11=_value(20.0), Sporters_6=_value(20.0))
    overrides = ScoringOverrides(sources={"health": {"Roker_11": {"direction": "negative"}}})

    scored = apply_scoring_to_dataset(location, national, "health", overrides)

    assert scored.get("Roker_11").calculated_score == -1
    assert scored.get("Sporters_6").calculated_score == 1
    assert scored.get("Extra_99").calculated_score is None
    assert scored.metadata == location.metadata


def test_apply_scoring_is_idempotent_and_does_not_mutate():
    location = _dataset(Roker_11=_value(30.0))
    national = _dataset(Roker_11=_value(20.0))
    before = location.to_dict()
    entries = dict(location.indicators)

    once = apply_scoring_to_dataset(location, national, "health")
    twice = apply_scoring_to_dataset(once, national, "health")

    assert location.to_dict() == before
    assert all(location.indicators[key] is value for key, value in entries.items())
    assert once.to_dict() == twice.to_dict()


def test_apply_scoring_without_national_dataset():
    scored = apply_scoring_to_dataset(_dataset(Roker_11=_value(30.0)), None, "health")
    assert scored.get("Roker_11").calculated_score is None
    assert scored.get("Roker_11").scoring == DEFAULT_SCORING_CONFIG


def test_summarize_scores():
    location = _dataset(a=_value(30.0), b=_value(5.0), c=_value(10.0), d=_value(None))
    national = _dataset(a=_value(10.0), b=_value(10.0), c=_value(10.0), d=_value(10.0))
    summary = summarize_scores(apply_scoring_to_dataset(location, national, "health"))
    assert summary == {"below": 1, "within": 1, "above": 1, "unscored": 1}
