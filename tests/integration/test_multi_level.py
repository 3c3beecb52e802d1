from __future__ import annotations

import pytest

from locationdata.common.config_loader import ScoringOverrides
from locationdata.pipeline.multi_level import build_location_report

FETCHED_AT = "2026-01-01T00:00:00.000+00:00"

RAW = {
    "demographics": {
        "national": {"Gemeentenaam_1": "Nederland", "AantalInwoners_5": 100000, "Mannen_6": 50000},
        "municipality": {"Gemeentenaam_1": "Utrecht", "AantalInwoners_5": 10000, "Mannen_6": 7000},
    },
    "health": {
        "national": {"Roker_11": 20.0},
        "municipality": {"Roker_11": 30.0},
    },
    "safety": {
        "municipality": {"1.1.1": 25},
    },
}


@pytest.mark.integration
def test_report_scores_against_national_and_keeps_national_unscored():
    overrides = ScoringOverrides(sources={"health": {"Roker_11": {"direction": "negative"}}})
    report = build_location_report(RAW, overrides, fetched_at=FETCHED_AT)

    assert report.dataset("demographics", "municipality").get("Mannen_6").calculated_score == 1
    assert report.dataset("health", "municipality").get("Roker_11").calculated_score == -1
    assert report.dataset("health", "national").get("Roker_11").scoring is None
    assert report.dataset("health", "municipality").get("Roker_11").absolute == 3000
    assert report.populations == {"national": 100000.0, "municipality": 10000.0}


@pytest.mark.integration
def test_source_without_national_record_is_unscored():
    report = build_location_report(RAW, None, fetched_at=FETCHED_AT)
    burglary = report.dataset("safety", "municipality").get("Crime_1.1.1")
    assert burglary.relative == 0.25
    assert burglary.calculated_score is None


@pytest.mark.integration
def test_base_value_scores_without_national_record():
    overrides = ScoringOverrides(sources={"safety": {"Crime_1.1.1": {"base_value": 0.1, "direction": "negative"}}})
    report = build_location_report(RAW, overrides, fetched_at=FETCHED_AT)
    assert report.dataset("safety", "municipality").get("Crime_1.1.1").calculated_score == -1


@pytest.mark.integration
def test_rows_skip_text_metadata_and_carry_display_strings():
    report = build_location_report(RAW, None, fetched_at=FETCHED_AT)
    rows = report.rows()

    assert all(row.key != "Gemeentenaam_1" for row in rows)
    smoker = next(row for row in rows if row.source == "health" and row.level == "municipality")
    assert smoker.relative_display == "30%"
    assert smoker.absolute_display == "3.000"
    assert smoker.score == 1
    assert [row.level for row in rows if row.key == "Roker_11"] == ["national", "municipality"]


@pytest.mark.integration
def test_score_summary_excludes_national_level():
    summary = build_location_report(RAW, None, fetched_at=FETCHED_AT).score_summary()
    assert set(summary) == {"demographics", "health", "safety"}
    assert set(summary["health"]) == {"municipality"}
    assert summary["health"]["municipality"]["above"] == 1
    assert summary["safety"]["municipality"]["unscored"] == 1
