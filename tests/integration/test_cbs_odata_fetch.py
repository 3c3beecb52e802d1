from __future__ import annotations

import pytest

from locationdata.common.errors import StageError
from locationdata.common.http import HttpRequestError
from locationdata.sources.cbs_odata import DATASETS, build_filter, fetch_location, fetch_multi_level, fetch_record


class FakeHttpClient:
    def __init__(self, rows_by_code: dict[str, list[dict]], failing_codes: set[str] | None = None):
        self.rows_by_code = rows_by_code
        self.failing_codes = failing_codes or set()
        self.calls: list[tuple[str, str]] = []

    def get_odata_rows(self, url, *, params=None):
        odata_filter = params["$filter"]
        code = odata_filter.split("'")[1]
        self.calls.append((url, odata_filter))
        if code in self.failing_codes:
            raise HttpRequestError(f"HTTP status: 500 for {code}")
        return list(self.rows_by_code.get(code, []))


def test_build_filter_for_health_adds_fixed_dimensions():
    odata_filter = build_filter(DATASETS["health"], "GM0344", "2022JJ00")
    assert odata_filter == (
        "startswith(WijkenEnBuurten,'GM0344') and Perioden eq '2022JJ00'"
        " and Leeftijd eq '20300' and Marges eq 'MW00000'"
    )


@pytest.mark.integration
def test_fetch_record_returns_first_row():
    client = FakeHttpClient({"GM0344": [{"AantalInwoners_5": 100}, {"AantalInwoners_5": 999}]})
    assert fetch_record(client, "demographics", "GM0344") == {"AantalInwoners_5": 100}
    url, odata_filter = client.calls[0]
    assert url.endswith("84583NED/UntypedDataSet")
    assert "Perioden eq '2023JJ00'" in odata_filter


@pytest.mark.integration
def test_fetch_record_remaps_safety_rows():
    rows = [
        {"SoortMisdrijf": "0.0.0   ", "GeregistreerdeMisdrijven_1": "3353"},
        {"SoortMisdrijf": "1.1.1", "GeregistreerdeMisdrijven_1": "     ."},
        {"SoortMisdrijf": "", "GeregistreerdeMisdrijven_1": "4"},
    ]
    client = FakeHttpClient({"WK034401": rows})
    assert fetch_record(client, "safety", "WK034401", "2023JJ00") == {"0.0.0": 3353, "1.1.1": 0}
    assert "Perioden eq '2023JJ00'" in client.calls[0][1]


@pytest.mark.integration
def test_fetch_record_empty_result():
    assert fetch_record(FakeHttpClient({}), "livability", "GM0344") == {}


@pytest.mark.integration
def test_national_level_falls_back_to_nl01():
    client = FakeHttpClient({"NL01": [{"AantalInwoners_5": 17_800_000}], "GM0344": [{"AantalInwoners_5": 1}]})
    result = fetch_multi_level(client, "demographics", {"municipality": "GM0344"})
    assert result.codes == {"national": "NL01", "municipality": "GM0344"}
    assert set(result.records) == {"national", "municipality"}
    assert result.failed_levels == []


@pytest.mark.integration
def test_failing_level_is_left_out():
    client = FakeHttpClient(
        {"NL00": [{"a": 1}], "GM0344": [{"a": 2}]},
        failing_codes={"WK034401"},
    )
    result = fetch_multi_level(client, "demographics", {"municipality": "GM0344", "district": "WK034401"})
    assert set(result.records) == {"national", "municipality"}
    assert result.failed_levels == ["district"]


@pytest.mark.integration
def test_all_levels_failing_raises_stage_error():
    client = FakeHttpClient({}, failing_codes={"NL00", "GM0344"})
    with pytest.raises(StageError):
        fetch_multi_level(client, "health", {"municipality": "GM0344"})


@pytest.mark.integration
def test_fetch_location_reports_partial_failures():
    client = FakeHttpClient({"NL00": [{"a": 1}], "GM0344": [{"a": 2}]}, failing_codes={"BU03440101"})
    raw, failures = fetch_location(
        client,
        {"municipality": "GM0344", "neighborhood": "BU03440101"},
        sources=("demographics", "health"),
    )
    assert set(raw) == {"demographics", "health"}
    assert failures == {"demographics": ["neighborhood"], "health": ["neighborhood"]}
