import math

import pytest

from locationdata.common.numbers import count_from_percentage, original_value, parse_number, round_half_up, share_of


@pytest.mark.parametrize("raw", [None, "", "   ", ".", "n/a", "N/A", "abc", True, False, math.nan, math.inf, -math.inf, [], {}])
def test_parse_number_returns_none_for_non_numbers(raw):
    assert parse_number(raw) is None


def test_parse_number_accepts_numbers_and_numeric_strings():
    assert parse_number(12) == 12.0
    assert parse_number(" 12.5 ") == 12.5
    assert parse_number("-3") == -3.0
    assert parse_number(0) == 0.0


def test_original_value_passes_through_scalars_only():
    assert original_value("     .") == "     ."
    assert original_value(7) == 7
    assert original_value(True) is None
    assert original_value(None) is None
    assert original_value({"nested": 1}) is None


def test_round_half_up_always_rounds_half_upward():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-0.5) == 0


def test_share_of_guards_zero_and_missing_denominators():
    assert share_of(25, 5000) == 0.5
    assert share_of(0, 100) == 0
    assert share_of(10, 0) is None
    assert share_of(10, None) is None
    assert share_of(None, 100) is None


def test_count_from_percentage():
    assert count_from_percentage(40.0, 1000) == 400
    assert count_from_percentage(12.5, 100) == 13
    assert count_from_percentage(40.0, 0) is None
    assert count_from_percentage(None, 1000) is None
    assert count_from_percentage(40.0, None) is None
