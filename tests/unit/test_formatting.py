import pytest

from locationdata.common.formatting import EMPTY_DISPLAY, format_number, format_value


@pytest.mark.parametrize(
    ("value", "unit", "expected"),
    [
        (None, None, EMPTY_DISPLAY),
        (1234567.891, None, "1.234.567,89"),
        (12.5, "%", "12,5%"),
        (12.0, "%", "12%"),
        (-0.25, None, "-0,25"),
        (3200, "kWh", "3.200 kWh"),
        (0.004, None, "0"),
    ],
)
def test_format_number(value, unit, expected):
    assert format_number(value, unit) == expected


def test_format_value_handles_strings_and_numbers():
    assert format_value(None) == EMPTY_DISPLAY
    assert format_value("Utrecht") == "Utrecht"
    assert format_value("1234.5") == "1.234,5"
    assert format_value(0.1234) == "0,123"
    assert format_value(True) == "True"
