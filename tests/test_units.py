import pytest

from loadplanner_core.units import format_float, format_percent, parse_bool, parse_float


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_strips_whitespace():
    assert parse_float("  10.0 ") == 10.0


def test_parse_float_rejects_empty():
    with pytest.raises(ValueError):
        parse_float("")


def test_format_float():
    assert format_float(589.8) == "589.80"
    assert format_float(0.296667, 4) == "0.2967"


def test_format_percent():
    assert format_percent(0.867) == "86.70%"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("false", False),
        ("no", False),
        ("", False),
        (" True ", True),
        ("on", True),
        (1, True),
        (0, False),
    ],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected
