import pytest

from restaurant_api.search.errors import BadRequestError
from restaurant_api.search.params import (
    is_blank,
    parse_coordinates,
    parse_float,
    parse_max_distance,
    parse_positive_int,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 7),
        ("3", 3),
        (" 3 ", 3),
        ("3abc", 3),
        ("2.9", 2),
        ("abc", 7),
        ("", 7),
        ("0", 7),
        ("-5", 7),
    ],
)
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw, 7) == expected


def test_parse_float():
    assert parse_float("40.7128") == 40.7128
    assert parse_float("0") == 0.0
    assert parse_float("abc") is None
    assert parse_float("nan") is None
    assert parse_float("inf") is None
    assert parse_float(None) is None


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("  ")
    assert not is_blank("0")


class TestParseCoordinates:
    def test_valid(self):
        assert parse_coordinates("40.7128", "-74.0060") == (40.7128, -74.006)

    def test_zero_is_supplied(self):
        assert parse_coordinates("0", "0") == (0.0, 0.0)

    def test_missing_lat(self):
        with pytest.raises(BadRequestError, match="required"):
            parse_coordinates(None, "-74.0")

    def test_missing_check_precedes_invalid(self):
        with pytest.raises(BadRequestError, match="required"):
            parse_coordinates("", "abc")

    def test_non_numeric(self):
        with pytest.raises(BadRequestError, match="Invalid"):
            parse_coordinates("north", "-74.0")


def test_parse_max_distance():
    assert parse_max_distance(None, 10.0) == 10.0
    assert parse_max_distance("2.5", 10.0) == 2.5
    assert parse_max_distance("far", 10.0) == 10.0
    assert parse_max_distance("nan", 10.0) == 10.0
    assert parse_max_distance("inf", 10.0) == float("inf")


def test_parse_positive_int_beyond_int_conversion_limit():
    assert parse_positive_int("1" * 5000, 7) == 7
