import pytest

from hp_firmware.parsers import VersionParser


def test_parse_extracts_numeric_segments():
    assert VersionParser.parse("2.65") == (2, 65)
    assert VersionParser.parse("HPD8") == (8,)
    assert VersionParser.parse("") == ()
    assert VersionParser.parse(None) == ()


@pytest.mark.parametrize("left,right,expected", [
    ("2.65", "2.62", 1),
    ("2.62", "2.65", -1),
    ("1.98", "1.98", 0),
    ("2.6", "2.6.0", 0),
    ("10.0", "9.9", 1),
    ("HPD8", "HPD1", 1),
    ("HPD7", "HPD7", 0),
])
def test_compare(left, right, expected):
    assert VersionParser.compare(left, right) == expected


def test_is_valid():
    assert VersionParser.is_valid("2.18") is True
    assert VersionParser.is_valid("HPD1") is True
    assert VersionParser.is_valid("") is False
    assert VersionParser.is_valid("unknown") is False


def test_range_bounds_are_inclusive():
    assert VersionParser.is_in_range("1.98", "1.98", "2.62") is True
    assert VersionParser.is_in_range("2.62", "1.98", "2.62") is True
    assert VersionParser.is_in_range("2.63", "1.98", "2.62") is False
    assert VersionParser.is_in_range("1.97", "1.98", "2.62") is False


def test_floor_checks():
    assert VersionParser.is_below("2.17", "2.18") is True
    assert VersionParser.is_below("2.18", "2.18") is False
    assert VersionParser.is_at_least("2.65", "2.65") is True
    assert VersionParser.is_at_least("2.64", "2.65") is False
