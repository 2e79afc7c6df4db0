"""
Tests for coercion.py module.
"""
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from kvindex.core.types import FieldType, is_blank, to_number, to_segment


class TestToNumber:
    """Test cases for numeric coercion."""

    @pytest.mark.parametrize("value, expected", [
        (None, 0.0),
        (True, 1.0),
        (False, 0.0),
        (3, 3.0),
        (2.5, 2.5),
        (Decimal("1.25"), 1.25),
        ("12.5kg", 12.5),
        ("  -4", -4.0),
        ("1e3", 1000.0),
        ("abc", 0.0),
        ("", 0.0),
    ])
    def test_scalars(self, value, expected):
        assert to_number(value) == expected

    def test_aware_datetime(self):
        moment = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert to_number(moment) == moment.timestamp()

    def test_naive_datetime_is_utc(self):
        naive = datetime(2024, 5, 1, 12, 30)
        aware = naive.replace(tzinfo=timezone.utc)
        assert to_number(naive) == aware.timestamp()

    def test_date(self):
        expected = datetime(2024, 5, 1, tzinfo=timezone.utc).timestamp()
        assert to_number(date(2024, 5, 1)) == expected

    def test_unconvertible_object(self):
        assert to_number(object()) == 0.0


class TestToSegment:
    """Test cases for hash segment formatting."""

    def test_none_is_empty(self):
        assert to_segment(None) == ""

    def test_bools(self):
        assert to_segment(True) == "true"
        assert to_segment(False) == "false"

    def test_other_values(self):
        assert to_segment("Josh") == "Josh"
        assert to_segment(42) == "42"
        assert to_segment(1.5) == "1.5"


class TestIsBlank:
    """Test cases for blank detection."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], set(), {}])
    def test_blank(self, value):
        assert is_blank(value) is True

    @pytest.mark.parametrize("value", ["Josh.", ".", 0, 0.0, False, ["x"]])
    def test_not_blank(self, value):
        assert is_blank(value) is False


class TestFieldType:
    """Test cases for FieldType enum."""

    def test_numeric_types(self):
        assert FieldType.INTEGER.is_numeric()
        assert FieldType.NUMBER.is_numeric()
        assert FieldType.DATETIME.is_numeric()
        assert not FieldType.STRING.is_numeric()
        assert not FieldType.SET.is_numeric()
