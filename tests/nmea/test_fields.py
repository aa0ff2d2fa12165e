"""Tests for the fixed-point field decoders."""

import dataclasses

import pytest

from nmeastream.nmea.fields import parse_decimal, parse_degrees, parse_integer
from nmeastream.nmea.types import RawDegrees


class TestParseDecimal:
    """Tests for parse_decimal function."""

    def test_third_fraction_digit_ignored(self):
        assert parse_decimal("123.456") == 12345

    def test_negative_integer(self):
        assert parse_decimal("-5") == -500

    def test_single_fraction_digit(self):
        assert parse_decimal("0.6") == 60

    def test_two_fraction_digits(self):
        assert parse_decimal("545.42") == 54542

    def test_negative_fraction(self):
        assert parse_decimal("-0.25") == -25

    def test_leading_zeros(self):
        assert parse_decimal("022.4") == 2240

    def test_trailing_point(self):
        assert parse_decimal("7.") == 700

    def test_empty_is_zero(self):
        assert parse_decimal("") == 0

    def test_garbage_is_zero(self):
        assert parse_decimal("abc") == 0

    def test_trailing_garbage_ignored(self):
        assert parse_decimal("12.3x") == 1230

    def test_time_of_day(self):
        assert parse_decimal("123519.00") == 12351900


class TestParseInteger:
    """Tests for parse_integer function."""

    def test_leading_zero(self):
        assert parse_integer("08") == 8

    def test_stops_at_non_digit(self):
        assert parse_integer("230394xyz") == 230394

    def test_empty_is_zero(self):
        assert parse_integer("") == 0

    def test_signed(self):
        assert parse_integer("-12") == -12


class TestParseDegrees:
    """Tests for parse_degrees function."""

    def test_latitude(self):
        assert parse_degrees("4807.038") == RawDegrees(
            degrees=48, billionths=117300000, negative=False
        )

    def test_latitude_decimal_value(self):
        assert parse_degrees("4807.038").value == pytest.approx(48.1173, abs=1e-5)

    def test_longitude_with_leading_zero(self):
        angle = parse_degrees("01131.000")
        assert angle.degrees == 11
        assert angle.billionths == 516666667

    def test_high_precision(self):
        angle = parse_degrees("4807.03812345")
        assert angle.billionths == 117302057
        assert angle.value == pytest.approx(48.117302057, abs=1e-9)

    def test_digits_beyond_precision_contribute_nothing(self):
        assert parse_degrees("4807.0381234") == parse_degrees("4807.03812349999")

    def test_never_negative(self):
        assert parse_degrees("4807.038").negative is False

    def test_minutes_only(self):
        angle = parse_degrees("12")
        assert angle.degrees == 0
        assert angle.value == pytest.approx(0.2)

    def test_empty_is_zero(self):
        assert parse_degrees("").value == pytest.approx(0.0)


class TestRawDegrees:
    """Tests for the RawDegrees value type."""

    def test_negative_flag_applies_sign(self):
        angle = RawDegrees(degrees=33, billionths=935383333, negative=True)
        assert angle.value == pytest.approx(-33.935383333)

    def test_negative_zero_is_representable(self):
        angle = RawDegrees(negative=True)
        assert angle.negative is True
        assert angle.value == 0.0

    def test_is_immutable(self):
        angle = parse_degrees("4807.038")
        with pytest.raises(dataclasses.FrozenInstanceError):
            angle.negative = True
