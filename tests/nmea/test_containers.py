"""Tests for the staged/committed field containers."""

import dataclasses

import pytest

from nmeastream.nmea import containers
from nmeastream.nmea.containers import (
    HDOP,
    MAX_AGE,
    Altitude,
    Course,
    Date,
    FixedPoint,
    Integer,
    Location,
    Speed,
    Time,
)


@pytest.fixture
def clock(monkeypatch):
    """Replace the container clock with a settable millisecond counter."""
    now = {"ms": 1_000}
    monkeypatch.setattr(containers, "_millis", lambda: now["ms"])
    return now


class TestStagedField:
    """Commit protocol shared by every container."""

    def test_new_container_is_invalid_and_not_updated(self):
        quantity = FixedPoint()
        assert quantity.is_valid is False
        assert quantity.is_updated is False

    def test_staging_does_not_change_committed_value(self):
        quantity = FixedPoint()
        quantity.set("12.5")
        assert quantity.value() == 0
        assert quantity.is_valid is False

    def test_commit_publishes_staged_value(self):
        quantity = FixedPoint()
        quantity.set("12.5")
        quantity.commit()
        assert quantity.is_valid is True
        assert quantity.is_updated is True
        assert quantity.value() == 1250

    def test_reading_clears_updated(self):
        quantity = Integer()
        quantity.set("8")
        quantity.commit()
        assert quantity.value() == 8
        assert quantity.is_updated is False
        assert quantity.value() == 8
        assert quantity.is_valid is True

    def test_restaging_after_commit_keeps_committed_value(self):
        quantity = Integer()
        quantity.set("8")
        quantity.commit()
        quantity.set("12")
        assert quantity.value() == 8

    def test_age_is_sentinel_before_first_commit(self):
        assert Time().age() == MAX_AGE == 0xFFFFFFFF

    def test_age_counts_from_commit(self, clock):
        quantity = FixedPoint()
        quantity.commit()
        assert quantity.age() == 0
        clock["ms"] += 250
        assert quantity.age() == 250
        clock["ms"] += 250
        assert quantity.age() == 500

    def test_age_resets_on_next_commit(self, clock):
        quantity = FixedPoint()
        quantity.commit()
        clock["ms"] += 900
        quantity.commit()
        assert quantity.age() == 0


class TestLocation:
    """Tests for the Location container."""

    def test_commit_latitude_and_longitude(self):
        location = Location()
        location.set_latitude("4807.038")
        location.set_longitude("01131.000")
        location.set_longitude_negative(True)
        location.commit()
        assert location.lat() == pytest.approx(48.1173, abs=1e-5)
        assert location.lng() == pytest.approx(-11.5166667, abs=1e-6)

    def test_hemisphere_changes_only_staged_angle(self):
        location = Location()
        location.set_latitude("4807.038")
        location.commit()
        location.set_latitude_negative(True)
        assert location.lat() > 0

    def test_committed_angle_is_independent_of_later_staging(self):
        location = Location()
        location.set_latitude("4807.038")
        location.commit()
        raw = location.raw_lat()
        location.set_latitude_negative(True)
        location.commit()
        assert raw.negative is False
        assert location.raw_lat().negative is True

    def test_committed_angle_cannot_be_changed_through_accessor(self):
        location = Location()
        location.set_latitude("4807.038")
        location.commit()
        raw = location.raw_lat()
        with pytest.raises(dataclasses.FrozenInstanceError):
            raw.degrees = 0
        assert location.lat() == pytest.approx(48.1173, abs=1e-6)

    def test_hemisphere_after_commit_leaves_returned_angle_alone(self):
        location = Location()
        location.set_longitude("01131.000")
        location.commit()
        raw = location.raw_lng()
        location.set_longitude_negative(True)
        location.commit()
        assert raw.negative is False
        assert location.lng() < 0

    def test_raw_accessors_clear_updated(self):
        location = Location()
        location.commit()
        location.raw_lng()
        assert location.is_updated is False


class TestDateAndTime:
    """Tests for the Date and Time containers."""

    def test_date_parts(self):
        date = Date()
        date.set_date("230394")
        date.commit()
        assert date.value() == 230394
        assert date.day() == 23
        assert date.month() == 3
        assert date.year() == 2094

    def test_time_parts(self):
        time = Time()
        time.set_time("123519.47")
        time.commit()
        assert time.value() == 12351947
        assert time.hour() == 12
        assert time.minute() == 35
        assert time.second() == 19
        assert time.centisecond() == 47

    def test_time_part_accessor_clears_updated(self):
        time = Time()
        time.commit()
        time.hour()
        assert time.is_updated is False


class TestUnitViews:
    """Unit conversions layered over FixedPoint."""

    def test_speed_units(self):
        speed = Speed()
        speed.set("022.4")
        speed.commit()
        assert speed.knots() == pytest.approx(22.4)
        assert speed.kmph() == pytest.approx(22.4 * 1.852)
        assert speed.mps() == pytest.approx(22.4 * 0.51444444)
        assert speed.mph() == pytest.approx(22.4 * 1.15077945)

    def test_course(self):
        course = Course()
        course.set("084.4")
        course.commit()
        assert course.deg() == pytest.approx(84.4)

    def test_altitude_units(self):
        altitude = Altitude()
        altitude.set("545.4")
        altitude.commit()
        assert altitude.meters() == pytest.approx(545.4)
        assert altitude.kilometers() == pytest.approx(0.5454)
        assert altitude.feet() == pytest.approx(545.4 * 3.2808399)
        assert altitude.miles() == pytest.approx(545.4 * 0.00062137112)

    def test_hdop(self):
        hdop = HDOP()
        hdop.set("0.9")
        hdop.commit()
        assert hdop.hdop() == pytest.approx(0.9)

    def test_unit_accessor_clears_updated(self):
        speed = Speed()
        speed.commit()
        assert speed.is_updated is True
        speed.knots()
        assert speed.is_updated is False

    def test_view_shares_storage_with_quantity(self):
        quantity = FixedPoint()
        course = Course(quantity)
        quantity.set("90")
        quantity.commit()
        assert course.is_valid is True
        assert course.deg() == pytest.approx(90.0)
