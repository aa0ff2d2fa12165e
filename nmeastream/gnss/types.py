"""GNSS snapshot type built from a parser's committed values."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmeastream.nmea_parser import NMEAParser


@dataclass
class GNSSData:
    """A snapshot of everything an ``NMEAParser`` has committed so far.

    Values come from different sentences (RMC supplies speed, course and
    date; GGA supplies altitude, satellites and HDOP), each from the most
    recent sentence of its kind that passed the checksum. A field is None
    until its first commit.

    Attributes:
        latitude_degrees: Latitude in decimal degrees, positive=North.
        longitude_degrees: Longitude in decimal degrees, positive=East.
        altitude_meters: Altitude above mean sea level in meters.
        speed_meters_per_second: Ground speed in m/s, converted from knots.
        course_degrees: Course over ground relative to true north.
        num_satellites: Satellites used in the fix.
        horizontal_dilution_of_precision: HDOP; lower is better.
        utc_time: UTC time as ``HHMMSS.cc`` text.
        utc_date: UTC date as ``DDMMYY`` text.
        valid: True once a position has been committed.

    Example:
        >>> with GNSSReader() as gnss:
        ...     data = gnss.read()
        >>> data.latitude_degrees
        48.1173
        >>> data.utc_time
        '123519.00'
    """

    latitude_degrees: float | None
    longitude_degrees: float | None
    altitude_meters: float | None
    speed_meters_per_second: float | None
    course_degrees: float | None
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    utc_time: str | None
    utc_date: str | None
    valid: bool

    @classmethod
    def from_parser(cls, gps: "NMEAParser") -> "GNSSData":
        """Read every valid container of ``gps``.

        Reading marks the containers as no longer updated.
        """
        location = gps.location
        utc_time = None
        if gps.time.is_valid:
            utc_time = (
                f"{gps.time.hour():02d}{gps.time.minute():02d}"
                f"{gps.time.second():02d}.{gps.time.centisecond():02d}"
            )
        return cls(
            latitude_degrees=location.lat() if location.is_valid else None,
            longitude_degrees=location.lng() if location.is_valid else None,
            altitude_meters=gps.altitude.meters() if gps.altitude.is_valid else None,
            speed_meters_per_second=gps.speed.mps() if gps.speed.is_valid else None,
            course_degrees=gps.course.deg() if gps.course.is_valid else None,
            num_satellites=(
                gps.satellites.value() if gps.satellites.is_valid else None
            ),
            horizontal_dilution_of_precision=(
                gps.hdop.hdop() if gps.hdop.is_valid else None
            ),
            utc_time=utc_time,
            utc_date=f"{gps.date.value():06d}" if gps.date.is_valid else None,
            valid=location.is_valid,
        )
