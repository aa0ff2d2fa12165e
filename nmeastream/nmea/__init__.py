"""NMEA 0183 field decoders, containers and sentence layouts."""

from nmeastream.nmea.checksum import format_sentence, validate_checksum
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
from nmeastream.nmea.custom import MAX_FIELD_SIZE, CustomField
from nmeastream.nmea.fields import parse_decimal, parse_degrees
from nmeastream.nmea.types import RawDegrees

__all__ = [
    "HDOP",
    "MAX_AGE",
    "MAX_FIELD_SIZE",
    "Altitude",
    "Course",
    "CustomField",
    "Date",
    "FixedPoint",
    "Integer",
    "Location",
    "RawDegrees",
    "Speed",
    "Time",
    "format_sentence",
    "parse_decimal",
    "parse_degrees",
    "validate_checksum",
]
