"""Streaming NMEA 0183 parsing for serial GPS receivers."""

from nmeastream.geodesy import cardinal, course_to, distance_between
from nmeastream.gnss import GNSSData, GNSSReader
from nmeastream.nmea import (
    MAX_AGE,
    CustomField,
    RawDegrees,
    format_sentence,
    parse_decimal,
    parse_degrees,
    validate_checksum,
)
from nmeastream.nmea_parser import VERSION as __version__
from nmeastream.nmea_parser import NMEAParser

__all__ = [
    "MAX_AGE",
    "CustomField",
    "GNSSData",
    "GNSSReader",
    "NMEAParser",
    "RawDegrees",
    "__version__",
    "cardinal",
    "course_to",
    "distance_between",
    "format_sentence",
    "parse_decimal",
    "parse_degrees",
    "validate_checksum",
]
