"""GGA sentence field layout.

GGA (Global Positioning System Fix Data) provides the position fix together
with fix quality, satellite count, HDOP and altitude.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |     |
           |      |        | |         | | |  |   |     | |     +-- DGPS info (ignored)
           |      |        | |         | | |  |   |     | +-- Geoid height (ignored)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL (meters)
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0 = invalid)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Commit rules:
    Time, satellite count and HDOP commit on every valid sentence. Location
    and altitude commit only when the fix quality digit is above '0'.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmeastream.nmea_parser import NMEAParser

SENTENCE_NAMES = ("GPGGA", "GNGGA")


def stage_field(gps: "NMEAParser", index: int, text: str) -> bool | None:
    """Stage one non-empty GGA field into the parser's containers.

    Args:
        gps: Parser owning the containers.
        index: Field index within the sentence (1 = time).
        text: Field text, never empty.

    Returns:
        The fix indication if this field carries one, otherwise None.
    """
    if index == 1:
        gps.time.set_time(text)
    elif index == 2:
        gps.location.set_latitude(text)
    elif index == 3:
        gps.location.set_latitude_negative(text[0] == "S")
    elif index == 4:
        gps.location.set_longitude(text)
    elif index == 5:
        gps.location.set_longitude_negative(text[0] == "W")
    elif index == 6:
        # Fix quality: '0' = invalid, anything above is some kind of fix
        return text[0] > "0"
    elif index == 7:
        gps.satellites.set(text)
    elif index == 8:
        gps.hdop.set(text)
    elif index == 9:
        gps.altitude.set(text)
    return None


def commit(gps: "NMEAParser", has_fix: bool) -> None:
    """Publish the staged GGA values after a successful checksum."""
    gps.time.commit()
    if has_fix:
        gps.location.commit()
        gps.altitude.commit()
    gps.satellites.commit()
    gps.hdop.commit()
