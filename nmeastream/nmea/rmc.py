"""RMC sentence field layout.

RMC (Recommended Minimum Specific GNSS Data) carries position, velocity and
the UTC date and time.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |
           |      | |        | |         | |     |     |      +-- Magnetic variation (ignored)
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

Commit rules:
    Date and time commit on every valid sentence. Location, speed and course
    commit only when the status field reported an active fix, so a void
    sentence cannot overwrite the last good position.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmeastream.nmea_parser import NMEAParser

SENTENCE_NAMES = ("GPRMC", "GNRMC")

_ACTIVE = "A"


def stage_field(gps: "NMEAParser", index: int, text: str) -> bool | None:
    """Stage one non-empty RMC field into the parser's containers.

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
        return text[0] == _ACTIVE
    elif index == 3:
        gps.location.set_latitude(text)
    elif index == 4:
        gps.location.set_latitude_negative(text[0] == "S")
    elif index == 5:
        gps.location.set_longitude(text)
    elif index == 6:
        gps.location.set_longitude_negative(text[0] == "W")
    elif index == 7:
        gps.speed.set(text)
    elif index == 8:
        gps.course.set(text)
    elif index == 9:
        gps.date.set_date(text)
    return None


def commit(gps: "NMEAParser", has_fix: bool) -> None:
    """Publish the staged RMC values after a successful checksum."""
    gps.date.commit()
    gps.time.commit()
    if has_fix:
        gps.location.commit()
        gps.speed.commit()
        gps.course.commit()
