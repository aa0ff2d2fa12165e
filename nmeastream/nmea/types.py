"""Value types shared by the NMEA decoders and field containers.

Design Decisions:
    1. Sign carried separately: NMEA sends a coordinate magnitude and its
       hemisphere letter as two separate fields. Keeping ``negative`` apart
       from the magnitude lets the letter flip the sign of a staged angle
       regardless of which field arrives first, and keeps "negative zero"
       representable.

    2. Fixed-point fractions: ``billionths`` is an integer count of
       billionths of a degree, so decoding never touches floating point and
       two decodes of the same text always compare equal.

    3. Frozen: a hemisphere letter replaces the staged angle instead of
       mutating it, so the angle returned by a reader accessor is never
       changed afterwards and cannot be changed by the caller.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDegrees:
    """An angle decoded from NMEA ``DDDMM.MMMM`` text.

    Attributes:
        degrees: Whole degrees, always non-negative.

        billionths: Fractional part in billionths of a degree (the minutes
            converted to degrees), always non-negative.

        negative: True for the southern or western hemisphere.

    Example:
        >>> angle = parse_degrees("4807.038")
        >>> angle.degrees, angle.billionths
        (48, 117300000)
        >>> dataclasses.replace(angle, negative=True).value
        -48.1173
    """

    degrees: int = 0
    billionths: int = 0
    negative: bool = False

    @property
    def value(self) -> float:
        """Signed decimal degrees."""
        magnitude = self.degrees + self.billionths / 1_000_000_000.0
        return -magnitude if self.negative else magnitude
