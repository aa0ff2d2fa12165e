"""NMEA field decoding utilities.

This module turns the text of a single NMEA field into fixed-point numbers.
Both decoders are deliberately permissive: they never raise, and malformed
text yields a best-effort value (usually zero) so that one bad field cannot
wedge the streaming parser. The checksum, not the decoder, decides whether
a value is ever published.
"""

import re

from nmeastream.nmea.types import RawDegrees

# Mirrors C atol(): optional leading whitespace, optional sign, then digits.
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_DIGITS = "0123456789"

# Fraction digits of a minutes value are accumulated in ten-millionths of a
# minute, so the first fraction digit is worth 10**6.
_MINUTES_SCALE = 10_000_000


def parse_integer(text: str) -> int:
    """Parse the leading integer of a field, returning 0 if there is none.

    Example:
        >>> parse_integer("08")
        8
        >>> parse_integer("12abc")
        12
        >>> parse_integer("")
        0
    """
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def _skip_digits(text: str, position: int) -> int:
    while position < len(text) and text[position] in _DIGITS:
        position += 1
    return position


def _is_digit_at(text: str, position: int) -> bool:
    return position < len(text) and text[position] in _DIGITS


def parse_decimal(text: str) -> int:
    """Parse a signed decimal field into a fixed-point integer scaled by 100.

    Only the first two fraction digits contribute; later ones are ignored
    rather than rounded.

    Args:
        text: Field text such as ``"545.4"`` or ``"-12.75"``.

    Returns:
        The value multiplied by 100 and truncated to an integer.

    Example:
        >>> parse_decimal("123.456")
        12345
        >>> parse_decimal("-5")
        -500
        >>> parse_decimal("0.6")
        60
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    result = 100 * parse_integer(text)
    position = _skip_digits(text, 0)
    if text[position : position + 1] == "." and _is_digit_at(text, position + 1):
        result += 10 * int(text[position + 1])
        if _is_digit_at(text, position + 2):
            result += int(text[position + 2])

    return -result if negative else result


def parse_degrees(text: str) -> RawDegrees:
    """Parse an NMEA ``DDDMM.MMMM`` coordinate magnitude.

    The two digits left of the decimal point are whole minutes and anything
    before them is degrees. Fraction digits are accumulated with a shrinking
    power-of-ten multiplier, so precision beyond ten-millionths of a minute
    is silently dropped. Minutes are converted to billionths of a degree
    with the exact factor 5/3 (``1e9 / 60 / 1e7``), rounding up by one
    before the integer division.

    Args:
        text: Coordinate text such as ``"4807.038"`` or ``"01131.000"``.

    Returns:
        A non-negative ``RawDegrees``; the hemisphere field sets the sign.

    Example:
        >>> parse_degrees("4807.038")
        RawDegrees(degrees=48, billionths=117300000, negative=False)
    """
    left_of_decimal = abs(parse_integer(text))
    minutes = left_of_decimal % 100
    multiplier = _MINUTES_SCALE
    ten_millionths_of_minutes = minutes * multiplier

    position = _skip_digits(text, 0)
    if text[position : position + 1] == ".":
        position += 1
        while _is_digit_at(text, position):
            multiplier //= 10
            ten_millionths_of_minutes += int(text[position]) * multiplier
            position += 1

    return RawDegrees(
        degrees=left_of_decimal // 100,
        billionths=(5 * ten_millionths_of_minutes + 1) // 3,
        negative=False,
    )
