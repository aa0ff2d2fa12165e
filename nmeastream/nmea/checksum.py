"""NMEA checksum helpers.

NMEA 0183 sentences carry a simple XOR checksum over every character between
'$' and '*' (exclusive), written as two hexadecimal digits after the '*'.

Example sentence structure:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
     ^                      checksum content                      ^ ^^
     start                                                 delimiter checksum

The streaming parser folds characters into the checksum one at a time with
``xor_character`` and decodes the trailing digits with
``decode_checksum_field``. The whole-sentence helpers are for callers that
already hold a complete line, such as tests and simulators.
"""


def xor_character(parity: int, character: str) -> int:
    """Fold one character into a running XOR checksum."""
    return parity ^ (ord(character) & 0xFF)


def _hex_digit_value(digit: str) -> int:
    """Decode one checksum digit the lenient way.

    Upper- and lower-case hex letters decode normally. Anything else is
    treated as a decimal digit, so garbage produces a value that simply
    fails to match instead of raising.
    """
    if "A" <= digit <= "F":
        return ord(digit) - ord("A") + 10
    if "a" <= digit <= "f":
        return ord(digit) - ord("a") + 10
    return ord(digit) - ord("0")


def decode_checksum_field(text: str) -> int:
    """Decode the two-digit checksum field text into a byte value.

    Missing digits decode as NUL, and the result is masked to 8 bits, so a
    truncated or corrupt field never raises.

    Example:
        >>> decode_checksum_field("6A")
        106
    """
    high = text[0] if len(text) > 0 else "\0"
    low = text[1] if len(text) > 1 else "\0"
    return (16 * _hex_digit_value(high) + _hex_digit_value(low)) & 0xFF


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of the text between '$' and '*'.

    Args:
        content: The sentence body, without the delimiters.

    Returns:
        Integer checksum value (0-255).
    """
    result = 0
    for character in content:
        result = xor_character(result, character)
    return result


def format_sentence(content: str) -> str:
    """Wrap a sentence body with '$', '*', its checksum and CR LF.

    Example:
        >>> format_sentence("GPGSA,A,3,04,05")
        '$GPGSA,A,3,04,05*31\\r\\n'
    """
    return f"${content}*{calculate_checksum(content):02X}\r\n"


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Split ``$<content>*<checksum>`` into its content and checksum text.

    Returns:
        ``(content, checksum_hex)``, or None when a delimiter is missing or
        the checksum is shorter than two characters.
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    end = sentence.index("*")
    content = sentence[1:end]
    provided = sentence[end + 1 : end + 3]

    if len(provided) != 2:
        return None

    return content, provided


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of a complete NMEA sentence.

    Args:
        sentence: Complete sentence including '$', '*', and checksum.
                  Trailing whitespace and line endings are ignored.

    Returns:
        True if the checksum is well formed and matches, False otherwise.

    Example:
        >>> validate_checksum("$GPGSA,A,3,04,05*31")
        True
        >>> validate_checksum("$GPGSA,A,3,04,05*FF")
        False
    """
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return False

    content, provided = parts

    try:
        return calculate_checksum(content) == int(provided, 16)
    except ValueError:
        return False
