"""Streaming NMEA 0183 parser.

``NMEAParser`` consumes a GPS receiver's output one character at a time and
keeps the latest validated position, velocity, date and time in field
containers. It never buffers more than the field currently being read.

Parsing strategy:
    '$'                starts a sentence and resets the per-sentence state.
    ',' CR LF '*'      end the current field. The field text is staged into
                       the matching container right away; '*' additionally
                       marks the next field as the checksum.
    anything else      is appended to the field buffer (truncated at
                       ``MAX_TERM_SIZE - 1`` characters) and folded into the
                       running XOR checksum.

    When the checksum field ends and matches, every container the sentence
    touched commits at once, followed by the custom fields registered for
    that sentence name. A mismatch commits nothing, so readers only ever see
    values from sentences that passed their checksum.

Example::

    gps = NMEAParser()
    for byte in serial_port.read(64):
        if gps.encode(byte) and gps.location.is_updated:
            print(gps.location.lat(), gps.location.lng())
"""

import logging
from collections.abc import Iterable
from types import ModuleType

from nmeastream.nmea import gga, rmc
from nmeastream.nmea.checksum import decode_checksum_field, xor_character
from nmeastream.nmea.containers import (
    HDOP,
    Altitude,
    Course,
    Date,
    Integer,
    Location,
    Speed,
    Time,
)
from nmeastream.nmea.custom import CustomField, CustomFieldRegistry

__all__ = ["MAX_TERM_SIZE", "VERSION", "NMEAParser"]

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Field buffer capacity including a terminator slot; at most
# MAX_TERM_SIZE - 1 characters of a field are kept.
MAX_TERM_SIZE = 15

_SENTENCE_START = "$"
_FIELD_SEPARATOR = ","
_CHECKSUM_DELIMITER = "*"
_FIELD_TERMINATORS = (_FIELD_SEPARATOR, "\r", "\n", _CHECKSUM_DELIMITER)

_LAYOUTS: dict[str, ModuleType] = {
    **{name: rmc for name in rmc.SENTENCE_NAMES},
    **{name: gga for name in gga.SENTENCE_NAMES},
}


class _SentenceState:
    """Transient state of the sentence being parsed."""

    def __init__(self) -> None:
        self.term: list[str] = []
        self.parity = 0
        self.is_checksum_term = False
        self.term_number = 0
        self.layout: ModuleType | None = None
        self.sentence_name = ""
        self.has_fix = False
        self.custom_start: int | None = None

    def reset(self) -> None:
        self.term.clear()
        self.parity = 0
        self.is_checksum_term = False
        self.term_number = 0
        self.layout = None
        self.sentence_name = ""
        self.has_fix = False
        self.custom_start = None


class NMEAParser:
    """Character-at-a-time NMEA parser with checksum-gated commits.

    Natively decodes RMC and GGA sentences from the GP and GN talkers. Any
    other field can be observed with ``register_custom_field``.

    Attributes:
        location: Latitude and longitude (RMC, GGA).
        date: UTC date (RMC).
        time: UTC time (RMC, GGA).
        speed: Speed over ground (RMC).
        course: Course over ground (RMC).
        altitude: Altitude above mean sea level (GGA).
        satellites: Number of satellites in use (GGA).
        hdop: Horizontal dilution of precision (GGA).

    The parser is not thread-safe; feed it from one thread and read the
    containers between calls to ``encode``.
    """

    def __init__(self) -> None:
        self.location = Location()
        self.date = Date()
        self.time = Time()
        self.speed = Speed()
        self.course = Course()
        self.altitude = Altitude()
        self.satellites = Integer()
        self.hdop = HDOP()

        self._state = _SentenceState()
        self._custom_fields = CustomFieldRegistry()

        self._encoded_char_count = 0
        self._sentences_with_fix_count = 0
        self._failed_checksum_count = 0
        self._passed_checksum_count = 0

    # --- feeding ---------------------------------------------------------------

    def encode(self, character: str | int) -> bool:
        """Process one character received from the GPS.

        Args:
            character: A one-character string or a byte value.

        Returns:
            True exactly when this character completed the checksum field of
            a sentence whose checksum matched.

        Raises:
            TypeError: If ``character`` is neither an ``int`` nor a
                one-character ``str``. Feed ``bytes`` through ``encode_all``.
        """
        if isinstance(character, int):
            character = chr(character)
        elif not isinstance(character, str) or len(character) != 1:
            raise TypeError(
                f"expected a one-character str or an int, got {character!r}"
            )
        self._encoded_char_count += 1
        state = self._state

        if character in _FIELD_TERMINATORS:
            if character == _FIELD_SEPARATOR:
                state.parity = xor_character(state.parity, character)
            is_valid_sentence = self._end_of_term("".join(state.term))
            state.term_number += 1
            state.term.clear()
            state.is_checksum_term = character == _CHECKSUM_DELIMITER
            return is_valid_sentence

        if character == _SENTENCE_START:
            state.reset()
            return False

        if len(state.term) < MAX_TERM_SIZE - 1:
            state.term.append(character)
        if not state.is_checksum_term:
            state.parity = xor_character(state.parity, character)
        return False

    feed = encode

    def __lshift__(self, character: str | int) -> "NMEAParser":
        self.encode(character)
        return self

    def encode_all(self, data: Iterable[str | int]) -> int:
        """Feed every character of ``data``.

        Args:
            data: A ``str``, ``bytes`` or any iterable of characters.

        Returns:
            Number of sentences that passed their checksum.
        """
        return sum(1 for character in data if self.encode(character))

    # --- custom fields ------------------------------------------------------------

    def register_custom_field(self, sentence_name: str, field_index: int) -> CustomField:
        """Start capturing field ``field_index`` of every ``sentence_name``.

        Args:
            sentence_name: Full sentence name including the talker ID,
                e.g. "GPGSA".
            field_index: 1-based index of the field after the sentence name.

        Returns:
            The ``CustomField`` handle to read the captured text from.

        Raises:
            ValueError: If the name is empty or the index is not positive.
        """
        if not sentence_name:
            raise ValueError("sentence_name must not be empty.")
        if field_index < 1:
            raise ValueError(f"field_index must be >= 1, got {field_index}.")

        field = CustomField(sentence_name, field_index)
        self._custom_fields.register(field)
        # Positions after the insertion point have shifted
        if self._state.sentence_name:
            self._state.custom_start = self._custom_fields.first_candidate(
                self._state.sentence_name
            )
        logger.debug("Registered custom field %s[%d]", sentence_name, field_index)
        return field

    # --- statistics -----------------------------------------------------------------

    @property
    def is_updated(self) -> bool:
        """True if any native container changed since it was last read."""
        return (
            self.location.is_updated
            or self.date.is_updated
            or self.time.is_updated
            or self.speed.is_updated
            or self.course.is_updated
            or self.altitude.is_updated
            or self.satellites.is_updated
            or self.hdop.is_updated
        )

    @property
    def chars_processed(self) -> int:
        return self._encoded_char_count

    @property
    def sentences_with_fix(self) -> int:
        return self._sentences_with_fix_count

    @property
    def failed_checksum(self) -> int:
        return self._failed_checksum_count

    @property
    def passed_checksum(self) -> int:
        return self._passed_checksum_count

    @staticmethod
    def library_version() -> str:
        return VERSION

    # --- field handling -------------------------------------------------------------

    def _end_of_term(self, term: str) -> bool:
        """Handle a just-completed field.

        Returns:
            True if this was the checksum field and it matched.
        """
        state = self._state

        if state.is_checksum_term:
            return self._check_sentence(term)

        if state.term_number == 0:
            state.layout = _LAYOUTS.get(term)
            state.sentence_name = term
            state.custom_start = self._custom_fields.first_candidate(term)
            return False

        if state.layout is not None and term:
            has_fix = state.layout.stage_field(self, state.term_number, term)
            if has_fix is not None:
                state.has_fix = has_fix

        for field in self._custom_fields.run(state.custom_start):
            if field.field_index > state.term_number:
                break
            if field.field_index == state.term_number:
                field.set(term)

        return False

    def _check_sentence(self, term: str) -> bool:
        state = self._state
        checksum = decode_checksum_field(term)
        if checksum != state.parity:
            self._failed_checksum_count += 1
            logger.debug(
                "Checksum mismatch in %s: computed %02X, received %r",
                state.sentence_name or "<unnamed>",
                state.parity,
                term,
            )
            return False

        self._passed_checksum_count += 1
        if state.has_fix:
            self._sentences_with_fix_count += 1

        if state.layout is not None:
            state.layout.commit(self, state.has_fix)

        for field in self._custom_fields.run(state.custom_start):
            field.commit()
        return True
