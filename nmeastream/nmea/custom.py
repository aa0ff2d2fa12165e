"""Caller-registered taps on arbitrary NMEA fields.

The parser natively decodes only RMC and GGA. Any other field, from any
sentence, can be observed by registering a ``CustomField`` for a
(sentence name, field index) pair. Registered fields take part in the same
checksum-gated commit protocol as the native containers.

Registry layout:
    Entries are kept sorted by sentence name, then by field index, so all
    entries for one sentence form a contiguous run in ascending field order:

        [("GPGSA", 3), ("GPGSA", 15), ("GPGSV", 1), ("GPGSV", 4)]
          ^-- run for "GPGSA" --^      ^-- run for "GPGSV" --^

    When a sentence starts the parser locates the start of its run once and
    then walks only that run for every field of the sentence.
"""

import bisect
import itertools
from collections.abc import Iterator

from nmeastream.nmea.containers import StagedField

# Longest custom field text kept; longer fields are truncated.
MAX_FIELD_SIZE = 15


def _sort_key(field: "CustomField") -> tuple[str, int]:
    return field.sentence_name, field.field_index


def _name_key(field: "CustomField") -> str:
    return field.sentence_name


class CustomField(StagedField):
    """Raw text of one field of one sentence type.

    Args:
        sentence_name: Sentence name including the talker ID, e.g. "GPGSA".
        field_index: 1-based index of the field after the sentence name.

    Example:
        >>> mode = parser.register_custom_field("GPGSA", 2)
        >>> parser.encode_all(format_sentence("GPGSA,A,3,04,05"))
        1
        >>> mode.value()
        '3'
    """

    def __init__(self, sentence_name: str, field_index: int) -> None:
        super().__init__()
        self._sentence_name = sentence_name
        self._field_index = field_index
        self._text = ""
        self._staged_text = ""

    @property
    def sentence_name(self) -> str:
        return self._sentence_name

    @property
    def field_index(self) -> int:
        return self._field_index

    def value(self) -> str:
        self._updated = False
        return self._text

    def set(self, text: str) -> None:
        self._staged_text = text[:MAX_FIELD_SIZE]

    def commit(self) -> None:
        self._text = self._staged_text
        self._mark_committed()

    def __repr__(self) -> str:
        return f"CustomField({self._sentence_name!r}, {self._field_index})"


class CustomFieldRegistry:
    """Sorted collection of ``CustomField`` entries."""

    def __init__(self) -> None:
        self._fields: list[CustomField] = []

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[CustomField]:
        return iter(self._fields)

    def register(self, field: CustomField) -> None:
        """Insert ``field`` keeping the (name, index) order.

        A field whose key equals an existing entry is placed after it.
        """
        bisect.insort_right(self._fields, field, key=_sort_key)

    def first_candidate(self, sentence_name: str) -> int | None:
        """Position of the first entry for ``sentence_name``, or None."""
        position = bisect.bisect_left(self._fields, sentence_name, key=_name_key)
        if (
            position < len(self._fields)
            and self._fields[position].sentence_name == sentence_name
        ):
            return position
        return None

    def run(self, start: int | None) -> Iterator[CustomField]:
        """Yield the contiguous entries sharing the name of entry ``start``."""
        if start is None:
            return
        sentence_name = self._fields[start].sentence_name
        for field in itertools.islice(self._fields, start, None):
            if field.sentence_name != sentence_name:
                return
            yield field
