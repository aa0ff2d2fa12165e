"""Field containers with a staged/committed update protocol.

Every quantity the parser exposes lives in a container that keeps two
copies of its value:

    staged     - assembled from the sentence currently being parsed; never
                 visible to readers.
    committed  - the value from the last sentence whose checksum passed.

The parser stages values with the ``set*`` methods as fields arrive and
calls ``commit()`` only after the checksum validates, so a reader polling
between characters always sees whole sentences. A sentence that fails its
checksum simply never commits; its staged values are overwritten later.

Reading a value clears ``is_updated``. The flag therefore answers "has this
changed since I last looked?", not "was this in the last sentence?".
"""

import dataclasses
import time

from nmeastream import units
from nmeastream.nmea.fields import parse_decimal, parse_degrees, parse_integer
from nmeastream.nmea.types import RawDegrees

# Age reported for a container that has never committed.
MAX_AGE = 0xFFFFFFFF


def _millis() -> int:
    """Milliseconds from a monotonic clock."""
    return int(time.monotonic() * 1000)


class StagedField:
    """Validity, freshness and age bookkeeping shared by all containers."""

    def __init__(self) -> None:
        self._valid = False
        self._updated = False
        self._last_commit_time = 0

    @property
    def is_valid(self) -> bool:
        """True once at least one value has been committed."""
        return self._valid

    @property
    def is_updated(self) -> bool:
        """True if a commit happened since the value was last read."""
        return self._updated

    def age(self) -> int:
        """Milliseconds since the last commit, or ``MAX_AGE`` if never."""
        if not self._valid:
            return MAX_AGE
        return _millis() - self._last_commit_time

    def _mark_committed(self) -> None:
        self._last_commit_time = _millis()
        self._valid = True
        self._updated = True


class Location(StagedField):
    """Latitude/longitude pair.

    Hemisphere letters only ever flip the sign of the *staged* angle, so a
    missing or out-of-order hemisphere field cannot corrupt the committed
    position.
    """

    def __init__(self) -> None:
        super().__init__()
        self._raw_lat = RawDegrees()
        self._raw_lng = RawDegrees()
        self._staged_lat = RawDegrees()
        self._staged_lng = RawDegrees()

    def raw_lat(self) -> RawDegrees:
        self._updated = False
        return self._raw_lat

    def raw_lng(self) -> RawDegrees:
        self._updated = False
        return self._raw_lng

    def lat(self) -> float:
        """Latitude in signed decimal degrees, positive north."""
        self._updated = False
        return self._raw_lat.value

    def lng(self) -> float:
        """Longitude in signed decimal degrees, positive east."""
        self._updated = False
        return self._raw_lng.value

    def set_latitude(self, text: str) -> None:
        self._staged_lat = parse_degrees(text)

    def set_longitude(self, text: str) -> None:
        self._staged_lng = parse_degrees(text)

    def set_latitude_negative(self, negative: bool) -> None:
        self._staged_lat = dataclasses.replace(self._staged_lat, negative=negative)

    def set_longitude_negative(self, negative: bool) -> None:
        self._staged_lng = dataclasses.replace(self._staged_lng, negative=negative)

    def commit(self) -> None:
        self._raw_lat = self._staged_lat
        self._raw_lng = self._staged_lng
        self._mark_committed()


class Date(StagedField):
    """UTC date held as the ``DDMMYY`` integer sent on the wire."""

    def __init__(self) -> None:
        super().__init__()
        self._date = 0
        self._staged_date = 0

    def value(self) -> int:
        self._updated = False
        return self._date

    def year(self) -> int:
        self._updated = False
        return self._date % 100 + 2000

    def month(self) -> int:
        self._updated = False
        return (self._date // 100) % 100

    def day(self) -> int:
        self._updated = False
        return self._date // 10000

    def set_date(self, text: str) -> None:
        self._staged_date = parse_integer(text)

    def commit(self) -> None:
        self._date = self._staged_date
        self._mark_committed()


class Time(StagedField):
    """UTC time held as an ``HHMMSSCC`` integer (centiseconds last)."""

    def __init__(self) -> None:
        super().__init__()
        self._time = 0
        self._staged_time = 0

    def value(self) -> int:
        self._updated = False
        return self._time

    def hour(self) -> int:
        self._updated = False
        return self._time // 1000000

    def minute(self) -> int:
        self._updated = False
        return (self._time // 10000) % 100

    def second(self) -> int:
        self._updated = False
        return (self._time // 100) % 100

    def centisecond(self) -> int:
        self._updated = False
        return self._time % 100

    def set_time(self, text: str) -> None:
        self._staged_time = parse_decimal(text)

    def commit(self) -> None:
        self._time = self._staged_time
        self._mark_committed()


class FixedPoint(StagedField):
    """Generic fixed-point quantity, stored as the value times 100.

    For example ``"1234.56"`` is held as ``123456`` and ``"-1234.56"`` as
    ``-123456``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._value = 0
        self._staged_value = 0

    def value(self) -> int:
        self._updated = False
        return self._value

    def scaled(self, factor: float = 1.0) -> float:
        """The committed value as a float, multiplied by ``factor``."""
        return factor * self.value() / 100.0

    def set(self, text: str) -> None:
        self._staged_value = parse_decimal(text)

    def commit(self) -> None:
        self._value = self._staged_value
        self._mark_committed()


class Integer(StagedField):
    """Generic integer quantity such as the satellite count."""

    def __init__(self) -> None:
        super().__init__()
        self._value = 0
        self._staged_value = 0

    def value(self) -> int:
        self._updated = False
        return self._value

    def set(self, text: str) -> None:
        self._staged_value = parse_integer(text)

    def commit(self) -> None:
        self._value = self._staged_value
        self._mark_committed()


class _FixedPointView:
    """Unit accessors over a shared ``FixedPoint`` container.

    The view owns no state of its own; everything is delegated to
    ``self.quantity``, and every unit accessor clears ``is_updated`` just
    like ``value()`` does.
    """

    def __init__(self, quantity: FixedPoint | None = None) -> None:
        self.quantity = quantity if quantity is not None else FixedPoint()

    @property
    def is_valid(self) -> bool:
        return self.quantity.is_valid

    @property
    def is_updated(self) -> bool:
        return self.quantity.is_updated

    def age(self) -> int:
        return self.quantity.age()

    def value(self) -> int:
        return self.quantity.value()

    def set(self, text: str) -> None:
        self.quantity.set(text)

    def commit(self) -> None:
        self.quantity.commit()


class Speed(_FixedPointView):
    """Speed over ground; the wire value is in knots."""

    def knots(self) -> float:
        return self.quantity.scaled()

    def mph(self) -> float:
        return self.quantity.scaled(units.MPH_PER_KNOT)

    def mps(self) -> float:
        return self.quantity.scaled(units.MPS_PER_KNOT)

    def kmph(self) -> float:
        return self.quantity.scaled(units.KMPH_PER_KNOT)


class Course(_FixedPointView):
    """Course over ground in degrees, 0 = north, clockwise through 360."""

    def deg(self) -> float:
        return self.quantity.scaled()


class Altitude(_FixedPointView):
    """Altitude above mean sea level; the wire value is in meters."""

    def meters(self) -> float:
        return self.quantity.scaled()

    def miles(self) -> float:
        return self.quantity.scaled(units.MILES_PER_METER)

    def kilometers(self) -> float:
        return self.quantity.scaled(units.KM_PER_METER)

    def feet(self) -> float:
        return self.quantity.scaled(units.FEET_PER_METER)


class HDOP(_FixedPointView):
    """Horizontal dilution of precision."""

    def hdop(self) -> float:
        return self.quantity.scaled()
