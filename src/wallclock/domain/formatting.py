"""ISO-8601 extended local-time formatter and parser.

Accepted text is ``HH:mm``, ``HH:mm:ss`` or ``HH:mm:ss.f`` with one to nine
fraction digits.  Formatting always prints seconds and strips trailing
zeros from the fraction, so ``10:15`` formats as ``10:15:00`` and
``10:15:30.5`` as ``10:15:30.5``.  For the shortest canonical form use
``str(time)`` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from wallclock.domain.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from wallclock.domain.errors import RangeError, TimeParseError, UnsupportedFieldError
from wallclock.domain.fields import ChronoField

if TYPE_CHECKING:
    from wallclock.domain.contracts import TemporalAccessor, TemporalField, TemporalQuery
    from wallclock.domain.value_range import ValueRange

_DIGITS = "0123456789"
_MAX_FRACTION = 9


class TimeFormatter(Protocol):
    """Renders accessors to text and parses text back through a factory."""

    def format(self, accessor: TemporalAccessor) -> str: ...

    def parse[T](self, text: str, factory: Callable[[TemporalAccessor], T]) -> T: ...


@dataclass(frozen=True, slots=True)
class ParsedTime:
    """Field values resolved from text, exposed as a temporal accessor."""

    hour: int
    minute: int
    second: int
    nano: int

    _FIELDS = frozenset(
        {
            ChronoField.HOUR_OF_DAY,
            ChronoField.MINUTE_OF_HOUR,
            ChronoField.SECOND_OF_MINUTE,
            ChronoField.NANO_OF_SECOND,
            ChronoField.NANO_OF_DAY,
        }
    )

    def is_supported(self, field: TemporalField | None) -> bool:
        return field in self._FIELDS

    def range(self, field: TemporalField) -> ValueRange:
        return field.range()

    def get_long(self, field: TemporalField) -> int:
        match field:
            case ChronoField.HOUR_OF_DAY:
                return self.hour
            case ChronoField.MINUTE_OF_HOUR:
                return self.minute
            case ChronoField.SECOND_OF_MINUTE:
                return self.second
            case ChronoField.NANO_OF_SECOND:
                return self.nano
            case ChronoField.NANO_OF_DAY:
                return (
                    self.hour * NANOS_PER_HOUR
                    + self.minute * NANOS_PER_MINUTE
                    + self.second * NANOS_PER_SECOND
                    + self.nano
                )
        msg = f"Unsupported field: {field}"
        raise UnsupportedFieldError(msg)

    def get(self, field: TemporalField) -> int:
        return self.range(field).check_valid_int_value(self.get_long(field), field)

    def query(self, query: TemporalQuery[Any]) -> Any:
        return query.query_from(self)


class IsoLocalTimeFormatter:
    """Formatter for ``HH:mm[:ss[.fffffffff]]``."""

    def format(self, accessor: TemporalAccessor) -> str:
        hour = accessor.get_long(ChronoField.HOUR_OF_DAY)
        minute = accessor.get_long(ChronoField.MINUTE_OF_HOUR)
        second = accessor.get_long(ChronoField.SECOND_OF_MINUTE)
        nano = accessor.get_long(ChronoField.NANO_OF_SECOND)
        text = f"{hour:02d}:{minute:02d}:{second:02d}"
        if nano:
            text += "." + f"{nano:09d}".rstrip("0")
        return text

    def parse[T](self, text: str, factory: Callable[[TemporalAccessor], T]) -> T:
        """Parse *text* and hand the resolved fields to *factory*.

        Raises:
            TimeParseError: If the text is malformed or a value is out of range.
        """
        parsed = self.parse_resolved(text)
        return factory(parsed)

    def parse_resolved(self, text: str) -> ParsedTime:
        """Parse *text* into validated field values."""
        hour, pos = _two_digits(text, 0)
        pos = _expect(text, pos, ":")
        minute, pos = _two_digits(text, pos)
        second = nano = 0
        if pos < len(text):
            pos = _expect(text, pos, ":")
            second, pos = _two_digits(text, pos)
            if pos < len(text):
                pos = _expect(text, pos, ".")
                nano, pos = _fraction(text, pos)
        if pos != len(text):
            msg = f"Text '{text}' could not be parsed, unparsed text found at index {pos}"
            raise TimeParseError(msg, text, pos)
        try:
            ChronoField.HOUR_OF_DAY.check_valid_value(hour)
            ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
            ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        except RangeError as exc:
            msg = f"Text '{text}' could not be parsed: {exc}"
            raise TimeParseError(msg, text, 0) from exc
        return ParsedTime(hour, minute, second, nano)

    def __repr__(self) -> str:
        return "ISO_LOCAL_TIME"


def _fail(text: str, pos: int) -> TimeParseError:
    msg = f"Text '{text}' could not be parsed at index {pos}"
    return TimeParseError(msg, text, pos)


def _two_digits(text: str, pos: int) -> tuple[int, int]:
    chunk = text[pos : pos + 2]
    if len(chunk) != 2 or any(c not in _DIGITS for c in chunk):
        raise _fail(text, pos)
    return int(chunk), pos + 2


def _expect(text: str, pos: int, literal: str) -> int:
    if text[pos : pos + 1] != literal:
        raise _fail(text, pos)
    return pos + 1


def _fraction(text: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(text) and end - pos < _MAX_FRACTION and text[end] in _DIGITS:
        end += 1
    if end == pos:
        raise _fail(text, pos)
    digits = text[pos:end]
    return int(digits.ljust(_MAX_FRACTION, "0")), end


ISO_LOCAL_TIME = IsoLocalTimeFormatter()
