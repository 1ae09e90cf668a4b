"""LocalTime — an immutable time-of-day with nanosecond precision.

A ``LocalTime`` is a wall-clock reading such as ``10:15:30.123`` with no
date and no time-zone.  It stores four integers:

- ``hour``: 0–23
- ``minute``: 0–59
- ``second``: 0–59
- ``nanosecond``: 0–999,999,999

INVARIANT: every instance denotes a valid point on a single 24-hour clock,
so ``to_nano_of_day()`` is always in ``[0, 86_400_000_000_000)``.  Direct
construction validates exactly like the factories; there is no way to obtain
an out-of-range instance.

All arithmetic wraps modulo one day and never signals day overflow.  Adding
zero of any unit returns the same instance.

The 24 hour-exact values (``HH:00``) are prebuilt once at import time and
returned by the factories whenever minute, second and nanosecond are all
zero.  That is an optimization only; compare values with ``==``.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn

from wallclock.domain import queries
from wallclock.domain.contracts import TemporalAmount
from wallclock.domain.constants import (
    HOURS_PER_DAY,
    INT64_MAX,
    INT64_MIN,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from wallclock.domain.errors import (
    ConversionError,
    FieldOverflowError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from wallclock.domain.fields import ChronoField
from wallclock.domain.units import ChronoUnit

if TYPE_CHECKING:
    from wallclock.domain.clock import Clock
    from wallclock.domain.composites import LocalDateTime, OffsetTime
    from wallclock.domain.contracts import (
        Temporal,
        TemporalAccessor,
        TemporalAdjuster,
        TemporalField,
        TemporalQuery,
        TemporalUnit,
    )
    from wallclock.domain.formatting import TimeFormatter
    from wallclock.domain.value_range import ValueRange


def _div_toward_zero(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (Python's ``//`` floors)."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


@dataclass(frozen=True, slots=True, order=True, repr=False)
class LocalTime:
    """A time-of-day without a date or time-zone, e.g. ``10:15:30``.

    Prefer the factories (:meth:`of`, :meth:`of_second_of_day`,
    :meth:`of_nano_of_day`, :meth:`parse`, :meth:`from_temporal`) over the
    constructor; they share the hour cache.

    Ordering is lexicographic by hour, minute, second, then nanosecond.
    """

    hour: int
    minute: int
    second: int
    nanosecond: int

    MIN: ClassVar[LocalTime]
    MAX: ClassVar[LocalTime]
    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]

    def __post_init__(self) -> None:
        ChronoField.HOUR_OF_DAY.check_valid_value(self.hour)
        ChronoField.MINUTE_OF_HOUR.check_valid_value(self.minute)
        ChronoField.SECOND_OF_MINUTE.check_valid_value(self.second)
        ChronoField.NANO_OF_SECOND.check_valid_value(self.nanosecond)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, hour: int, minute: int, second: int = 0, nanosecond: int = 0) -> LocalTime:
        """Obtain a time from hour, minute and optional second and nanosecond.

        Raises:
            RangeError: If any component is outside its range.
        """
        ChronoField.HOUR_OF_DAY.check_valid_value(hour)
        ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
        ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        ChronoField.NANO_OF_SECOND.check_valid_value(nanosecond)
        return _create(hour, minute, second, nanosecond)

    @classmethod
    def of_second_of_day(cls, second_of_day: int, nano_of_second: int = 0) -> LocalTime:
        """Obtain a time from a second-of-day plus an optional nano-of-second."""
        ChronoField.SECOND_OF_DAY.check_valid_value(second_of_day)
        ChronoField.NANO_OF_SECOND.check_valid_value(nano_of_second)
        hours, rem = divmod(second_of_day, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rem, SECONDS_PER_MINUTE)
        return _create(hours, minutes, seconds, nano_of_second)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Obtain a time from a nano-of-day in ``[0, 86_400_000_000_000)``."""
        ChronoField.NANO_OF_DAY.check_valid_value(nano_of_day)
        hours, rem = divmod(nano_of_day, NANOS_PER_HOUR)
        minutes, rem = divmod(rem, NANOS_PER_MINUTE)
        seconds, nanos = divmod(rem, NANOS_PER_SECOND)
        return _create(hours, minutes, seconds, nanos)

    @classmethod
    def from_temporal(cls, accessor: TemporalAccessor | dt.time | dt.datetime) -> LocalTime:
        """Obtain a time from any accessor that can supply a nano-of-day.

        Standard-library ``datetime.time`` and ``datetime.datetime`` values
        are accepted too; their wall-clock part is used.

        Raises:
            ConversionError: If no time-of-day can be obtained.
        """
        if isinstance(accessor, LocalTime):
            return accessor
        if isinstance(accessor, dt.datetime):
            return cls.from_pytime(accessor.time())
        if isinstance(accessor, dt.time):
            return cls.from_pytime(accessor)
        query = getattr(accessor, "query", None)
        time = query(queries.LOCAL_TIME) if callable(query) else None
        if time is None:
            msg = (
                f"Unable to obtain LocalTime from temporal accessor: {accessor!r}, "
                f"type {type(accessor).__qualname__}"
            )
            raise ConversionError(msg)
        return time

    @classmethod
    def from_pytime(cls, value: dt.time) -> LocalTime:
        """Convert a ``datetime.time``, ignoring any ``tzinfo`` and ``fold``."""
        return cls.of(value.hour, value.minute, value.second, value.microsecond * NANOS_PER_MICRO)

    @classmethod
    def parse(cls, text: str, formatter: TimeFormatter | None = None) -> LocalTime:
        """Parse *text* with *formatter*, defaulting to ISO ``HH:mm[:ss[.f]]``.

        Raises:
            TimeParseError: If the text cannot be parsed.
        """
        if formatter is None:
            from wallclock.domain.formatting import ISO_LOCAL_TIME

            formatter = ISO_LOCAL_TIME
        return formatter.parse(text, cls.from_temporal)

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalTime:
        """Current time from *clock* (the system clock in the local offset by default)."""
        if clock is None:
            from wallclock.domain.clock import SystemClock

            clock = SystemClock()
        epoch_second, nano = clock.instant()
        offset = clock.offset_seconds(epoch_second)
        return cls.of_second_of_day((epoch_second + offset) % SECONDS_PER_DAY, nano)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: TemporalField | None) -> bool:
        """Whether *field* can be queried on a time-of-day."""
        if isinstance(field, ChronoField):
            return field.is_time_based()
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit | None) -> bool:
        """Whether *unit* can be added to or subtracted from a time-of-day."""
        if isinstance(unit, ChronoUnit):
            return unit.is_time_based()
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if isinstance(field, ChronoField):
            if field.is_time_based():
                return field.range()
            _unsupported_field(field)
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Value of *field* as a 32-bit integer.

        Raises:
            FieldOverflowError: For nano-of-day and micro-of-day; use
                :meth:`get_long` for those.
            UnsupportedFieldError: If the field is not time-based.
        """
        if isinstance(field, ChronoField):
            return self._get_field(field)
        return self.range(field).check_valid_int_value(self.get_long(field), field)

    def get_long(self, field: TemporalField) -> int:
        """Value of *field* with no width limit."""
        if isinstance(field, ChronoField):
            if field is ChronoField.NANO_OF_DAY:
                return self.to_nano_of_day()
            if field is ChronoField.MICRO_OF_DAY:
                return self.to_nano_of_day() // NANOS_PER_MICRO
            return self._get_field(field)
        return field.get_from(self)

    def _get_field(self, field: ChronoField) -> int:
        match field:
            case ChronoField.NANO_OF_SECOND:
                return self.nanosecond
            case ChronoField.NANO_OF_DAY | ChronoField.MICRO_OF_DAY:
                msg = f"Field too large for an int: {field}"
                raise FieldOverflowError(msg)
            case ChronoField.MICRO_OF_SECOND:
                return self.nanosecond // NANOS_PER_MICRO
            case ChronoField.MILLI_OF_SECOND:
                return self.nanosecond // NANOS_PER_MILLI
            case ChronoField.MILLI_OF_DAY:
                return self.to_nano_of_day() // NANOS_PER_MILLI
            case ChronoField.SECOND_OF_MINUTE:
                return self.second
            case ChronoField.SECOND_OF_DAY:
                return self.to_second_of_day()
            case ChronoField.MINUTE_OF_HOUR:
                return self.minute
            case ChronoField.MINUTE_OF_DAY:
                return self.hour * MINUTES_PER_HOUR + self.minute
            case ChronoField.HOUR_OF_AMPM:
                return self.hour % 12
            case ChronoField.CLOCK_HOUR_OF_AMPM:
                ham = self.hour % 12
                return 12 if ham == 0 else ham
            case ChronoField.HOUR_OF_DAY:
                return self.hour
            case ChronoField.CLOCK_HOUR_OF_DAY:
                return 24 if self.hour == 0 else self.hour
            case ChronoField.AMPM_OF_DAY:
                return self.hour // 12
        _unsupported_field(field)

    def query(self, query: TemporalQuery[Any]) -> Any:
        """Answer *query*; zone, offset, chronology and date queries yield ``None``."""
        if query is queries.PRECISION:
            return ChronoUnit.NANOS
        if query is queries.LOCAL_TIME:
            return self
        if query in (
            queries.CHRONOLOGY,
            queries.ZONE_ID,
            queries.ZONE,
            queries.OFFSET,
            queries.LOCAL_DATE,
        ):
            return None
        return query.query_from(self)

    # ------------------------------------------------------------------
    # Adjustment
    # ------------------------------------------------------------------

    def adjust(self, adjuster: TemporalAdjuster | LocalTime) -> LocalTime:
        """Return a copy adjusted by *adjuster*; a ``LocalTime`` simply replaces this one."""
        if isinstance(adjuster, LocalTime):
            return adjuster
        return adjuster.adjust_into(self)

    def adjust_into[T: Temporal](self, temporal: T) -> T:
        """Set this time-of-day on *temporal* via the nano-of-day field."""
        return temporal.with_field(ChronoField.NANO_OF_DAY, self.to_nano_of_day())

    def with_field(self, field: TemporalField, value: int) -> LocalTime:
        """Return a copy with *field* set to *value*.

        The new value is range-checked first.  Fields that overlap others
        keep the finer fields: setting second-of-day keeps the nanosecond,
        setting an hour field keeps minute, second and nanosecond.
        Clock-hour values 12 (am-pm) and 24 (day) mean hour zero.

        Raises:
            RangeError: If *value* is outside the field's range.
            UnsupportedFieldError: If the field is not time-based.
        """
        if not isinstance(field, ChronoField):
            return field.adjust_into(self, value)
        if not field.is_time_based():
            _unsupported_field(field)
        value = field.check_valid_value(value)
        match field:
            case ChronoField.NANO_OF_SECOND:
                return self.with_nanosecond(value)
            case ChronoField.NANO_OF_DAY:
                return LocalTime.of_nano_of_day(value)
            case ChronoField.MICRO_OF_SECOND:
                return self.with_nanosecond(value * NANOS_PER_MICRO)
            case ChronoField.MICRO_OF_DAY:
                return LocalTime.of_nano_of_day(value * NANOS_PER_MICRO)
            case ChronoField.MILLI_OF_SECOND:
                return self.with_nanosecond(value * NANOS_PER_MILLI)
            case ChronoField.MILLI_OF_DAY:
                return LocalTime.of_nano_of_day(value * NANOS_PER_MILLI)
            case ChronoField.SECOND_OF_MINUTE:
                return self.with_second(value)
            case ChronoField.SECOND_OF_DAY:
                return self.plus_seconds(value - self.to_second_of_day())
            case ChronoField.MINUTE_OF_HOUR:
                return self.with_minute(value)
            case ChronoField.MINUTE_OF_DAY:
                return self.plus_minutes(value - (self.hour * MINUTES_PER_HOUR + self.minute))
            case ChronoField.HOUR_OF_AMPM:
                return self.plus_hours(value - self.hour % 12)
            case ChronoField.CLOCK_HOUR_OF_AMPM:
                return self.plus_hours((0 if value == 12 else value) - self.hour % 12)
            case ChronoField.HOUR_OF_DAY:
                return self.with_hour(value)
            case ChronoField.CLOCK_HOUR_OF_DAY:
                return self.with_hour(0 if value == 24 else value)
            case ChronoField.AMPM_OF_DAY:
                return self.plus_hours((value - self.hour // 12) * 12)
        _unsupported_field(field)

    def with_hour(self, hour: int) -> LocalTime:
        if self.hour == hour:
            return self
        ChronoField.HOUR_OF_DAY.check_valid_value(hour)
        return _create(hour, self.minute, self.second, self.nanosecond)

    def with_minute(self, minute: int) -> LocalTime:
        if self.minute == minute:
            return self
        ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
        return _create(self.hour, minute, self.second, self.nanosecond)

    def with_second(self, second: int) -> LocalTime:
        if self.second == second:
            return self
        ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        return _create(self.hour, self.minute, second, self.nanosecond)

    def with_nanosecond(self, nanosecond: int) -> LocalTime:
        if self.nanosecond == nanosecond:
            return self
        ChronoField.NANO_OF_SECOND.check_valid_value(nanosecond)
        return _create(self.hour, self.minute, self.second, nanosecond)

    def truncated_to(self, unit: TemporalUnit) -> LocalTime:
        """Zero every field finer than *unit*.

        Raises:
            UnsupportedUnitError: If the unit is longer than a day or does
                not divide a day exactly.
        """
        if unit is ChronoUnit.NANOS:
            return self
        duration = unit.duration_nanos()
        if duration <= 0 or duration > NANOS_PER_DAY:
            msg = f"Unit is too large to be used for truncation: {unit}"
            raise UnsupportedUnitError(msg)
        if NANOS_PER_DAY % duration != 0:
            msg = f"Unit must divide into a standard day without remainder: {unit}"
            raise UnsupportedUnitError(msg)
        nod = self.to_nano_of_day()
        return LocalTime.of_nano_of_day(nod // duration * duration)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, amount: int, unit: TemporalUnit) -> LocalTime:
        """Return a copy with *amount* of *unit* added, wrapping around midnight.

        Raises:
            UnsupportedUnitError: If the unit is a built-in date-based unit.
        """
        if not isinstance(unit, ChronoUnit):
            return unit.add_to(self, amount)
        match unit:
            case ChronoUnit.NANOS:
                return self.plus_nanos(amount)
            case ChronoUnit.MICROS:
                return self.plus_nanos((amount % MICROS_PER_DAY) * NANOS_PER_MICRO)
            case ChronoUnit.MILLIS:
                return self.plus_nanos((amount % MILLIS_PER_DAY) * NANOS_PER_MILLI)
            case ChronoUnit.SECONDS:
                return self.plus_seconds(amount)
            case ChronoUnit.MINUTES:
                return self.plus_minutes(amount)
            case ChronoUnit.HOURS:
                return self.plus_hours(amount)
            case ChronoUnit.HALF_DAYS:
                return self.plus_hours((amount % 2) * 12)
        _unsupported_unit(unit)

    def plus_hours(self, hours: int) -> LocalTime:
        if hours == 0:
            return self
        new_hour = (self.hour + hours) % HOURS_PER_DAY
        return _create(new_hour, self.minute, self.second, self.nanosecond)

    def plus_minutes(self, minutes: int) -> LocalTime:
        if minutes == 0:
            return self
        mofd = self.hour * MINUTES_PER_HOUR + self.minute
        new_mofd = (mofd + minutes) % MINUTES_PER_DAY
        if mofd == new_mofd:
            return self
        new_hour, new_minute = divmod(new_mofd, MINUTES_PER_HOUR)
        return _create(new_hour, new_minute, self.second, self.nanosecond)

    def plus_seconds(self, seconds: int) -> LocalTime:
        if seconds == 0:
            return self
        sofd = self.to_second_of_day()
        new_sofd = (sofd + seconds) % SECONDS_PER_DAY
        if sofd == new_sofd:
            return self
        new_hour, rem = divmod(new_sofd, SECONDS_PER_HOUR)
        new_minute, new_second = divmod(rem, SECONDS_PER_MINUTE)
        return _create(new_hour, new_minute, new_second, self.nanosecond)

    def plus_nanos(self, nanos: int) -> LocalTime:
        if nanos == 0:
            return self
        nofd = self.to_nano_of_day()
        new_nofd = (nofd + nanos) % NANOS_PER_DAY
        if nofd == new_nofd:
            return self
        new_hour, rem = divmod(new_nofd, NANOS_PER_HOUR)
        new_minute, rem = divmod(rem, NANOS_PER_MINUTE)
        new_second, new_nano = divmod(rem, NANOS_PER_SECOND)
        return _create(new_hour, new_minute, new_second, new_nano)

    def minus(self, amount: int, unit: TemporalUnit) -> LocalTime:
        """Return a copy with *amount* of *unit* subtracted, wrapping around midnight."""
        # External units may only accept signed 64-bit amounts.
        if amount == INT64_MIN:
            return self.plus(INT64_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-(hours % HOURS_PER_DAY))

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-(minutes % MINUTES_PER_DAY))

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-(seconds % SECONDS_PER_DAY))

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-(nanos % NANOS_PER_DAY))

    def plus_amount(self, amount: TemporalAmount | dt.timedelta) -> LocalTime:
        """Add a ``timedelta`` (at microsecond precision) or any temporal amount."""
        if isinstance(amount, dt.timedelta):
            return self.plus_nanos(_timedelta_nanos(amount))
        return amount.add_to(self)

    def minus_amount(self, amount: TemporalAmount | dt.timedelta) -> LocalTime:
        if isinstance(amount, dt.timedelta):
            return self.minus_nanos(_timedelta_nanos(amount))
        return amount.subtract_from(self)

    def __add__(self, other: object) -> LocalTime:
        if isinstance(other, (dt.timedelta, TemporalAmount)):
            return self.plus_amount(other)  # type: ignore[arg-type]
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> LocalTime:
        if isinstance(other, (dt.timedelta, TemporalAmount)):
            return self.minus_amount(other)  # type: ignore[arg-type]
        return NotImplemented

    def until(self, end: TemporalAccessor, unit: TemporalUnit) -> int:
        """Whole units from this time to *end*, truncated toward zero.

        ``of(11, 30).until(of(13, 29), HOURS)`` is 1, and the reverse is -1.

        Raises:
            ConversionError: If *end* cannot be converted to a ``LocalTime``.
            UnsupportedUnitError: If the unit is a built-in date-based unit.
        """
        end_time = LocalTime.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end_time)
        if not unit.is_time_based():
            _unsupported_unit(unit)
        nanos_until = end_time.to_nano_of_day() - self.to_nano_of_day()
        return _div_toward_zero(nanos_until, unit.duration_nanos())

    # ------------------------------------------------------------------
    # Composition and conversion
    # ------------------------------------------------------------------

    def at_date(self, date: dt.date) -> LocalDateTime:
        from wallclock.domain.composites import LocalDateTime

        if isinstance(date, dt.datetime):
            date = date.date()
        return LocalDateTime(date, self)

    def at_offset(self, offset: dt.timedelta | dt.tzinfo | int) -> OffsetTime:
        from wallclock.domain.composites import OffsetTime, offset_to_seconds

        return OffsetTime(self, offset_to_seconds(offset))

    def to_second_of_day(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def to_nano_of_day(self) -> int:
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )

    def to_pytime(self) -> dt.time:
        """Convert to ``datetime.time``, dropping sub-microsecond digits."""
        return dt.time(self.hour, self.minute, self.second, self.nanosecond // NANOS_PER_MICRO)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: LocalTime) -> int:
        """Return -1, 0 or 1 as this time is before, equal to, or after *other*."""
        mine = (self.hour, self.minute, self.second, self.nanosecond)
        theirs = (other.hour, other.minute, other.second, other.nanosecond)
        return (mine > theirs) - (mine < theirs)

    def is_after(self, other: LocalTime) -> bool:
        return self.compare_to(other) > 0

    def is_before(self, other: LocalTime) -> bool:
        return self.compare_to(other) < 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format(self, formatter: TimeFormatter) -> str:
        return formatter.format(self)

    def __str__(self) -> str:
        """Shortest ISO-8601 form: ``HH:mm``, ``HH:mm:ss`` or with a 3/6/9-digit fraction."""
        text = f"{self.hour:02d}:{self.minute:02d}"
        if self.second or self.nanosecond:
            text += f":{self.second:02d}"
            nano = self.nanosecond
            if nano:
                if nano % NANOS_PER_MILLI == 0:
                    text += f".{nano // NANOS_PER_MILLI:03d}"
                elif nano % NANOS_PER_MICRO == 0:
                    text += f".{nano // NANOS_PER_MICRO:06d}"
                else:
                    text += f".{nano:09d}"
        return text

    def __repr__(self) -> str:
        return f"LocalTime({self})"

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        msg = "LocalTime cannot be pickled; use wallclock.domain.codec.encode()"
        raise TypeError(msg)

    def __copy__(self) -> LocalTime:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> LocalTime:
        return self


def _timedelta_nanos(delta: dt.timedelta) -> int:
    return (delta.days * SECONDS_PER_DAY + delta.seconds) * NANOS_PER_SECOND + (
        delta.microseconds * NANOS_PER_MICRO
    )


def _unsupported_field(field: object) -> NoReturn:
    msg = f"Unsupported field: {field}"
    raise UnsupportedFieldError(msg)


def _unsupported_unit(unit: object) -> NoReturn:
    msg = f"Unsupported unit: {unit}"
    raise UnsupportedUnitError(msg)


# No state restorer: every instance passes through __post_init__.
for _hook in ("__getstate__", "__setstate__"):
    if _hook in vars(LocalTime):
        delattr(LocalTime, _hook)

_HOURS: tuple[LocalTime, ...] = tuple(LocalTime(h, 0, 0, 0) for h in range(HOURS_PER_DAY))


def _create(hour: int, minute: int, second: int, nanosecond: int) -> LocalTime:
    """Build from pre-validated components, reusing the hour cache."""
    if minute == 0 and second == 0 and nanosecond == 0:
        return _HOURS[hour]
    return LocalTime(hour, minute, second, nanosecond)


LocalTime.MIN = _HOURS[0]
LocalTime.MIDNIGHT = _HOURS[0]
LocalTime.NOON = _HOURS[12]
LocalTime.MAX = LocalTime(23, 59, 59, 999_999_999)
