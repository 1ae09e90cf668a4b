"""Built-in temporal fields.

The fifteen time-based fields (nano-of-second through am-pm-of-day) are the
ones a :class:`~wallclock.domain.local_time.LocalTime` supports.  A handful
of date-based and instant fields are catalogued as well so that asking a
time-of-day for them fails with a typed error rather than a lookup error.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from wallclock.domain.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_OFFSET_SECONDS,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    SECONDS_PER_DAY,
    YEAR_MAX,
    YEAR_MIN,
)
from wallclock.domain.units import ChronoUnit
from wallclock.domain.value_range import ValueRange

if TYPE_CHECKING:
    from wallclock.domain.contracts import Temporal, TemporalAccessor


class ChronoField(Enum):
    """Standard set of fields: (display name, base unit, range unit, range)."""

    NANO_OF_SECOND = ("NanoOfSecond", ChronoUnit.NANOS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = ("NanoOfDay", ChronoUnit.NANOS, ChronoUnit.DAYS, ValueRange.of(0, NANOS_PER_DAY - 1))
    MICRO_OF_SECOND = ("MicroOfSecond", ChronoUnit.MICROS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = ("MicroOfDay", ChronoUnit.MICROS, ChronoUnit.DAYS, ValueRange.of(0, MICROS_PER_DAY - 1))
    MILLI_OF_SECOND = ("MilliOfSecond", ChronoUnit.MILLIS, ChronoUnit.SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = ("MilliOfDay", ChronoUnit.MILLIS, ChronoUnit.DAYS, ValueRange.of(0, MILLIS_PER_DAY - 1))
    SECOND_OF_MINUTE = ("SecondOfMinute", ChronoUnit.SECONDS, ChronoUnit.MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = ("SecondOfDay", ChronoUnit.SECONDS, ChronoUnit.DAYS, ValueRange.of(0, SECONDS_PER_DAY - 1))
    MINUTE_OF_HOUR = ("MinuteOfHour", ChronoUnit.MINUTES, ChronoUnit.HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", ChronoUnit.MINUTES, ChronoUnit.DAYS, ValueRange.of(0, MINUTES_PER_DAY - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7))
    DAY_OF_MONTH = ("DayOfMonth", ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", ChronoUnit.DAYS, ChronoUnit.YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = (
        "EpochDay",
        ChronoUnit.DAYS,
        ChronoUnit.FOREVER,
        ValueRange.of(int(YEAR_MIN * 365.25), int(YEAR_MAX * 365.25)),
    )
    MONTH_OF_YEAR = ("MonthOfYear", ChronoUnit.MONTHS, ChronoUnit.YEARS, ValueRange.of(1, 12))
    YEAR = ("Year", ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(YEAR_MIN, YEAR_MAX))
    ERA = ("Era", ChronoUnit.ERAS, ChronoUnit.FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = ("InstantSeconds", ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(INT64_MIN, INT64_MAX))
    OFFSET_SECONDS = (
        "OffsetSeconds",
        ChronoUnit.SECONDS,
        ChronoUnit.FOREVER,
        ValueRange.of(-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS),
    )

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self.display_name = display_name
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range

    def range(self) -> ValueRange:
        return self._range

    def is_time_based(self) -> bool:
        return self in _TIME_FIELDS

    def is_date_based(self) -> bool:
        return self in _DATE_FIELDS

    def check_valid_value(self, value: int) -> int:
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, accessor: TemporalAccessor) -> bool:
        return accessor.is_supported(self)

    def range_refined_by(self, accessor: TemporalAccessor) -> ValueRange:
        return accessor.range(self)

    def get_from(self, accessor: TemporalAccessor) -> int:
        return accessor.get_long(self)

    def adjust_into[T: Temporal](self, temporal: T, value: int) -> T:
        return temporal.with_field(self, value)

    def __str__(self) -> str:
        return self.display_name


_TIME_FIELDS = frozenset(
    {
        ChronoField.NANO_OF_SECOND,
        ChronoField.NANO_OF_DAY,
        ChronoField.MICRO_OF_SECOND,
        ChronoField.MICRO_OF_DAY,
        ChronoField.MILLI_OF_SECOND,
        ChronoField.MILLI_OF_DAY,
        ChronoField.SECOND_OF_MINUTE,
        ChronoField.SECOND_OF_DAY,
        ChronoField.MINUTE_OF_HOUR,
        ChronoField.MINUTE_OF_DAY,
        ChronoField.HOUR_OF_AMPM,
        ChronoField.CLOCK_HOUR_OF_AMPM,
        ChronoField.HOUR_OF_DAY,
        ChronoField.CLOCK_HOUR_OF_DAY,
        ChronoField.AMPM_OF_DAY,
    }
)

_DATE_FIELDS = frozenset(
    {
        ChronoField.DAY_OF_WEEK,
        ChronoField.DAY_OF_MONTH,
        ChronoField.DAY_OF_YEAR,
        ChronoField.EPOCH_DAY,
        ChronoField.MONTH_OF_YEAR,
        ChronoField.YEAR,
        ChronoField.ERA,
    }
)

TIME_FIELDS: tuple[ChronoField, ...] = tuple(f for f in ChronoField if f in _TIME_FIELDS)
