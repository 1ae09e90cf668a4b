"""Tests for LocalTime — construction, fields, arithmetic, rendering."""

from __future__ import annotations

import copy
import dataclasses
import datetime as dt
import pickle

import pytest

from wallclock.domain import queries
from wallclock.domain.clock import FixedClock
from wallclock.domain.constants import INT64_MAX, INT64_MIN, MICROS_PER_DAY, NANOS_PER_DAY
from wallclock.domain.errors import (
    ConversionError,
    FieldOverflowError,
    RangeError,
    TimeParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from wallclock.domain.fields import TIME_FIELDS, ChronoField
from wallclock.domain.formatting import ISO_LOCAL_TIME
from wallclock.domain.local_time import LocalTime
from wallclock.domain.units import ChronoUnit
from wallclock.domain.value_range import ValueRange
from wallclock.plugins.builtins.spans import QUARTER_HOURS, QUARTER_OF_HOUR, FixedSpanUnit

T = LocalTime.of(13, 45, 20, 123_456_789)
TIME_UNITS = [unit for unit in ChronoUnit if unit.is_time_based()]


class TestFactories:
    def test_of_defaults(self) -> None:
        t = LocalTime.of(10, 15)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (10, 15, 0, 0)

    def test_of_all_components(self) -> None:
        assert T.hour == 13
        assert T.minute == 45
        assert T.second == 20
        assert T.nanosecond == 123_456_789

    @pytest.mark.parametrize(
        ("args", "field_name"),
        [
            ((24, 0), "HourOfDay"),
            ((-1, 0), "HourOfDay"),
            ((0, 60), "MinuteOfHour"),
            ((0, 0, 60), "SecondOfMinute"),
            ((0, 0, 0, 1_000_000_000), "NanoOfSecond"),
            ((0, 0, 0, -1), "NanoOfSecond"),
        ],
    )
    def test_of_out_of_range(self, args: tuple[int, ...], field_name: str) -> None:
        with pytest.raises(RangeError, match=field_name):
            LocalTime.of(*args)

    def test_hour_checked_first(self) -> None:
        with pytest.raises(RangeError, match="HourOfDay"):
            LocalTime.of(25, 60)

    def test_error_names_bounds(self) -> None:
        with pytest.raises(RangeError) as exc_info:
            LocalTime.of(24, 0)
        assert str(exc_info.value) == "Invalid value for HourOfDay (valid values 0 - 23): 24"

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(TypeError):
            LocalTime.of(1.5, 0)  # type: ignore[arg-type]

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(RangeError):
            LocalTime(24, 0, 0, 0)

    def test_of_second_of_day(self) -> None:
        assert LocalTime.of_second_of_day(3661) == LocalTime.of(1, 1, 1)
        assert LocalTime.of_second_of_day(3661, 5) == LocalTime.of(1, 1, 1, 5)
        assert LocalTime.of_second_of_day(86_399) == LocalTime.of(23, 59, 59)

    def test_of_second_of_day_out_of_range(self) -> None:
        with pytest.raises(RangeError, match="SecondOfDay"):
            LocalTime.of_second_of_day(86_400)
        with pytest.raises(RangeError, match="NanoOfSecond"):
            LocalTime.of_second_of_day(0, 1_000_000_000)

    def test_of_nano_of_day(self) -> None:
        assert LocalTime.of_nano_of_day(0) is LocalTime.MIDNIGHT
        assert LocalTime.of_nano_of_day(NANOS_PER_DAY - 1) == LocalTime.MAX
        assert LocalTime.of_nano_of_day(T.to_nano_of_day()) == T

    def test_of_nano_of_day_out_of_range(self) -> None:
        with pytest.raises(RangeError, match="NanoOfDay"):
            LocalTime.of_nano_of_day(NANOS_PER_DAY)
        with pytest.raises(RangeError):
            LocalTime.of_nano_of_day(-1)

    def test_constants(self) -> None:
        assert LocalTime.MIN is LocalTime.MIDNIGHT
        assert LocalTime.MIDNIGHT == LocalTime.of(0, 0)
        assert LocalTime.NOON == LocalTime.of(12, 0)
        assert LocalTime.MAX == LocalTime.of(23, 59, 59, 999_999_999)


class TestHourCache:
    def test_exact_hours_are_shared(self) -> None:
        assert LocalTime.of(10, 0) is LocalTime.of(10, 0)
        assert LocalTime.of_second_of_day(36_000) is LocalTime.of(10, 0)
        assert LocalTime.of(0, 0) is LocalTime.MIDNIGHT
        assert LocalTime.of(12, 0) is LocalTime.NOON

    def test_non_exact_hours_are_equal(self) -> None:
        assert LocalTime.of(10, 1) == LocalTime.of(10, 1)

    def test_arithmetic_lands_on_cache(self) -> None:
        assert LocalTime.of(9, 59).plus_minutes(1) is LocalTime.of(10, 0)
        assert T.truncated_to(ChronoUnit.HOURS) is LocalTime.of(13, 0)


class TestFromTemporal:
    def test_local_time_returns_itself(self) -> None:
        assert LocalTime.from_temporal(T) is T

    def test_parsed_accessor(self) -> None:
        parsed = ISO_LOCAL_TIME.parse_resolved("10:15:30")
        assert LocalTime.from_temporal(parsed) == LocalTime.of(10, 15, 30)

    def test_stdlib_time_and_datetime(self) -> None:
        assert LocalTime.from_temporal(dt.time(10, 15, 30, 500)) == LocalTime.of(10, 15, 30, 500_000)
        moment = dt.datetime(2024, 1, 1, 10, 15, 30, 500)
        assert LocalTime.from_temporal(moment) == LocalTime.of(10, 15, 30, 500_000)

    def test_unconvertible(self) -> None:
        with pytest.raises(ConversionError, match="Unable to obtain LocalTime"):
            LocalTime.from_temporal(object())  # type: ignore[arg-type]

    def test_accessor_without_nano_of_day(self) -> None:
        class DateOnly:
            def is_supported(self, field: object) -> bool:
                return False

            def query(self, query: queries.TemporalQuery[object]) -> object:
                return query.query_from(self)  # type: ignore[arg-type]

        with pytest.raises(ConversionError):
            LocalTime.from_temporal(DateOnly())  # type: ignore[arg-type]


class TestStdlibInterop:
    def test_to_pytime_truncates_nanos(self) -> None:
        assert T.to_pytime() == dt.time(13, 45, 20, 123_456)

    def test_from_pytime(self) -> None:
        assert LocalTime.from_pytime(dt.time(1, 2, 3, 4)) == LocalTime.of(1, 2, 3, 4_000)


class TestNow:
    def test_fixed_clock_with_offset(self) -> None:
        clock = FixedClock(epoch_second=86_400 * 10 + 3_661, nano=5, offset=3_600)
        assert LocalTime.now(clock) == LocalTime.of(2, 1, 1, 5)

    def test_negative_epoch(self) -> None:
        assert LocalTime.now(FixedClock(epoch_second=-1)) == LocalTime.of(23, 59, 59)

    def test_negative_offset_wraps(self) -> None:
        clock = FixedClock(epoch_second=1_800, offset=-3_600)
        assert LocalTime.now(clock) == LocalTime.of(23, 30)

    def test_system_clock_is_valid(self) -> None:
        t = LocalTime.now()
        assert 0 <= t.to_nano_of_day() < NANOS_PER_DAY


class TestSupport:
    @pytest.mark.parametrize("field", TIME_FIELDS)
    def test_time_fields_supported(self, field: ChronoField) -> None:
        assert T.is_supported(field)

    @pytest.mark.parametrize(
        "field",
        [ChronoField.DAY_OF_WEEK, ChronoField.YEAR, ChronoField.OFFSET_SECONDS],
    )
    def test_other_fields_unsupported(self, field: ChronoField) -> None:
        assert not T.is_supported(field)

    def test_none_unsupported(self) -> None:
        assert not T.is_supported(None)
        assert not T.is_supported_unit(None)

    def test_units(self) -> None:
        for unit in (ChronoUnit.NANOS, ChronoUnit.HOURS, ChronoUnit.HALF_DAYS):
            assert T.is_supported_unit(unit)
        for unit in (ChronoUnit.DAYS, ChronoUnit.YEARS, ChronoUnit.FOREVER):
            assert not T.is_supported_unit(unit)

    def test_external_descriptors(self) -> None:
        assert T.is_supported(QUARTER_OF_HOUR)
        assert T.is_supported_unit(QUARTER_HOURS)


class TestFieldAccess:
    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (ChronoField.NANO_OF_SECOND, 123_456_789),
            (ChronoField.NANO_OF_DAY, 49_520_123_456_789),
            (ChronoField.MICRO_OF_SECOND, 123_456),
            (ChronoField.MICRO_OF_DAY, 49_520_123_456),
            (ChronoField.MILLI_OF_SECOND, 123),
            (ChronoField.MILLI_OF_DAY, 49_520_123),
            (ChronoField.SECOND_OF_MINUTE, 20),
            (ChronoField.SECOND_OF_DAY, 49_520),
            (ChronoField.MINUTE_OF_HOUR, 45),
            (ChronoField.MINUTE_OF_DAY, 825),
            (ChronoField.HOUR_OF_AMPM, 1),
            (ChronoField.CLOCK_HOUR_OF_AMPM, 1),
            (ChronoField.HOUR_OF_DAY, 13),
            (ChronoField.CLOCK_HOUR_OF_DAY, 13),
            (ChronoField.AMPM_OF_DAY, 1),
        ],
    )
    def test_get_long(self, field: ChronoField, expected: int) -> None:
        assert T.get_long(field) == expected

    @pytest.mark.parametrize("field", [ChronoField.NANO_OF_DAY, ChronoField.MICRO_OF_DAY])
    def test_narrow_get_overflows(self, field: ChronoField) -> None:
        with pytest.raises(FieldOverflowError, match="too large for an int"):
            T.get(field)

    def test_narrow_get(self) -> None:
        assert T.get(ChronoField.MILLI_OF_DAY) == 49_520_123
        assert T.get(ChronoField.HOUR_OF_DAY) == 13

    def test_clock_hours_at_midnight_and_noon(self) -> None:
        midnight, noon = LocalTime.MIDNIGHT, LocalTime.NOON
        assert midnight.get(ChronoField.CLOCK_HOUR_OF_DAY) == 24
        assert midnight.get(ChronoField.CLOCK_HOUR_OF_AMPM) == 12
        assert noon.get(ChronoField.CLOCK_HOUR_OF_AMPM) == 12
        assert noon.get(ChronoField.HOUR_OF_AMPM) == 0
        assert noon.get(ChronoField.AMPM_OF_DAY) == 1

    def test_unsupported_field(self) -> None:
        with pytest.raises(UnsupportedFieldError, match="DayOfWeek"):
            T.get(ChronoField.DAY_OF_WEEK)
        with pytest.raises(UnsupportedFieldError):
            T.get_long(ChronoField.YEAR)
        with pytest.raises(UnsupportedFieldError):
            T.range(ChronoField.YEAR)

    def test_range(self) -> None:
        assert T.range(ChronoField.HOUR_OF_DAY) == ValueRange.of(0, 23)
        assert T.range(QUARTER_OF_HOUR) == ValueRange.of(0, 3)

    def test_external_field(self) -> None:
        t = LocalTime.of(10, 47)
        assert t.get(QUARTER_OF_HOUR) == 3
        assert t.get_long(QUARTER_OF_HOUR) == 3


class TestWithField:
    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            (ChronoField.NANO_OF_SECOND, 5, LocalTime.of(13, 45, 20, 5)),
            (ChronoField.NANO_OF_DAY, 0, LocalTime.MIDNIGHT),
            (ChronoField.MICRO_OF_SECOND, 7, LocalTime.of(13, 45, 20, 7_000)),
            (ChronoField.MICRO_OF_DAY, 1, LocalTime.of(0, 0, 0, 1_000)),
            (ChronoField.MILLI_OF_SECOND, 9, LocalTime.of(13, 45, 20, 9_000_000)),
            (ChronoField.MILLI_OF_DAY, 1_000, LocalTime.of(0, 0, 1)),
            (ChronoField.SECOND_OF_MINUTE, 59, LocalTime.of(13, 45, 59, 123_456_789)),
            (ChronoField.SECOND_OF_DAY, 0, LocalTime.of(0, 0, 0, 123_456_789)),
            (ChronoField.MINUTE_OF_HOUR, 0, LocalTime.of(13, 0, 20, 123_456_789)),
            (ChronoField.MINUTE_OF_DAY, 61, LocalTime.of(1, 1, 20, 123_456_789)),
            (ChronoField.HOUR_OF_AMPM, 11, LocalTime.of(23, 45, 20, 123_456_789)),
            (ChronoField.CLOCK_HOUR_OF_AMPM, 12, LocalTime.of(12, 45, 20, 123_456_789)),
            (ChronoField.HOUR_OF_DAY, 0, LocalTime.of(0, 45, 20, 123_456_789)),
            (ChronoField.CLOCK_HOUR_OF_DAY, 24, LocalTime.of(0, 45, 20, 123_456_789)),
            (ChronoField.AMPM_OF_DAY, 0, LocalTime.of(1, 45, 20, 123_456_789)),
        ],
    )
    def test_with_field(self, field: ChronoField, value: int, expected: LocalTime) -> None:
        assert T.with_field(field, value) == expected

    def test_value_is_range_checked(self) -> None:
        with pytest.raises(RangeError, match="HourOfDay"):
            T.with_field(ChronoField.HOUR_OF_DAY, 24)
        with pytest.raises(RangeError, match="ClockHourOfDay"):
            T.with_field(ChronoField.CLOCK_HOUR_OF_DAY, 0)

    def test_unsupported_field(self) -> None:
        with pytest.raises(UnsupportedFieldError):
            T.with_field(ChronoField.YEAR, 2000)

    def test_unchanged_returns_self(self) -> None:
        assert T.with_hour(13) is T
        assert T.with_minute(45) is T
        assert T.with_second(20) is T
        assert T.with_nanosecond(123_456_789) is T

    def test_with_shortcuts_validate(self) -> None:
        with pytest.raises(RangeError):
            T.with_minute(60)
        with pytest.raises(RangeError):
            T.with_nanosecond(-1)

    def test_external_field(self) -> None:
        t = LocalTime.of(10, 47)
        assert t.with_field(QUARTER_OF_HOUR, 0) == LocalTime.of(10, 2)
        with pytest.raises(RangeError):
            t.with_field(QUARTER_OF_HOUR, 4)


class TestAdjust:
    def test_local_time_adjuster_replaces(self) -> None:
        assert T.adjust(LocalTime.NOON) is LocalTime.NOON

    def test_custom_adjuster(self) -> None:
        class StartOfHour:
            def adjust_into(self, temporal: LocalTime) -> LocalTime:
                return temporal.with_minute(0).with_second(0).with_nanosecond(0)

        assert T.adjust(StartOfHour()) == LocalTime.of(13, 0)

    def test_adjust_into_sets_nano_of_day(self) -> None:
        assert LocalTime.of(10, 0).adjust_into(T) == LocalTime.of(10, 0)


class TestTruncation:
    @pytest.mark.parametrize(
        ("unit", "expected"),
        [
            (ChronoUnit.MICROS, LocalTime.of(13, 45, 20, 123_456_000)),
            (ChronoUnit.MILLIS, LocalTime.of(13, 45, 20, 123_000_000)),
            (ChronoUnit.SECONDS, LocalTime.of(13, 45, 20)),
            (ChronoUnit.MINUTES, LocalTime.of(13, 45)),
            (ChronoUnit.HOURS, LocalTime.of(13, 0)),
            (ChronoUnit.HALF_DAYS, LocalTime.NOON),
            (ChronoUnit.DAYS, LocalTime.MIDNIGHT),
        ],
    )
    def test_truncated_to(self, unit: ChronoUnit, expected: LocalTime) -> None:
        assert T.truncated_to(unit) == expected

    def test_nanos_returns_self(self) -> None:
        assert T.truncated_to(ChronoUnit.NANOS) is T

    def test_unit_longer_than_day(self) -> None:
        with pytest.raises(UnsupportedUnitError, match="too large"):
            T.truncated_to(ChronoUnit.WEEKS)

    def test_ninety_minute_unit(self) -> None:
        ninety = FixedSpanUnit("NinetyMinutes", 90 * 60 * 1_000_000_000)
        assert T.truncated_to(ninety) == LocalTime.of(13, 30)

    def test_unit_not_dividing_day(self) -> None:
        ninety_five = FixedSpanUnit("NinetyFiveMinutes", 95 * 60 * 1_000_000_000)
        with pytest.raises(UnsupportedUnitError, match="without remainder"):
            T.truncated_to(ninety_five)


class TestPlus:
    def test_plus_hours_wraps(self) -> None:
        assert LocalTime.of(23, 0).plus_hours(2) == LocalTime.of(1, 0)
        assert LocalTime.of(10, 0).plus_hours(-11) == LocalTime.of(23, 0)
        assert LocalTime.of(10, 30).plus_hours(24) == LocalTime.of(10, 30)

    def test_plus_minutes_wraps(self) -> None:
        assert LocalTime.of(23, 59).plus_minutes(2) == LocalTime.of(0, 1)
        assert LocalTime.of(0, 0).plus_minutes(-1) == LocalTime.of(23, 59)

    def test_plus_seconds_wraps(self) -> None:
        assert LocalTime.MIDNIGHT.plus_seconds(-1) == LocalTime.of(23, 59, 59)
        assert LocalTime.of(23, 59, 59, 7).plus_seconds(1) == LocalTime.of(0, 0, 0, 7)

    def test_plus_nanos_wraps(self) -> None:
        assert LocalTime.MIDNIGHT.plus_nanos(-1) == LocalTime.MAX
        assert LocalTime.MAX.plus_nanos(1) is LocalTime.MIDNIGHT

    def test_zero_returns_self(self) -> None:
        for unit in (ChronoUnit.NANOS, ChronoUnit.SECONDS, ChronoUnit.HOURS, ChronoUnit.HALF_DAYS):
            assert T.plus(0, unit) is T
        assert T.plus_hours(0) is T

    def test_whole_day_returns_self(self) -> None:
        assert T.plus_minutes(1_440) is T
        assert T.plus_seconds(-86_400) is T
        assert T.plus_nanos(NANOS_PER_DAY * 3) is T

    def test_plus_micros_and_millis(self) -> None:
        assert LocalTime.MIDNIGHT.plus(1, ChronoUnit.MICROS) == LocalTime.of(0, 0, 0, 1_000)
        assert LocalTime.MIDNIGHT.plus(MICROS_PER_DAY + 1, ChronoUnit.MICROS) == LocalTime.of(
            0, 0, 0, 1_000
        )
        assert LocalTime.MIDNIGHT.plus(-1, ChronoUnit.MILLIS) == LocalTime.of(23, 59, 59, 999_000_000)

    def test_plus_half_days(self) -> None:
        assert LocalTime.of(10, 0).plus(3, ChronoUnit.HALF_DAYS) == LocalTime.of(22, 0)
        assert LocalTime.of(10, 0).plus(2, ChronoUnit.HALF_DAYS) == LocalTime.of(10, 0)

    def test_date_unit_rejected(self) -> None:
        with pytest.raises(UnsupportedUnitError, match="Days"):
            T.plus(1, ChronoUnit.DAYS)

    def test_external_unit(self) -> None:
        assert LocalTime.of(23, 30).plus(3, QUARTER_HOURS) == LocalTime.of(0, 15)


class TestMinus:
    def test_minus_wraps(self) -> None:
        assert LocalTime.of(1, 0).minus(2, ChronoUnit.HOURS) == LocalTime.of(23, 0)
        assert LocalTime.of(1, 0).minus_hours(25) == LocalTime.MIDNIGHT
        assert LocalTime.of(0, 0).minus_minutes(1) == LocalTime.of(23, 59)
        assert LocalTime.of(0, 0).minus_seconds(86_401) == LocalTime.of(23, 59, 59)
        assert LocalTime.of(0, 0).minus_nanos(1) == LocalTime.MAX

    def test_minus_int64_min(self) -> None:
        # 2**63 seconds is 55_808 seconds past a whole number of days
        assert LocalTime.MIDNIGHT.minus(INT64_MIN, ChronoUnit.SECONDS) == LocalTime.of(15, 30, 8)

    def test_minus_zero_returns_self(self) -> None:
        assert T.minus(0, ChronoUnit.MINUTES) is T
        assert T.minus_hours(0) is T


class TestAmounts:
    def test_timedelta(self) -> None:
        assert LocalTime.of(10, 0) + dt.timedelta(minutes=90) == LocalTime.of(11, 30)
        assert dt.timedelta(hours=1) + LocalTime.of(10, 0) == LocalTime.of(11, 0)
        assert LocalTime.MIDNIGHT - dt.timedelta(microseconds=1) == LocalTime.of(23, 59, 59, 999_999)
        assert LocalTime.of(10, 0).plus_amount(dt.timedelta(days=-1, hours=2)) == LocalTime.of(12, 0)

    def test_temporal_amount(self) -> None:
        class TwoHours:
            def add_to(self, temporal: LocalTime) -> LocalTime:
                return temporal.plus_hours(2)

            def subtract_from(self, temporal: LocalTime) -> LocalTime:
                return temporal.minus_hours(2)

        assert LocalTime.of(23, 0) + TwoHours() == LocalTime.of(1, 0)
        assert LocalTime.of(1, 0) - TwoHours() == LocalTime.of(23, 0)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            LocalTime.of(10, 0) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            LocalTime.of(10, 0) - LocalTime.of(9, 0)  # type: ignore[operator]

    @pytest.mark.parametrize("unit", [ChronoUnit.HOURS, QUARTER_HOURS], ids=str)
    def test_unit_is_not_an_amount(self, unit: object) -> None:
        with pytest.raises(TypeError, match="unsupported operand"):
            LocalTime.of(10, 0) + unit  # type: ignore[operator]
        with pytest.raises(TypeError, match="unsupported operand"):
            LocalTime.of(10, 0) - unit  # type: ignore[operator]
        assert LocalTime.of(10, 0).__add__(unit) is NotImplemented


class TestUntil:
    def test_truncates_toward_zero(self) -> None:
        assert LocalTime.of(11, 30).until(LocalTime.of(13, 29), ChronoUnit.HOURS) == 1
        assert LocalTime.of(13, 29).until(LocalTime.of(11, 30), ChronoUnit.HOURS) == -1

    def test_negative_partial_millis(self) -> None:
        end = LocalTime.of(9, 59, 59, 999_000)
        assert LocalTime.of(10, 0).until(end, ChronoUnit.MILLIS) == -999

    def test_full_day_in_nanos(self) -> None:
        assert LocalTime.MIDNIGHT.until(LocalTime.MAX, ChronoUnit.NANOS) == NANOS_PER_DAY - 1

    def test_sub_unit_difference_is_zero(self) -> None:
        assert LocalTime.of(10, 0).until(LocalTime.of(10, 0, 0, 999), ChronoUnit.MICROS) == 0

    def test_half_days(self) -> None:
        assert LocalTime.MIDNIGHT.until(LocalTime.NOON, ChronoUnit.HALF_DAYS) == 1

    def test_date_unit_rejected(self) -> None:
        with pytest.raises(UnsupportedUnitError):
            LocalTime.MIDNIGHT.until(LocalTime.NOON, ChronoUnit.DAYS)

    def test_end_is_converted(self) -> None:
        assert LocalTime.MIDNIGHT.until(dt.time(12, 0), ChronoUnit.HOURS) == 12
        with pytest.raises(ConversionError):
            LocalTime.MIDNIGHT.until("12:00", ChronoUnit.HOURS)  # type: ignore[arg-type]

    def test_external_unit(self) -> None:
        assert LocalTime.of(10, 0).until(LocalTime.of(10, 44), QUARTER_HOURS) == 2
        assert LocalTime.of(10, 44).until(LocalTime.of(10, 0), QUARTER_HOURS) == -2


class TestQuery:
    def test_precision(self) -> None:
        assert T.query(queries.PRECISION) is ChronoUnit.NANOS

    def test_local_time(self) -> None:
        assert T.query(queries.LOCAL_TIME) is T

    @pytest.mark.parametrize(
        "query",
        [queries.ZONE_ID, queries.ZONE, queries.CHRONOLOGY, queries.OFFSET, queries.LOCAL_DATE],
    )
    def test_inapplicable_queries(self, query: queries.TemporalQuery[object]) -> None:
        assert T.query(query) is None

    def test_custom_query(self) -> None:
        hour = queries.TemporalQuery("Hour", lambda a: a.get_long(ChronoField.HOUR_OF_DAY))
        assert T.query(hour) == 13


class TestComposition:
    def test_at_date(self) -> None:
        ldt = LocalTime.of(10, 15).at_date(dt.date(2024, 2, 29))
        assert ldt.time == LocalTime.of(10, 15)
        assert str(ldt) == "2024-02-29T10:15"

    def test_at_offset(self) -> None:
        assert str(LocalTime.of(10, 15).at_offset(dt.timedelta(hours=1))) == "10:15+01:00"
        assert str(LocalTime.of(10, 15).at_offset(0)) == "10:15Z"
        tz = dt.timezone(dt.timedelta(hours=-5, minutes=-30))
        assert str(LocalTime.of(10, 15).at_offset(tz)) == "10:15-05:30"

    def test_at_offset_out_of_range(self) -> None:
        with pytest.raises(RangeError):
            LocalTime.of(10, 15).at_offset(19 * 3_600)
        with pytest.raises(ValueError, match="whole number of seconds"):
            LocalTime.of(10, 15).at_offset(dt.timedelta(microseconds=1))

    def test_to_second_and_nano_of_day(self) -> None:
        assert T.to_second_of_day() == 49_520
        assert T.to_nano_of_day() == 49_520_123_456_789


class TestComparison:
    def test_ordering(self) -> None:
        assert LocalTime.of(10, 0) < LocalTime.of(10, 0, 0, 1)
        assert LocalTime.of(9, 59, 59, 999_999_999) < LocalTime.of(10, 0)
        times = [LocalTime.NOON, LocalTime.MAX, LocalTime.MIDNIGHT]
        assert sorted(times) == [LocalTime.MIDNIGHT, LocalTime.NOON, LocalTime.MAX]

    def test_compare_to(self) -> None:
        assert LocalTime.of(10, 0).compare_to(LocalTime.of(11, 0)) == -1
        assert LocalTime.of(11, 0).compare_to(LocalTime.of(10, 0)) == 1
        assert LocalTime.of(10, 0).compare_to(LocalTime.of(10, 0)) == 0

    def test_is_before_after(self) -> None:
        assert LocalTime.of(10, 0).is_before(LocalTime.of(10, 1))
        assert LocalTime.of(10, 1).is_after(LocalTime.of(10, 0))
        assert not LocalTime.of(10, 0).is_after(LocalTime.of(10, 0))

    def test_equality_and_hash(self) -> None:
        assert LocalTime.of(10, 15) == LocalTime(10, 15, 0, 0)
        assert hash(LocalTime.of(10, 15, 1)) == hash(LocalTime(10, 15, 1, 0))
        assert len({LocalTime.of(10, 15), LocalTime(10, 15, 0, 0)}) == 1
        assert LocalTime.of(10, 15) != "10:15"


class TestRendering:
    @pytest.mark.parametrize(
        ("time", "text"),
        [
            (LocalTime.of(10, 15), "10:15"),
            (LocalTime.of(10, 15, 30), "10:15:30"),
            (LocalTime.of(10, 15, 0, 1), "10:15:00.000000001"),
            (LocalTime.of(10, 15, 30, 500_000_000), "10:15:30.500"),
            (LocalTime.of(10, 15, 30, 123_456_000), "10:15:30.123456"),
            (LocalTime.of(10, 15, 30, 123_456_789), "10:15:30.123456789"),
            (LocalTime.of(0, 0, 0, 1_000), "00:00:00.000001"),
            (LocalTime.MAX, "23:59:59.999999999"),
        ],
    )
    def test_str(self, time: LocalTime, text: str) -> None:
        assert str(time) == text

    def test_str_parses_back(self) -> None:
        assert LocalTime.parse(str(T)) == T

    def test_repr(self) -> None:
        assert repr(LocalTime.of(10, 15)) == "LocalTime(10:15)"

    def test_format(self) -> None:
        assert LocalTime.of(10, 15).format(ISO_LOCAL_TIME) == "10:15:00"
        assert LocalTime.of(10, 15, 30, 500_000_000).format(ISO_LOCAL_TIME) == "10:15:30.5"

    def test_parse(self) -> None:
        assert LocalTime.parse("10:15") == LocalTime.of(10, 15)
        assert LocalTime.parse("10:15:30.5") == LocalTime.of(10, 15, 30, 500_000_000)
        with pytest.raises(TimeParseError):
            LocalTime.parse("10:15pm")


class TestImmutability:
    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            T.hour = 1  # type: ignore[misc]

    def test_pickle_refused(self) -> None:
        with pytest.raises(TypeError, match="cannot be pickled"):
            pickle.dumps(T)

    def test_copy_returns_same_instance(self) -> None:
        assert copy.copy(T) is T
        assert copy.deepcopy(T) is T

    def test_no_state_restorer(self) -> None:
        assert not hasattr(LocalTime, "__setstate__")
        assert "__getstate__" not in vars(LocalTime)
        blank = object.__new__(LocalTime)
        with pytest.raises(AttributeError):
            blank.__setstate__([99, 99, 99, -5])  # type: ignore[attr-defined]


class TestArithmeticProperties:
    @pytest.mark.parametrize("unit", TIME_UNITS, ids=str)
    @pytest.mark.parametrize(
        "amount", [1, -1, 7, 59, 1_000_003, 10**15, -(10**17), INT64_MAX, INT64_MIN]
    )
    def test_plus_then_minus_restores(self, unit: ChronoUnit, amount: int) -> None:
        assert T.plus(amount, unit).minus(amount, unit) == T
        assert LocalTime.MAX.minus(amount, unit).plus(amount, unit) == LocalTime.MAX

    @pytest.mark.parametrize("unit", TIME_UNITS, ids=str)
    def test_zero_amount_is_identity(self, unit: ChronoUnit) -> None:
        assert T.plus(0, unit) is T
        assert T.minus(0, unit) is T

    def test_seven_time_units(self) -> None:
        assert len(TIME_UNITS) == 7


class TestFieldRoundTrip:
    # Sub-second parts are whole milliseconds so micro and milli fields are lossless.
    @pytest.mark.parametrize(
        "time",
        [
            LocalTime.MIDNIGHT,
            LocalTime.NOON,
            LocalTime.of(0, 0, 0, 5_000_000),
            LocalTime.of(12, 30, 1),
            LocalTime.of(13, 45, 20, 123_000_000),
            LocalTime.of(23, 59, 59, 999_000_000),
        ],
        ids=str,
    )
    @pytest.mark.parametrize("field", TIME_FIELDS, ids=str)
    def test_with_own_value_is_equal(self, time: LocalTime, field: ChronoField) -> None:
        assert time.with_field(field, time.get_long(field)) == time
