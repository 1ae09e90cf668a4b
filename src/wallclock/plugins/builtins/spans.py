"""Built-in plugin contributing fixed-span units and a quarter-of-hour field.

Everything here goes through the external field/unit contracts only, so it
doubles as a reference for third-party plugins:

- ``quarter-hours`` (15 minutes) and ``ninety-minutes`` units
- ``quarter-of-hour`` field (0-3, derived from minute-of-hour)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pluggy

from wallclock.domain.constants import NANOS_PER_MINUTE
from wallclock.domain.fields import ChronoField
from wallclock.domain.units import ChronoUnit
from wallclock.domain.value_range import ValueRange

if TYPE_CHECKING:
    from wallclock.domain.contracts import (
        Temporal,
        TemporalAccessor,
        TemporalField,
        TemporalUnit,
    )

hookimpl = pluggy.HookimplMarker("wallclock")


@dataclass(frozen=True, slots=True)
class FixedSpanUnit:
    """A time-based unit of a fixed number of nanoseconds."""

    name: str
    nanos: int

    def __post_init__(self) -> None:
        if self.nanos <= 0:
            msg = f"Span must be positive: {self.nanos}"
            raise ValueError(msg)

    def is_time_based(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return False

    def is_duration_estimated(self) -> bool:
        return False

    def duration_nanos(self) -> int:
        return self.nanos

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(ChronoField.NANO_OF_DAY)

    def add_to[T: Temporal](self, temporal: T, amount: int) -> T:
        return temporal.plus(amount * self.nanos, ChronoUnit.NANOS)

    def between(self, start: Temporal, end: Temporal) -> int:
        """Whole spans from *start* to *end*, truncated toward zero."""
        nanos = start.until(end, ChronoUnit.NANOS)
        spans = abs(nanos) // self.nanos
        return spans if nanos >= 0 else -spans

    def __str__(self) -> str:
        return self.name


class QuarterOfHourField:
    """Which quarter of the hour a time falls in: 0 (``:00``-``:14``) to 3."""

    _RANGE = ValueRange.of(0, 3)

    def is_time_based(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return False

    def range(self) -> ValueRange:
        return self._RANGE

    def check_valid_value(self, value: int) -> int:
        return self._RANGE.check_valid_value(value, self)

    def is_supported_by(self, accessor: TemporalAccessor) -> bool:
        return accessor.is_supported(ChronoField.MINUTE_OF_HOUR)

    def range_refined_by(self, accessor: TemporalAccessor) -> ValueRange:
        return self._RANGE

    def get_from(self, accessor: TemporalAccessor) -> int:
        return accessor.get_long(ChronoField.MINUTE_OF_HOUR) // 15

    def adjust_into[T: Temporal](self, temporal: T, value: int) -> T:
        """Move to the same minute offset within quarter *value*."""
        value = self.check_valid_value(value)
        minute = temporal.get_long(ChronoField.MINUTE_OF_HOUR)
        return temporal.with_field(ChronoField.MINUTE_OF_HOUR, value * 15 + minute % 15)

    def __str__(self) -> str:
        return "QuarterOfHour"

    def __repr__(self) -> str:
        return "QuarterOfHourField()"


QUARTER_HOURS = FixedSpanUnit("QuarterHours", 15 * NANOS_PER_MINUTE)
NINETY_MINUTES = FixedSpanUnit("NinetyMinutes", 90 * NANOS_PER_MINUTE)
QUARTER_OF_HOUR = QuarterOfHourField()


class SpanUnitsPlugin:
    """Registers the built-in fixed-span units and quarter-of-hour field."""

    @hookimpl
    def register_units(self) -> dict[str, TemporalUnit]:
        return {"quarter-hours": QUARTER_HOURS, "ninety-minutes": NINETY_MINUTES}

    @hookimpl
    def register_fields(self) -> dict[str, TemporalField]:
        return {"quarter-of-hour": QUARTER_OF_HOUR}
