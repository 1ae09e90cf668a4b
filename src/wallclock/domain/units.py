"""Built-in temporal units, from nanoseconds to eras.

Only the time-based units (``NANOS`` through ``HALF_DAYS``) take part in
time-of-day arithmetic.  The date-based units exist so that callers get an
:class:`~wallclock.domain.errors.UnsupportedUnitError` rather than a lookup
failure, and so that truncation can reject units longer than a day.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from wallclock.domain.constants import INT64_MAX, NANOS_PER_DAY, NANOS_PER_SECOND
from wallclock.domain.errors import TemporalError

if TYPE_CHECKING:
    from wallclock.domain.contracts import Temporal

_SECONDS_PER_YEAR = 31_556_952  # 365.2425 days


class ChronoUnit(Enum):
    """Standard set of duration units."""

    NANOS = ("Nanos", 1, False)
    MICROS = ("Micros", 1_000, False)
    MILLIS = ("Millis", 1_000_000, False)
    SECONDS = ("Seconds", NANOS_PER_SECOND, False)
    MINUTES = ("Minutes", 60 * NANOS_PER_SECOND, False)
    HOURS = ("Hours", 3_600 * NANOS_PER_SECOND, False)
    HALF_DAYS = ("HalfDays", 43_200 * NANOS_PER_SECOND, False)
    DAYS = ("Days", NANOS_PER_DAY, True)
    WEEKS = ("Weeks", 7 * NANOS_PER_DAY, True)
    MONTHS = ("Months", _SECONDS_PER_YEAR // 12 * NANOS_PER_SECOND, True)
    YEARS = ("Years", _SECONDS_PER_YEAR * NANOS_PER_SECOND, True)
    DECADES = ("Decades", 10 * _SECONDS_PER_YEAR * NANOS_PER_SECOND, True)
    CENTURIES = ("Centuries", 100 * _SECONDS_PER_YEAR * NANOS_PER_SECOND, True)
    MILLENNIA = ("Millennia", 1_000 * _SECONDS_PER_YEAR * NANOS_PER_SECOND, True)
    ERAS = ("Eras", 1_000_000_000 * _SECONDS_PER_YEAR * NANOS_PER_SECOND, True)
    FOREVER = ("Forever", INT64_MAX * NANOS_PER_SECOND + 999_999_999, True)

    def __init__(self, display_name: str, nanos: int, estimated: bool) -> None:
        self.display_name = display_name
        self._nanos = nanos
        self._estimated = estimated

    def duration_nanos(self) -> int:
        """Length of the unit in nanoseconds (estimated for date-based units)."""
        return self._nanos

    def is_duration_estimated(self) -> bool:
        return self._estimated

    def is_time_based(self) -> bool:
        return self in _TIME_UNITS

    def is_date_based(self) -> bool:
        return self not in _TIME_UNITS and self is not ChronoUnit.FOREVER

    def is_supported_by(self, temporal: Temporal) -> bool:
        """Probe *temporal* by adding one unit, then minus one unit."""
        if self is ChronoUnit.FOREVER:
            return False
        try:
            temporal.plus(1, self)
            return True
        except TemporalError:
            try:
                temporal.plus(-1, self)
                return True
            except TemporalError:
                return False

    def add_to[T: Temporal](self, temporal: T, amount: int) -> T:
        return temporal.plus(amount, self)

    def between(self, start: Temporal, end: Temporal) -> int:
        return start.until(end, self)

    def __str__(self) -> str:
        return self.display_name


_TIME_UNITS = frozenset(
    {
        ChronoUnit.NANOS,
        ChronoUnit.MICROS,
        ChronoUnit.MILLIS,
        ChronoUnit.SECONDS,
        ChronoUnit.MINUTES,
        ChronoUnit.HOURS,
        ChronoUnit.HALF_DAYS,
    }
)
