"""Clock abstraction for obtaining the current instant and offset.

Only :meth:`LocalTime.now <wallclock.domain.local_time.LocalTime.now>`
consumes a clock.  Tests pass a :class:`FixedClock` to pin the result.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

from wallclock.domain.constants import NANOS_PER_SECOND
from wallclock.domain.fields import ChronoField


class Clock(Protocol):
    """Source of the current instant plus the offset in effect at that instant."""

    def instant(self) -> tuple[int, int]:
        """Return ``(epoch_second, nano_of_second)``."""
        ...

    def offset_seconds(self, epoch_second: int) -> int:
        """Return the UTC offset, in seconds, in effect at *epoch_second*."""
        ...


class SystemClock:
    """Clock backed by the system time.

    Uses the host's local offset unless *offset_seconds* pins one.
    """

    def __init__(self, offset_seconds: int | None = None) -> None:
        if offset_seconds is not None:
            ChronoField.OFFSET_SECONDS.check_valid_value(offset_seconds)
        self._offset = offset_seconds

    def instant(self) -> tuple[int, int]:
        return divmod(time.time_ns(), NANOS_PER_SECOND)

    def offset_seconds(self, epoch_second: int) -> int:
        if self._offset is not None:
            return self._offset
        return time.localtime(epoch_second).tm_gmtoff

    def __repr__(self) -> str:
        return f"SystemClock(offset_seconds={self._offset!r})"


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always reports the same instant and offset."""

    epoch_second: int
    nano: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        ChronoField.NANO_OF_SECOND.check_valid_value(self.nano)
        ChronoField.OFFSET_SECONDS.check_valid_value(self.offset)

    def instant(self) -> tuple[int, int]:
        return self.epoch_second, self.nano

    def offset_seconds(self, epoch_second: int) -> int:
        return self.offset
