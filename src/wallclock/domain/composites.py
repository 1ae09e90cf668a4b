"""Values produced by combining a time-of-day with a date or an offset.

These are thin holders: all time-of-day behaviour stays on
:class:`~wallclock.domain.local_time.LocalTime`.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wallclock.domain.fields import ChronoField

if TYPE_CHECKING:
    from wallclock.domain.local_time import LocalTime


def offset_to_seconds(offset: dt.timedelta | dt.tzinfo | int) -> int:
    """Normalize an offset to whole seconds within +/-18 hours."""
    if isinstance(offset, dt.tzinfo):
        delta = offset.utcoffset(None)
        if delta is None:
            msg = f"Time-zone {offset!r} has no fixed offset"
            raise ValueError(msg)
        offset = delta
    if isinstance(offset, dt.timedelta):
        if offset.microseconds:
            msg = f"Offset must be a whole number of seconds: {offset}"
            raise ValueError(msg)
        offset = offset.days * 86_400 + offset.seconds
    return ChronoField.OFFSET_SECONDS.check_valid_value(offset)


def format_offset(total_seconds: int) -> str:
    """Render an offset as ``Z``, ``+HH:MM`` or ``+HH:MM:SS``."""
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    hours, rem = divmod(abs(total_seconds), 3_600)
    minutes, seconds = divmod(rem, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


@dataclass(frozen=True, slots=True)
class LocalDateTime:
    """A calendar date paired with a time-of-day."""

    date: dt.date
    time: LocalTime

    def __str__(self) -> str:
        return f"{self.date.isoformat()}T{self.time}"


@dataclass(frozen=True, slots=True)
class OffsetTime:
    """A time-of-day paired with a fixed UTC offset, in seconds."""

    time: LocalTime
    offset_seconds: int

    def __post_init__(self) -> None:
        ChronoField.OFFSET_SECONDS.check_valid_value(self.offset_seconds)

    def __str__(self) -> str:
        return f"{self.time}{format_offset(self.offset_seconds)}"
