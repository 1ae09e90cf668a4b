"""Common temporal queries.

A query extracts one piece of information from an accessor.  Value types
short-circuit the queries they can answer directly (see
:meth:`LocalTime.query <wallclock.domain.local_time.LocalTime.query>`);
every other accessor falls back to the query's own ``query_from`` logic
defined here.

Queries are compared by identity, so each constant below is a singleton.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wallclock.domain.fields import ChronoField

if TYPE_CHECKING:
    from wallclock.domain.contracts import TemporalAccessor


@dataclass(frozen=True, slots=True, eq=False)
class TemporalQuery[R]:
    """A named query backed by a plain function."""

    name: str
    func: Callable[[TemporalAccessor], R | None]

    def query_from(self, accessor: TemporalAccessor) -> R | None:
        return self.func(accessor)

    def __str__(self) -> str:
        return self.name


def _none(_accessor: TemporalAccessor) -> Any:
    return None


def _local_time(accessor: TemporalAccessor) -> Any:
    if accessor.is_supported(ChronoField.NANO_OF_DAY):
        from wallclock.domain.local_time import LocalTime

        return LocalTime.of_nano_of_day(accessor.get_long(ChronoField.NANO_OF_DAY))
    return None


def _offset(accessor: TemporalAccessor) -> Any:
    if accessor.is_supported(ChronoField.OFFSET_SECONDS):
        return accessor.get_long(ChronoField.OFFSET_SECONDS)
    return None


ZONE_ID: TemporalQuery[Any] = TemporalQuery("ZoneId", _none)
CHRONOLOGY: TemporalQuery[Any] = TemporalQuery("Chronology", _none)
PRECISION: TemporalQuery[Any] = TemporalQuery("Precision", _none)
ZONE: TemporalQuery[Any] = TemporalQuery("Zone", _none)
OFFSET: TemporalQuery[int] = TemporalQuery("Offset", _offset)
LOCAL_DATE: TemporalQuery[Any] = TemporalQuery("LocalDate", _none)
LOCAL_TIME: TemporalQuery[Any] = TemporalQuery("LocalTime", _local_time)
