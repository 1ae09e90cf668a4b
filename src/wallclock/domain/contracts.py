"""Capability contracts for temporal fields, units, queries, and accessors.

Built-in fields and units are closed enums (:mod:`wallclock.domain.fields`,
:mod:`wallclock.domain.units`) handled by fast-path logic inside the value
type.  Anything else is dispatched through these protocols, so extensions can
supply their own fields and units without subclassing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from wallclock.domain.value_range import ValueRange


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to field values and queries."""

    def is_supported(self, field: TemporalField) -> bool: ...

    def range(self, field: TemporalField) -> ValueRange: ...

    def get_long(self, field: TemporalField) -> int: ...

    def query(self, query: TemporalQuery[Any]) -> Any: ...


@runtime_checkable
class Temporal(TemporalAccessor, Protocol):
    """An accessor that can also be adjusted and measured."""

    def with_field(self, field: TemporalField, value: int) -> Self: ...

    def plus(self, amount: int, unit: TemporalUnit) -> Self: ...

    def until(self, end: TemporalAccessor, unit: TemporalUnit) -> int: ...


@runtime_checkable
class TemporalField(Protocol):
    """A named, range-bounded accessor such as hour-of-day."""

    def is_time_based(self) -> bool: ...

    def is_date_based(self) -> bool: ...

    def range(self) -> ValueRange: ...

    def check_valid_value(self, value: int) -> int: ...

    def is_supported_by(self, accessor: TemporalAccessor) -> bool: ...

    def range_refined_by(self, accessor: TemporalAccessor) -> ValueRange: ...

    def get_from(self, accessor: TemporalAccessor) -> int: ...

    def adjust_into[T: Temporal](self, temporal: T, value: int) -> T: ...


@runtime_checkable
class TemporalUnit(Protocol):
    """A duration granularity used for arithmetic, truncation, and differences."""

    def is_time_based(self) -> bool: ...

    def is_date_based(self) -> bool: ...

    def is_duration_estimated(self) -> bool: ...

    def duration_nanos(self) -> int: ...

    def is_supported_by(self, temporal: Temporal) -> bool: ...

    def add_to[T: Temporal](self, temporal: T, amount: int) -> T: ...

    def between(self, start: Temporal, end: Temporal) -> int: ...


class TemporalQuery[R](Protocol):
    """A strategy for extracting information from an accessor."""

    def query_from(self, accessor: TemporalAccessor) -> R | None: ...


class TemporalAdjuster(Protocol):
    """A strategy for adjusting a temporal object."""

    def adjust_into[T: Temporal](self, temporal: T) -> T: ...


@runtime_checkable
class TemporalAmount(Protocol):
    """An amount of time, such as a duration, that can be added or subtracted."""

    def add_to[T: Temporal](self, temporal: T) -> T: ...

    def subtract_from[T: Temporal](self, temporal: T) -> T: ...
