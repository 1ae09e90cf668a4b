"""BaseService — shared plumbing for wallclock services.

Every service receives a :class:`~wallclock.domain.clock.Clock` at
construction time and converts domain exceptions into failed
:class:`ServiceResult` values with a stable error code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wallclock.domain import registry
from wallclock.domain.clock import SystemClock
from wallclock.domain.errors import (
    CodecIntegrityError,
    ConversionError,
    FieldOverflowError,
    RangeError,
    TemporalError,
    TimeParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from wallclock.services.result import ServiceResult

if TYPE_CHECKING:
    from wallclock.domain.clock import Clock
    from wallclock.domain.contracts import TemporalField, TemporalUnit

logger = logging.getLogger(__name__)

ERROR_CODES: dict[type[TemporalError], str] = {
    TimeParseError: "PARSE_ERROR",
    RangeError: "RANGE_ERROR",
    UnsupportedFieldError: "UNSUPPORTED_FIELD",
    UnsupportedUnitError: "UNSUPPORTED_UNIT",
    FieldOverflowError: "OVERFLOW",
    ConversionError: "CONVERSION_ERROR",
    CodecIntegrityError: "CODEC_ERROR",
}


class InputError(Exception):
    """Caller input rejected before it reaches the domain (unknown name, bad hex)."""

    def __init__(self, code: str, message: str, **detail: object) -> None:
        super().__init__(message)
        self.code = code
        self.detail = detail


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TimeService(BaseService):
            def shift(self, text: str, ...) -> ServiceResult:
                try:
                    ...
                except (TemporalError, InputError) as exc:
                    return self._fail(op, exc)
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else SystemClock()

    @staticmethod
    def _fail(op: str, exc: TemporalError | InputError) -> ServiceResult:
        """Convert a rejected input or domain error into a failed result."""
        detail: dict[str, object] = {}
        if isinstance(exc, InputError):
            code = exc.code
            detail = dict(exc.detail)
        else:
            code = next(
                (ERROR_CODES[cls] for cls in type(exc).__mro__ if cls in ERROR_CODES),
                "TEMPORAL_ERROR",
            )
            if isinstance(exc, TimeParseError):
                detail = {"parsed_text": exc.parsed_text, "error_index": exc.error_index}
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult.failure(op, code, str(exc), **detail)

    @staticmethod
    def _field(name: str) -> TemporalField:
        field = registry.lookup_field(name)
        if field is None:
            raise InputError("UNKNOWN_FIELD", f"Unknown field: {name!r}", name=name)
        return field

    @staticmethod
    def _unit(name: str) -> TemporalUnit:
        unit = registry.lookup_unit(name)
        if unit is None:
            raise InputError("UNKNOWN_UNIT", f"Unknown unit: {name!r}", name=name)
        return unit
