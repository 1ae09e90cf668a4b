"""TimeService — parse, inspect, shift, compare and serialize times of day.

Each public method takes user-level input (text, names, integers), runs one
domain operation on :class:`LocalTime` and reports the outcome as a
:class:`ServiceResult`.  Field and unit names resolve through the registry,
so plugin-provided descriptors work everywhere a built-in one does.
"""

from __future__ import annotations

import binascii
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from wallclock.domain import codec, registry
from wallclock.domain.clock import FixedClock
from wallclock.domain.errors import TemporalError
from wallclock.domain.fields import ChronoField
from wallclock.domain.formatting import ISO_LOCAL_TIME
from wallclock.domain.local_time import LocalTime
from wallclock.services.base import BaseService, InputError
from wallclock.services.result import ServiceResult
from wallclock.services.telemetry import annotate, trace_span, traced

if TYPE_CHECKING:
    from wallclock.domain.clock import Clock

DEFAULT_FIELDS: tuple[str, ...] = (
    "hour-of-day",
    "minute-of-hour",
    "second-of-minute",
    "nano-of-second",
    "second-of-day",
    "nano-of-day",
    "ampm-of-day",
    "clock-hour-of-ampm",
)


class TimeService(BaseService):
    """Operations on a single time-of-day given as ISO text."""

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        inspect_fields: Sequence[str] = DEFAULT_FIELDS,
        hex_uppercase: bool = False,
        default_unit: str = "seconds",
    ) -> None:
        super().__init__(clock)
        self._inspect_fields = tuple(inspect_fields)
        self._hex_uppercase = hex_uppercase
        self._default_unit = default_unit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def inspect(self, text: str) -> ServiceResult:
        """Parse *text* and report its canonical forms and field values."""
        op = "inspect"
        try:
            with trace_span("parse"):
                time = LocalTime.parse(text)
            with trace_span("fields"):
                values = {
                    str(field): time.get_long(field)
                    for field in (self._field(name) for name in self._inspect_fields)
                }
            annotate(fields=len(values))
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": str(time),
                "iso": time.format(ISO_LOCAL_TIME),
                "nano_of_day": time.to_nano_of_day(),
                "fields": values,
                "hex": self._hex(codec.encode(time)),
            },
        )

    @traced
    def encode(self, text: str) -> ServiceResult:
        """Encode *text* with the binary codec and report the bytes as hex."""
        op = "encode"
        try:
            time = LocalTime.parse(text)
        except TemporalError as exc:
            return self._fail(op, exc)
        raw = codec.encode(time)
        return ServiceResult(
            ok=True,
            op=op,
            data={"time": str(time), "hex": self._hex(raw), "length": len(raw)},
        )

    @traced
    def decode(self, hex_text: str) -> ServiceResult:
        """Decode hex-encoded codec bytes back to a time."""
        op = "decode"
        try:
            raw = _from_hex(hex_text)
            time = codec.decode(raw)
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"hex": self._hex(raw), "time": str(time), "length": len(raw)},
        )

    @traced
    def shift(
        self,
        text: str,
        amount: int,
        unit: str | None = None,
        *,
        subtract: bool = False,
    ) -> ServiceResult:
        """Add (or with *subtract*, remove) *amount* of *unit*, wrapping at midnight."""
        op = "minus" if subtract else "plus"
        try:
            time = LocalTime.parse(text)
            resolved = self._unit(unit or self._default_unit)
            annotate(unit=str(resolved))
            result = time.minus(amount, resolved) if subtract else time.plus(amount, resolved)
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": str(time),
                "amount": amount,
                "unit": str(resolved),
                "result": str(result),
            },
        )

    @traced
    def until(self, start: str, end: str, unit: str | None = None) -> ServiceResult:
        """Whole units from *start* to *end*, truncated toward zero."""
        op = "until"
        try:
            start_time = LocalTime.parse(start)
            end_time = LocalTime.parse(end)
            resolved = self._unit(unit or self._default_unit)
            annotate(unit=str(resolved))
            amount = start_time.until(end_time, resolved)
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": str(start_time),
                "end": str(end_time),
                "unit": str(resolved),
                "amount": amount,
            },
        )

    @traced
    def truncate(self, text: str, unit: str) -> ServiceResult:
        """Zero every field of *text* finer than *unit*."""
        op = "truncate"
        try:
            time = LocalTime.parse(text)
            resolved = self._unit(unit)
            annotate(unit=str(resolved))
            result = time.truncated_to(resolved)
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"time": str(time), "unit": str(resolved), "result": str(result)},
        )

    @traced
    def adjust(self, text: str, field: str, value: int) -> ServiceResult:
        """Set *field* of *text* to *value*."""
        op = "with"
        try:
            time = LocalTime.parse(text)
            resolved = self._field(field)
            annotate(field=str(resolved))
            result = time.with_field(resolved, value)
        except (TemporalError, InputError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": str(time),
                "field": str(resolved),
                "value": value,
                "result": str(result),
            },
        )

    @traced
    def now(self) -> ServiceResult:
        """Current time-of-day from the service clock."""
        op = "now"
        epoch_second, nano = self._clock.instant()
        offset = self._clock.offset_seconds(epoch_second)
        try:
            time = LocalTime.now(FixedClock(epoch_second, nano=nano, offset=offset))
        except TemporalError as exc:
            return self._fail(op, exc)
        annotate(offset_seconds=offset)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": str(time),
                "iso": time.format(ISO_LOCAL_TIME),
                "offset_seconds": offset,
            },
        )

    @traced
    def catalog(self) -> ServiceResult:
        """List every registered field and unit with its properties."""
        fields: list[dict[str, Any]] = []
        for name, field in registry.registered_fields().items():
            fields.append(
                {
                    "name": name,
                    "range": str(field.range()),
                    "time_based": field.is_time_based(),
                    "supported": LocalTime.MIDNIGHT.is_supported(field),
                    "builtin": isinstance(field, ChronoField),
                }
            )
        units: list[dict[str, Any]] = []
        for name, unit in registry.registered_units().items():
            units.append(
                {
                    "name": name,
                    "duration_nanos": unit.duration_nanos(),
                    "estimated": unit.is_duration_estimated(),
                    "supported": LocalTime.MIDNIGHT.is_supported_unit(unit),
                }
            )
        return ServiceResult(ok=True, op="fields", data={"fields": fields, "units": units})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _hex(self, raw: bytes) -> str:
        text = raw.hex()
        return text.upper() if self._hex_uppercase else text


def _from_hex(hex_text: str) -> bytes:
    cleaned = "".join(hex_text.split())
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise InputError("INVALID_HEX", f"Invalid hex input: {hex_text!r}", hex=hex_text) from exc
