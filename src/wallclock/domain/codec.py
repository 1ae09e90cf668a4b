"""Compact binary codec for :class:`~wallclock.domain.local_time.LocalTime`.

Wire format, big-endian, 1 to 7 bytes::

    hour:   int8   ~hour   if minute, second and nano are all zero (stop)
    minute: int8   ~minute if second and nano are both zero (stop)
    second: int8   ~second if nano is zero (stop)
    nano:   int32

A negative byte is a stop sentinel: its one's complement is the final
component and every later component is zero.  ``00:00`` therefore encodes
as the single byte ``0xFF``.

This is the only path from bytes to a ``LocalTime``; instances refuse
pickling.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from wallclock.domain.errors import CodecIntegrityError, RangeError
from wallclock.domain.local_time import LocalTime

_BYTE = struct.Struct(">b")
_INT = struct.Struct(">i")


def write_time(stream: BinaryIO, time: LocalTime) -> None:
    """Write *time* to *stream* in the sentinel-byte format."""
    if time.nanosecond == 0:
        if time.second == 0:
            if time.minute == 0:
                stream.write(_BYTE.pack(~time.hour))
            else:
                stream.write(_BYTE.pack(time.hour))
                stream.write(_BYTE.pack(~time.minute))
        else:
            stream.write(_BYTE.pack(time.hour))
            stream.write(_BYTE.pack(time.minute))
            stream.write(_BYTE.pack(~time.second))
    else:
        stream.write(_BYTE.pack(time.hour))
        stream.write(_BYTE.pack(time.minute))
        stream.write(_BYTE.pack(time.second))
        stream.write(_INT.pack(time.nanosecond))


def read_time(stream: BinaryIO) -> LocalTime:
    """Read one time from *stream*, leaving any following bytes unread.

    Raises:
        CodecIntegrityError: If the stream ends early or holds a component
            outside its range.
    """
    minute = second = nano = 0
    hour = _read(stream, _BYTE)
    if hour < 0:
        hour = ~hour
    else:
        minute = _read(stream, _BYTE)
        if minute < 0:
            minute = ~minute
        else:
            second = _read(stream, _BYTE)
            if second < 0:
                second = ~second
            else:
                nano = _read(stream, _INT)
    try:
        return LocalTime.of(hour, minute, second, nano)
    except RangeError as exc:
        msg = f"Decoded time has an invalid component: {exc}"
        raise CodecIntegrityError(msg) from exc


def encode(time: LocalTime) -> bytes:
    """Encode *time* to bytes."""
    buffer = io.BytesIO()
    write_time(buffer, time)
    return buffer.getvalue()


def decode(data: bytes) -> LocalTime:
    """Decode exactly one time from *data*.

    Raises:
        CodecIntegrityError: If *data* is truncated, has trailing bytes, or
            holds an out-of-range component.
    """
    buffer = io.BytesIO(data)
    time = read_time(buffer)
    trailing = len(data) - buffer.tell()
    if trailing:
        msg = f"Unexpected {trailing} trailing byte(s) after encoded time"
        raise CodecIntegrityError(msg)
    return time


def _read(stream: BinaryIO, layout: struct.Struct) -> int:
    chunk = stream.read(layout.size)
    if chunk is None or len(chunk) != layout.size:
        msg = f"Truncated stream: expected {layout.size} byte(s), got {len(chunk or b'')}"
        raise CodecIntegrityError(msg)
    (value,) = layout.unpack(chunk)
    return value
