"""Typed failures raised by the domain layer.

Every failure is surfaced immediately to the caller; nothing in the domain
retries, repairs, or swallows an error.  An operation either returns a fully
valid value or raises one of these with no observable side effect.
"""

from __future__ import annotations


class TemporalError(Exception):
    """Base class for all wallclock domain errors."""


class RangeError(TemporalError, ValueError):
    """A component value lies outside its declared legal range."""


class UnsupportedFieldError(TemporalError):
    """The field is not time-based or not handled by the value type."""


class UnsupportedUnitError(TemporalError):
    """The unit is not time-based, not handled, or illegal for truncation."""


class FieldOverflowError(TemporalError, OverflowError):
    """A field value does not fit the requested (32-bit) accessor."""


class ConversionError(TemporalError):
    """A generic temporal source cannot supply a time-of-day."""


class CodecIntegrityError(TemporalError):
    """A binary stream is truncated, has trailing data, or holds bad values."""


class TimeParseError(TemporalError, ValueError):
    """Text could not be parsed into a time-of-day.

    Attributes:
        parsed_text: The text that failed to parse.
        error_index: Offset of the first offending character.
    """

    def __init__(self, message: str, parsed_text: str, error_index: int = 0) -> None:
        super().__init__(message)
        self.parsed_text = parsed_text
        self.error_index = error_index
