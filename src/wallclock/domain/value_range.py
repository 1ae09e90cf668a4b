"""Valid-value ranges for temporal fields.

A range is described by four bounds so that fields such as day-of-month
(``1 - 28/31``) can express a variable maximum.  Time-based fields always
have a fixed range, so ``minimum == largest_minimum`` and
``smallest_maximum == maximum`` for all of them.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wallclock.domain.constants import INT32_MAX, INT32_MIN
from wallclock.domain.errors import RangeError

if TYPE_CHECKING:
    from wallclock.domain.contracts import TemporalField


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive range of valid values for a field."""

    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.largest_minimum:
            msg = "Smallest minimum value must be less than largest minimum value"
            raise ValueError(msg)
        if self.smallest_maximum > self.maximum:
            msg = "Smallest maximum value must be less than largest maximum value"
            raise ValueError(msg)
        if self.largest_minimum > self.maximum:
            msg = "Minimum value must be less than maximum value"
            raise ValueError(msg)

    @classmethod
    def of(cls, minimum: int, maximum: int, largest_maximum: int | None = None) -> ValueRange:
        """Build a fixed range, or a variable-maximum one when *largest_maximum* is given."""
        if largest_maximum is None:
            return cls(minimum, minimum, maximum, maximum)
        return cls(minimum, minimum, maximum, largest_maximum)

    def is_fixed(self) -> bool:
        return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

    def is_int_value(self) -> bool:
        """Whether every value in the range fits a signed 32-bit integer."""
        return self.minimum >= INT32_MIN and self.maximum <= INT32_MAX

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: TemporalField | None = None) -> int:
        """Return *value* unchanged if it lies in the range.

        Raises:
            TypeError: If *value* is not an integer.
            RangeError: If *value* is out of range.
        """
        value = operator.index(value)
        if not self.is_valid_value(value):
            if field is not None:
                msg = f"Invalid value for {field} (valid values {self}): {value}"
            else:
                msg = f"Invalid value (valid values {self}): {value}"
            raise RangeError(msg)
        return value

    def check_valid_int_value(self, value: int, field: TemporalField | None = None) -> int:
        """Like :meth:`check_valid_value` but also requires a 32-bit range."""
        value = operator.index(value)
        if not self.is_valid_int_value(value):
            msg = f"Invalid int value for {field}: {value}"
            raise RangeError(msg)
        return value

    def __str__(self) -> str:
        text = str(self.minimum)
        if self.minimum != self.largest_minimum:
            text += f"/{self.largest_minimum}"
        text += f" - {self.smallest_maximum}"
        if self.smallest_maximum != self.maximum:
            text += f"/{self.maximum}"
        return text
