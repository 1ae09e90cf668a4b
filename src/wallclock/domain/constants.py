"""Numeric constants for the 24-hour day model.

All arithmetic in :mod:`wallclock.domain.local_time` is expressed in terms of
these values.  INVARIANT: one day is exactly 86,400 seconds (no leap seconds).
"""

from __future__ import annotations

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY

MILLIS_PER_DAY = SECONDS_PER_DAY * 1_000
MICROS_PER_DAY = SECONDS_PER_DAY * 1_000_000

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY  # 86_400_000_000_000

# --- Integer widths (for narrow vs wide field access) ---

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# --- Calendar bounds used by the date-based field catalog ---

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999

MAX_OFFSET_SECONDS = 18 * SECONDS_PER_HOUR
