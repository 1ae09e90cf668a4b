"""wallclock — an immutable nanosecond-precision time-of-day and its CLI."""

from wallclock.domain.local_time import LocalTime

__version__ = "0.1.0"

__all__ = ["LocalTime", "__version__"]
