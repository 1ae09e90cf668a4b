"""Command: the current time-of-day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock now
  wallclock now --offset 0               # UTC
  wallclock now --at 1700000000 --offset 3600""",
)
@click.option(
    "--offset",
    type=int,
    default=None,
    help="UTC offset in seconds (default: [clock] offset_seconds, else the system offset).",
)
@click.option(
    "--at",
    "epoch_second",
    type=int,
    default=None,
    help="Fixed instant, in epoch seconds (offset defaults to UTC).",
)
@click.pass_obj
def now(app: AppContext, offset: int | None, epoch_second: int | None) -> None:
    """Show the current time-of-day."""
    from wallclock.domain.clock import FixedClock, SystemClock
    from wallclock.domain.errors import RangeError

    if offset is None:
        offset = app.settings.clock.offset_seconds
    try:
        if epoch_second is not None:
            clock = FixedClock(epoch_second, offset=offset or 0)
        else:
            clock = SystemClock(offset_seconds=offset)
    except RangeError as exc:
        raise click.BadParameter(str(exc), param_hint="--offset") from exc
    app.emit(app.time_service(clock).now())
