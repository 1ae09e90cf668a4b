"""Command: set one field of a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext


@click.command(
    "with",
    cls=WallclockCommand,
    examples="""\
  wallclock with 10:15 hour-of-day 18
  wallclock with 10:15:30 second-of-day 0
  wallclock with 10:15 ampm-of-day 1     # 22:15
  wallclock with 10:15 quarter-of-hour 3 # 10:45""",
)
@click.argument("time")
@click.argument("field")
@click.argument("value", type=int)
@click.pass_obj
def with_cmd(app: AppContext, time: str, field: str, value: int) -> None:
    """Return TIME with FIELD set to VALUE."""
    app.emit(app.time_service().adjust(time, field, value))
