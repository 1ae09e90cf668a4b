"""Command: show the canonical forms and field values of a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext


@click.command(
    "inspect",
    cls=WallclockCommand,
    examples="""\
  wallclock inspect 10:15
  wallclock inspect 23:59:59.999999999
  wallclock --json inspect 12:00:00.5""",
)
@click.argument("time")
@click.pass_obj
def inspect_cmd(app: AppContext, time: str) -> None:
    """Parse TIME (HH:mm[:ss[.fffffffff]]) and show its fields."""
    app.emit(app.time_service().inspect(time))
