"""Command: list registered fields and units."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock fields
  wallclock -v fields        # include date-based entries
  wallclock -q fields        # names only""",
)
@click.pass_obj
def fields(app: AppContext) -> None:
    """List the fields and units usable with a time-of-day."""
    app.emit(app.time_service().catalog())
