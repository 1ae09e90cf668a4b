"""Commands: binary encoding and decoding of times."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock encode 00:00          # ff
  wallclock encode 10:15          # 0af0
  wallclock encode 10:15:30.5     # 0a0f1e1dcd6500""",
)
@click.argument("time")
@click.pass_obj
def encode(app: AppContext, time: str) -> None:
    """Encode TIME to its compact binary form, printed as hex."""
    app.emit(app.time_service().encode(time))


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock decode ff
  wallclock decode 0af0
  wallclock decode '0a 0f 1e 1d cd 65 00'""",
)
@click.argument("hex_text", metavar="HEX")
@click.pass_obj
def decode(app: AppContext, hex_text: str) -> None:
    """Decode HEX bytes produced by ``encode`` back to a time."""
    app.emit(app.time_service().decode(hex_text))
