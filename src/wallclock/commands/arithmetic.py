"""Commands: add, subtract, difference, and truncation.

Arithmetic wraps around midnight: ``plus 23:00 2 -u hours`` is ``01:00``.
The unit defaults to ``[arithmetic] default_unit`` from ``wallclock.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wallclock.commands._base import WallclockCommand

if TYPE_CHECKING:
    from wallclock.commands._context import AppContext

# Negative amounts (``plus 10:00 -5``) are arguments, not unknown options.
_ALLOW_NEGATIVE = {"ignore_unknown_options": True}

_unit_option = click.option(
    "-u",
    "--unit",
    default=None,
    help="Unit name, e.g. seconds, hours, half-days, quarter-hours.",
)


@click.command(
    cls=WallclockCommand,
    context_settings=_ALLOW_NEGATIVE,
    examples="""\
  wallclock plus 10:15 90                # default unit (seconds)
  wallclock plus 23:00 2 -u hours        # wraps to 01:00
  wallclock plus 10:00 -5 -u minutes
  wallclock plus 10:00 3 -u quarter-hours""",
)
@click.argument("time")
@click.argument("amount", type=int)
@_unit_option
@click.pass_obj
def plus(app: AppContext, time: str, amount: int, unit: str | None) -> None:
    """Add AMOUNT units to TIME."""
    app.emit(app.time_service().shift(time, amount, unit))


@click.command(
    cls=WallclockCommand,
    context_settings=_ALLOW_NEGATIVE,
    examples="""\
  wallclock minus 10:15 90
  wallclock minus 01:00 2 -u hours       # wraps to 23:00
  wallclock minus 12:00 1 -u half-days""",
)
@click.argument("time")
@click.argument("amount", type=int)
@_unit_option
@click.pass_obj
def minus(app: AppContext, time: str, amount: int, unit: str | None) -> None:
    """Subtract AMOUNT units from TIME."""
    app.emit(app.time_service().shift(time, amount, unit, subtract=True))


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock until 11:30 13:29 -u hours   # 1
  wallclock until 13:29 11:30 -u hours   # -1 (truncated toward zero)
  wallclock until 09:00 17:30 -u minutes""",
)
@click.argument("start")
@click.argument("end")
@_unit_option
@click.pass_obj
def until(app: AppContext, start: str, end: str, unit: str | None) -> None:
    """Count whole units from START to END within the same day."""
    app.emit(app.time_service().until(start, end, unit))


@click.command(
    cls=WallclockCommand,
    examples="""\
  wallclock truncate 10:15:30.123456789 seconds
  wallclock truncate 10:47 quarter-hours
  wallclock truncate 10:47 days          # 00:00""",
)
@click.argument("time")
@click.argument("unit")
@click.pass_obj
def truncate(app: AppContext, time: str, unit: str) -> None:
    """Zero every field of TIME finer than UNIT."""
    app.emit(app.time_service().truncate(time, unit))
