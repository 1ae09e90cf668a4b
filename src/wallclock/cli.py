"""Root CLI group for wallclock with global flags and command registration."""

from __future__ import annotations

import click

from wallclock import __version__
from wallclock.commands import register_commands
from wallclock.commands._base import WallclockGroup
from wallclock.commands._context import AppContext
from wallclock.config.settings import WallclockSettings


@click.group(
    cls=WallclockGroup,
    invoke_without_command=True,
    examples="""\
  wallclock inspect 10:15:30
  wallclock plus 23:30 45 -u minutes
  wallclock --json until 09:00 17:30 -u hours
  wallclock -c ./wallclock.toml now""",
)
@click.version_option(version=__version__, prog_name="wallclock")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info and timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """wallclock — time-of-day arithmetic, inspection and encoding."""
    flags = {"json_output": json_output, "quiet": quiet, "verbose": verbose, "log_json": log_json}
    # Unset flags must not shadow WALLCLOCK_* env vars or the TOML file.
    settings = WallclockSettings.from_cli(
        config_path=config_path,
        **{k: v for k, v in flags.items() if v},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
