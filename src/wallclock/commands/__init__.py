"""Subcommand modules for wallclock.

Provides register_commands() which uses deferred imports to keep
``wallclock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from wallclock.commands.adjust import with_cmd
    from wallclock.commands.arithmetic import minus, plus, truncate, until
    from wallclock.commands.codec_cmd import decode, encode
    from wallclock.commands.fields import fields
    from wallclock.commands.inspect_cmd import inspect_cmd
    from wallclock.commands.now import now

    cli.add_command(inspect_cmd)
    cli.add_command(encode)
    cli.add_command(decode)
    cli.add_command(plus)
    cli.add_command(minus)
    cli.add_command(until)
    cli.add_command(truncate)
    cli.add_command(with_cmd)
    cli.add_command(now)
    cli.add_command(fields)
