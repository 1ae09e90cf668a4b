"""Off-screen Rich rendering for human-readable wallclock output.

Renderers draw onto a Console that writes into memory; :func:`render_to_text`
returns what was drawn so the CLI can route it to stdout or stderr.  Output
captured this way is never a terminal, so it carries no ANSI codes.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

RENDER_WIDTH = 100

# Roles: op status, time values before/after a change, raw codec bytes,
# numeric field values, and catalog rows a time-of-day cannot use.
WALLCLOCK_THEME = Theme(
    {
        "wc.ok": "bold green",
        "wc.error": "bold red",
        "wc.op": "bold cyan",
        "wc.key": "dim",
        "wc.time": "bold",
        "wc.result": "bold green",
        "wc.hex": "magenta",
        "wc.number": "cyan",
        "wc.unsupported": "dim",
    }
)


def render_to_text(draw: Callable[[Console], None], *, width: int = RENDER_WIDTH) -> str:
    """Run *draw* against an in-memory console and return the text it printed."""
    buffer = StringIO()
    console = Console(file=buffer, theme=WALLCLOCK_THEME, highlight=False, width=width)
    draw(console)
    return buffer.getvalue()
