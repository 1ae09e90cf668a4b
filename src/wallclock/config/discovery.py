"""Locate the ``wallclock.toml`` that applies to the current directory.

``WALLCLOCK_CONFIG`` names the file outright; when it points at nothing, no
file is used at all.  Otherwise the nearest ``wallclock.toml`` in the start
directory or any parent wins, the way git finds ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "wallclock.toml"
CONFIG_ENV_VAR = "WALLCLOCK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        named = Path(override).expanduser()
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
