"""Pluggy hook specifications for wallclock extensions.

Both hooks run once, at start-up, after plugins are discovered.  Each
returns a mapping of name to descriptor; the names are registered with
:mod:`wallclock.domain.registry` and become usable wherever the CLI takes
a field or unit name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from wallclock.domain.contracts import TemporalField, TemporalUnit

hookspec = pluggy.HookspecMarker("wallclock")


class WallclockHookSpec:
    """Hook specifications for the wallclock plugin system."""

    @hookspec
    def register_fields(self) -> dict[str, TemporalField] | None:
        """Return name -> field mappings to add to the registry."""

    @hookspec
    def register_units(self) -> dict[str, TemporalUnit] | None:
        """Return name -> unit mappings to add to the registry."""
