"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading, service construction,
and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from wallclock.config.logging import configure_logging
from wallclock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from wallclock.config.settings import WallclockSettings
    from wallclock.domain.clock import Clock
    from wallclock.plugins.manager import PluginManager
    from wallclock.services.result import ServiceResult
    from wallclock.services.time import TimeService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins load on first service access, so ``--help``, ``--version`` and
    ``--examples`` never import plugin code.
    """

    def __init__(self, settings: WallclockSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from wallclock.services.telemetry import disable_telemetry, enable_telemetry

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (loaded lazily; rebuilds registry extensions)."""
        if self._plugins is None:
            from wallclock.domain import registry
            from wallclock.plugins.builtins.spans import SpanUnitsPlugin
            from wallclock.plugins.manager import PluginManager

            registry.clear_extensions()
            manager = PluginManager()
            manager.register_plugin(SpanUnitsPlugin(), name="wallclock.spans")
            cfg = self.settings.plugins
            if cfg.enabled:
                names = manager.discover_and_load(
                    local_dir=self.settings.config_root / cfg.local_dir,
                )
            else:
                names = manager.discover_and_load(entry_points=False)
            logger.debug("Plugins loaded: %s", ", ".join(names))
            self._plugins = manager
        return self._plugins

    def time_service(self, clock: Clock | None = None) -> TimeService:
        """Build a TimeService configured from settings.

        Without *clock*, uses the system clock with the configured offset.
        """
        from wallclock.domain.clock import SystemClock
        from wallclock.services.time import TimeService

        _ = self.plugins
        if clock is None:
            clock = SystemClock(offset_seconds=self.settings.clock.offset_seconds)
        return TimeService(
            clock,
            inspect_fields=self.settings.display.fields,
            hex_uppercase=self.settings.display.hex_uppercase,
            default_unit=self.settings.arithmetic.default_unit,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if self._plugins is not None and self._plugins.warnings:
            result = result.model_copy(
                update={"warnings": [*self._plugins.warnings, *result.warnings]}
            )
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
