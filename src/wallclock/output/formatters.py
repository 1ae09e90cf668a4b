"""Rich/JSON output dispatch.

The CLI renders a ServiceResult for humans (Rich tables and styled text)
or machines (``--json``).  This module picks the mode; the per-operation
layouts live in :mod:`wallclock.output.renderers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from wallclock.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from wallclock.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
