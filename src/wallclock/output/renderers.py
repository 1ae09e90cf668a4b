"""Operation-specific Rich renderers for ServiceResult.

Each renderer draws onto the in-memory Rich console handed out by
:func:`~wallclock.output.console.render_to_text`.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from wallclock.output.console import render_to_text

if TYPE_CHECKING:
    from rich.console import Console

    from wallclock.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult as plain text laid out by Rich.

    Failures render as an error line; *verbose* adds error detail or the meta block.
    """

    def draw(console: Console) -> None:
        if not result.ok:
            _render_error(result, console, verbose=verbose)
            return
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)

    return render_to_text(draw).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare answer for ``--quiet`` mode (suitable for piping)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    if result.op == "fields":
        names = [f["name"] for f in result.data.get("fields", [])]
        names += [u["name"] for u in result.data.get("units", [])]
        return "\n".join(names)
    return f"OK: {result.op}"


_QUIET_KEYS: dict[str, str] = {
    "inspect": "time",
    "encode": "hex",
    "decode": "time",
    "plus": "result",
    "minus": "result",
    "with": "result",
    "truncate": "result",
    "until": "amount",
    "now": "time",
}


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="wc.ok"), Text(f"  {result.op}", style="wc.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="wc.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="wc.error")
    op = Text(f"  {result.op}", style="wc.op")
    code = Text(f" [{err.code}]" if err else "", style="dim")
    console.print(label, op, code, Text(" - "), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Time renderers ────────────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "time", d["time"], "wc.time")
    _field(console, "iso", d["iso"])
    _field(console, "nano_of_day", d["nano_of_day"], "wc.number")
    _field(console, "hex", d["hex"], "wc.hex")

    values: dict[str, int] = d.get("fields", {})
    if values:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Field")
        table.add_column("Value", style="wc.number", justify="right")
        for name, value in values.items():
            table.add_row(name, str(value))
        console.print(table)


def _render_codec(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render encode/decode results."""
    d = result.data
    _status_line(console, result)
    _field(console, "time", d["time"], "wc.time")
    _field(console, "hex", d["hex"], "wc.hex")
    _field(console, "length", f"{d['length']} byte(s)")


def _render_change(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render plus/minus/with/truncate as ``before -> after``."""
    d = result.data
    _status_line(console, result)
    if "amount" in d:
        sign = "-" if result.op == "minus" else "+"
        _field(console, "change", f"{sign}{d['amount']} {d['unit']}")
    elif "field" in d:
        _field(console, "change", f"{d['field']} = {d['value']}")
    elif "unit" in d:
        _field(console, "change", f"truncate to {d['unit']}")
    console.print(
        Text("  "),
        Text(str(d["time"]), style="wc.time"),
        Text(" -> "),
        Text(str(d["result"]), style="wc.result"),
        sep="",
    )


def _render_until(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "start", d["start"], "wc.time")
    _field(console, "end", d["end"], "wc.time")
    _field(console, "amount", f"{d['amount']} {d['unit']}", "wc.result")


def _render_now(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "time", d["time"], "wc.time")
    _field(console, "offset_seconds", d["offset_seconds"], "wc.number")
    if verbose:
        _field(console, "iso", d["iso"])


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the field and unit catalog as two tables."""
    d = result.data
    _status_line(console, result)

    fields = Table(title="Fields", show_header=True, pad_edge=False, expand=False)
    fields.add_column("Name")
    fields.add_column("Range", justify="right")
    fields.add_column("Time", justify="center")
    fields.add_column("Supported", justify="center")
    for f in d.get("fields", []):
        if not verbose and not f["supported"]:
            continue
        style = "" if f["supported"] else "wc.unsupported"
        fields.add_row(
            f["name"],
            f["range"],
            _mark(f["time_based"]),
            _mark(f["supported"]),
            style=style,
        )
    console.print(fields)

    units = Table(title="Units", show_header=True, pad_edge=False, expand=False)
    units.add_column("Name")
    units.add_column("Nanos", style="wc.number", justify="right")
    units.add_column("Estimated", justify="center")
    units.add_column("Supported", justify="center")
    for u in d.get("units", []):
        if not verbose and not u["supported"]:
            continue
        style = "" if u["supported"] else "wc.unsupported"
        units.add_row(
            u["name"],
            str(u["duration_nanos"]),
            _mark(u["estimated"]),
            _mark(u["supported"]),
            style=style,
        )
    console.print(units)


def _mark(flag: bool) -> str:
    return "yes" if flag else "-"


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "inspect": _render_inspect,
    "encode": _render_codec,
    "decode": _render_codec,
    "plus": _render_change,
    "minus": _render_change,
    "with": _render_change,
    "truncate": _render_change,
    "until": _render_until,
    "now": _render_now,
    "fields": _render_fields,
}
