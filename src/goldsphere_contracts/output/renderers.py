"""Operation-specific Rich renderers for response envelopes.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by operation name in :func:`render_envelope`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from goldsphere_contracts.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from goldsphere_contracts.domain.envelope import ApiError, ApiSuccess


# ── Public API ────────────────────────────────────────────────────────


def render_envelope(op: str, envelope: ApiSuccess | ApiError, *, verbose: bool = False) -> str:
    """Render an envelope to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if envelope.success:
        renderer = _OP_RENDERERS.get(op, _render_generic)
        renderer(op, envelope.data, console, verbose=verbose)
    else:
        _render_error(op, envelope, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(op: str, envelope: ApiSuccess | ApiError) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not envelope.success:
        return f"ERROR: {op} — {envelope.error.message}"

    data = envelope.data
    if op == "schemas" and isinstance(data, dict):
        return "\n".join(data.get("schemas", []))
    if op == "batch" and isinstance(data, dict):
        summary = data.get("summary", {})
        return f"{summary.get('successful', 0)}/{summary.get('total', 0)}"
    return f"OK: {op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, op: str) -> None:
    """Print the OK status line."""
    label = Text("OK", style="gs.ok")
    name = Text(f"  {op}", style="gs.op")
    console.print(label, name, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="gs.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _details_table(details: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of ``{path, message}`` rows."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Path", style="gs.path", no_wrap=True)
    table.add_column("Message")
    for detail in details:
        table.add_row(
            Text(str(detail.get("path", "")) or "(root)"),
            Text(str(detail.get("message", ""))),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(op: str, envelope: ApiError, console: Console, *, verbose: bool = False) -> None:
    err = envelope.error
    label = Text("ERROR", style="gs.error")
    name = Text(f"  {op}", style="gs.op")
    sep = Text(" — ")
    console.print(label, name, sep, Text(err.message))
    if verbose:
        console.print(Text(f"  code: {err.code}", style="dim"))

    if err.details:
        console.print()
        console.print(_details_table([d.model_dump() for d in err.details]))


# ── Operation renderers ───────────────────────────────────────────────


def _render_schemas(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    names = data.get("schemas", [])
    for name in names:
        console.print(f"  {name}")
    console.print(f"\n{len(names)} schemas")


def _render_validate(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    """Status line; the normalized document follows in verbose mode."""
    _status_line(console, op)
    if verbose and isinstance(data, dict):
        for key, value in data.items():
            _field(console, key, value)


def _render_batch(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    """Per-item table plus summary counts."""
    _status_line(console, op)
    summary = data.get("summary", {})
    for key in ("total", "successful", "failed"):
        _field(console, key, summary.get(key, 0))

    results = data.get("results", [])
    shown = results if verbose else [r for r in results if r.get("status") == "error"]
    if not shown:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="gs.index", justify="right")
    table.add_column("Status")
    table.add_column("Error")
    for row in shown:
        status = str(row.get("status", ""))
        style = style_for_status(status)
        table.add_row(
            str(row.get("index", "")),
            Text(status, style=style),
            Text(str(row.get("error", ""))),
        )
    console.print()
    console.print(table)


def _render_config_show(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    """Resolved configuration, one section per block."""
    _status_line(console, op)
    for section, body in data.items():
        console.print(f"\n[bold]{section}[/bold]")
        if isinstance(body, dict):
            for key, value in body.items():
                _field(console, key, value)
        else:
            _field(console, section, body)


def _render_config_check(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    issues = data.get("issues", [])
    if not issues:
        console.print("[gs.ok]OK[/gs.ok]  No issues found.")
        return

    for issue in issues:
        sev = str(issue.get("severity", "warning"))
        style = style_for_status(sev)
        line = Text("  ")
        line.append(sev, style=style)
        line.append(f" {issue.get('path', '')}: {issue.get('message', '')}")
        console.print(line)
        if verbose:
            console.print(f"    check: {issue.get('check', '')}")

    errors = sum(1 for i in issues if i.get("severity") == "error")
    console.print(f"\n{errors} errors, {len(issues) - errors} warnings")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(op: str, data: Any, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, op)
    if isinstance(data, dict):
        for key, value in data.items():
            _field(console, key, value)
    elif data is not None:
        _field(console, "data", data)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "schemas": _render_schemas,
    "validate": _render_validate,
    "batch": _render_batch,
    "config_show": _render_config_show,
    "config_check": _render_config_check,
}
