"""Rich Console factory and theme for gsctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_envelope() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GS_THEME = Theme(
    {
        "gs.ok": "bold green",
        "gs.error": "bold red",
        "gs.warning": "bold yellow",
        "gs.op": "bold cyan",
        "gs.key": "dim",
        "gs.path": "bold blue",
        "gs.index": "magenta",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "success": "gs.ok",
    "error": "gs.error",
    "warning": "gs.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for an item status or issue severity."""
    return _STATUS_STYLES.get(status, "")
