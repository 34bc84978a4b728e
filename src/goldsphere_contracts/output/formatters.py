"""Rich/JSON output helpers.

The CLI renders response envelopes for humans (Rich tables and colors)
or machines (--json, the envelope's wire form). The formatter layer
picks the mode.
"""

from __future__ import annotations

from pydantic import BaseModel

from goldsphere_contracts.domain.envelope import ApiError, ApiSuccess


class OutputSettings(BaseModel):
    """Output flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_envelope(
    op: str,
    envelope: ApiSuccess | ApiError,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format the envelope produced by operation *op* for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return envelope.model_dump_json(indent=2, by_alias=True, exclude_none=True)

    from goldsphere_contracts.output.renderers import render_envelope, render_quiet

    if settings.quiet:
        return render_quiet(op, envelope)
    return render_envelope(op, envelope, verbose=settings.verbose)
