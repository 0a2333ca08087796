"""Human/JSON output for ServiceResult.

Rendering ops (``strip``, ``html``, ``page``) print their product as-is so
``qstr`` works as a filter in a pipe. Everything else prints an ``OK: op``
header followed by indented key-value pairs. ``--json`` always dumps the
whole result.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from qstr.output.console import create_console, get_output

if TYPE_CHECKING:
    from qstr.services.result import ServiceResult

# op -> data key printed verbatim in human mode
PRIMARY_FIELDS: dict[str, str] = {
    "strip": "text",
    "html": "html",
    "page": "html",
}


class OutputSettings(BaseModel):
    """Output flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_segments(segments: list[dict[str, Any]]) -> str:
    """One line per segment: hex color (or ``-`` when uncolored) and the text."""
    console = create_console(no_color=True)
    for seg in segments:
        color = seg["color"]
        label = color["hex"] if color else "-"
        console.print(f"{label:<8} {seg['text']!r}", markup=False, emoji=False, soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)

    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"

    primary = PRIMARY_FIELDS.get(result.op)
    if primary is not None and primary in result.data:
        return str(result.data[primary])

    if result.op == "parts":
        return format_segments(result.data.get("segments", []))

    if settings.quiet:
        return f"OK: {result.op}"

    parts = [f"OK: {result.op}"]
    if result.data:
        parts.append(_format_data_human(result.data))
    return "\n".join(parts)
