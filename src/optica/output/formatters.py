"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables and colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.markup import escape
from rich.table import Table

from optica.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from optica.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_data(console: Console, data: dict[str, Any]) -> None:
    """Render result data: a table for per-lens rows, key-value pairs otherwise."""
    for key, value in data.items():
        if key == "lenses" and isinstance(value, list):
            continue
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(f"  [optica.key]{key}:[/] {escape(str(value))}")

    rows = data.get("lenses")
    if isinstance(rows, list) and rows:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Lens", style="optica.lens")
        table.add_column("Kind")
        table.add_column("Violations", justify="right")
        for row in rows:
            kind = str(row.get("kind", ""))
            if kind in ("total", "partial"):
                kind = f"[optica.kind.{kind}]{kind}[/]"
            table.add_row(
                escape(str(row.get("lens", ""))),
                kind,
                str(row.get("violations", 0)),
            )
        console.print(table)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode flags. Takes precedence over *json_output*.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[optica.ok]OK:[/] [optica.op]{result.op}[/]")
        if result.data and not settings.quiet:
            _render_data(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[optica.error]ERROR:[/] [optica.op]{result.op}[/] - {escape(message)}")
        if result.error and not settings.quiet:
            for error in result.error.detail.get("errors", []):
                console.print(f"  - {escape(str(error))}")
        if result.data and settings.verbose:
            _render_data(console, result.data)
    return get_output(console).rstrip("\n")
