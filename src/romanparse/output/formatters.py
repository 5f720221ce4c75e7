"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich styled key/value lines)
or machines (--json). Quiet mode prints only the value or the reason.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.markup import escape

from romanparse.output.console import create_console, get_output

if TYPE_CHECKING:
    from romanparse.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False


def _format_quiet(result: ServiceResult) -> str:
    if result.ok:
        value = result.data.get("value")
        # validate passes without computing a value
        return str(value) if value is not None else str(result.data.get("validity", ""))
    return result.error.message if result.error else "Unknown error"


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=settings.no_color)
    if result.ok:
        console.print(f"[roman.ok]OK[/]: [roman.op]{result.op}[/]")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[roman.error]ERROR[/]: [roman.op]{result.op}[/] - [roman.reason]{escape(message)}[/]"
        )
    for key, value in result.data.items():
        if value is None:
            continue
        style = "roman.value" if key == "value" else ""
        rendered = f"[{style}]{escape(str(value))}[/]" if style else escape(str(value))
        console.print(f"  [roman.key]{key}[/]: {rendered}")
    if settings.verbose and result.meta:
        telemetry = result.meta.get("telemetry")
        if telemetry:
            console.print(f"  [roman.key]duration_ms[/]: {telemetry['duration_ms']}")
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
        settings: Output mode flags. Takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, settings)
