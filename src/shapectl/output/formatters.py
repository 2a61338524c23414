"""Rich/JSON output helpers.

The CLI renders CheckResult for humans (Rich output, colors) or machines
(--json). ``ABSENT`` fields are pruned in both modes.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from shapectl.output.console import create_console, get_output
from shapectl.services.check import prune_absent
from shapectl.validator.absent import ABSENT

if TYPE_CHECKING:
    from shapectl.services.result import CheckResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False


def _format_value_lines(value: Any) -> list[str]:
    """Format a narrowed value as indented key-value pairs."""
    if not isinstance(value, dict):
        return [f"  {_json.dumps(value, default=str)}"]
    lines: list[str] = []
    for key, item in value.items():
        if isinstance(item, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(item, separators=(',', ':'), default=str)}")
        else:
            lines.append(f"  {key}: {item}")
    return lines


def format_result(result: CheckResult, *, settings: OutputSettings | None = None) -> str:
    """Format a CheckResult for display."""
    settings = settings or OutputSettings()
    value = prune_absent(result.value)
    if value is ABSENT:
        value = None

    if settings.json_output:
        payload = result.model_dump(mode="python")
        payload["value"] = value
        return _json.dumps(payload, indent=2, default=str)

    console = create_console(no_color=settings.no_color)
    if result.ok:
        console.print(f"[shape.ok]OK[/]: [shape.name]{escape(result.name)}[/]")
        if not settings.quiet and value is not None:
            for line in _format_value_lines(value):
                console.print(escape(line))
        return get_output(console).rstrip("\n")

    console.print(f"[shape.error]ERROR[/]: [shape.name]{escape(result.name)}[/]")
    for error in result.errors:
        code = f" [shape.code]({error.code})[/]" if settings.verbose else ""
        if error.path:
            console.print(f"  [shape.path]{escape(error.path)}[/]: {escape(error.message)}{code}")
        else:
            console.print(f"  {escape(error.message)}{code}")
    if result.expected and not settings.quiet:
        console.print("[shape.hint]Expected:[/]")
        for line in result.expected:
            console.print(f"  {escape(line)}")
    return get_output(console).rstrip("\n")
