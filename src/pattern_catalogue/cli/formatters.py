"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- plain text (the demo lines exactly as printed by each pattern)
- JSON and YAML dumps
- Rich tables
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Dict[str, Any]) -> str:
    """Plain console output."""
    if "results" in data:
        return "\n".join(line for result in data["results"] for line in result["lines"])
    elif "patterns" in data:
        return format_patterns_text(data["patterns"])
    else:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")


def format_patterns_text(patterns: List[Dict[str, Any]]) -> str:
    if not patterns:
        return "No patterns registered."

    name_width = max(len(p["name"]) for p in patterns)
    category_width = max(len(p["category"]) for p in patterns)
    return "\n".join(
        f"{p['name']:<{name_width}}  {p['category']:<{category_width}}  {p['description']}"
        for p in patterns
    )


def format_table_output(data: Dict[str, Any]) -> str:
    """Format data as a table."""
    if "results" in data:
        return format_results_table(data["results"])
    elif "patterns" in data:
        return format_patterns_table(data["patterns"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, Any]]) -> str:
    """Format registered patterns as a Rich table."""
    if not patterns:
        return "No patterns registered."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Description")

    for pattern in patterns:
        table.add_row(pattern["name"], pattern["category"], pattern["description"])

    return _render(table)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    """Format demo results as a Rich table, one row per pattern."""
    if not results:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Output")
    table.add_column("Time (ms)", style="yellow", justify="right")

    for result in results:
        table.add_row(
            result["pattern"],
            result["category"],
            "\n".join(result["lines"]),
            f"{result['duration_ms']:.3f}",
        )

    return _render(table)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
