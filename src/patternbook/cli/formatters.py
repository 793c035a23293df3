"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps of the demo catalog
- Rich tables with colors and borders
- List formatting for detailed views
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, str]]) -> str:
    """Format the demo catalog as a table using Rich."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Summary", style="green")
    table.add_column("Package", style="blue")

    for entry in demos:
        table.add_row(entry.get("name", "N/A"), entry.get("summary", ""), entry.get("package", ""))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_list(demos: List[Dict[str, str]]) -> str:
    """Format the demo catalog as a detailed list."""
    if not demos:
        return "No demos found."

    lines = []
    for entry in demos:
        lines.append(f"Pattern: {entry.get('name', 'N/A')}")
        lines.append(f"  Summary: {entry.get('summary', '')}")
        lines.append(f"  Package: {entry.get('package', '')}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")
