"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML output
- Rich tables for stemcell listings
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

STEMCELL_COLUMNS = [
    ("ID", "id", "cyan"),
    ("Name", "name", "green"),
    ("OS", "operating_system", "blue"),
    ("Version", "version", "yellow"),
    ("CPI", "cpi", "magenta"),
    ("CID", "cid", "white"),
]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "stemcells" in data:
        return format_stemcells_table(data["stemcells"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_stemcells_table(stemcells: List[Dict]) -> str:
    """Format stemcells as a table using Rich."""
    if not stemcells:
        return "No stemcells found."

    table = Table(show_header=True, header_style="bold magenta")
    for header, _, style in STEMCELL_COLUMNS:
        table.add_column(header, style=style)

    for stemcell in stemcells:
        # Default CPI is stored as an empty string
        table.add_row(*[
            str(stemcell.get(key) if stemcell.get(key) not in (None, "") else "-")
            for _, key, _ in STEMCELL_COLUMNS
        ])

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
