"""
Utility functions for Screenly REST API

Handles output formatting for the CLI and the tool server
"""

import json
from typing import Any, Dict, List, Optional


def to_json(result: Any) -> str:
    """Serialize a result as pretty-printed JSON"""
    return json.dumps(result, indent=2)


def error_envelope(error: Any) -> str:
    """Wrap an error message in the {"error": ...} envelope"""
    return json.dumps({"error": str(error)})


def format_table(records: List[Dict[str, Any]], columns: Optional[List[str]] = None) -> str:
    """Render a list of records as a plain-text table

    Columns default to the keys of the first record. Nested values are
    shown as compact JSON.
    """
    if not records:
        return "No records found"

    columns = columns or list(records[0].keys())
    rows = [[_cell(record.get(column)) for column in columns] for record in records]

    widths = [len(column) for column in columns]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    lines = [
        "  ".join(column.upper().ljust(widths[idx]) for idx, column in enumerate(columns))
    ]
    for row in rows:
        lines.append("  ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)))
    return "\n".join(line.rstrip() for line in lines)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def format_result(result: Any, output_format: str = "json") -> str:
    """Format a result for display in the chosen output format"""
    if output_format == "human":
        if isinstance(result, list) and all(isinstance(item, dict) for item in result):
            return format_table(result)
        if isinstance(result, dict):
            width = max((len(str(key)) for key in result), default=0)
            return "\n".join(
                f"{str(key).ljust(width)}  {_cell(value)}" for key, value in result.items()
            )
    return to_json(result)
