#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing for context files and API payloads.
Files are always pretty-printed UTF-8 so that stored contexts stay easy to
read and edit by hand.
"""

import json
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Creates the parent directory if needed.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def read_json(filepath: str | Path) -> Any:
    """Read data from a JSON file."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, pretty: bool = True, default: Any = None) -> str:
    """
    Format data as a JSON string.

    Args:
        data: Data to format
        pretty: Indent the output (default: True); compact form is used on the wire
        default: Function to serialize non-JSON types (default: None)
    """
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False, default=default)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"), default=default)
