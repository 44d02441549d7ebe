#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing for the settings file and for
`--json` output, so every JSON document the CLI produces is formatted the
same way.
"""

import json
import os
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, mode: int | None = None) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    The document is written to a sibling temporary file first and then moved
    into place, so an interrupted write never leaves a truncated file behind.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        mode: Optional permission bits applied to the file (e.g. 0o600)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = filepath.with_name(f".{filepath.name}.tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")

    if mode is not None:
        os.chmod(tmp_path, mode)
    os.replace(tmp_path, filepath)


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Non-ASCII characters are kept as-is and values the json module cannot
    encode natively (datetimes, Decimals) fall back to str().

    Args:
        data: Data to format
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string
    """
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys, default=str)
