"""CLI argument parsers and validators."""

from __future__ import annotations

import json
from typing import Any

import typer


def parse_arg(value: str) -> tuple[str, Any]:
    """Parse a template argument in format KEY=VALUE.

    VALUE is decoded as JSON when possible so lists and numbers survive;
    anything else is kept as a plain string.
    """
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key.isidentifier():
        raise typer.BadParameter(f"Invalid argument name: {key!r}")
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e
