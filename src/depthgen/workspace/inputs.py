# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of parsed schema syntax trees stored as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# ###############
# Public Interface
# ###############


class InputError(Exception):
    """Raised when a syntax-tree file cannot be read or has the wrong shape."""


def load_program(path: Path) -> dict[str, Any]:
    """Read a JSON syntax tree and return its ``Program`` node.

    The file may hold the program node itself or a parser result wrapping it
    as ``{"program": {...}}`` (the shape returned by oxc-parser).

    Raises:
        InputError: If the file is missing, not JSON, or holds no program.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(f"Syntax tree file not found: {path}") from None
    except OSError as exc:
        raise InputError(f"Cannot read syntax tree file: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid JSON in {path}: {exc}") from exc

    return extract_program(data, source_label=str(path))


def extract_program(data: Any, source_label: str = "<data>") -> dict[str, Any]:
    """Return the ``Program`` node of decoded parser output."""
    if isinstance(data, dict) and isinstance(data.get("program"), dict):
        data = data["program"]
    if not isinstance(data, dict) or not isinstance(data.get("body"), list):
        raise InputError(f"{source_label}: expected a Program node with a 'body' list")
    return data
