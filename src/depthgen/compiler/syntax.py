# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript lexical helpers: identifiers, property keys and string quoting."""

from __future__ import annotations

import json
import re

# ###############
# Public Interface
# ###############


def is_identifier(name: str) -> bool:
    """Return True if *name* can be written as a bare TypeScript identifier."""
    return _IDENTIFIER_RE.fullmatch(name) is not None


def property_key(name: str) -> str:
    """Return *name* as a property key: bare when possible, JSON-quoted otherwise."""
    return name if is_identifier(name) else json.dumps(name, ensure_ascii=False)


def member_access(source: str, name: str) -> str:
    """Return an expression reading property *name* of *source*."""
    if is_identifier(name):
        return f"{source}.{name}"
    return f"{source}[{json.dumps(name, ensure_ascii=False)}]"


def single_quoted(value: str) -> str:
    """Quote *value* as a single-quoted TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n").replace("\r", "\\r")
    )
    return f"'{escaped}'"


def double_quoted(value: str) -> str:
    """Quote *value* as a double-quoted TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def number_text(value: int | float) -> str:
    """Format a number the way JavaScript's ``String()`` does for common values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
