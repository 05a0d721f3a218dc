# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the depthgen configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from depthgen.compiler.assemble import DEFAULT_MAX_DEPTH

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".depthgen.yaml"
DEFAULT_HEADER = "// Auto-generated. Do not edit."


class GeneratorConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """The parsed depthgen configuration.

    Attributes:
        input: Path (relative to the config directory) of the JSON syntax tree.
        output: Path (relative to the config directory) of the generated module.
        max_depth: Deepest generated variant.
        only_names: Optional allow-list of entity names (empty means all).
        header: First line written above the generated code.
        report: Optional path of the property report JSON.
    """

    input: str
    output: str
    max_depth: int = DEFAULT_MAX_DEPTH
    only_names: list[str] = field(default_factory=list)
    header: str = DEFAULT_HEADER
    report: str | None = None


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a depthgen configuration file.

    Args:
        path: Path to the ``.depthgen.yaml`` file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read config file: {exc}") from exc

    return parse_generator_config(text, source_label=str(path))


def parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        GeneratorConfigError: If the YAML is invalid or fields are missing or ill-typed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: config must be a YAML mapping")

    config = GeneratorConfig(
        input=_require_string(data, "input", source_label),
        output=_require_string(data, "output", source_label),
    )

    if "max-depth" in data:
        max_depth = data["max-depth"]
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
            raise GeneratorConfigError(f"{source_label}: 'max-depth' must be a non-negative integer")
        config.max_depth = max_depth

    if "only-names" in data:
        only_names = data["only-names"]
        if not isinstance(only_names, list) or not all(isinstance(n, str) for n in only_names):
            raise GeneratorConfigError(f"{source_label}: 'only-names' must be a list of strings")
        config.only_names = only_names

    if "header" in data:
        config.header = _require_string(data, "header", source_label)

    if "report" in data:
        config.report = _require_string(data, "report", source_label)

    return config


def default_config_text() -> str:
    """Return the starter configuration written by ``depthgen init``."""
    return (
        "# depthgen configuration\n"
        "# Syntax tree of the schema, e.g. the JSON of oxc-parser's parseSync().program\n"
        "input: schema.ast.json\n"
        "output: payload-depth-types.ts\n"
        f"max-depth: {DEFAULT_MAX_DEPTH}\n"
    )


# ################
# Implementation
# ################


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising GeneratorConfigError if missing."""
    if key not in mapping:
        raise GeneratorConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a string")
    return value
