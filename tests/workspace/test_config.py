# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the depthgen configuration module."""

from pathlib import Path

import pytest

from depthgen.workspace import (
    DEFAULT_HEADER,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
    parse_generator_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a depthgen config file and return its path."""
    config_file = tmp_path / ".depthgen.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only input and output uses the defaults for everything else."""
    config = load_generator_config(_write_config(tmp_path, "input: schema.json\noutput: out/types.ts\n"))

    assert isinstance(config, GeneratorConfig)
    assert config.input == "schema.json"
    assert config.output == "out/types.ts"
    assert config.max_depth == 2
    assert config.only_names == []
    assert config.header == DEFAULT_HEADER
    assert config.report is None


def test_full_config(tmp_path: Path) -> None:
    """Every optional key is parsed into its field."""
    content = """\
input: schema.ast.json
output: generated/depth.ts
max-depth: 3
only-names:
  - User
  - Tenant
header: "// generated"
report: generated/report.json
"""
    config = load_generator_config(_write_config(tmp_path, content))

    assert config.max_depth == 3
    assert config.only_names == ["User", "Tenant"]
    assert config.header == "// generated"
    assert config.report == "generated/report.json"


def test_max_depth_zero_is_allowed() -> None:
    config = parse_generator_config("input: a.json\noutput: b.ts\nmax-depth: 0\n")
    assert config.max_depth == 0


def test_default_config_text_parses() -> None:
    """The starter configuration written by init is itself valid."""
    config = parse_generator_config(default_config_text())
    assert config.input == "schema.ast.json"
    assert config.output == "payload-depth-types.ts"
    assert config.max_depth == 2


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(GeneratorConfigError, match="not found"):
        load_generator_config(tmp_path / ".depthgen.yaml")


def test_invalid_yaml_raises() -> None:
    with pytest.raises(GeneratorConfigError, match="Invalid YAML"):
        parse_generator_config("input: [unclosed\n")


def test_non_mapping_raises() -> None:
    with pytest.raises(GeneratorConfigError, match="mapping"):
        parse_generator_config("- a\n- b\n")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("output: b.ts\n", "missing required field 'input'"),
        ("input: a.json\n", "missing required field 'output'"),
        ("input: 1\noutput: b.ts\n", "'input' must be a string"),
        ("input: a.json\noutput: b.ts\nmax-depth: -1\n", "'max-depth'"),
        ("input: a.json\noutput: b.ts\nmax-depth: two\n", "'max-depth'"),
        ("input: a.json\noutput: b.ts\nmax-depth: true\n", "'max-depth'"),
        ("input: a.json\noutput: b.ts\nonly-names: User\n", "'only-names'"),
        ("input: a.json\noutput: b.ts\nonly-names: [1, 2]\n", "'only-names'"),
        ("input: a.json\noutput: b.ts\nheader: 5\n", "'header' must be a string"),
        ("input: a.json\noutput: b.ts\nreport: [x]\n", "'report' must be a string"),
    ],
)
def test_invalid_fields_raise(content: str, message: str) -> None:
    with pytest.raises(GeneratorConfigError, match=message):
        parse_generator_config(content, source_label="cfg.yaml")


def test_error_mentions_source_label() -> None:
    with pytest.raises(GeneratorConfigError, match="^cfg.yaml:"):
        parse_generator_config("input: a.json\n", source_label="cfg.yaml")
