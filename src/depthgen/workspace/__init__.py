# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration and input loading for depthgen."""

from depthgen.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_HEADER,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
    parse_generator_config,
)
from depthgen.workspace.inputs import InputError, load_program

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_HEADER",
    "GeneratorConfig",
    "GeneratorConfigError",
    "InputError",
    "default_config_text",
    "load_generator_config",
    "load_program",
    "parse_generator_config",
]
