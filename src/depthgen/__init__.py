# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""depthgen: depth-variant types and projectors for TypeScript schemas."""

from depthgen.compiler import ConfigurationMissingError, GenerationError, generate

__all__ = [
    "ConfigurationMissingError",
    "GenerationError",
    "generate",
]
