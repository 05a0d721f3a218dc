# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Depth-variant compiler: collection, classification, rendering and assembly."""

from depthgen.compiler.assemble import (
    DEFAULT_MAX_DEPTH,
    ConfigurationMissingError,
    GenerationError,
    Schema,
    generate,
    resolve_schema,
)
from depthgen.compiler.collector import collect_interfaces
from depthgen.compiler.mappers import plan_mapper, render_mapper
from depthgen.compiler.registry import extract_registry, select_entities
from depthgen.compiler.render import render_type
from depthgen.compiler.report import InterfaceReport, PropertyReport, property_report, report_to_json

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ConfigurationMissingError",
    "GenerationError",
    "InterfaceReport",
    "PropertyReport",
    "Schema",
    "collect_interfaces",
    "extract_registry",
    "generate",
    "plan_mapper",
    "property_report",
    "render_mapper",
    "render_type",
    "report_to_json",
    "resolve_schema",
    "select_entities",
]
