# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property report: the interface members that matter for payload schemas.

A property is reported when it is optional, can be ``null``, mentions the
``undefined`` keyword, or references other named types.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field
from pydantic.alias_generators import to_camel

from depthgen.compiler.collector import collect_interfaces
from depthgen.model.nodes import (
    ArrayType,
    IntersectionType,
    Keyword,
    ParenthesizedType,
    PropertySignature,
    TupleType,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
    UnsupportedType,
    is_keyword,
)

# ###############
# Public Interface
# ###############


class PropertyReport(BaseModel):
    """Noteworthy facts about one interface property."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    optional: bool
    contains_null: bool
    contains_undefined_keyword: bool
    referenced_types: list[str] = _Field(default_factory=list)


class InterfaceReport(BaseModel):
    """The reported properties of one interface."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    interface_name: str
    properties: list[PropertyReport] = _Field(default_factory=list)


def property_report(program: Any) -> list[InterfaceReport]:
    """Build the property report for every top-level interface of *program*."""
    reports: list[InterfaceReport] = []
    for entity in collect_interfaces(program).values():
        properties: list[PropertyReport] = []
        for f in entity.fields:
            info = _TypeInfo()
            info.visit(f.type)
            if not (f.optional or info.contains_null or info.contains_undefined or info.references):
                continue
            properties.append(
                PropertyReport(
                    name=f.name,
                    optional=f.optional,
                    contains_null=info.contains_null,
                    contains_undefined_keyword=info.contains_undefined,
                    referenced_types=sorted(info.references),
                )
            )
        reports.append(InterfaceReport(interface_name=entity.name, properties=properties))
    return reports


def report_to_json(reports: list[InterfaceReport]) -> str:
    """Serialize a property report as indented JSON with camelCase keys."""
    return json.dumps([r.model_dump(by_alias=True) for r in reports], indent=2)


# ################
# Implementation
# ################


@dataclass
class _TypeInfo:
    contains_null: bool = False
    contains_undefined: bool = False
    references: set[str] = field(default_factory=set)

    def visit(self, node: TypeNode | None) -> None:
        if node is None:
            return
        if is_keyword(node, Keyword.NULL):
            self.contains_null = True
        elif is_keyword(node, Keyword.UNDEFINED):
            self.contains_undefined = True
        elif isinstance(node, TypeReference):
            if node.name:
                self.references.add(node.name)
            for arg in node.type_arguments:
                self.visit(arg)
        elif isinstance(node, ArrayType):
            self.visit(node.element)
        elif isinstance(node, ParenthesizedType):
            self.visit(node.inner)
        elif isinstance(node, (UnionType, IntersectionType)):
            for part in node.types:
                self.visit(part)
        elif isinstance(node, TupleType):
            for element in node.elements:
                self.visit(element)
        elif isinstance(node, TypeLiteral):
            for member in node.members:
                self.visit(member.type if isinstance(member, PropertySignature) else member.value_type)
        elif isinstance(node, UnsupportedType):
            for child in node.children:
                self.visit(child)
