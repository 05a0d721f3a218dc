# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Collection of top-level interface declarations into entity records."""

from __future__ import annotations

from typing import Any

from depthgen.compiler.reader import (
    annotation_type,
    get_prop,
    interface_members,
    iter_interface_declarations,
    member_key_name,
    node_type,
    read_type_node,
)
from depthgen.model.entities import ANONYMOUS_NAME, EntityDecl, EntityField

# ###############
# Public Interface
# ###############


def collect_interfaces(program: Any) -> dict[str, EntityDecl]:
    """Collect every top-level interface declaration of a parsed program.

    Both ``interface X {}`` and ``export interface X {}`` are recognized;
    type aliases, classes and other statements are ignored. Only property
    signatures become fields. A name declared twice keeps its first position
    but the later declaration's fields.

    Args:
        program: The raw ``Program`` node of the syntax tree.

    Returns:
        A mapping from interface name to :class:`EntityDecl`, in declaration order.
    """
    entities: dict[str, EntityDecl] = {}
    for decl in iter_interface_declarations(program):
        name = get_prop(get_prop(decl, "id"), "name")
        if not isinstance(name, str):
            name = ANONYMOUS_NAME
        entities[name] = EntityDecl(name=name, fields=_read_fields(decl))
    return entities


# ################
# Implementation
# ################


def _read_fields(decl: Any) -> list[EntityField]:
    fields: list[EntityField] = []
    for member in interface_members(decl):
        if node_type(member) != "TSPropertySignature":
            continue
        fields.append(
            EntityField(
                name=member_key_name(member),
                optional=bool(get_prop(member, "optional")),
                type=read_type_node(annotation_type(member)),
            )
        )
    return fields
