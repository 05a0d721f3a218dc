# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of the collection registry from the ``Config`` interface.

The registry is declared in the schema itself::

    export interface Config {
      collections: {
        users: User;
        tenants: Tenant;
      };
    }

It decides which entities are generated and names the key space of the
depth dispatcher.
"""

from __future__ import annotations

from typing import Any

from depthgen.compiler.reader import (
    annotation_type,
    get_prop,
    interface_members,
    iter_interface_declarations,
    member_key_name,
    node_type,
    read_members,
)
from depthgen.model.entities import COMPUTED_KEY, CollectionRegistry, EntityDecl
from depthgen.model.nodes import (
    ArrayType,
    IntersectionType,
    ParenthesizedType,
    PropertySignature,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)

# ###############
# Public Interface
# ###############

CONFIG_INTERFACE = "Config"
COLLECTIONS_PROPERTY = "collections"


def extract_registry(program: Any) -> CollectionRegistry:
    """Read ``Config.collections`` into a :class:`CollectionRegistry`.

    The first ``Config`` interface that declares a ``collections`` property
    decides the result; later declarations are never merged. If that property
    is not an inline object type the registry is empty.

    Args:
        program: The raw ``Program`` node of the syntax tree.

    Returns:
        The registry, empty when no usable ``Config`` declaration exists.
    """
    for decl in iter_interface_declarations(program):
        ident = get_prop(decl, "id")
        if node_type(ident) != "Identifier" or get_prop(ident, "name") != CONFIG_INTERFACE:
            continue
        for member in interface_members(decl):
            if node_type(member) != "TSPropertySignature":
                continue
            if member_key_name(member) != COLLECTIONS_PROPERTY:
                continue
            raw_type = annotation_type(member)
            if node_type(raw_type) != "TSTypeLiteral":
                return CollectionRegistry()
            return _registry_from_members(read_members(get_prop(raw_type, "members") or []))
    return CollectionRegistry()


def first_reference_name(node: TypeNode | None) -> str | None:
    """Return the first referenced type name found under *node*.

    Arrays, parentheses, unions, intersections and inline object types are
    unwrapped in source order.
    """
    if isinstance(node, TypeReference):
        return node.name or None
    if isinstance(node, ArrayType):
        return first_reference_name(node.element)
    if isinstance(node, ParenthesizedType):
        return first_reference_name(node.inner)
    if isinstance(node, (UnionType, IntersectionType)):
        for part in node.types:
            name = first_reference_name(part)
            if name:
                return name
        return None
    if isinstance(node, TypeLiteral):
        for prop in node.properties:
            name = first_reference_name(prop.type)
            if name:
                return name
        return None
    return None


def select_entities(
    entities: dict[str, EntityDecl],
    registry: CollectionRegistry,
    only_names: list[str] | None = None,
) -> list[str]:
    """Return the entity names to generate, in declaration order.

    An entity is selected when the registry references it and it is declared.
    A non-empty *only_names* further restricts the selection.
    """
    referenced = set(registry.entity_names)
    names = [name for name in entities if name in referenced]
    if only_names:
        allowed = set(only_names)
        names = [name for name in names if name in allowed]
    return names


# ################
# Implementation
# ################


def _registry_from_members(members: list[Any]) -> CollectionRegistry:
    collections: dict[str, str] = {}
    for member in members:
        if not isinstance(member, PropertySignature):
            continue
        if not member.name or member.name == COMPUTED_KEY:
            continue
        entity = first_reference_name(member.type)
        if entity:
            collections[member.name] = entity
    return CollectionRegistry(collections=collections)
