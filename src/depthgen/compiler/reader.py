# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Permissive access to raw ESTree nodes and decoding into the type-node model.

The raw tree is JSON-compatible data as produced by ``oxc-parser`` (or any
ESTree producer with TypeScript extensions). Reads never raise: a missing or
malformed node reads as ``None`` and decodes to the closest supported shape.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from depthgen.compiler.syntax import number_text
from depthgen.model.entities import COMPUTED_KEY
from depthgen.model.nodes import (
    ArrayType,
    IndexSignature,
    IntersectionType,
    Keyword,
    KeywordType,
    LiteralType,
    ParenthesizedType,
    PropertySignature,
    TupleType,
    TypeLiteral,
    TypeLiteralMember,
    TypeNode,
    TypeReference,
    UnionType,
    UnsupportedType,
)

# ###############
# Public Interface
# ###############


def get_prop(node: Any, key: str) -> Any:
    """Return ``node[key]`` when *node* is a mapping, otherwise ``None``."""
    if isinstance(node, Mapping):
        return node.get(key)
    return None


def node_type(node: Any) -> str | None:
    """Return the ``type`` discriminator of a raw node, if it has one."""
    value = get_prop(node, "type")
    return value if isinstance(value, str) else None


def qualified_name_to_string(node: Any) -> str:
    """Render an ``Identifier`` or ``TSQualifiedName`` node as dotted text.

    Returns an empty string for anything else.
    """
    kind = node_type(node)
    if kind == "Identifier":
        name = get_prop(node, "name")
        return name if isinstance(name, str) else ""
    if kind == "TSQualifiedName":
        left = qualified_name_to_string(get_prop(node, "left"))
        right = qualified_name_to_string(get_prop(node, "right"))
        if left and right:
            return f"{left}.{right}"
        return right or left
    return ""


def member_key_name(member: Any) -> str:
    """Return the name of a property-signature key.

    Identifier keys yield their name, literal keys their value as text.
    Computed or unreadable keys yield :data:`COMPUTED_KEY`.
    """
    if get_prop(member, "computed"):
        return COMPUTED_KEY
    key = get_prop(member, "key")
    name = get_prop(key, "name")
    if isinstance(name, str):
        return name
    value = get_prop(key, "value")
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_text(value)
    return COMPUTED_KEY


def annotation_type(node: Any) -> Any:
    """Return the raw type node behind ``node.typeAnnotation.typeAnnotation``."""
    return get_prop(get_prop(node, "typeAnnotation"), "typeAnnotation")


def iter_interface_declarations(program: Any) -> Iterator[Mapping[str, Any]]:
    """Yield top-level interface declarations, bare or wrapped in ``export``."""
    body = get_prop(program, "body")
    if not isinstance(body, list):
        return
    for stmt in body:
        kind = node_type(stmt)
        if kind == "TSInterfaceDeclaration":
            yield stmt
        elif kind == "ExportNamedDeclaration":
            decl = get_prop(stmt, "declaration")
            if node_type(decl) == "TSInterfaceDeclaration":
                yield decl


def interface_members(decl: Any) -> list[Any]:
    """Return the raw members listed in ``decl.body.body``."""
    members = get_prop(get_prop(decl, "body"), "body")
    return members if isinstance(members, list) else []


def read_type_node(node: Any) -> TypeNode | None:
    """Decode a raw ESTree type node into the type-node model.

    Returns ``None`` for a missing node. Node kinds outside the supported set
    decode to :class:`UnsupportedType`.
    """
    kind = node_type(node)
    if kind is None:
        return None
    if kind in _KEYWORDS:
        return KeywordType(keyword=_KEYWORDS[kind])
    if kind == "TSLiteralType":
        return _read_literal(get_prop(node, "literal") or node)
    if kind == "TSParenthesizedType":
        return ParenthesizedType(inner=read_type_node(get_prop(node, "typeAnnotation")))
    if kind == "TSArrayType":
        return ArrayType(element=read_type_node(get_prop(node, "elementType")))
    if kind == "TSTupleType":
        return TupleType(elements=[read_type_node(e) for e in _list(node, "elementTypes")])
    if kind == "TSUnionType":
        return UnionType(types=_read_all(_list(node, "types")))
    if kind == "TSIntersectionType":
        return IntersectionType(types=_read_all(_list(node, "types")))
    if kind == "TSTypeLiteral":
        return TypeLiteral(members=read_members(_list(node, "members")))
    if kind == "TSTypeReference":
        type_args = get_prop(node, "typeArguments") or get_prop(node, "typeParameters")
        return TypeReference(
            name=qualified_name_to_string(get_prop(node, "typeName")),
            type_arguments=_read_all(_list(type_args, "params")),
        )
    return UnsupportedType(node_type=kind, children=_read_children(node))


def read_members(members: list[Any]) -> list[TypeLiteralMember]:
    """Decode property and index signatures; other member kinds are skipped."""
    result: list[TypeLiteralMember] = []
    for member in members:
        kind = node_type(member)
        if kind == "TSPropertySignature":
            result.append(
                PropertySignature(
                    name=member_key_name(member),
                    optional=bool(get_prop(member, "optional")),
                    type=read_type_node(annotation_type(member)),
                )
            )
        elif kind == "TSIndexSignature":
            params = get_prop(member, "parameters")
            first = params[0] if isinstance(params, list) and params else None
            param_name = get_prop(first, "name")
            result.append(
                IndexSignature(
                    parameter=param_name if isinstance(param_name, str) and param_name else "key",
                    key_type=read_type_node(annotation_type(first)),
                    value_type=read_type_node(annotation_type(member)),
                )
            )
    return result


# ################
# Implementation
# ################

_KEYWORDS: dict[str, Keyword] = {
    "TSStringKeyword": Keyword.STRING,
    "TSNumberKeyword": Keyword.NUMBER,
    "TSBooleanKeyword": Keyword.BOOLEAN,
    "TSNullKeyword": Keyword.NULL,
    "TSUndefinedKeyword": Keyword.UNDEFINED,
    "TSAnyKeyword": Keyword.ANY,
    "TSUnknownKeyword": Keyword.UNKNOWN,
    "TSNeverKeyword": Keyword.NEVER,
}

# Location bookkeeping that never holds type nodes.
_SKIPPED_KEYS = frozenset({"type", "start", "end", "range", "loc", "span"})


def _list(node: Any, key: str) -> list[Any]:
    value = get_prop(node, key)
    return value if isinstance(value, list) else []


def _read_all(nodes: list[Any]) -> list[TypeNode]:
    decoded = (read_type_node(n) for n in nodes)
    return [n for n in decoded if n is not None]


def _read_literal(literal: Any) -> LiteralType:
    """Decode a literal node (string, numeric, boolean or negated numeric)."""
    raw = get_prop(literal, "raw")
    value = get_prop(literal, "value")
    if node_type(literal) == "UnaryExpression" and get_prop(literal, "operator") == "-":
        argument = get_prop(literal, "argument")
        arg_value = get_prop(argument, "value")
        if isinstance(arg_value, (int, float)) and not isinstance(arg_value, bool):
            arg_raw = get_prop(argument, "raw")
            return LiteralType(
                value=-arg_value,
                raw=f"-{arg_raw}" if isinstance(arg_raw, str) else None,
            )
        return LiteralType()
    if not isinstance(value, (bool, int, float, str)):
        value = None
    return LiteralType(value=value, raw=raw if isinstance(raw, str) else None)


def _read_children(node: Any) -> list[TypeNode]:
    """Decode every nested node of an unsupported node, dropping empty leaves."""
    children: list[TypeNode] = []
    for key, value in node.items():
        if key in _SKIPPED_KEYS:
            continue
        candidates = value if isinstance(value, list) else [value]
        for candidate in candidates:
            decoded = read_type_node(candidate)
            if decoded is None:
                continue
            if isinstance(decoded, UnsupportedType) and not decoded.children:
                continue
            children.append(decoded)
    return children
