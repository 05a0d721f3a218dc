# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Depth-parameterized rendering of type nodes to TypeScript type text.

At depth 0 every relation (``string | Ref``) collapses to its identifier
form ``string``. At depth ``d > 0`` the ``string`` arm is dropped and each
reference is rewritten to ``Ref_D{d-1}`` when ``Ref`` is a known entity.
Everything that is not relation-shaped renders the same at every depth.
"""

from __future__ import annotations

from collections.abc import Container

from depthgen.compiler.classify import Relation, Shape, classify, flatten_union
from depthgen.compiler.syntax import number_text, property_key, single_quoted
from depthgen.model.entities import variant_name
from depthgen.model.nodes import (
    ArrayType,
    IntersectionType,
    KeywordType,
    LiteralType,
    ParenthesizedType,
    PropertySignature,
    TupleType,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)

# ###############
# Public Interface
# ###############


def render_type(node: TypeNode | None, depth: int, entities: Container[str]) -> str:
    """Render *node* as TypeScript type text at *depth*.

    Args:
        node: The decoded type node; ``None`` renders as ``any``.
        depth: The target depth (``>= 0``).
        entities: Names of the entities that have depth variants. References
            to other names are kept bare.

    Returns:
        The rendered type text. Unrecognized shapes render as ``any``.
    """
    if node is None:
        return "any"
    shape = classify(node)
    if shape.shape == Shape.RELATION_SCALAR:
        assert shape.relation is not None
        return _render_relation(shape.relation, depth, entities)
    if shape.shape == Shape.RELATION_ARRAY:
        assert shape.relation is not None
        return _render_relation_array(shape.relation, depth, entities)
    if isinstance(node, KeywordType):
        return node.keyword.value
    if isinstance(node, LiteralType):
        return render_literal(node)
    if isinstance(node, ParenthesizedType):
        return f"({render_type(node.inner, depth, entities)})"
    if isinstance(node, ArrayType):
        return f"{render_type(node.element, depth, entities)}[]"
    if isinstance(node, TupleType):
        return "[" + ", ".join(render_type(e, depth, entities) for e in node.elements) + "]"
    if isinstance(node, UnionType):
        return " | ".join(render_type(p, depth, entities) for p in flatten_union(node))
    if isinstance(node, IntersectionType):
        return " & ".join(render_type(p, depth, entities) for p in node.types)
    if isinstance(node, TypeLiteral):
        return _render_type_literal(node, depth, entities)
    if isinstance(node, TypeReference):
        return node.name or "unknown"
    return "any"


def render_literal(node: LiteralType) -> str:
    """Render a literal type, preferring the original source text."""
    if node.raw is not None:
        return node.raw
    value = node.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_text(value)
    if isinstance(value, str):
        return single_quoted(value)
    return "unknown"


def render_reference(name: str, depth: int, entities: Container[str]) -> str:
    """Rewrite a relation reference for a depth ``> 0``."""
    if not name:
        return "any"
    return variant_name(name, depth - 1) if name in entities else name


# ################
# Implementation
# ################


def _render_refs(relation: Relation, depth: int, entities: Container[str]) -> list[str]:
    return list(dict.fromkeys(render_reference(r, depth, entities) for r in relation.refs))


def _render_relation(relation: Relation, depth: int, entities: Container[str]) -> str:
    if depth <= 0:
        pieces = ["string"]
        if relation.nullable:
            pieces.append("null")
        if relation.undefinable:
            pieces.append("undefined")
        return " | ".join(pieces)
    pieces = ["null"] if relation.nullable else []
    pieces.extend(_render_refs(relation, depth, entities))
    if relation.undefinable:
        pieces.append("undefined")
    return " | ".join(pieces)


def _render_relation_array(relation: Relation, depth: int, entities: Container[str]) -> str:
    if depth <= 0:
        return "string[]"
    refs = _render_refs(relation, depth, entities)
    if len(refs) == 1:
        return f"{refs[0]}[]"
    return "(" + " | ".join(refs) + ")[]"


def _render_type_literal(node: TypeLiteral, depth: int, entities: Container[str]) -> str:
    # Only the first index signature is kept; the projector maps that one alone.
    index = node.index_signature
    members: list[str] = []
    for member in node.members:
        if isinstance(member, PropertySignature):
            marker = "?" if member.optional else ""
            members.append(f"{property_key(member.name)}{marker}: {render_type(member.type, depth, entities)};")
        elif member is index:
            key_type = render_type(member.key_type, depth, entities)
            value_type = render_type(member.value_type, depth, entities)
            members.append(f"[{member.parameter}: {key_type}]: {value_type};")
    return "{ " + " ".join(members) + " }"
