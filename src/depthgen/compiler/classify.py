# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shape classification shared by the type renderer and the projector generator.

Both renderers branch on :func:`classify` so that the type text emitted for a
depth and the runtime projection emitted for the same depth always take the
same branch for a given node.
"""

from __future__ import annotations

import enum
from collections.abc import Container
from dataclasses import dataclass

from depthgen.model.nodes import (
    ArrayType,
    IntersectionType,
    Keyword,
    KeywordType,
    LiteralType,
    ParenthesizedType,
    TupleType,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
    is_keyword,
)

# ###############
# Public Interface
# ###############


class Shape(enum.Enum):
    """The rendering branch a type node takes."""

    PRIMITIVE = "primitive"
    RELATION_SCALAR = "relation_scalar"
    RELATION_ARRAY = "relation_array"
    STRUCTURAL_LITERAL = "structural_literal"
    REFERENCE = "reference"
    COMPOSITE = "composite"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Relation:
    """The arms of a ``string | Ref`` union.

    Attributes:
        refs: Referenced type names in arm order (may repeat, may be empty
            strings for unnamed references).
        nullable: Whether a ``null`` arm is present.
        undefinable: Whether an ``undefined`` arm is present.
    """

    refs: tuple[str, ...]
    nullable: bool = False
    undefinable: bool = False

    def refs_in(self, names: Container[str]) -> list[str]:
        """Return the distinct referenced names contained in *names*, in arm order."""
        return list(dict.fromkeys(ref for ref in self.refs if ref in names))


@dataclass(frozen=True)
class Classification:
    """Result of :func:`classify`; ``relation`` is set for relation shapes."""

    shape: Shape
    relation: Relation | None = None


def flatten_union(node: TypeNode) -> list[TypeNode]:
    """Flatten nested unions and the parentheses around them into one arm list."""
    if isinstance(node, UnionType):
        parts: list[TypeNode] = []
        for part in node.types:
            parts.extend(flatten_union(part))
        return parts
    if isinstance(node, ParenthesizedType):
        return flatten_union(node.inner) if node.inner is not None else [node]
    return [node]


def relation_of(parts: list[TypeNode]) -> Relation | None:
    """Return the relation described by union arms, or None if not relation-shaped.

    A relation needs a ``string`` arm and at least one type reference arm.
    """
    refs = tuple(p.name for p in parts if isinstance(p, TypeReference))
    has_string = any(is_keyword(p, Keyword.STRING) for p in parts)
    if not (has_string and refs):
        return None
    return Relation(
        refs=refs,
        nullable=any(is_keyword(p, Keyword.NULL) for p in parts),
        undefinable=any(is_keyword(p, Keyword.UNDEFINED) for p in parts),
    )


def classify(node: TypeNode | None) -> Classification:
    """Classify a type node into its rendering :class:`Shape`.

    The classification depends only on the node, never on the depth.
    """
    if isinstance(node, (KeywordType, LiteralType)):
        return Classification(Shape.PRIMITIVE)
    if isinstance(node, ArrayType):
        if isinstance(node.element, (UnionType, ParenthesizedType)):
            relation = relation_of(flatten_union(node.element))
            if relation is not None:
                return Classification(Shape.RELATION_ARRAY, relation)
        return Classification(Shape.COMPOSITE)
    if isinstance(node, UnionType):
        relation = relation_of(flatten_union(node))
        if relation is not None:
            return Classification(Shape.RELATION_SCALAR, relation)
        return Classification(Shape.COMPOSITE)
    if isinstance(node, TypeLiteral):
        return Classification(Shape.STRUCTURAL_LITERAL)
    if isinstance(node, TypeReference):
        return Classification(Shape.REFERENCE)
    if isinstance(node, (ParenthesizedType, TupleType, IntersectionType)):
        return Classification(Shape.COMPOSITE)
    return Classification(Shape.UNSUPPORTED)


def is_nullish(node: TypeNode) -> bool:
    """Return True for the ``null`` and ``undefined`` keyword types."""
    return is_keyword(node, Keyword.NULL) or is_keyword(node, Keyword.UNDEFINED)
