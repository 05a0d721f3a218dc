# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for depthgen: decoded type nodes and schema entities."""

from depthgen.model.entities import (
    ANONYMOUS_NAME,
    COMPUTED_KEY,
    CollectionRegistry,
    EntityDecl,
    EntityField,
    variant_name,
)
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
    is_keyword,
    keyword,
)

__all__ = [
    # Type nodes
    "Keyword",
    "KeywordType",
    "LiteralType",
    "ParenthesizedType",
    "ArrayType",
    "TupleType",
    "UnionType",
    "IntersectionType",
    "PropertySignature",
    "IndexSignature",
    "TypeLiteralMember",
    "TypeLiteral",
    "TypeReference",
    "UnsupportedType",
    "TypeNode",
    "keyword",
    "is_keyword",
    # Entities
    "ANONYMOUS_NAME",
    "COMPUTED_KEY",
    "EntityField",
    "EntityDecl",
    "CollectionRegistry",
    "variant_name",
]
