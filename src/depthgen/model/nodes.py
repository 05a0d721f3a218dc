# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-node representations decoded from a TypeScript syntax tree."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Keyword(Enum):
    """Keyword types recognized by the depth renderer."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    ANY = "any"
    UNKNOWN = "unknown"
    NEVER = "never"


class KeywordType(BaseModel):
    """A keyword type such as ``string`` or ``null``."""

    kind: Literal["keyword"] = "keyword"
    keyword: Keyword


class LiteralType(BaseModel):
    """A literal type (``'a'``, ``42``, ``true``).

    ``raw`` keeps the source text when the parser provided it.
    """

    kind: Literal["literal"] = "literal"
    value: bool | int | float | str | None = None
    raw: str | None = None


class ParenthesizedType(BaseModel):
    """A parenthesized type ``(T)``."""

    kind: Literal["parenthesized"] = "parenthesized"
    inner: TypeNode | None = None


class ArrayType(BaseModel):
    """An array type ``T[]``."""

    kind: Literal["array"] = "array"
    element: TypeNode | None = None


class TupleType(BaseModel):
    """A tuple type ``[A, B]``."""

    kind: Literal["tuple"] = "tuple"
    elements: list[TypeNode | None] = _Field(default_factory=list)


class UnionType(BaseModel):
    """A union type ``A | B``."""

    kind: Literal["union"] = "union"
    types: list[TypeNode] = _Field(default_factory=list)


class IntersectionType(BaseModel):
    """An intersection type ``A & B``."""

    kind: Literal["intersection"] = "intersection"
    types: list[TypeNode] = _Field(default_factory=list)


class PropertySignature(BaseModel):
    """A named member of an inline object type."""

    kind: Literal["property"] = "property"
    name: str
    optional: bool = False
    type: TypeNode | None = None


class IndexSignature(BaseModel):
    """An index signature ``[key: K]: V`` of an inline object type."""

    kind: Literal["index"] = "index"
    parameter: str = "key"
    key_type: TypeNode | None = None
    value_type: TypeNode | None = None


TypeLiteralMember = Annotated[PropertySignature | IndexSignature, _Field(discriminator="kind")]


class TypeLiteral(BaseModel):
    """An inline object type ``{ a: A; [k: string]: B }``."""

    kind: Literal["type_literal"] = "type_literal"
    members: list[TypeLiteralMember] = _Field(default_factory=list)

    @property
    def properties(self) -> list[PropertySignature]:
        return [m for m in self.members if isinstance(m, PropertySignature)]

    @property
    def index_signature(self) -> IndexSignature | None:
        """Return the first index signature, if any."""
        for member in self.members:
            if isinstance(member, IndexSignature):
                return member
        return None


class TypeReference(BaseModel):
    """A reference to a named type, possibly qualified (``NS.Name``)."""

    kind: Literal["reference"] = "reference"
    name: str
    type_arguments: list[TypeNode] = _Field(default_factory=list)


class UnsupportedType(BaseModel):
    """Any node kind the renderer does not model.

    ``children`` holds the type nodes found beneath it so that analyses such as
    the property report can still see nested references.
    """

    kind: Literal["unsupported"] = "unsupported"
    node_type: str = ""
    children: list[TypeNode] = _Field(default_factory=list)


# A decoded type node. The `kind` discriminator keeps the set of node kinds closed.
TypeNode = Annotated[
    KeywordType
    | LiteralType
    | ParenthesizedType
    | ArrayType
    | TupleType
    | UnionType
    | IntersectionType
    | TypeLiteral
    | TypeReference
    | UnsupportedType,
    _Field(discriminator="kind"),
]


def keyword(name: str) -> KeywordType:
    """Shorthand for building a :class:`KeywordType` from its keyword text."""
    return KeywordType(keyword=Keyword(name))


def is_keyword(node: TypeNode | None, kw: Keyword) -> bool:
    """Return True if *node* is the keyword type *kw*."""
    return isinstance(node, KeywordType) and node.keyword == kw


# Resolve forward references for self-referential models.
ParenthesizedType.model_rebuild()
ArrayType.model_rebuild()
TupleType.model_rebuild()
UnionType.model_rebuild()
IntersectionType.model_rebuild()
PropertySignature.model_rebuild()
IndexSignature.model_rebuild()
TypeLiteral.model_rebuild()
TypeReference.model_rebuild()
UnsupportedType.model_rebuild()
