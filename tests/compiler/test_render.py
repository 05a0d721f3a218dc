# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for depth-parameterized type rendering."""

from depthgen.compiler.render import render_literal, render_reference, render_type
from depthgen.compiler.syntax import member_access, number_text, property_key, single_quoted
from depthgen.model import (
    ArrayType,
    IndexSignature,
    IntersectionType,
    LiteralType,
    ParenthesizedType,
    PropertySignature,
    TupleType,
    TypeLiteral,
    TypeReference,
    UnionType,
    UnsupportedType,
    keyword,
)

# ###############
# Helpers
# ###############

ENTITIES = {"User", "Tenant"}


def _ref(name: str) -> TypeReference:
    return TypeReference(name=name)


def _union(*types) -> UnionType:
    return UnionType(types=list(types))


def _relation(*extra, ref: str = "User") -> UnionType:
    return _union(keyword("string"), _ref(ref), *extra)


# ###############
# Relations
# ###############


class TestRelations:
    def test_scalar_at_depth_zero(self) -> None:
        assert render_type(_relation(), 0, ENTITIES) == "string"

    def test_scalar_at_depth_one(self) -> None:
        assert render_type(_relation(), 1, ENTITIES) == "User_D0"
        assert render_type(_relation(), 3, ENTITIES) == "User_D2"

    def test_nullable_relation(self) -> None:
        node = _relation(keyword("null"), keyword("undefined"))
        assert render_type(node, 0, ENTITIES) == "string | null | undefined"
        assert render_type(node, 1, ENTITIES) == "null | User_D0 | undefined"

    def test_unknown_reference_stays_bare(self) -> None:
        assert render_type(_relation(ref="Media"), 2, ENTITIES) == "Media"

    def test_repeated_references_render_once(self) -> None:
        node = _union(keyword("string"), _ref("User"), _ref("User"))
        assert render_type(node, 1, ENTITIES) == "User_D0"

    def test_array_of_relations(self) -> None:
        node = ArrayType(element=ParenthesizedType(inner=_relation()))
        assert render_type(node, 0, ENTITIES) == "string[]"
        assert render_type(node, 1, ENTITIES) == "User_D0[]"

    def test_array_of_multi_reference_relations(self) -> None:
        node = ArrayType(element=ParenthesizedType(inner=_relation(_ref("Tenant"))))
        assert render_type(node, 2, ENTITIES) == "(User_D1 | Tenant_D1)[]"

    def test_nullable_array_of_relations(self) -> None:
        node = _union(ArrayType(element=ParenthesizedType(inner=_relation())), keyword("null"))
        assert render_type(node, 0, ENTITIES) == "string[] | null"
        assert render_type(node, 1, ENTITIES) == "User_D0[] | null"

    def test_render_reference(self) -> None:
        assert render_reference("User", 2, ENTITIES) == "User_D1"
        assert render_reference("Media", 2, ENTITIES) == "Media"
        assert render_reference("", 2, ENTITIES) == "any"


# ###############
# Structural types
# ###############


class TestStructural:
    def test_keywords(self) -> None:
        assert render_type(keyword("boolean"), 1, ENTITIES) == "boolean"
        assert render_type(None, 1, ENTITIES) == "any"

    def test_literal_union_array_is_depth_invariant(self) -> None:
        node = ArrayType(
            element=ParenthesizedType(
                inner=_union(LiteralType(value="x", raw="'x'"), LiteralType(value="y", raw="'y'"))
            )
        )
        for depth in range(3):
            assert render_type(node, depth, ENTITIES) == "('x' | 'y')[]"

    def test_literal_fallbacks(self) -> None:
        assert render_literal(LiteralType(value=True)) == "true"
        assert render_literal(LiteralType(value=4.0)) == "4"
        assert render_literal(LiteralType(value="it's")) == "'it\\'s'"
        assert render_literal(LiteralType()) == "unknown"

    def test_tuple_and_intersection(self) -> None:
        assert render_type(TupleType(elements=[keyword("string"), _relation()]), 1, ENTITIES) == "[string, User_D0]"
        assert render_type(IntersectionType(types=[_ref("A"), _ref("B")]), 1, ENTITIES) == "A & B"

    def test_nested_union_is_flattened(self) -> None:
        node = _union(keyword("number"), ParenthesizedType(inner=_union(keyword("boolean"), keyword("null"))))
        assert render_type(node, 0, ENTITIES) == "number | boolean | null"

    def test_type_literal_with_relation(self) -> None:
        node = TypeLiteral(
            members=[
                PropertySignature(name="theme", optional=True, type=_union(keyword("string"), keyword("null"))),
                PropertySignature(name="nested", optional=True, type=_relation(ref="Tenant")),
            ]
        )
        assert render_type(node, 0, ENTITIES) == "{ theme?: string | null; nested?: string; }"
        assert render_type(node, 2, ENTITIES) == "{ theme?: string | null; nested?: Tenant_D1; }"

    def test_type_literal_keeps_first_index_signature(self) -> None:
        node = TypeLiteral(
            members=[
                IndexSignature(parameter="k", key_type=keyword("string"), value_type=keyword("unknown")),
                IndexSignature(parameter="n", key_type=keyword("number"), value_type=keyword("string")),
            ]
        )
        assert render_type(node, 1, ENTITIES) == "{ [k: string]: unknown; }"

    def test_index_signature_inside_union(self) -> None:
        index = TypeLiteral(
            members=[IndexSignature(parameter="k", key_type=keyword("string"), value_type=keyword("unknown"))]
        )
        node = _union(index, ArrayType(element=keyword("unknown")), keyword("string"), keyword("null"))
        assert render_type(node, 1, ENTITIES) == "{ [k: string]: unknown; } | unknown[] | string | null"

    def test_empty_type_literal(self) -> None:
        assert render_type(TypeLiteral(), 0, ENTITIES) == "{  }"

    def test_quoted_property_key(self) -> None:
        node = TypeLiteral(members=[PropertySignature(name="created-at", type=keyword("string"))])
        assert render_type(node, 0, ENTITIES) == '{ "created-at": string; }'

    def test_reference_and_unsupported(self) -> None:
        assert render_type(_ref("Date"), 2, ENTITIES) == "Date"
        assert render_type(_ref(""), 2, ENTITIES) == "unknown"
        assert render_type(UnsupportedType(node_type="TSMappedType"), 2, ENTITIES) == "any"


class TestSyntax:
    def test_number_text(self) -> None:
        assert number_text(3) == "3"
        assert number_text(3.0) == "3"
        assert number_text(2.5) == "2.5"

    def test_property_key(self) -> None:
        assert property_key("id") == "id"
        assert property_key("$ref") == "$ref"
        assert property_key("1st") == '"1st"'

    def test_member_access(self) -> None:
        assert member_access("value", "owner") == "value.owner"
        assert member_access("value", "created-at") == 'value["created-at"]'

    def test_single_quoted(self) -> None:
        assert single_quoted("a\nb") == "'a\\nb'"
