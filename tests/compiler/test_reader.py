# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for raw syntax-tree access and type-node decoding."""

from typing import Any

from depthgen.compiler.reader import (
    get_prop,
    interface_members,
    iter_interface_declarations,
    member_key_name,
    qualified_name_to_string,
    read_type_node,
)
from depthgen.model import (
    COMPUTED_KEY,
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


def _ident(name: str) -> dict[str, Any]:
    return {"type": "Identifier", "name": name}


def _ref(name: str) -> dict[str, Any]:
    return {"type": "TSTypeReference", "typeName": _ident(name)}


def _annotation(node: dict[str, Any]) -> dict[str, Any]:
    return {"type": "TSTypeAnnotation", "typeAnnotation": node}


def _prop(name: str, node: dict[str, Any], optional: bool = False) -> dict[str, Any]:
    return {
        "type": "TSPropertySignature",
        "computed": False,
        "optional": optional,
        "key": _ident(name),
        "typeAnnotation": _annotation(node),
    }


def _interface(name: str, *members: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "TSInterfaceDeclaration",
        "id": _ident(name),
        "body": {"type": "TSInterfaceBody", "body": list(members)},
    }


STRING = {"type": "TSStringKeyword"}
NULL = {"type": "TSNullKeyword"}


# ###############
# Node access
# ###############


class TestNodeAccess:
    def test_get_prop_reads_existing_and_missing_keys(self) -> None:
        obj = {"a": 1, "b": {"c": 2}}
        assert get_prop(obj, "a") == 1
        assert get_prop(obj, "missing") is None
        assert get_prop(None, "a") is None
        assert get_prop("text", "a") is None

    def test_qualified_name_identifier(self) -> None:
        assert qualified_name_to_string(_ident("Foo")) == "Foo"

    def test_qualified_name_nested(self) -> None:
        node = {
            "type": "TSQualifiedName",
            "left": {"type": "TSQualifiedName", "left": _ident("A"), "right": _ident("B")},
            "right": _ident("C"),
        }
        assert qualified_name_to_string(node) == "A.B.C"

    def test_qualified_name_of_other_node_is_empty(self) -> None:
        assert qualified_name_to_string({"type": "ThisExpression"}) == ""
        assert qualified_name_to_string(None) == ""

    def test_member_key_name_variants(self) -> None:
        assert member_key_name({"key": _ident("id")}) == "id"
        assert member_key_name({"key": {"type": "Literal", "value": "created-at"}}) == "created-at"
        assert member_key_name({"key": {"type": "Literal", "value": 1.0}}) == "1"
        assert member_key_name({"computed": True, "key": _ident("sym")}) == COMPUTED_KEY
        assert member_key_name({}) == COMPUTED_KEY

    def test_iter_interface_declarations_bare_and_exported(self) -> None:
        program = {
            "type": "Program",
            "body": [
                _interface("A"),
                {"type": "ExportNamedDeclaration", "declaration": _interface("B")},
                {"type": "TSTypeAliasDeclaration", "id": _ident("C")},
                {"type": "ExportNamedDeclaration", "declaration": None},
            ],
        }
        names = [d["id"]["name"] for d in iter_interface_declarations(program)]
        assert names == ["A", "B"]

    def test_iter_interface_declarations_without_body(self) -> None:
        assert list(iter_interface_declarations({"type": "Program"})) == []

    def test_interface_members(self) -> None:
        decl = _interface("A", _prop("id", STRING))
        assert len(interface_members(decl)) == 1
        assert interface_members({"type": "TSInterfaceDeclaration"}) == []


# ###############
# Type decoding
# ###############


class TestReadTypeNode:
    def test_missing_node(self) -> None:
        assert read_type_node(None) is None

    def test_keywords(self) -> None:
        assert read_type_node(STRING) == keyword("string")
        assert read_type_node({"type": "TSUndefinedKeyword"}) == keyword("undefined")
        assert read_type_node({"type": "TSNeverKeyword"}) == keyword("never")

    def test_string_literal_keeps_raw(self) -> None:
        node = read_type_node({"type": "TSLiteralType", "literal": {"type": "Literal", "value": "x", "raw": "'x'"}})
        assert node == LiteralType(value="x", raw="'x'")

    def test_negative_number_literal(self) -> None:
        node = read_type_node(
            {
                "type": "TSLiteralType",
                "literal": {
                    "type": "UnaryExpression",
                    "operator": "-",
                    "argument": {"type": "Literal", "value": 1, "raw": "1"},
                },
            }
        )
        assert node == LiteralType(value=-1, raw="-1")

    def test_reference_with_type_arguments(self) -> None:
        node = read_type_node(
            {
                "type": "TSTypeReference",
                "typeName": _ident("Array"),
                "typeArguments": {"type": "TSTypeParameterInstantiation", "params": [_ref("User")]},
            }
        )
        assert node == TypeReference(name="Array", type_arguments=[TypeReference(name="User")])

    def test_reference_with_legacy_type_parameters(self) -> None:
        node = read_type_node(
            {
                "type": "TSTypeReference",
                "typeName": _ident("Promise"),
                "typeParameters": {"type": "TSTypeParameterInstantiation", "params": [STRING]},
            }
        )
        assert isinstance(node, TypeReference)
        assert node.type_arguments == [keyword("string")]

    def test_composite_nodes(self) -> None:
        union = {"type": "TSUnionType", "types": [STRING, _ref("User")]}
        assert read_type_node(union) == UnionType(types=[keyword("string"), TypeReference(name="User")])
        paren = {"type": "TSParenthesizedType", "typeAnnotation": union}
        assert isinstance(read_type_node(paren), ParenthesizedType)
        array = {"type": "TSArrayType", "elementType": paren}
        decoded = read_type_node(array)
        assert isinstance(decoded, ArrayType)
        assert isinstance(decoded.element, ParenthesizedType)
        tuple_node = {"type": "TSTupleType", "elementTypes": [STRING, NULL]}
        assert read_type_node(tuple_node) == TupleType(elements=[keyword("string"), keyword("null")])
        intersection = {"type": "TSIntersectionType", "types": [_ref("A"), _ref("B")]}
        assert isinstance(read_type_node(intersection), IntersectionType)

    def test_type_literal_members(self) -> None:
        node = read_type_node(
            {
                "type": "TSTypeLiteral",
                "members": [
                    _prop("theme", STRING, optional=True),
                    {
                        "type": "TSIndexSignature",
                        "parameters": [{"type": "Identifier", "name": "k", "typeAnnotation": _annotation(STRING)}],
                        "typeAnnotation": _annotation({"type": "TSUnknownKeyword"}),
                    },
                    {"type": "TSMethodSignature", "key": _ident("run")},
                ],
            }
        )
        assert isinstance(node, TypeLiteral)
        assert node.members == [
            PropertySignature(name="theme", optional=True, type=keyword("string")),
            IndexSignature(parameter="k", key_type=keyword("string"), value_type=keyword("unknown")),
        ]

    def test_unsupported_node_keeps_nested_types(self) -> None:
        node = read_type_node(
            {
                "type": "TSConditionalType",
                "start": 10,
                "checkType": _ref("T"),
                "extendsType": STRING,
                "trueType": _ref("User"),
                "falseType": {"type": "TSNeverKeyword"},
            }
        )
        assert isinstance(node, UnsupportedType)
        assert node.node_type == "TSConditionalType"
        assert TypeReference(name="User") in node.children
        assert keyword("string") in node.children
