# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Projection plans for one depth step and their TypeScript rendering.

A plan describes how a value of depth ``d`` becomes the equivalent value of
depth ``d - 1``. Plans are derived from :func:`~depthgen.compiler.classify.classify`,
the same table the type renderer uses, and are consumed by two backends: the
TypeScript expression renderer in this module and the Python evaluator in
:mod:`depthgen.runtime.projection`.

Every plan other than :class:`Keep` short-circuits on ``null`` and
``undefined``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from depthgen.compiler.classify import Relation, Shape, classify, flatten_union, is_nullish
from depthgen.compiler.syntax import member_access, property_key
from depthgen.model.entities import EntityDecl
from depthgen.model.nodes import ArrayType, ParenthesizedType, TupleType, TypeLiteral, TypeNode, UnionType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Keep:
    """Pass the value through unchanged."""


@dataclass(frozen=True)
class ExtractId:
    """Collapse an embedded entity to its ``id``."""


@dataclass(frozen=True)
class Delegate:
    """Apply the step projector of *entity* starting at *from_depth*."""

    entity: str
    from_depth: int


@dataclass(frozen=True)
class MapItems:
    """Apply *item* to every element of an array."""

    item: Plan


@dataclass(frozen=True)
class MapTuple:
    """Apply one plan per tuple position."""

    items: tuple[Plan, ...]


@dataclass(frozen=True)
class ObjectProperty:
    name: str
    plan: Plan


@dataclass(frozen=True)
class BuildObject:
    """Build a new object from declared properties.

    Attributes:
        properties: Declared properties and their plans, in source order.
        open: Whether undeclared keys are carried over (index signature).
        index_value: Plan applied to every carried-over value, None to copy them.
        untyped: Whether the source is a union of entity variants, read
            through an ``any`` cast in TypeScript.
    """

    properties: tuple[ObjectProperty, ...]
    open: bool = False
    index_value: Plan | None = None
    untyped: bool = False


Plan = Keep | ExtractId | Delegate | MapItems | MapTuple | BuildObject

KEEP = Keep()


def step_function_name(entity: str, depth: int) -> str:
    """Return the name of the generated step projector ``depth -> depth - 1``."""
    return f"map_{entity}_D{depth}_to_D{depth - 1}"


def plan_mapper(
    node: TypeNode | None,
    depth: int,
    entities: Mapping[str, EntityDecl],
    inside_literal: bool = False,
) -> Plan:
    """Derive the plan projecting a value of type *node* from *depth* to ``depth - 1``.

    Args:
        node: The field's decoded type node.
        depth: The source depth; must be at least 1.
        entities: The entities that have step projectors, by name.
        inside_literal: Whether the node sits inside an inline object type.
            Relations found there collapse to their id when the destination
            depth is 1, whatever their declared type at that depth.

    Returns:
        The projection plan for the value.

    Raises:
        ValueError: If *depth* is lower than 1.
    """
    if depth < 1:
        raise ValueError(f"No projection exists below depth 0 (got source depth {depth})")
    if node is None:
        return KEEP
    shape = classify(node)
    if shape.shape == Shape.RELATION_SCALAR:
        assert shape.relation is not None
        return _relation_plan(shape.relation, depth, entities, inside_literal)
    if shape.shape == Shape.RELATION_ARRAY:
        assert shape.relation is not None
        return _map_items(_relation_plan(shape.relation, depth, entities, inside_literal))
    if isinstance(node, TypeLiteral):
        return _object_plan(node, depth, entities)
    if isinstance(node, ParenthesizedType):
        return plan_mapper(node.inner, depth, entities, inside_literal)
    if isinstance(node, ArrayType):
        return _map_items(plan_mapper(node.element, depth, entities, inside_literal))
    if isinstance(node, TupleType):
        items = tuple(plan_mapper(e, depth, entities, inside_literal) for e in node.elements)
        return KEEP if all(item == KEEP for item in items) else MapTuple(items)
    if isinstance(node, UnionType):
        arms = [p for p in flatten_union(node) if not is_nullish(p)]
        if len(arms) == 1:
            return plan_mapper(arms[0], depth, entities, inside_literal)
    return KEEP


def entity_plan(entity: EntityDecl, depth: int, entities: Mapping[str, EntityDecl]) -> BuildObject:
    """Return the plan of the step projector of *entity* at *depth*."""
    if depth < 1:
        raise ValueError(f"No projection exists below depth 0 (got source depth {depth})")
    return BuildObject(
        properties=tuple(ObjectProperty(f.name, plan_mapper(f.type, depth, entities)) for f in entity.fields)
    )


def render_plan(plan: Plan, source: str, level: int = 0) -> str:
    """Render *plan* as a TypeScript expression reading from *source*.

    *level* numbers the callback parameters introduced by nested maps.
    """
    if isinstance(plan, Keep):
        return source
    if isinstance(plan, ExtractId):
        return f"__getId({source})"
    if isinstance(plan, Delegate):
        return _guard(source, f"{step_function_name(plan.entity, plan.from_depth)}({source})")
    if isinstance(plan, MapItems):
        item = f"x{level + 1}"
        return _guard(source, f"{source}.map(({item}) => {render_plan(plan.item, item, level + 1)})")
    if isinstance(plan, MapTuple):
        parts = [render_plan(p, f"{source}[{i}]", level) for i, p in enumerate(plan.items)]
        return _guard(source, "[" + ", ".join(parts) + "]")
    read_from = f"({source} as any)" if plan.untyped else source
    return _guard(source, render_object(plan, read_from, level))


def render_object(plan: BuildObject, source: str, level: int = 0) -> str:
    """Render the object literal built by *plan*, without a null guard."""
    entries: list[str] = []
    if plan.open:
        if plan.index_value is None:
            entries.append(f"...{source}")
        else:
            key, value = f"k{level + 1}", f"v{level + 1}"
            mapped = render_plan(plan.index_value, value, level + 1)
            entries.append(
                f"...Object.fromEntries(Object.entries({source}).map(([{key}, {value}]) => [{key}, {mapped}]))"
            )
    for prop in plan.properties:
        entries.append(f"{property_key(prop.name)}: {render_plan(prop.plan, member_access(source, prop.name), level)}")
    if not entries:
        return "{}"
    return "{ " + ", ".join(entries) + " }"


def render_mapper(
    node: TypeNode | None,
    depth: int,
    entities: Mapping[str, EntityDecl],
    source: str,
    inside_literal: bool = False,
) -> str:
    """Render the TypeScript expression projecting *source* from *depth* to ``depth - 1``."""
    return render_plan(plan_mapper(node, depth, entities, inside_literal), source)


# ################
# Implementation
# ################


def _relation_plan(relation: Relation, depth: int, entities: Mapping[str, EntityDecl], inside_literal: bool) -> Plan:
    target = depth - 1
    if target == 0 or (inside_literal and target == 1):
        return ExtractId()
    refs = relation.refs_in(entities)
    if not refs:
        return KEEP
    if len(refs) == 1:
        return Delegate(refs[0], target)
    # Values of several entities share one projection: the union of their
    # step plans, first declaration winning on a shared field name.
    merged: dict[str, ObjectProperty] = {}
    for ref in refs:
        for prop in entity_plan(entities[ref], target, entities).properties:
            merged.setdefault(prop.name, prop)
    return BuildObject(properties=tuple(merged.values()), untyped=True)


def _map_items(item: Plan) -> Plan:
    return KEEP if item == KEEP else MapItems(item)


def _object_plan(node: TypeLiteral, depth: int, entities: Mapping[str, EntityDecl]) -> BuildObject:
    properties = tuple(
        ObjectProperty(p.name, plan_mapper(p.type, depth, entities, inside_literal=True)) for p in node.properties
    )
    index = node.index_signature
    if index is None:
        return BuildObject(properties=properties)
    value_plan = plan_mapper(index.value_type, depth, entities, inside_literal=True)
    return BuildObject(properties=properties, open=True, index_value=None if value_plan == KEEP else value_plan)


def _guard(source: str, expression: str) -> str:
    return f"({source} == null ? {source} : {expression})"
