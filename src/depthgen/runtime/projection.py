# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Evaluation of depth projections on Python data.

This mirrors the runtime functions of the generated TypeScript module on
JSON-like Python values, using the same projection plans the generator
renders. JavaScript ``null`` is ``None``; ``undefined`` is :data:`UNDEFINED`,
which is also what reading a missing key yields.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from depthgen.compiler.assemble import DEFAULT_MAX_DEPTH, Schema, resolve_schema
from depthgen.compiler.mappers import (
    BuildObject,
    Delegate,
    ExtractId,
    Keep,
    MapItems,
    MapTuple,
    Plan,
    entity_plan,
)

# ###############
# Public Interface
# ###############


class _Undefined:
    """Type of the :data:`UNDEFINED` sentinel."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class ProjectionError(Exception):
    """Raised when a value cannot be projected."""


class ProjectionDirectionError(ProjectionError):
    """Raised when asked to project towards a higher depth."""


class UnknownCollectionError(ProjectionError):
    """Raised for a collection key the projector does not know."""


def is_nullish(value: Any) -> bool:
    """Return True for ``None`` and :data:`UNDEFINED`."""
    return value is None or value is UNDEFINED


def get_id(value: Any) -> Any:
    """Return ``value["id"]`` for a mapping that has an ``id`` key, else *value*."""
    if isinstance(value, Mapping) and "id" in value:
        return value["id"]
    return value


def prune_undefined(value: Any) -> Any:
    """Remove :data:`UNDEFINED`-valued keys from mappings, recursively.

    Sequences are recursed into but keep every position, including
    :data:`UNDEFINED` items. ``None`` is kept.
    """
    if isinstance(value, list):
        return [prune_undefined(item) for item in value]
    if isinstance(value, tuple):
        return tuple(prune_undefined(item) for item in value)
    if isinstance(value, Mapping):
        return {key: prune_undefined(item) for key, item in value.items() if item is not UNDEFINED}
    return value


class DepthProjector:
    """Projects entity documents between depths.

    Args:
        schema: The resolved schema (see :func:`~depthgen.compiler.assemble.resolve_schema`).
        max_depth: The deepest generated variant.
    """

    def __init__(self, schema: Schema, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self._max_depth = max_depth
        self._collections = schema.collections
        known = schema.selected_entities
        self._plans: dict[tuple[str, int], BuildObject] = {
            (name, depth): entity_plan(entity, depth, known)
            for name, entity in known.items()
            for depth in range(1, max_depth + 1)
        }

    @classmethod
    def from_program(
        cls,
        program: Any,
        max_depth: int = DEFAULT_MAX_DEPTH,
        only_names: list[str] | None = None,
    ) -> DepthProjector:
        """Build a projector for a parsed schema, selecting entities like the generator."""
        return cls(resolve_schema(program, only_names), max_depth)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def collections(self) -> dict[str, str]:
        return dict(self._collections)

    def step(self, entity: str, depth: int, value: Any) -> Any:
        """Project an *entity* value one step, from *depth* to ``depth - 1``.

        Equivalent to the generated ``map_<entity>_D<depth>_to_D<depth-1>``.
        """
        plan = self._plans.get((entity, depth))
        if plan is None:
            raise ProjectionError(f"No projector for '{entity}' from depth {depth}")
        return prune_undefined(self._apply(plan, value))

    def project_entity(self, entity: str, value: Any, from_depth: int, to_depth: int) -> Any:
        """Project an *entity* value from *from_depth* down to *to_depth*."""
        _check_direction(from_depth, to_depth)
        if to_depth == from_depth:
            return value
        current = value
        for depth in range(from_depth, to_depth, -1):
            current = self.step(entity, depth, current)
        return prune_undefined(current)

    def project_depth(self, document: Any, collection_key: str, from_depth: int, to_depth: int) -> Any:
        """Project a document of collection *collection_key* between depths.

        Equivalent to the generated ``projectDepth``: projecting upwards is
        rejected and projecting to the same depth returns *document* itself.

        Raises:
            ProjectionDirectionError: If *to_depth* is greater than *from_depth*.
            UnknownCollectionError: If *collection_key* is not generated.
        """
        _check_direction(from_depth, to_depth)
        if to_depth == from_depth:
            return document
        entity = self._collections.get(collection_key)
        if entity is None:
            raise UnknownCollectionError(f"Unknown collection: {collection_key}")
        return self.project_entity(entity, document, from_depth, to_depth)

    def _apply(self, plan: Plan, value: Any) -> Any:
        if isinstance(plan, Keep):
            return value
        if isinstance(plan, ExtractId):
            return get_id(value)
        if is_nullish(value):
            return value
        if isinstance(plan, Delegate):
            return self.step(plan.entity, plan.from_depth, value)
        if isinstance(plan, MapItems):
            return [self._apply(plan.item, item) for item in _sequence(value)]
        if isinstance(plan, MapTuple):
            items = _sequence(value)
            return [
                self._apply(item_plan, items[i] if i < len(items) else UNDEFINED)
                for i, item_plan in enumerate(plan.items)
            ]
        return self._build_object(plan, value)

    def _build_object(self, plan: BuildObject, value: Any) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if plan.open and isinstance(value, Mapping):
            for key, item in value.items():
                result[key] = item if plan.index_value is None else self._apply(plan.index_value, item)
        for prop in plan.properties:
            raw = value.get(prop.name, UNDEFINED) if isinstance(value, Mapping) else UNDEFINED
            result[prop.name] = self._apply(prop.plan, raw)
        return result


# ################
# Implementation
# ################


def _check_direction(from_depth: int, to_depth: int) -> None:
    if to_depth > from_depth:
        raise ProjectionDirectionError(f"Cannot project from depth {from_depth} up to depth {to_depth}")


def _sequence(value: Any) -> list[Any] | tuple[Any, ...]:
    if not isinstance(value, (list, tuple)):
        raise ProjectionError(f"Expected an array, got {type(value).__name__}")
    return value
