# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of the generated depth module.

The generated TypeScript contains, in order:

1. ``export type Depth = 0 | ... | N``;
2. ``Entity_D0 .. Entity_DN`` interfaces for every selected entity;
3. ``CollectionKey`` and ``DepthQuery<Name, D>`` dispatch types;
4. the ``__getId`` and ``__pruneUndefined`` runtime helpers;
5. ``map_Entity_D{d}_to_D{d-1}`` step projectors, from ``d = N`` down to 1;
6. the ``projectDepth`` dispatcher.

Generation is all-or-nothing: any error is raised before text is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from depthgen.compiler.collector import collect_interfaces
from depthgen.compiler.emitter import (
    RUNTIME_HELPERS,
    emit_collection_key,
    emit_depth_alias,
    emit_depth_query,
    emit_dispatcher,
    emit_interface,
    emit_step_mapper,
)
from depthgen.compiler.registry import extract_registry, select_entities
from depthgen.model.entities import CollectionRegistry, EntityDecl

# ###############
# Public Interface
# ###############

DEFAULT_MAX_DEPTH = 2


class GenerationError(Exception):
    """Raised when the depth module cannot be generated."""


class ConfigurationMissingError(GenerationError):
    """Raised when the schema has no usable ``Config.collections`` registry."""


@dataclass(frozen=True)
class Schema:
    """The entities and registry a generation pass works on.

    Attributes:
        entities: Every collected interface, by name.
        registry: The collection registry read from ``Config``.
        selected: Names of the entities to generate, in declaration order.
    """

    entities: dict[str, EntityDecl]
    registry: CollectionRegistry
    selected: list[str]

    @property
    def selected_entities(self) -> dict[str, EntityDecl]:
        """The selected entities by name; the lookup table for rendering."""
        return {name: self.entities[name] for name in self.selected}

    @property
    def collections(self) -> dict[str, str]:
        """Registry entries whose entity is selected."""
        return {key: self.registry.collections[key] for key in self.registry.keys_for(self.selected)}


def resolve_schema(program: Any, only_names: list[str] | None = None) -> Schema:
    """Collect interfaces and the registry from *program* and select the entities.

    Raises:
        ConfigurationMissingError: If no ``Config`` interface declares a
            non-empty ``collections`` object type.
    """
    registry = extract_registry(program)
    if registry.is_empty:
        raise ConfigurationMissingError(
            "Missing Config with collections: please declare `interface Config { collections: { ... } }`"
        )
    entities = collect_interfaces(program)
    return Schema(entities=entities, registry=registry, selected=select_entities(entities, registry, only_names))


def generate(
    program: Any,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    only_names: list[str] | None = None,
) -> str:
    """Generate the depth module for a parsed schema.

    Args:
        program: The raw ``Program`` node of the parsed schema.
        max_depth: The deepest variant to generate (``>= 0``).
        only_names: Optional allow-list of entity names; entities must still
            be referenced by ``Config.collections``.

    Returns:
        The generated TypeScript source text.

    Raises:
        ValueError: If *max_depth* is negative.
        ConfigurationMissingError: If the registry is missing or empty.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    schema = resolve_schema(program, only_names)
    known = schema.selected_entities
    collections = schema.collections

    blocks: list[str] = [emit_depth_alias(max_depth)]
    for entity in known.values():
        for depth in range(max_depth + 1):
            blocks.append(emit_interface(entity, depth, known))
    blocks.append(emit_collection_key(list(collections)))
    blocks.append(emit_depth_query(collections, max_depth))
    blocks.append(RUNTIME_HELPERS)
    for entity in known.values():
        for depth in range(max_depth, 0, -1):
            blocks.append(emit_step_mapper(entity, depth, known))
    blocks.append(emit_dispatcher(collections, max_depth))
    return "\n\n".join(blocks) + "\n"
