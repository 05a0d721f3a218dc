# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema entities collected from interface declarations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from depthgen.model.nodes import TypeNode

# ###############
# Public Interface
# ###############

COMPUTED_KEY = "<computed>"
"""Placeholder name for members whose key is not an identifier or literal."""

ANONYMOUS_NAME = "<anonymous>"


class EntityField(BaseModel):
    """A single property of an entity declaration."""

    model_config = ConfigDict(frozen=True)

    name: str
    optional: bool = False
    type: TypeNode | None = None


class EntityDecl(BaseModel):
    """A named interface declaration with its ordered fields."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: list[EntityField] = _Field(default_factory=list)

    def variant_name(self, depth: int) -> str:
        """Return the name of this entity's depth variant, e.g. ``User_D1``."""
        return variant_name(self.name, depth)


class CollectionRegistry(BaseModel):
    """Mapping from collection key to entity name, in declaration order."""

    collections: dict[str, str] = _Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.collections

    @property
    def entity_names(self) -> list[str]:
        """Return the referenced entity names without duplicates."""
        return list(dict.fromkeys(self.collections.values()))

    def keys_for(self, names: set[str] | list[str]) -> list[str]:
        """Return the collection keys whose entity is among *names*."""
        wanted = set(names)
        return [key for key, entity in self.collections.items() if entity in wanted]


def variant_name(entity: str, depth: int) -> str:
    """Return the synthesized name of *entity* at *depth*."""
    return f"{entity}_D{depth}"


EntityField.model_rebuild()
EntityDecl.model_rebuild()
