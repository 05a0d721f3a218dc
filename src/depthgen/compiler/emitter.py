# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript text emission for each artifact kind of the generated module.

One function per artifact kind: the depth alias, depth-variant interfaces,
dispatch types, runtime helpers, step projectors and the dispatcher. All
formatting of declarations lives here.
"""

from __future__ import annotations

from collections.abc import Mapping

from depthgen.compiler.mappers import entity_plan, render_plan, step_function_name
from depthgen.compiler.render import render_type
from depthgen.compiler.syntax import double_quoted, member_access, property_key
from depthgen.model.entities import EntityDecl, variant_name

# ###############
# Public Interface
# ###############

INDENT = "  "

RUNTIME_HELPERS = """\
export function __getId(value: unknown): unknown {
  if (value !== null && typeof value === "object" && "id" in value) {
    return (value as { id: unknown }).id;
  }
  return value;
}

export function __pruneUndefined<T>(value: T): T {
  if (Array.isArray(value)) {
    return value.map((item) => __pruneUndefined(item)) as unknown as T;
  }
  if (value !== null && typeof value === "object") {
    const result: Record<string, unknown> = {};
    for (const [key, item] of Object.entries(value)) {
      if (item !== undefined) {
        result[key] = __pruneUndefined(item);
      }
    }
    return result as T;
  }
  return value;
}"""


def emit_depth_alias(max_depth: int) -> str:
    """Emit ``export type Depth = 0 | 1 | ... | max_depth;``."""
    return "export type Depth = " + " | ".join(str(d) for d in range(max_depth + 1)) + ";"


def emit_interface(entity: EntityDecl, depth: int, entities: Mapping[str, EntityDecl]) -> str:
    """Emit the depth-variant interface ``Entity_D{depth}``."""
    lines = [f"export interface {entity.variant_name(depth)} {{"]
    for f in entity.fields:
        marker = "?" if f.optional else ""
        lines.append(f"{INDENT}{property_key(f.name)}{marker}: {render_type(f.type, depth, entities)};")
    lines.append("}")
    return "\n".join(lines)


def emit_collection_key(keys: list[str]) -> str:
    """Emit the union of collection keys (``never`` when there are none)."""
    union = " | ".join(double_quoted(k) for k in keys) if keys else "never"
    return f"export type CollectionKey = {union};"


def emit_depth_query(collections: dict[str, str], max_depth: int) -> str:
    """Emit ``DepthQuery<Name, D>`` resolving a collection key and depth to a variant."""
    lines = ["export type DepthQuery<Name extends CollectionKey, D extends Depth> = {"]
    for depth in range(max_depth + 1):
        branches = "".join(
            f"Name extends {double_quoted(key)} ? {variant_name(entity, depth)} : "
            for key, entity in collections.items()
        )
        lines.append(f"{INDENT}{depth}: {branches}never;")
    lines.append("}[D];")
    return "\n".join(lines)


def emit_step_mapper(entity: EntityDecl, depth: int, entities: Mapping[str, EntityDecl]) -> str:
    """Emit ``map_Entity_D{depth}_to_D{depth-1}``."""
    source = variant_name(entity.name, depth)
    target = variant_name(entity.name, depth - 1)
    plan = entity_plan(entity, depth, entities)
    lines = [f"export function {step_function_name(entity.name, depth)}(value: {source}): {target} {{"]
    if not plan.properties:
        lines.append(f"{INDENT}return {{}} as unknown as {target};")
    else:
        lines.append(f"{INDENT}return __pruneUndefined({{")
        for prop in plan.properties:
            expression = render_plan(prop.plan, member_access("value", prop.name))
            lines.append(f"{INDENT * 2}{property_key(prop.name)}: {expression},")
        lines.append(f"{INDENT}}}) as unknown as {target};")
    lines.append("}")
    return "\n".join(lines)


def emit_dispatcher(collections: dict[str, str], max_depth: int) -> str:
    """Emit the step-projector table and ``projectDepth``."""
    lines = ["const __stepMappers: { [K in CollectionKey]: Record<number, (value: any) => any> } = {"]
    for key, entity in collections.items():
        steps = ", ".join(f"{d}: {step_function_name(entity, d)}" for d in range(max_depth, 0, -1))
        lines.append(f"{INDENT}{property_key(key)}: {{{' ' + steps + ' ' if steps else ''}}},")
    lines.append("};")
    return "\n".join(lines) + "\n\n" + _PROJECT_DEPTH


# ################
# Implementation
# ################

_PROJECT_DEPTH = """\
export function projectDepth<Name extends CollectionKey, From extends Depth, To extends Depth>(
  document: DepthQuery<Name, From>,
  collection: Name,
  fromDepth: From,
  toDepth: To,
): DepthQuery<Name, To> {
  if ((toDepth as number) > (fromDepth as number)) {
    throw new Error(
      `Cannot project ${String(collection)} from depth ${fromDepth} up to depth ${toDepth}`,
    );
  }
  if ((toDepth as number) === (fromDepth as number)) {
    return document as unknown as DepthQuery<Name, To>;
  }
  const steps = __stepMappers[collection];
  if (steps === undefined) {
    throw new Error(`Unknown collection: ${String(collection)}`);
  }
  let current: unknown = document;
  for (let depth: number = fromDepth; depth > toDepth; depth--) {
    current = steps[depth](current);
  }
  return __pruneUndefined(current) as DepthQuery<Name, To>;
}"""
