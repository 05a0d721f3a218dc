# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Python evaluation of the generated depth projections."""

from depthgen.runtime.projection import (
    UNDEFINED,
    DepthProjector,
    ProjectionDirectionError,
    ProjectionError,
    UnknownCollectionError,
    get_id,
    is_nullish,
    prune_undefined,
)

__all__ = [
    "UNDEFINED",
    "DepthProjector",
    "ProjectionDirectionError",
    "ProjectionError",
    "UnknownCollectionError",
    "get_id",
    "is_nullish",
    "prune_undefined",
]
