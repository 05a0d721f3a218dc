# Copyright 2026 DepthGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for depthgen."""
