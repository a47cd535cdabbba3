#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for parsed LHE data

The tables dataclass is the sole output format of the reader layer and
the sole input format accepted by the converter layer.
"""

from __future__ import annotations

from fastlhe.models.records import (
    LHETables,
    TableDimensions,
    allocate_tables,
)

__all__ = [
    "LHETables",
    "TableDimensions",
    "allocate_tables",
]
