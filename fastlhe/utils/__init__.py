#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises the numeric tokenizer, the dimension scan,
table-layout constants, and post-parse validation routines.
"""

from __future__ import annotations
