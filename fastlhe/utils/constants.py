#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Table layouts, markup names, and tunables used across FastLHE

The column tuples below define the bit-exact layout of the four output
tables.  Names follow the Les Houches Accord common-block variables [1]_.

References
----------
.. [1] J. Alwall et al., "A standard format for Les Houches Event Files",
   Comput. Phys. Commun. 176 (2007) 300, arXiv:hep-ph/0609017.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Table layout
# ---------------------------------------------------------------------------

INT_DTYPE: str = "i4"
"""NumPy dtype of the integer tables (C ``int``)."""

FLOAT_DTYPE: str = "f8"
"""NumPy dtype of the floating-point tables (C ``double``)."""

INT_EVENT_COLUMNS: tuple[str, ...] = ("NUP", "IDPRUP")
"""Columns of the integer event table."""

FLOAT_EVENT_HEADER_COLUMNS: tuple[str, ...] = ("XWGTUP", "SCALUP", "AQEDUP", "AQCDUP")
"""Leading columns of the float event table; weight columns follow."""

INT_PARTICLE_COLUMNS: tuple[str, ...] = (
    "evt_idx", "IDUP", "ISTUP", "MOTHUP1", "MOTHUP2", "ICOLUP1", "ICOLUP2",
)
"""Columns of the integer particle table; ``evt_idx`` is the owning event."""

FLOAT_PARTICLE_COLUMNS: tuple[str, ...] = (
    "PUP1", "PUP2", "PUP3", "PUP4", "PUP5", "VTIMUP", "SPINUP",
)
"""Columns of the float particle table (px, py, pz, E, m, lifetime, spin)."""

N_INT_EVENT_COLS: int = len(INT_EVENT_COLUMNS)
N_FLOAT_EVENT_HEADER_COLS: int = len(FLOAT_EVENT_HEADER_COLUMNS)
N_INT_PARTICLE_COLS: int = len(INT_PARTICLE_COLUMNS)
N_FLOAT_PARTICLE_COLS: int = len(FLOAT_PARTICLE_COLUMNS)

PARTICLE_INT_FIELDS: tuple[str, ...] = INT_PARTICLE_COLUMNS[1:]
"""Integer fields as they appear on a particle line."""


def float_event_columns(n_weights: int) -> tuple[str, ...]:
    """Column names of the float event table for *n_weights* weights"""
    return FLOAT_EVENT_HEADER_COLUMNS + tuple(f"wgt_{i}" for i in range(n_weights))


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

EVENT_ELEMENT: str = "event"
"""Element enclosing one event block."""

WEIGHT_ELEMENTS: frozenset[str] = frozenset({"wgt", "weight"})
"""Elements carrying one alternative event weight inside an event."""

EVENT_OPEN_MARKER: re.Pattern[bytes] = re.compile(rb"<event[\s>]")
"""Line marker counted once per event by the dimension scan."""

WEIGHT_OPEN_MARKER: re.Pattern[bytes] = re.compile(rb"<weight[\s>]")
"""Line marker counted once per weight tag by the dimension scan.

Matches ``<weight id="...">`` declarations but not ``<weights>``.
"""

WHITESPACE: str = " \t\n\r"
"""Token delimiters of the untagged numeric blocks."""


# ---------------------------------------------------------------------------
# Tunables
# ---------------------------------------------------------------------------

CHUNK_SIZE: int = 65536
"""Bytes read per chunk by the markup pass."""
