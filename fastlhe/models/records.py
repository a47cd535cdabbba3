#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for parsed LHE files

The four dense output tables are plain NumPy arrays, grouped in a
``dataclass`` so that they travel together.  Models are the sole output
of the reader layer and the sole input accepted by the converter layer.

Table Layout
------------
::

    int_event       (n_events, 2)              [NUP, IDPRUP]
    float_event     (n_events, 4 + n_weights)  [XWGTUP, SCALUP, AQEDUP, AQCDUP, wgt_0, ...]
    int_particle    (n_particles, 7)           [evt_idx, IDUP, ISTUP, MOTHUP1, MOTHUP2, ICOLUP1, ICOLUP2]
    float_particle  (n_particles, 7)           [PUP1, PUP2, PUP3, PUP4, PUP5, VTIMUP, SPINUP]

Integer tables are ``int32``, float tables ``float64``.  All tables
start zero-filled; weight columns beyond an event's own weight count
stay zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from fastlhe.exceptions import EmptyInputError
from fastlhe.utils.constants import (
    FLOAT_DTYPE,
    INT_DTYPE,
    N_FLOAT_EVENT_HEADER_COLS,
    N_FLOAT_PARTICLE_COLS,
    N_INT_EVENT_COLS,
    N_INT_PARTICLE_COLS,
)


class TableDimensions(NamedTuple):
    """Sizes found by the dimension scan

    Parameters
    ----------
    n_events : int
        Number of event-open tags.
    n_weights : int
        Number of ``<weight>`` tags in the whole file; every event row
        gets this many weight columns.
    n_particles : int
        Sum of NUP over all event headers.
    """

    n_events: int
    n_weights: int
    n_particles: int


@dataclass
class LHETables:
    """The four dense tables produced from one LHE file

    Parameters
    ----------
    int_event : numpy.ndarray
        Shape ``(n_events, 2)``, dtype ``int32``.
    float_event : numpy.ndarray
        Shape ``(n_events, 4 + n_weights)``, dtype ``float64``.
    int_particle : numpy.ndarray
        Shape ``(n_particles, 7)``, dtype ``int32``.  Column 0 is the
        index of the owning event row.
    float_particle : numpy.ndarray
        Shape ``(n_particles, 7)``, dtype ``float64``.
    """

    int_event: np.ndarray
    float_event: np.ndarray
    int_particle: np.ndarray
    float_particle: np.ndarray

    @property
    def n_events(self) -> int:
        return int(self.int_event.shape[0])

    @property
    def n_particles(self) -> int:
        return int(self.int_particle.shape[0])

    @property
    def n_weights(self) -> int:
        return int(self.float_event.shape[1]) - N_FLOAT_EVENT_HEADER_COLS

    @property
    def dimensions(self) -> TableDimensions:
        return TableDimensions(self.n_events, self.n_weights, self.n_particles)

    @property
    def weights(self) -> np.ndarray:
        """View of the weight columns of the float event table."""
        return self.float_event[:, N_FLOAT_EVENT_HEADER_COLS:]

    def event_particles(self, event_index: int) -> slice:
        """Particle-table row slice belonging to *event_index*

        Relies on particle rows being grouped by event in file order.

        Examples
        --------
        >>> rows = tables.event_particles(0)
        >>> tables.float_particle[rows, 3]   # energies of event 0
        """
        owners = self.int_particle[:, 0]
        start = int(np.searchsorted(owners, event_index, side="left"))
        stop = int(np.searchsorted(owners, event_index, side="right"))
        return slice(start, stop)

    def as_tuple(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(int_event, float_event, int_particle, float_particle)``."""
        return (self.int_event, self.float_event, self.int_particle, self.float_particle)


def allocate_tables(dims: TableDimensions) -> LHETables:
    """Allocate zero-filled output tables sized from the dimension scan

    Parameters
    ----------
    dims : TableDimensions
        Event, weight-tag, and particle counts.

    Returns
    -------
    LHETables
        Tables ready to be filled by the markup pass.

    Raises
    ------
    EmptyInputError
        If any of the three counts is zero.
    """
    n_events, n_weights, n_particles = dims
    if n_events == 0 or n_weights == 0 or n_particles == 0:
        raise EmptyInputError(
            f"Found no events, weights, or particles "
            f"(events={n_events}, weights={n_weights}, particles={n_particles})."
        )

    return LHETables(
        int_event=np.zeros((n_events, N_INT_EVENT_COLS), dtype=INT_DTYPE),
        float_event=np.zeros((n_events, N_FLOAT_EVENT_HEADER_COLS + n_weights), dtype=FLOAT_DTYPE),
        int_particle=np.zeros((n_particles, N_INT_PARTICLE_COLS), dtype=INT_DTYPE),
        float_particle=np.zeros((n_particles, N_FLOAT_PARTICLE_COLS), dtype=FLOAT_DTYPE),
    )
