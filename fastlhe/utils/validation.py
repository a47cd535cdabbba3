#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Post-parse validation routines for LHE tables

Every validation function raises :class:`~fastlhe.exceptions.ValidationError`
when a constraint is violated.  The reader calls :func:`validate_tables`
after the markup pass so that inconsistent tables never reach the
converter layer.

Checked Constraints
-------------------
* Table shapes and dtypes agree with each other.
* The sum of NUP over all events equals the number of particle rows.
* The owning-event column of the particle table is non-decreasing and
  within ``[0, n_events)``.

Design Note
-----------
Validation functions accept raw NumPy arrays, **not** the tables
dataclass, so that ``utils`` does not depend on ``models``::

    utils ← models ← readers ← converters
"""

from __future__ import annotations

import logging

import numpy as np

from fastlhe.exceptions import ValidationError
from fastlhe.utils.constants import (
    N_FLOAT_EVENT_HEADER_COLS,
    N_FLOAT_PARTICLE_COLS,
    N_INT_EVENT_COLS,
    N_INT_PARTICLE_COLS,
)

logger = logging.getLogger(__name__)


def validate_table_shapes(
    int_event: np.ndarray,
    float_event: np.ndarray,
    int_particle: np.ndarray,
    float_particle: np.ndarray,
) -> None:
    """Verify that the four tables have mutually consistent shapes

    Raises
    ------
    ValidationError
        If a table is not 2-D, has the wrong column count, or its row
        count disagrees with its sibling table.
    """
    for name, arr in (
        ("int_event", int_event),
        ("float_event", float_event),
        ("int_particle", int_particle),
        ("float_particle", float_particle),
    ):
        if arr.ndim != 2:
            raise ValidationError(f"Table '{name}' must be 2-D, got shape {arr.shape}.")

    if int_event.shape[1] != N_INT_EVENT_COLS:
        raise ValidationError(
            f"int_event has {int_event.shape[1]} columns, expected {N_INT_EVENT_COLS}."
        )
    if float_event.shape[1] < N_FLOAT_EVENT_HEADER_COLS:
        raise ValidationError(
            f"float_event has {float_event.shape[1]} columns, expected at least "
            f"{N_FLOAT_EVENT_HEADER_COLS}."
        )
    if int_particle.shape[1] != N_INT_PARTICLE_COLS:
        raise ValidationError(
            f"int_particle has {int_particle.shape[1]} columns, expected {N_INT_PARTICLE_COLS}."
        )
    if float_particle.shape[1] != N_FLOAT_PARTICLE_COLS:
        raise ValidationError(
            f"float_particle has {float_particle.shape[1]} columns, expected {N_FLOAT_PARTICLE_COLS}."
        )
    if int_event.shape[0] != float_event.shape[0]:
        raise ValidationError(
            f"Event tables disagree on row count: {int_event.shape[0]} vs {float_event.shape[0]}."
        )
    if int_particle.shape[0] != float_particle.shape[0]:
        raise ValidationError(
            f"Particle tables disagree on row count: "
            f"{int_particle.shape[0]} vs {float_particle.shape[0]}."
        )


def validate_particle_count(int_event: np.ndarray, int_particle: np.ndarray) -> None:
    """Verify that the declared NUP values add up to the particle rows

    Raises
    ------
    ValidationError
        If ``sum(NUP) != n_particles``.
    """
    total = int(np.asarray(int_event[:, 0], dtype="i8").sum())
    if total != int_particle.shape[0]:
        raise ValidationError(
            f"Sum of NUP over events is {total} but the particle table has "
            f"{int_particle.shape[0]} rows."
        )
    logger.debug("Particle count %d matches sum of NUP.", total)


def validate_event_ownership(int_particle: np.ndarray, n_events: int) -> None:
    """Verify that particle rows are grouped by event in file order

    Parameters
    ----------
    int_particle : numpy.ndarray
        Integer particle table; column 0 holds the owning event index.
    n_events : int
        Number of event rows.

    Raises
    ------
    ValidationError
        If the owner column decreases anywhere or points outside
        ``[0, n_events)``.
    """
    owners = int_particle[:, 0]
    if owners.size == 0:
        return
    if owners.min() < 0 or owners.max() >= n_events:
        raise ValidationError(
            f"Owning-event index out of range [0, {n_events}): "
            f"min={int(owners.min())}, max={int(owners.max())}."
        )
    diff = np.diff(owners)
    if np.any(diff < 0):
        first_bad = int(np.argmax(diff < 0))
        raise ValidationError(
            f"Owning-event index decreases at particle row {first_bad + 1}: "
            f"{int(owners[first_bad])} -> {int(owners[first_bad + 1])}."
        )


def validate_tables(
    int_event: np.ndarray,
    float_event: np.ndarray,
    int_particle: np.ndarray,
    float_particle: np.ndarray,
) -> None:
    """Run every table check

    Raises
    ------
    ValidationError
        If any sub-check fails.
    """
    validate_table_shapes(int_event, float_event, int_particle, float_particle)
    validate_particle_count(int_event, int_particle)
    validate_event_ownership(int_particle, int_event.shape[0])
    logger.debug(
        "Tables passed validation (%d events, %d particles).",
        int_event.shape[0], int_particle.shape[0],
    )
