#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for post-parse table validation
"""

from __future__ import annotations

import numpy as np
import pytest

from fastlhe.exceptions import ValidationError
from fastlhe.utils.validation import (
    validate_event_ownership,
    validate_particle_count,
    validate_table_shapes,
    validate_tables,
)


def _tables(nup=(2, 1), owners=(0, 0, 1), n_weights=1):
    n_events = len(nup)
    n_particles = len(owners)
    int_event = np.zeros((n_events, 2), dtype="i4")
    int_event[:, 0] = nup
    float_event = np.zeros((n_events, 4 + n_weights))
    int_particle = np.zeros((n_particles, 7), dtype="i4")
    int_particle[:, 0] = owners
    float_particle = np.zeros((n_particles, 7))
    return int_event, float_event, int_particle, float_particle


class TestValidateTables:
    """Tests for validate_tables"""

    def test_consistent_tables_pass(self) -> None:
        validate_tables(*_tables())

    def test_zero_weight_columns_allowed(self) -> None:
        validate_tables(*_tables(n_weights=0))


class TestTableShapes:
    """Tests for validate_table_shapes"""

    def test_one_dimensional_table(self) -> None:
        ie, fe, ip, fp = _tables()
        with pytest.raises(ValidationError, match="2-D"):
            validate_table_shapes(ie[:, 0], fe, ip, fp)

    def test_wrong_int_event_columns(self) -> None:
        ie, fe, ip, fp = _tables()
        with pytest.raises(ValidationError, match="int_event"):
            validate_table_shapes(np.zeros((2, 3), dtype="i4"), fe, ip, fp)

    def test_float_event_too_narrow(self) -> None:
        ie, fe, ip, fp = _tables()
        with pytest.raises(ValidationError, match="float_event"):
            validate_table_shapes(ie, fe[:, :3], ip, fp)

    def test_event_row_mismatch(self) -> None:
        ie, fe, ip, fp = _tables()
        with pytest.raises(ValidationError, match="Event tables"):
            validate_table_shapes(ie, fe[:1], ip, fp)

    def test_particle_row_mismatch(self) -> None:
        ie, fe, ip, fp = _tables()
        with pytest.raises(ValidationError, match="Particle tables"):
            validate_table_shapes(ie, fe, ip, fp[:2])


class TestParticleCount:
    """Tests for validate_particle_count"""

    def test_sum_matches(self) -> None:
        ie, _, ip, _ = _tables()
        validate_particle_count(ie, ip)

    def test_sum_mismatch(self) -> None:
        ie, _, ip, _ = _tables(nup=(2, 2))
        with pytest.raises(ValidationError, match="Sum of NUP"):
            validate_particle_count(ie, ip)


class TestEventOwnership:
    """Tests for validate_event_ownership"""

    def test_non_decreasing_passes(self) -> None:
        _, _, ip, _ = _tables(nup=(1, 0, 2), owners=(0, 2, 2))
        validate_event_ownership(ip, 3)

    def test_decreasing_owner(self) -> None:
        _, _, ip, _ = _tables(owners=(0, 1, 0))
        with pytest.raises(ValidationError, match="decreases at particle row 2"):
            validate_event_ownership(ip, 2)

    def test_owner_out_of_range(self) -> None:
        _, _, ip, _ = _tables(owners=(0, 0, 2))
        with pytest.raises(ValidationError, match="out of range"):
            validate_event_ownership(ip, 2)

    def test_no_particles(self) -> None:
        validate_event_ownership(np.zeros((0, 7), dtype="i4"), 0)
