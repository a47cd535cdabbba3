#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Record-assembly state machine for the LHE markup pass

:class:`RecordWriter` receives markup notifications from
:class:`~fastlhe.readers.markup.StreamingTagParser` and writes event,
weight, and particle values straight into preallocated tables.

States
------
::

    IDLE            text is discarded
    EVENT_HEADER    text after <event> is accumulated
    WEIGHT          text inside <wgt> / <weight> is accumulated

The event header and particle lines have no enclosing element, so the
*next* tag of any kind (or ``</event>``) ends the block.  The block is
drained before the triggering tag is acted on, which keeps a ``<wgt>``
that directly follows the particle lines from being lost.
"""

from __future__ import annotations

import enum
import logging

import numpy as np

from fastlhe.exceptions import (
    MalformedEventError,
    RowOverflowError,
    WeightOverflowError,
)
from fastlhe.models.records import LHETables
from fastlhe.utils.constants import (
    EVENT_ELEMENT,
    INT_DTYPE,
    FLOAT_EVENT_HEADER_COLUMNS,
    FLOAT_PARTICLE_COLUMNS,
    N_FLOAT_EVENT_HEADER_COLS,
    PARTICLE_INT_FIELDS,
    WEIGHT_ELEMENTS,
)
from fastlhe.utils.parsing import TokenCursor

logger = logging.getLogger(__name__)

_INT_INFO = np.iinfo(INT_DTYPE)


class CaptureState(enum.Enum):
    IDLE = 0
    EVENT_HEADER = 1
    WEIGHT = 2


class RecordWriter:
    """Markup consumer filling :class:`~fastlhe.models.records.LHETables`

    Parameters
    ----------
    tables : LHETables
        Zero-filled tables sized by the dimension scan.  The writer owns
        them until the parse finishes.

    Attributes
    ----------
    event_index : int
        Row of the event being written; after the parse, the number of
        complete events seen.
    weight_index : int
        Next weight column (relative to the first weight column) of the
        current event.
    particle_index : int
        Next unused particle row.
    state : CaptureState
        Current capture state.
    """

    def __init__(self, tables: LHETables) -> None:
        self.tables = tables
        self.n_events = tables.n_events
        self.n_weights = tables.n_weights
        self.n_particles = tables.n_particles

        self.event_index = 0
        self.weight_index = 0
        self.particle_index = 0
        self.state = CaptureState.IDLE
        self.in_event = False
        self._buffer: list[str] = []

    # -- notifications ------------------------------------------------------

    def start_element(self, name: str) -> None:
        if self.state is CaptureState.EVENT_HEADER:
            self._drain_event()

        if name == EVENT_ELEMENT:
            if self.event_index >= self.n_events:
                raise RowOverflowError(
                    f"more than {self.n_events} event(s) found; the dimension "
                    f"scan counted {self.n_events}"
                )
            self.state = CaptureState.EVENT_HEADER
            self.weight_index = 0
            self.in_event = True
        elif name in WEIGHT_ELEMENTS and self.in_event:
            self.state = CaptureState.WEIGHT

    def end_element(self, name: str) -> None:
        if name == EVENT_ELEMENT:
            if self.state is CaptureState.EVENT_HEADER:
                self._drain_event()
            self.event_index += 1
            self.in_event = False
            self.state = CaptureState.IDLE
        elif name in WEIGHT_ELEMENTS and self.state is CaptureState.WEIGHT:
            self.process_weight("".join(self._buffer))
            self._buffer.clear()
            self.state = CaptureState.IDLE

    def text(self, data: str) -> None:
        if self.state is not CaptureState.IDLE:
            self._buffer.append(data)

    def _drain_event(self) -> None:
        self.process_event("".join(self._buffer))
        self._buffer.clear()
        self.state = CaptureState.IDLE

    # -- block processing ---------------------------------------------------

    def process_event(self, text: str) -> None:
        """Write one event header block and its particle lines

        Consumes, in order: NUP and IDPRUP (int), XWGTUP, SCALUP, AQEDUP,
        AQCDUP (float), then for each of NUP particles six ints and seven
        floats.  Tokens after the last particle are ignored.

        Raises
        ------
        MalformedEventError
            If any field is missing or not a number, or NUP is negative.
        RowOverflowError
            If the particles would run past the particle table.
        """
        evt = self.event_index
        cur = TokenCursor(text)

        nup = self._read_int(cur, "NUP", "particle count")
        if nup < 0:
            raise MalformedEventError(evt, "NUP", f"negative particle count {nup}")
        idprup = self._read_int(cur, "IDPRUP")

        fe = self.tables.float_event[evt]
        for col, field in enumerate(FLOAT_EVENT_HEADER_COLUMNS):
            fe[col] = self._read_float(cur, field)

        ie = self.tables.int_event[evt]
        ie[0] = nup
        ie[1] = idprup

        if self.particle_index + nup > self.n_particles:
            raise RowOverflowError(
                f"event {evt} declares {nup} particle(s) but only "
                f"{self.n_particles - self.particle_index} particle row(s) remain"
            )

        ip_table = self.tables.int_particle
        fp_table = self.tables.float_particle
        for p in range(nup):
            detail = f"particle {p}"
            ip = ip_table[self.particle_index]
            fp = fp_table[self.particle_index]
            ip[0] = evt
            for col, field in enumerate(PARTICLE_INT_FIELDS, start=1):
                ip[col] = self._read_int(cur, field, detail)
            for col, field in enumerate(FLOAT_PARTICLE_COLUMNS):
                fp[col] = self._read_float(cur, field, detail)
            self.particle_index += 1

    def _read_int(self, cur: TokenCursor, field: str, detail: str = "") -> int:
        val = cur.next_int()
        if val is None:
            raise MalformedEventError(self.event_index, field, detail)
        if not _INT_INFO.min <= val <= _INT_INFO.max:
            raise MalformedEventError(
                self.event_index, field, f"{val} does not fit in {INT_DTYPE}"
            )
        return val

    def _read_float(self, cur: TokenCursor, field: str, detail: str = "") -> float:
        val = cur.next_float()
        if val is None:
            raise MalformedEventError(self.event_index, field, detail)
        return val

    def process_weight(self, text: str) -> None:
        """Write the single value of one weight element

        Raises
        ------
        WeightOverflowError
            If the event already filled every weight column.
        MalformedEventError
            If the element does not hold exactly one number.
        """
        evt = self.event_index
        if self.weight_index >= self.n_weights:
            raise WeightOverflowError(evt, self.n_weights)

        cur = TokenCursor(text)
        field = f"wgt_{self.weight_index}"
        val = cur.next_float()
        if val is None or not cur.exhausted:
            raise MalformedEventError(evt, field, "weight must hold exactly one number")

        self.tables.float_event[evt, N_FLOAT_EVENT_HEADER_COLS + self.weight_index] = val
        self.weight_index += 1
