#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for FastLHE tests

Provides small synthetic LHE files for testing the dimension scan, the
markup pass, and the HDF5 converter without real generator output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from fastlhe.models.records import LHETables, TableDimensions, allocate_tables


SINGLE_EVENT_LHE = """\
<LesHouchesEvents version="3.0">
<header>
<initrwgt>
<weightgroup name="scale_variation" combine="envelope">
<weight id="1"> muR=0.5 muF=0.5 </weight>
</weightgroup>
</initrwgt>
</header>
<init>
2212 2212 6.500000e+03 6.500000e+03 0 0 247000 247000 -4 1
5.000000e+01 1.000000e-01 5.000000e+01 1
</init>
<event>
2 1 0.5 100.0 0.0072 0.118
21 -1 0 0 501 502 0.0 0.0 50.0 50.0 0.0 0.0 9.0
-21 -1 0 0 502 501 0.0 0.0 -50.0 50.0 0.75 0.0 -1.0
<rwgt>
<wgt id="1"> 0.49 </wgt>
</rwgt>
</event>
</LesHouchesEvents>
"""

# Three events: NUP = 2, 3, 1; two declared weights; the events carry
# 2, 1, and 0 <wgt> values.  The last event has no inner tags at all.
MULTI_EVENT_LHE = """\
<LesHouchesEvents version="3.0">
<header>
<initrwgt>
<weightgroup name="scale_variation" combine="envelope">
<weight id="1"> muR=0.5 muF=0.5 </weight>
<weight id="2"> muR=2.0 muF=2.0 </weight>
</weightgroup>
</initrwgt>
</header>
<init>
2212 2212 6.500000e+03 6.500000e+03 0 0 247000 247000 -4 1
5.000000e+01 1.000000e-01 5.000000e+01 1
</init>
<event>
2 1 1.0e+00 9.1e+01 7.5e-03 1.3e-01
11 1 0 0 0 0 1.0 2.0 3.0 4.0 0.000511 0.0 -1.0
-11 1 0 0 0 0 -1.0 -2.0 -3.0 4.0 0.000511 0.0 1.0
<rwgt>
<wgt id="1"> 1.1e+00 </wgt>
<wgt id="2"> 9.0e-01 </wgt>
</rwgt>
</event>
<event>
3 2 2.0e+00 1.2e+02 7.5e-03 1.1e-01
2 -1 0 0 501 0 0.0 0.0 100.0 100.0 0.33 0.0 1.0
-2 -1 0 0 0 501 0.0 0.0 -100.0 100.0 0.33 0.0 -1.0
23 2 1 2 0 0 0.0 0.0 0.0 200.0 91.1876 0.0 0.0
<rwgt>
<wgt id="1"> 2.5e+00 </wgt>
</rwgt>
</event>
<event>
1 3 3.0e+00 5.0e+01 7.5e-03 1.2e-01
22 1 0 0 0 0 0.0 0.0 5.0 5.0 0.0 0.0 9.0
</event>
</LesHouchesEvents>
"""


@pytest.fixture
def write_lhe(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing LHE text to a file under ``tmp_path``"""

    def _write(text: str, name: str = "events.lhe") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def single_event_file(write_lhe) -> Path:
    """One event, two particles, one weight"""
    return write_lhe(SINGLE_EVENT_LHE, "single.lhe")


@pytest.fixture
def multi_event_file(write_lhe) -> Path:
    """Three events, six particles, two weight columns"""
    return write_lhe(MULTI_EVENT_LHE, "multi.lhe")


@pytest.fixture
def small_tables() -> LHETables:
    """Zero-filled tables for one event with two particles and two weights"""
    return allocate_tables(TableDimensions(n_events=1, n_weights=2, n_particles=2))


class RecordingHandler:
    """Tag handler that records every notification in order"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def start_element(self, name: str) -> None:
        self.calls.append(("start", name))

    def end_element(self, name: str) -> None:
        self.calls.append(("end", name))

    def text(self, data: str) -> None:
        # Merge adjacent text so results do not depend on chunking.
        if self.calls and self.calls[-1][0] == "text":
            self.calls[-1] = ("text", self.calls[-1][1] + data)
        else:
            self.calls.append(("text", data))


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()
