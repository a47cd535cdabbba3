#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for LHE event files

* :class:`~fastlhe.readers.lhe.LHEReader` - two-pass LHE reader
* :class:`~fastlhe.readers.markup.StreamingTagParser` - chunk-fed
  markup scanner
* :class:`~fastlhe.readers.events.RecordWriter` - table-filling state
  machine driven by the scanner

All readers share the :class:`~fastlhe.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from fastlhe.readers.events import CaptureState, RecordWriter
from fastlhe.readers.lhe import LHEReader, parse_lhe
from fastlhe.readers.markup import StreamingTagParser, TagHandler

__all__ = [
    "LHEReader",
    "parse_lhe",
    "StreamingTagParser",
    "TagHandler",
    "RecordWriter",
    "CaptureState",
]
