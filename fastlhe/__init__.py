#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
FastLHE - fast reader for Les Houches Event files

Parse LHE files, which interleave markup tags with untagged blocks of
whitespace-delimited numbers, into four dense NumPy tables suitable for
bulk numeric work.

Pipeline
--------
1. **Dimension scan** - one line-oriented pass counts events, weight
   tags, and particles.
2. **Allocation** - four zero-filled tables of exactly that size.
3. **Markup pass** - a chunk-fed tag scanner drives a state machine that
   tokenizes the numeric blocks and writes values in place.

Modules
-------
readers
    Two-pass LHE reader, markup scanner, and record-assembly state machine.
models
    Table dataclass and allocation.
converters
    HDF5 export of the tables.
utils
    Numeric tokenizer, dimension scan, layout constants, validation.

Examples
--------
>>> from fastlhe import parse_lhe
>>> int_event, float_event, int_particle, float_particle = parse_lhe("events.lhe")
>>> from fastlhe import LHEReader
>>> tables = LHEReader().read("events.lhe")
>>> tables.weights.shape
(10000, 45)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from fastlhe.readers.lhe import LHEReader, parse_lhe
from fastlhe.models.records import LHETables, TableDimensions
from fastlhe.converters.hdf5 import convert_lhe_to_hdf5, load_hdf5
from fastlhe.exceptions import (
    FastLHEError,
    FormatError,
    UnreadableParticleCountError,
    MalformedMarkupError,
    EmptyInputError,
    WeightOverflowError,
    MalformedEventError,
    RowOverflowError,
    RowShortfallError,
    ValidationError,
    ConversionError,
)

parse = parse_lhe

__all__ = [
    # Version
    "__version__",
    # Readers
    "LHEReader",
    "parse_lhe",
    "parse",
    # Models
    "LHETables",
    "TableDimensions",
    # Converter
    "convert_lhe_to_hdf5",
    "load_hdf5",
    # Exceptions
    "FastLHEError",
    "FormatError",
    "UnreadableParticleCountError",
    "MalformedMarkupError",
    "EmptyInputError",
    "WeightOverflowError",
    "MalformedEventError",
    "RowOverflowError",
    "RowShortfallError",
    "ValidationError",
    "ConversionError",
]
