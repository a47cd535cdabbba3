#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for LHE tables

* :func:`~fastlhe.converters.hdf5.convert_lhe_to_hdf5`
    Parses an LHE file and writes its four tables to HDF5.
* :func:`~fastlhe.converters.hdf5.load_hdf5`
    Reads the tables back.
"""

from __future__ import annotations

from fastlhe.converters.hdf5 import (
    convert_lhe_to_hdf5,
    load_hdf5,
    read_tables,
    write_tables,
)

__all__ = ["convert_lhe_to_hdf5", "load_hdf5", "read_tables", "write_tables"]
