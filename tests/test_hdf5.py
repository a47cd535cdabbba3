#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the HDF5 converter

Writes the synthetic LHE files to HDF5 and checks the dataset layout,
column attributes, and the round trip through load_hdf5.
"""

from __future__ import annotations

import numpy as np
import pytest

try:
    import h5py
except ImportError:
    pytest.skip("h5py not installed", allow_module_level=True)

from fastlhe.converters.hdf5 import (
    convert_lhe_to_hdf5,
    load_hdf5,
    read_tables,
    write_tables,
)
from fastlhe.exceptions import ConversionError, FormatError
from fastlhe.readers.lhe import LHEReader


class TestConvert:
    """Tests for convert_lhe_to_hdf5"""

    def test_creates_file(self, tmp_path, multi_event_file) -> None:
        out = tmp_path / "nested" / "multi.h5"
        convert_lhe_to_hdf5(multi_event_file, out)
        assert out.exists()

    def test_datasets_and_dtypes(self, tmp_path, multi_event_file) -> None:
        out = tmp_path / "multi.h5"
        convert_lhe_to_hdf5(multi_event_file, out)
        with h5py.File(str(out), "r") as h5f:
            grp = h5f["lhe"]
            assert grp["int_event"].shape == (3, 2)
            assert grp["float_event"].shape == (3, 6)
            assert grp["int_particle"].shape == (6, 7)
            assert grp["float_particle"].shape == (6, 7)
            assert grp["int_event"].dtype == np.int32
            assert grp["float_particle"].dtype == np.float64

    def test_group_attributes(self, tmp_path, multi_event_file) -> None:
        out = tmp_path / "multi.h5"
        convert_lhe_to_hdf5(multi_event_file, out)
        with h5py.File(str(out), "r") as h5f:
            attrs = h5f["lhe"].attrs
            assert attrs["n_events"] == 3
            assert attrs["n_weights"] == 2
            assert attrs["n_particles"] == 6
            assert attrs["source"] == str(multi_event_file)

    def test_column_names(self, tmp_path, single_event_file) -> None:
        out = tmp_path / "single.h5"
        convert_lhe_to_hdf5(single_event_file, out)
        with h5py.File(str(out), "r") as h5f:
            cols = [str(c) for c in h5f["lhe/float_event"].attrs["columns"]]
            assert cols == ["XWGTUP", "SCALUP", "AQEDUP", "AQCDUP", "wgt_0"]
            cols = [str(c) for c in h5f["lhe/int_particle"].attrs["columns"]]
            assert cols[0] == "evt_idx"

    def test_custom_group_and_compression(self, tmp_path, single_event_file) -> None:
        out = tmp_path / "single.h5"
        convert_lhe_to_hdf5(single_event_file, out, group="run_01", compression="gzip")
        with h5py.File(str(out), "r") as h5f:
            assert "run_01" in h5f
            assert h5f["run_01/float_particle"].compression == "gzip"

    def test_existing_file_without_overwrite(self, tmp_path, single_event_file) -> None:
        out = tmp_path / "single.h5"
        convert_lhe_to_hdf5(single_event_file, out)
        with pytest.raises(ConversionError, match="already exists"):
            convert_lhe_to_hdf5(single_event_file, out)

    def test_overwrite(self, tmp_path, single_event_file, multi_event_file) -> None:
        out = tmp_path / "out.h5"
        convert_lhe_to_hdf5(single_event_file, out)
        convert_lhe_to_hdf5(multi_event_file, out, overwrite=True)
        assert load_hdf5(out).n_events == 3

    def test_small_chunk_size(self, tmp_path, multi_event_file) -> None:
        default = convert_lhe_to_hdf5(multi_event_file, tmp_path / "a.h5")
        small = convert_lhe_to_hdf5(multi_event_file, tmp_path / "b.h5", chunk_size=3)
        for x, y in zip(default.as_tuple(), small.as_tuple()):
            np.testing.assert_array_equal(x, y)

    def test_invalid_chunk_size(self, tmp_path, single_event_file) -> None:
        with pytest.raises(ValueError):
            convert_lhe_to_hdf5(single_event_file, tmp_path / "x.h5", chunk_size=0)

    def test_malformed_source_writes_nothing(self, tmp_path, write_lhe) -> None:
        src = write_lhe("<LesHouchesEvents>\n</LesHouchesEvents>\n")
        out = tmp_path / "empty.h5"
        with pytest.raises(FormatError):
            convert_lhe_to_hdf5(src, out)
        assert not out.exists()


class TestLoad:
    """Tests for load_hdf5 / read_tables"""

    def test_round_trip(self, tmp_path, multi_event_file) -> None:
        out = tmp_path / "multi.h5"
        written = convert_lhe_to_hdf5(multi_event_file, out)
        loaded = load_hdf5(out)
        for x, y in zip(written.as_tuple(), loaded.as_tuple()):
            np.testing.assert_array_equal(x, y)

    def test_missing_group(self, tmp_path, single_event_file) -> None:
        out = tmp_path / "single.h5"
        convert_lhe_to_hdf5(single_event_file, out)
        with pytest.raises(ConversionError, match="no group"):
            load_hdf5(out, group="other")

    def test_missing_table(self, tmp_path, single_event_file) -> None:
        tables = LHEReader().read(single_event_file)
        out = tmp_path / "partial.h5"
        with h5py.File(str(out), "w") as h5f:
            write_tables(h5f.create_group("lhe"), tables)
            del h5f["lhe/float_particle"]
        with h5py.File(str(out), "r") as h5f:
            with pytest.raises(ConversionError, match="float_particle"):
                read_tables(h5f["lhe"])
