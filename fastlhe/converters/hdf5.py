#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for parsed LHE tables

Writes the four tables of an :class:`~fastlhe.models.records.LHETables`
into an HDF5 group, one dataset per table, and reads them back.

HDF5 Layout
-----------
::

    /<group>/                    attrs: n_events, n_weights, n_particles, source
        int_event       (n_events, 2)              int32    attrs: columns
        float_event     (n_events, 4 + n_weights)  float64  attrs: columns
        int_particle    (n_particles, 7)           int32    attrs: columns
        float_particle  (n_particles, 7)           float64  attrs: columns

The ``columns`` attribute lists the column names in order, e.g.
``["XWGTUP", "SCALUP", "AQEDUP", "AQCDUP", "wgt_0", ...]``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from fastlhe.exceptions import ConversionError
from fastlhe.models.records import LHETables
from fastlhe.utils.constants import (
    CHUNK_SIZE,
    FLOAT_DTYPE,
    FLOAT_PARTICLE_COLUMNS,
    INT_DTYPE,
    INT_EVENT_COLUMNS,
    INT_PARTICLE_COLUMNS,
    float_event_columns,
)

logger = logging.getLogger(__name__)

DEFAULT_GROUP: str = "lhe"
"""Group the tables are written to when none is given."""


# ---------------------------------------------------------------------------
# Internal writers
# ---------------------------------------------------------------------------

def _create_table(
    group: h5py.Group,
    name: str,
    data: np.ndarray,
    dtype: str,
    columns: tuple[str, ...],
    compression: str | None,
) -> h5py.Dataset:
    """Create a 2-D dataset with a ``columns`` attribute"""
    ds = group.create_dataset(
        name,
        data=np.asarray(data, dtype=dtype),
        compression=compression,
    )
    ds.attrs["columns"] = list(columns)
    return ds


def write_tables(
    group: h5py.Group,
    tables: LHETables,
    *,
    compression: str | None = None,
) -> None:
    """Write the four tables into an open HDF5 group

    Parameters
    ----------
    group : h5py.Group
        Open group (or file) in write mode.
    tables : LHETables
        Parsed tables.
    compression : str | None, optional
        h5py compression filter, e.g. ``"gzip"``.  Default none.
    """
    _create_table(group, "int_event", tables.int_event, INT_DTYPE,
                  INT_EVENT_COLUMNS, compression)
    _create_table(group, "float_event", tables.float_event, FLOAT_DTYPE,
                  float_event_columns(tables.n_weights), compression)
    _create_table(group, "int_particle", tables.int_particle, INT_DTYPE,
                  INT_PARTICLE_COLUMNS, compression)
    _create_table(group, "float_particle", tables.float_particle, FLOAT_DTYPE,
                  FLOAT_PARTICLE_COLUMNS, compression)

    group.attrs["n_events"] = tables.n_events
    group.attrs["n_weights"] = tables.n_weights
    group.attrs["n_particles"] = tables.n_particles


def read_tables(group: h5py.Group) -> LHETables:
    """Load the four tables from an HDF5 group written by :func:`write_tables`

    Raises
    ------
    ConversionError
        If a table dataset is missing.
    """
    missing = [
        name for name in ("int_event", "float_event", "int_particle", "float_particle")
        if name not in group
    ]
    if missing:
        raise ConversionError(
            f"HDF5 group {group.name!r} is missing table(s): {', '.join(missing)}"
        )
    return LHETables(
        int_event=group["int_event"][()],
        float_event=group["float_event"][()],
        int_particle=group["int_particle"][()],
        float_particle=group["float_particle"][()],
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def convert_lhe_to_hdf5(
    source_path: Path | str,
    output_path: Path | str,
    *,
    group: str = DEFAULT_GROUP,
    validate: bool = True,
    overwrite: bool = False,
    compression: str | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> LHETables:
    """Parse an LHE file and write its tables to an HDF5 file

    Parameters
    ----------
    source_path : Path | str
        Path to the LHE file.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    group : str, optional
        Group receiving the tables.  Default ``"lhe"``.
    validate : bool, optional
        Post-parse validation.  Default ``True``.
    overwrite : bool, optional
        If ``True``, overwrite an existing HDF5 file.  If ``False``
        (default), raise :class:`~fastlhe.exceptions.ConversionError`
        when the output file already exists.
    compression : str | None, optional
        h5py compression filter for the table datasets.
    chunk_size : int, optional
        Bytes per read in the markup pass.  Default
        :data:`~fastlhe.utils.constants.CHUNK_SIZE`.

    Returns
    -------
    LHETables
        The tables that were written.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, or if
        any HDF5 write operation fails.
    OSError
        If the source file cannot be opened.
    FormatError
        If the source file content is malformed.
    ValidationError
        If validation is enabled and fails.

    Examples
    --------
    >>> convert_lhe_to_hdf5("events.lhe", "out/events.h5", overwrite=True)
    """
    from fastlhe.readers.lhe import LHEReader

    src = Path(source_path)
    out = Path(output_path)

    if out.exists() and not overwrite:
        raise ConversionError(
            f"Output file {out} already exists and overwrite=False."
        )

    logger.debug("Parsing LHE tables from %s", src)
    tables = LHEReader(chunk_size=chunk_size).read(src, validate=validate)

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            grp = h5f.require_group(group)
            grp.attrs["source"] = str(src)
            write_tables(grp, tables, compression=compression)
    except Exception as exc:
        if isinstance(exc, ConversionError):
            raise
        raise ConversionError(
            f"Failed to write HDF5 file {out}: {exc}"
        ) from exc

    logger.info("Wrote LHE tables HDF5: %s", out)
    return tables


def load_hdf5(path: Path | str, *, group: str = DEFAULT_GROUP) -> LHETables:
    """Read tables back from a file written by :func:`convert_lhe_to_hdf5`

    Raises
    ------
    ConversionError
        If the file has no such group or a table is missing.
    """
    with h5py.File(str(path), "r") as h5f:
        if group not in h5f:
            raise ConversionError(f"HDF5 file {path} has no group {group!r}")
        return read_tables(h5f[group])
