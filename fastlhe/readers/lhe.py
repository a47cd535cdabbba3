#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE (Les Houches Event) file reader

Parses an LHE file into four dense NumPy tables in two passes over the
file:

1. :func:`~fastlhe.utils.parsing.scan_dimensions` counts events, weight
   tags, and particles line by line, without allocating output.
2. :func:`~fastlhe.models.records.allocate_tables` allocates zero-filled
   tables of exactly that size, and
   :class:`~fastlhe.readers.markup.StreamingTagParser` drives a
   :class:`~fastlhe.readers.events.RecordWriter` over fixed-size chunks
   of the file, writing every value at its final position.

The tables are returned only when the whole file has been consumed
without error; any format violation aborts the parse.

File Format Assumptions
-----------------------
* The file is well-formed markup (one root element, balanced tags).
* Each ``<event>`` opening tag is on its own line, immediately followed
  by the event header line starting with NUP.
* Alternative weights appear as ``<wgt>`` (or ``<weight>``) elements
  inside ``<event>``.  The number of weight columns is the count of
  lines holding a ``<weight`` open tag in the whole file, which for
  LHE 3.0 files is the number of ``<weight id=...>`` declarations in
  ``<initrwgt>``.

References
----------
.. [1] J. Alwall et al., Comput. Phys. Commun. 176 (2007) 300.
.. [2] J. R. Andersen et al., "Les Houches 2013: Physics at TeV
   Colliders: Standard Model Working Group Report", arXiv:1405.1067
   (LHE 3.0 weight format).
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from fastlhe.exceptions import RowShortfallError
from fastlhe.models.records import LHETables, TableDimensions, allocate_tables
from fastlhe.readers.base import BaseReader
from fastlhe.readers.events import RecordWriter
from fastlhe.readers.markup import StreamingTagParser
from fastlhe.utils.constants import CHUNK_SIZE
from fastlhe.utils.parsing import scan_dimensions
from fastlhe.utils.validation import validate_tables

logger = logging.getLogger(__name__)


class LHEReader(BaseReader):
    """Two-pass reader for LHE files

    Parameters
    ----------
    chunk_size : int, optional
        Bytes read per chunk in the markup pass.  Default
        :data:`~fastlhe.utils.constants.CHUNK_SIZE`.

    Examples
    --------
    >>> reader = LHEReader()
    >>> tables = reader.read("events.lhe")
    >>> tables.int_event.shape
    (10000, 2)
    >>> tables.int_particle[:, 0]          # owning event of each particle
    array([   0,    0,    0, ..., 9999, 9999, 9999], dtype=int32)
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}.")
        self.chunk_size = chunk_size

    def scan(self, path: Path | str) -> TableDimensions:
        """Run the dimension scan only

        Raises
        ------
        OSError
            If the file cannot be opened.
        UnreadableParticleCountError
            If an event header does not start with a particle count.
        """
        return TableDimensions(*scan_dimensions(path))

    def read(
        self,
        path: Path | str,
        *,
        validate: bool = True,
    ) -> LHETables:
        """Parse an LHE file into its four tables

        Parameters
        ----------
        path : Path | str
            Path to the LHE file.
        validate : bool, optional
            Check cross-table consistency after parsing.  Default
            ``True``.

        Returns
        -------
        LHETables
            Fully populated tables.

        Raises
        ------
        OSError
            If the file cannot be opened.
        UnreadableParticleCountError
            If an event header does not start with a particle count.
        EmptyInputError
            If the file holds no events, weight tags, or particles.
        MalformedMarkupError
            If the tag structure is not well formed.
        MalformedEventError
            If a numeric field of an event cannot be read.
        WeightOverflowError
            If an event has more weights than the table has columns.
        RowOverflowError
            If the markup pass finds more events or particles than the
            dimension scan.
        RowShortfallError
            If the markup pass writes fewer events or particles than the
            dimension scan counted.
        ValidationError
            If *validate* is ``True`` and the tables are inconsistent.
        """
        filepath = Path(path)
        logger.debug("Opening LHE file: %s", filepath)

        dims = self.scan(filepath)
        logger.debug(
            "Dimensions: %d events, %d weight columns, %d particles",
            dims.n_events, dims.n_weights, dims.n_particles,
        )

        tables = allocate_tables(dims)
        writer = RecordWriter(tables)
        parser = StreamingTagParser(writer)
        with open(filepath, "rb") as fh:
            parser.parse_stream(fh, self.chunk_size)

        if writer.event_index != dims.n_events or writer.particle_index != dims.n_particles:
            raise RowShortfallError(
                f"{filepath}: markup pass wrote {writer.event_index} event(s) and "
                f"{writer.particle_index} particle(s), dimension scan counted "
                f"{dims.n_events} and {dims.n_particles}"
            )

        if validate:
            validate_tables(*tables.as_tuple())

        logger.info(
            "Parsed %s: %d events, %d particles, %d weight columns",
            filepath, writer.event_index, writer.particle_index, dims.n_weights,
        )
        return tables


def parse_lhe(
    filename: Path | str,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Parse an LHE file into ``(int_event, float_event, int_particle, float_particle)``

    Convenience wrapper around :meth:`LHEReader.read`.

    Parameters
    ----------
    filename : Path | str
        Path to the LHE file.

    Returns
    -------
    tuple of numpy.ndarray
        See :mod:`fastlhe.models.records` for the column layout.

    Examples
    --------
    >>> i_evt, f_evt, i_ptc, f_ptc = parse_lhe("events.lhe")
    """
    return LHEReader().read(filename).as_tuple()
