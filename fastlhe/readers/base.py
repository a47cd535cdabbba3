#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for event-file readers

Every concrete reader inherits from :class:`BaseReader` and implements
the :meth:`read` method, which returns
:class:`~fastlhe.models.records.LHETables`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from fastlhe.models.records import LHETables

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base for event-file readers

    The *validate* keyword argument controls whether post-parse
    validation is performed.  When ``False`` the reader skips the
    cross-table consistency checks.

    Notes
    -----
    Readers must never call HDF5 writing functions; that is the
    responsibility of the converter layer.  The dependency direction is::

        utils ← models ← readers ← converters
    """

    @abstractmethod
    def read(
        self,
        path: Path | str,
        *,
        validate: bool = True,
    ) -> LHETables:
        """Parse an event file and return its tables

        Parameters
        ----------
        path : Path | str
            Filesystem path to the source file.
        validate : bool, optional
            If ``True`` (default), run post-parse validation checks.

        Returns
        -------
        LHETables
            The four dense output tables.

        Raises
        ------
        OSError
            If the file cannot be opened.
        FormatError
            If the file content is malformed.
        ValidationError
            If *validate* is ``True`` and any post-parse check fails.
        """
        ...
