#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the FastLHE package

All exceptions raised by FastLHE inherit from :class:`FastLHEError`, so a
single ``except`` clause catches every library-specific failure.  Any
violation of the LHE format aborts the whole parse; there is no partial
result and no recovery path.

Exception Hierarchy
-------------------
::

    FastLHEError
    ├── FormatError                     # Any LHE format violation
    │   ├── UnreadableParticleCountError  # Pass 1: NUP after <event> unparsable
    │   ├── MalformedMarkupError          # Pass 2: unbalanced / unterminated tags
    │   ├── EmptyInputError               # No events, weight tags, or particles
    │   ├── WeightOverflowError           # Too many weights for one event
    │   ├── MalformedEventError           # Unreadable numeric field in an event
    │   ├── RowOverflowError              # More rows than pass 1 sized for
    │   └── RowShortfallError             # Fewer rows than pass 1 sized for
    ├── ValidationError                 # Post-parse table consistency checks
    └── ConversionError                 # HDF5 write failures

An unreadable source file raises the built-in :class:`OSError` family
(``FileNotFoundError`` for a missing path).
"""

from __future__ import annotations


class FastLHEError(Exception):
    """Base exception for all FastLHE errors"""


class FormatError(FastLHEError):
    """Raised when an LHE file violates the expected format

    Parameters
    ----------
    message : str
        Human-readable description of the violation.
    lineno : int | None, optional
        1-based line number of the offending input, when known.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class UnreadableParticleCountError(FormatError):
    """Raised by the dimension scan when the line after an event-open tag
    does not begin with an integer particle count
    """


class MalformedMarkupError(FormatError):
    """Raised when the tag structure of the file is not well formed

    Parameters
    ----------
    lineno : int
        Line at which the markup engine stopped.
    reason : str
        Markup engine's description of the problem.
    """

    def __init__(self, lineno: int, reason: str) -> None:
        super().__init__(f"malformed markup: {reason}", lineno=lineno)
        self.reason = reason


class EmptyInputError(FormatError):
    """Raised when the dimension scan finds no events, weight tags, or
    particles; such input is treated as malformed rather than empty
    """


class WeightOverflowError(FormatError):
    """Raised when an event carries more weight values than the weight
    columns sized from the whole-file ``<weight>`` count
    """

    def __init__(self, event_index: int, n_weights: int) -> None:
        super().__init__(
            f"event {event_index} has more than {n_weights} weight value(s)"
        )
        self.event_index = event_index
        self.n_weights = n_weights


class MalformedEventError(FormatError):
    """Raised when a numeric field of an event block is missing or cannot
    be converted

    Parameters
    ----------
    event_index : int
        0-based index of the event being written.
    field : str
        Name of the field that failed (``"NUP"``, ``"IDUP"``, ...).
    detail : str, optional
        Extra context such as the particle number.
    """

    def __init__(self, event_index: int, field: str, detail: str = "") -> None:
        msg = f"cannot read {field} in event {event_index}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.event_index = event_index
        self.field = field


class RowOverflowError(FormatError):
    """Raised when the markup pass finds more events or particles than the
    dimension scan counted
    """


class RowShortfallError(FormatError):
    """Raised when the markup pass writes fewer events or particles than the
    dimension scan counted, e.g. for an event tag inside a markup comment
    """


class ValidationError(FastLHEError):
    """Raised when parsed tables fail post-parse consistency checks

    A ``ValidationError`` means the file was *parseable* but the tables
    disagree with each other (row counts, particle ownership order).
    """


class ConversionError(FastLHEError):
    """Raised when writing tables to HDF5 fails

    Covers an existing output file without ``overwrite``, permission
    errors, and any h5py failure during the write.
    """


# Short aliases, e.g. ``except FormatError.EmptyInput``
FormatError.UnreadableParticleCount = UnreadableParticleCountError
FormatError.MalformedMarkup = MalformedMarkupError
FormatError.EmptyInput = EmptyInputError
FormatError.WeightOverflow = WeightOverflowError
FormatError.MalformedEvent = MalformedEventError
FormatError.RowOverflow = RowOverflowError
FormatError.RowShortfall = RowShortfallError
