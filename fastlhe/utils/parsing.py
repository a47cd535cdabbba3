#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared LHE parsing helpers for the FastLHE package

Two low-level pieces live here so that the reader modules contain only
the record-assembly logic:

* :class:`TokenCursor` walks whitespace-delimited numeric tokens of an
  untagged text block and converts them strictly to ``int`` or ``float``.
* :func:`scan_dimensions` is the first, line-oriented pass over a file
  that counts events, weight tags, and particles so that the output
  tables can be allocated once.

LHE Event Block
---------------
An ``<event>`` element starts with untagged text::

    NUP IDPRUP XWGTUP SCALUP AQEDUP AQCDUP
    IDUP ISTUP MOTHUP1 MOTHUP2 ICOLUP1 ICOLUP2 PUP1 PUP2 PUP3 PUP4 PUP5 VTIMUP SPINUP
    ...                                  (NUP particle lines)

followed by optional tagged blocks such as ``<rwgt>`` with one ``<wgt>``
per alternative weight.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from fastlhe.exceptions import UnreadableParticleCountError
from fastlhe.utils.constants import (
    EVENT_OPEN_MARKER,
    WEIGHT_OPEN_MARKER,
    WHITESPACE,
)

logger = logging.getLogger(__name__)

_TOKEN = re.compile(f"[{WHITESPACE}]*([^{WHITESPACE}]+)[{WHITESPACE}]*")
_LEADING_INT = re.compile(rb"[ \t\r\n]*([+-]?[0-9]+)(?=[ \t\r\n]|\Z)")


# ---------------------------------------------------------------------------
# Numeric tokenizer
# ---------------------------------------------------------------------------

class TokenCursor:
    """Forward-only cursor over the whitespace-delimited tokens of a text block

    The cursor never copies the block; it keeps an offset into the
    borrowed string and matches one token at a time.  Conversions are
    strict: the whole token must be an ASCII integer or float literal
    (no digit separators, no locale-dependent digits).

    A failed conversion is *reported*, not raised: :meth:`next_int` and
    :meth:`next_float` return ``None`` and the caller decides whether
    that is fatal.  The offending token is consumed either way.

    Parameters
    ----------
    text : str
        Text block to tokenize.
    pos : int, optional
        Offset at which to start.  Default ``0``.

    Examples
    --------
    >>> cur = TokenCursor(" 2  1\\n0.5 abc")
    >>> cur.next_int(), cur.next_int(), cur.next_float()
    (2, 1, 0.5)
    >>> cur.next_float() is None
    True
    >>> cur.exhausted
    True
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def exhausted(self) -> bool:
        """``True`` when only whitespace remains."""
        return _TOKEN.match(self.text, self.pos) is None

    def _next_token(self) -> str | None:
        m = _TOKEN.match(self.text, self.pos)
        if m is None:
            self.pos = len(self.text)
            return None
        self.pos = m.end()
        tok = m.group(1)
        if "_" in tok or not tok.isascii():
            return None
        return tok

    def next_int(self) -> int | None:
        """Consume the next token as an integer, or return ``None``"""
        tok = self._next_token()
        if tok is None:
            return None
        try:
            return int(tok)
        except ValueError:
            return None

    def next_float(self) -> float | None:
        """Consume the next token as a float, or return ``None``"""
        tok = self._next_token()
        if tok is None:
            return None
        try:
            return float(tok)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Pass 1: dimension scan
# ---------------------------------------------------------------------------

def scan_dimensions(path: Path | str) -> tuple[int, int, int]:
    """Count events, weight tags, and particles in an LHE file

    Scans the file line by line without allocating output.  Each line
    holding an event-open tag adds one event and forces the following
    line to be read as the event header, whose leading integer (NUP) is
    added to the particle total.  Each line holding a ``<weight>`` open
    tag adds one weight tag; the count is global to the file, not per
    event.  No nesting or tag balance is checked here.

    Parameters
    ----------
    path : Path | str
        Path to the LHE file.

    Returns
    -------
    tuple[int, int, int]
        ``(n_events, n_weight_tags, n_particles_total)``.

    Raises
    ------
    OSError
        If the file cannot be opened.
    UnreadableParticleCountError
        If the line after an event-open tag does not start with an
        integer, or the integer is negative.
    """
    n_events = 0
    n_weights = 0
    n_particles = 0
    lineno = 0

    with open(path, "rb") as fh:
        for line in fh:
            lineno += 1
            if EVENT_OPEN_MARKER.search(line):
                n_events += 1
                line = next(fh, b"")
                lineno += 1
                m = _LEADING_INT.match(line)
                if m is None or int(m.group(1)) < 0:
                    raise UnreadableParticleCountError(
                        f"cannot read particle count from event header "
                        f"{line.strip()[:40]!r}",
                        lineno=lineno,
                    )
                n_particles += int(m.group(1))

            if WEIGHT_OPEN_MARKER.search(line):
                n_weights += 1

    logger.debug(
        "Scanned %s: %d lines, %d events, %d weight tags, %d particles",
        path, lineno, n_events, n_weights, n_particles,
    )
    return n_events, n_weights, n_particles
