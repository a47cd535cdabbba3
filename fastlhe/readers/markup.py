#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Incremental tag-structure scanner for LHE files

:class:`StreamingTagParser` consumes a file as bounded byte chunks and
forwards element-start, element-end, and text notifications, in
document order, to a :class:`TagHandler`.  The scanning itself is done
by the Expat engine from :mod:`xml.parsers.expat`; the handler never
sees Expat objects, so the record-assembly state machine does not
depend on the engine.

Chunks are never re-processed once consumed, and the scanner keeps no
copy of the text it forwards.  Accumulating text is the handler's job.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Protocol
from xml.parsers import expat

from fastlhe.exceptions import FormatError, MalformedMarkupError
from fastlhe.utils.constants import CHUNK_SIZE

logger = logging.getLogger(__name__)


class TagHandler(Protocol):
    """Receiver of markup notifications"""

    def start_element(self, name: str) -> None:
        ...

    def end_element(self, name: str) -> None:
        ...

    def text(self, data: str) -> None:
        ...


class StreamingTagParser:
    """Chunk-fed markup scanner emitting notifications to a handler

    Parameters
    ----------
    handler : TagHandler
        Object receiving ``start_element``, ``end_element``, and ``text``
        calls.

    Notes
    -----
    Any exception raised by the handler aborts the scan and propagates
    out of :meth:`feed`.  A :class:`~fastlhe.exceptions.FormatError`
    without a line number is stamped with the line of the tag that
    triggered it.  After a failure, or after the final chunk, the parser is
    closed and refuses further input.

    Examples
    --------
    >>> parser = StreamingTagParser(handler)
    >>> parser.feed(b"<event>1 2", is_final=False)
    >>> parser.feed(b" 3</event>", is_final=True)
    """

    def __init__(self, handler: TagHandler) -> None:
        self._handler = handler
        self._parser = expat.ParserCreate()
        self._parser.buffer_text = True
        self._parser.StartElementHandler = self._on_start
        self._parser.EndElementHandler = self._on_end
        self._parser.CharacterDataHandler = handler.text
        self._closed = False
        self.bytes_fed = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def lineno(self) -> int:
        """Line the scanner is currently at (1-based)."""
        return self._parser.CurrentLineNumber

    def _on_start(self, name: str, attrs: dict) -> None:
        try:
            self._handler.start_element(name)
        except FormatError as exc:
            self._stamp(exc)
            raise

    def _on_end(self, name: str) -> None:
        try:
            self._handler.end_element(name)
        except FormatError as exc:
            self._stamp(exc)
            raise

    def _stamp(self, exc: FormatError) -> None:
        if exc.lineno is None:
            exc.lineno = self._parser.CurrentLineNumber

    def feed(self, chunk: bytes, is_final: bool = False) -> None:
        """Scan one chunk of the file

        Parameters
        ----------
        chunk : bytes
            Next bytes of the file, in order.  May be empty.
        is_final : bool, optional
            ``True`` for the last chunk; unterminated elements are then
            reported as errors.

        Raises
        ------
        MalformedMarkupError
            If the bytes seen so far are not well-formed markup.
        FormatError
            If the handler rejects the content.
        ValueError
            If the parser is already closed.
        """
        if self._closed:
            raise ValueError("StreamingTagParser is closed; no further chunks accepted.")

        try:
            self._parser.Parse(chunk, is_final)
        except expat.ExpatError as exc:
            self._closed = True
            raise MalformedMarkupError(exc.lineno, expat.ErrorString(exc.code)) from exc
        except BaseException:
            self._closed = True
            raise

        self.bytes_fed += len(chunk)
        if is_final:
            self._closed = True

    def parse_stream(self, fh: BinaryIO, chunk_size: int = CHUNK_SIZE) -> None:
        """Feed a binary file object chunk by chunk until it is exhausted

        Parameters
        ----------
        fh : BinaryIO
            File opened in binary mode.
        chunk_size : int, optional
            Bytes per read.  Default :data:`~fastlhe.utils.constants.CHUNK_SIZE`.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}.")

        while True:
            chunk = fh.read(chunk_size)
            is_final = len(chunk) < chunk_size
            self.feed(chunk, is_final)
            if is_final:
                break

        logger.debug("Markup scan finished: %d bytes, %d lines", self.bytes_fed, self.lineno)
