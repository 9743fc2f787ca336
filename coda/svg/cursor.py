"""Position-tracking reader/writer over a single text stream.

The parsers never peek: they work from the char the cursor consumed last,
exposed as ``last_consumed`` (``""`` once the stream is exhausted).
"""

from __future__ import annotations

import logging
from typing import TextIO

from coda.svg.errors import DocumentError, DocumentSyntaxError, StreamError

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n")


def is_whitespace(c: str) -> bool:
    return c in WHITESPACE


def describe(c: str) -> str:
    """Human-readable form of a consumed char for error messages."""
    return "end of stream" if c == "" else f"char {c!r}"


class Cursor:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.line = 1
        self.column = 0
        self.last_consumed = ""

    # -- reading -------------------------------------------------------------

    def next_char(self) -> str:
        try:
            c = self.stream.read(1)
        except OSError as e:
            raise self.error("next_char", f"Could not read from stream: {e}", StreamError) from e
        self._advance(c)
        self.last_consumed = c
        return c

    def next_non_whitespace_char(self) -> str:
        c = self.next_char()
        while is_whitespace(c):
            c = self.next_char()
        return c

    def consume_char(self, expected: str) -> None:
        c = self.next_non_whitespace_char()
        if c != expected:
            raise self.error("consume_char", f"Expected char {expected!r} got {describe(c)}")

    def consume_literal(self, text: str) -> None:
        for expected in text:
            try:
                self.consume_char(expected)
            except DocumentError as err:
                err.add_frame("consume_literal", f"Could not consume {text!r}")
                raise

    # -- writing -------------------------------------------------------------

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except OSError as e:
            raise self.error("write", f"Could not write to stream: {e}", StreamError) from e
        for c in text:
            self._advance(c)

    def write_spaces(self, amount: int) -> None:
        if amount > 0:
            self.write(" " * amount)

    # -- errors --------------------------------------------------------------

    def error(
        self,
        operation: str,
        message: str,
        kind: type[DocumentError] = DocumentSyntaxError,
    ) -> DocumentError:
        logger.debug("%s failed at %d:%d: %s", operation, self.line, self.column, message)
        return kind(operation, message, self.line, self.column)

    def _advance(self, c: str) -> None:
        if c == "\n":
            self.line += 1
            self.column = 0
        elif c:
            self.column += 1
