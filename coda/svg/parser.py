"""Document deserializer: ``<svg viewport="..."> shapes </svg>``."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from coda.models.document import Document, Viewport
from coda.models.style import Style
from coda.svg.cursor import Cursor, describe
from coda.svg.errors import DocumentError, StreamError
from coda.svg.primitives import parse_point
from coda.svg.shapes import parse_shapes

logger = logging.getLogger(__name__)


def parse_viewport(cursor: Cursor) -> Viewport:
    c = cursor.next_non_whitespace_char()
    if c != "v":
        raise cursor.error("parse_viewport", f"Expected char 'v' got {describe(c)}")
    try:
        cursor.consume_literal('iewport="')
        start = parse_point(cursor)
        end = parse_point(cursor)
    except DocumentError as err:
        err.add_frame("parse_viewport", "Could not parse viewport.")
        raise

    if cursor.last_consumed != '"':
        c = cursor.next_non_whitespace_char()
        if c != '"':
            raise cursor.error("parse_viewport", f"Expected char '\"' got {describe(c)}")
    return Viewport(start=start, end=end)


def parse(stream: TextIO) -> Document:
    """Read a whole document from ``stream``.

    Content after the closing ``</svg>`` is ignored.
    """
    cursor = Cursor(stream)
    try:
        cursor.consume_literal("<svg")
        viewport = parse_viewport(cursor)
        cursor.consume_char(">")
        shapes = parse_shapes(cursor, Style(), "svg")
    except DocumentError as err:
        err.add_frame("parse_svg", "Could not parse svg.")
        raise

    document = Document(viewport=viewport, shapes=shapes)
    logger.debug("Parsed document with %d top-level shapes", len(document.shapes))
    return document


def parse_text(text: str) -> Document:
    return parse(io.StringIO(text))


def load(path: str | Path) -> Document:
    try:
        with open(path, encoding="utf-8") as f:
            return parse(f)
    except OSError as e:
        raise StreamError("load", f"Could not open {path}: {e}") from e
