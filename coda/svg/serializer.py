"""Document serializer, the structural mirror of ``coda.svg.parser``."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from coda.models.document import Document
from coda.models.export_config import ExportConfig
from coda.svg import writer
from coda.svg.cursor import Cursor
from coda.svg.errors import DocumentError, StreamError
from coda.svg.shapes import write_shape

logger = logging.getLogger(__name__)


def export(document: Document, stream: TextIO, config: ExportConfig | None = None) -> None:
    config = config or ExportConfig()
    cursor = Cursor(stream)
    try:
        cursor.write("<svg")
        cursor.write("\n" if config.line_break else " ")
        viewport = document.viewport
        writer.write_text_parameter(
            cursor,
            config,
            "viewport",
            f"{writer.format_point(viewport.start)} {writer.format_point(viewport.end)}",
            1,
        )
        cursor.write(">\n")
        for shape in document.shapes:
            write_shape(cursor, config, shape, 1)
        cursor.write("</svg>\n")
    except DocumentError as err:
        err.add_frame("export_svg", "Could not export svg")
        raise
    logger.debug("Exported document with %d top-level shapes", len(document.shapes))


def export_text(document: Document, config: ExportConfig | None = None) -> str:
    buffer = io.StringIO()
    export(document, buffer, config)
    return buffer.getvalue()


def save(document: Document, path: str | Path, config: ExportConfig | None = None) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            export(document, f, config)
    except OSError as e:
        raise StreamError("save", f"Could not write {path}: {e}") from e
