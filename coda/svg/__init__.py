"""Reading and writing Coda documents."""

from coda.svg.errors import (
    DocumentError,
    DocumentSyntaxError,
    IntegerOverflowError,
    MissingAttributeError,
    StreamError,
)
from coda.svg.html import export_html, save_html
from coda.svg.parser import load, parse, parse_text
from coda.svg.serializer import export, export_text, save

__all__ = [
    "DocumentError",
    "DocumentSyntaxError",
    "IntegerOverflowError",
    "MissingAttributeError",
    "StreamError",
    "export",
    "export_html",
    "export_text",
    "load",
    "parse",
    "parse_text",
    "save",
    "save_html",
]
