"""Coda: parser, serializer and editor for the Coda vector document format."""

__version__ = "0.1.0"
