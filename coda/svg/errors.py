"""Error taxonomy for parsing and exporting Coda documents.

Every error carries the operation that detected it, a message and the 1-based
line/column of the cursor at that point. Enclosing parsers append frames to
``trace`` while the error propagates, so the full chain can be reported.
"""

from __future__ import annotations

from typing import Any


class DocumentError(Exception):
    kind = "document_error"

    def __init__(self, operation: str, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.operation = operation
        self.message = message
        self.line = line
        self.column = column
        self.trace: list[tuple[str, str]] = []

    def add_frame(self, operation: str, message: str) -> None:
        self.trace.append((operation, message))

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "operation": self.operation,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "trace": [{"operation": op, "message": msg} for op, msg in self.trace],
        }

    def __str__(self) -> str:
        return f"({self.operation}) {self.message} [line {self.line}, column {self.column}]"


class DocumentSyntaxError(DocumentError):
    """Unexpected char where a literal, digit or attribute was expected."""

    kind = "syntax_error"


class MissingAttributeError(DocumentError):
    kind = "missing_attribute"

    def __init__(self, operation: str, attribute: str, line: int = 0, column: int = 0) -> None:
        super().__init__(operation, f"Missing parameter '{attribute}'.", line, column)
        self.attribute = attribute


class IntegerOverflowError(DocumentError):
    kind = "overflow"


class StreamError(DocumentError):
    """The underlying stream failed to read or write."""

    kind = "io_error"
