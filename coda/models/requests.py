"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from coda.models.document import Document
from coda.models.edit_ops import EditOp
from coda.models.export_config import ExportConfig


class ParseRequest(BaseModel):
    source: str = Field(..., description="Document text, <svg viewport=...> ... </svg>")


class ExportRequest(BaseModel):
    document: Document
    config: ExportConfig | None = Field(
        default=None,
        description="Formatting options; server defaults when omitted",
    )


class FormatRequest(BaseModel):
    source: str = Field(..., description="Document text to re-format")
    config: ExportConfig | None = None


class HtmlRequest(BaseModel):
    source: str = Field(..., description="Document text to render as HTML")


class EditRequest(BaseModel):
    source: str = Field(..., description="Document text to edit")
    operations: list[EditOp] = Field(..., description="Ordered list of edit operations")
    config: ExportConfig | None = None
