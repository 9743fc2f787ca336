"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from coda.models.document import Document
from coda.models.edit_ops import SkippedEdit


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ParseResponse(BaseModel):
    document: Document
    shape_count: int = 0


class SourceResponse(BaseModel):
    source: str


class HtmlResponse(BaseModel):
    html: str


class EditResponse(BaseModel):
    source: str
    applied: int = 0
    skipped: list[SkippedEdit] = Field(default_factory=list)
