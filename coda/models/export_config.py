"""Serializer formatting options."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ExportConfig(BaseModel):
    tab_size: int = Field(default=4, gt=0, description="Spaces per indentation level")
    line_break: bool = Field(default=True, description="One attribute per line when true")
