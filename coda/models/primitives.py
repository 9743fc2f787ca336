"""Points and colors."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Every integer the text format can carry: coordinates, sizes, H/V operands.
Int32 = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class CodaModel(BaseModel):
    """Base for every document model: mutable, validated on assignment."""

    model_config = ConfigDict(validate_assignment=True)


class Point(CodaModel):
    x: Int32 = 0
    y: Int32 = 0


class Color(CodaModel):
    """RGBA color, one byte per channel. Defaults to opaque black."""

    red: int = Field(default=0, ge=0, le=255)
    green: int = Field(default=0, ge=0, le=255)
    blue: int = Field(default=0, ge=0, le=255)
    alpha: int = Field(default=255, ge=0, le=255)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"
