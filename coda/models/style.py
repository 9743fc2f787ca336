"""Shape style: fill, outline, translation and rotation."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from coda.models.primitives import CodaModel, Color, Point


class FlipX(CodaModel):
    kind: Literal["flip_x"] = "flip_x"


class FlipY(CodaModel):
    kind: Literal["flip_y"] = "flip_y"


class Circular(CodaModel):
    """Rotation in degrees, kept in (-360, 360) with the sign of the input."""

    kind: Literal["circular"] = "circular"
    degree: int = 0

    def __init__(self, degree: int = 0, **data) -> None:
        super().__init__(degree=degree, **data)

    @field_validator("degree")
    @classmethod
    def _reduce(cls, value: int) -> int:
        # Truncating remainder: -370 -> -10, not 350.
        reduced = abs(value) % 360
        return reduced if value >= 0 else -reduced


Rotate = Annotated[Union[FlipX, FlipY, Circular], Field(discriminator="kind")]


class Style(CodaModel):
    fill: Color = Field(default_factory=Color)
    outline: Color = Field(default_factory=Color)
    translate: Point = Field(default_factory=Point)
    rotate: Rotate = Field(default_factory=Circular)
