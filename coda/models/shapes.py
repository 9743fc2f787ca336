"""Shape tree: primitives plus recursive groups. Every shape owns its style."""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from coda.models.path import PathElement
from coda.models.primitives import CodaModel, Int32, Point
from coda.models.style import Style


class Ellipse(CodaModel):
    tag: ClassVar[str] = "ellipse"
    kind: Literal["ellipse"] = "ellipse"
    style: Style = Field(default_factory=Style)
    cx: Int32
    cy: Int32
    rx: Int32
    ry: Int32


class Rectangle(CodaModel):
    tag: ClassVar[str] = "rectangle"
    kind: Literal["rectangle"] = "rectangle"
    style: Style = Field(default_factory=Style)
    x: Int32
    y: Int32
    width: Int32
    height: Int32


class Line(CodaModel):
    tag: ClassVar[str] = "line"
    kind: Literal["line"] = "line"
    style: Style = Field(default_factory=Style)
    start: Point
    end: Point


class Multiline(CodaModel):
    tag: ClassVar[str] = "multiline"
    kind: Literal["multiline"] = "multiline"
    style: Style = Field(default_factory=Style)
    points: list[Point] = Field(default_factory=list)


class Polygon(CodaModel):
    tag: ClassVar[str] = "polygon"
    kind: Literal["polygon"] = "polygon"
    style: Style = Field(default_factory=Style)
    points: list[Point] = Field(default_factory=list)


class Path(CodaModel):
    tag: ClassVar[str] = "draw"
    kind: Literal["path"] = "path"
    style: Style = Field(default_factory=Style)
    elements: list[PathElement] = Field(min_length=1)


class Group(CodaModel):
    tag: ClassVar[str] = "group"
    kind: Literal["group"] = "group"
    style: Style = Field(default_factory=Style)
    shapes: list[Shape] = Field(default_factory=list)


Shape = Annotated[
    Union[Ellipse, Rectangle, Line, Multiline, Polygon, Path, Group],
    Field(discriminator="kind"),
]

Group.model_rebuild()
