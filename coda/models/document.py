"""Top-level document: viewport plus shape list."""

from __future__ import annotations

from pydantic import Field

from coda.models.primitives import CodaModel, Point
from coda.models.shapes import Shape


class Viewport(CodaModel):
    start: Point = Field(default_factory=Point)
    end: Point = Field(default_factory=Point)


class Document(CodaModel):
    viewport: Viewport = Field(default_factory=Viewport)
    shapes: list[Shape] = Field(default_factory=list)

    def walk(self):
        """Yield every shape depth-first, groups before their children."""
        stack = list(reversed(self.shapes))
        while stack:
            shape = stack.pop()
            yield shape
            if shape.kind == "group":
                stack.extend(reversed(shape.shapes))
