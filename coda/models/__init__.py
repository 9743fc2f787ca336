"""Coda document model."""

from coda.models.document import Document, Viewport
from coda.models.export_config import ExportConfig
from coda.models.path import (
    CubicCurveTo,
    CubicCurveToShorthand,
    EndPath,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathElement,
    QuadraticCurveTo,
    QuadraticCurveToShorthand,
    VerticalLineTo,
)
from coda.models.primitives import Color, Point
from coda.models.shapes import Ellipse, Group, Line, Multiline, Path, Polygon, Rectangle, Shape
from coda.models.style import Circular, FlipX, FlipY, Rotate, Style

__all__ = [
    "Circular",
    "Color",
    "CubicCurveTo",
    "CubicCurveToShorthand",
    "Document",
    "Ellipse",
    "EndPath",
    "ExportConfig",
    "FlipX",
    "FlipY",
    "Group",
    "HorizontalLineTo",
    "Line",
    "LineTo",
    "MoveTo",
    "Multiline",
    "Path",
    "PathElement",
    "Point",
    "Polygon",
    "QuadraticCurveTo",
    "QuadraticCurveToShorthand",
    "Rectangle",
    "Rotate",
    "Shape",
    "Style",
    "VerticalLineTo",
    "Viewport",
]
