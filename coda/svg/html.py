"""One-way export to an HTML page with the drawing as inline SVG."""

from __future__ import annotations

import logging
from pathlib import Path

from coda.models.document import Document
from coda.models.path import PathElement
from coda.models.primitives import Color, Point
from coda.models.shapes import Ellipse, Group, Line, Multiline, Polygon, Rectangle, Shape
from coda.models.style import FlipX, FlipY, Style
from coda.svg.errors import StreamError
from coda.svg.paths import format_path_element

logger = logging.getLogger(__name__)

_PAGE_START = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      * {
        margin: 0;
        padding: 0;
      }

      svg {
        width: 100vw;
        height: 100vh;
      }
    </style>
  </head>
  <body>"""

_PAGE_END = """  </body>
</html>
"""


def _rgba(color: Color) -> str:
    alpha = round(color.alpha / 255, 3)
    return f"rgba({color.red}, {color.green}, {color.blue}, {alpha:g})"


def _transform(style: Style) -> str:
    translate = f"translate({style.translate.x}, {style.translate.y})"
    if isinstance(style.rotate, FlipX):
        return f"{translate} scale(1, -1)"
    if isinstance(style.rotate, FlipY):
        return f"{translate} scale(-1, 1)"
    return f"{translate} rotate({style.rotate.degree})"


def _style_attrs(style: Style) -> str:
    return (
        f'stroke="{_rgba(style.outline)}" fill="{_rgba(style.fill)}" '
        f'transform="{_transform(style)}"'
    )


def _points(points: list[Point]) -> str:
    return " ".join(f"{p.x},{p.y}" for p in points)


def _path_data(elements: list[PathElement]) -> str:
    return " ".join(format_path_element(e) for e in elements)


def _leaf_tag(shape: Shape) -> str:
    if isinstance(shape, Ellipse):
        tag = f'<ellipse cx="{shape.cx}" cy="{shape.cy}" rx="{shape.rx}" ry="{shape.ry}"'
    elif isinstance(shape, Rectangle):
        tag = f'<rect x="{shape.x}" y="{shape.y}" width="{shape.width}" height="{shape.height}"'
    elif isinstance(shape, Line):
        tag = (
            f'<line x1="{shape.start.x}" y1="{shape.start.y}" '
            f'x2="{shape.end.x}" y2="{shape.end.y}"'
        )
    elif isinstance(shape, Multiline):
        tag = f'<polyline points="{_points(shape.points)}"'
    elif isinstance(shape, Polygon):
        tag = f'<polygon points="{_points(shape.points)}"'
    else:
        tag = f'<path d="{_path_data(shape.elements)}"'
    return tag


def _shape_lines(shape: Shape, depth: int) -> list[str]:
    lines: list[str] = []
    stack: list[tuple[Shape, int, bool]] = [(shape, depth, False)]
    while stack:
        shape, depth, closing = stack.pop()
        indent = "  " * depth
        if closing:
            lines.append(f"{indent}</g>")
        elif isinstance(shape, Group):
            lines.append(f"{indent}<g {_style_attrs(shape.style)}>")
            stack.append((shape, depth, True))
            stack.extend((child, depth + 1, False) for child in reversed(shape.shapes))
        else:
            lines.append(f"{indent}{_leaf_tag(shape)} {_style_attrs(shape.style)} />")
    return lines


def export_html(document: Document) -> str:
    """Render ``document`` as a standalone HTML5 page."""
    viewport = document.viewport
    width = viewport.end.x - viewport.start.x
    height = viewport.end.y - viewport.start.y

    lines = [
        _PAGE_START,
        f'    <svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{viewport.start.x} {viewport.start.y} {width} {height}">',
    ]
    for shape in document.shapes:
        lines.extend(_shape_lines(shape, 3))
    lines.append("    </svg>")
    lines.append(_PAGE_END)
    return "\n".join(lines)


def save_html(document: Document, path: str | Path) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(export_html(document))
    except OSError as e:
        raise StreamError("save_html", f"Could not write {path}: {e}") from e
    logger.debug("Wrote HTML export to %s", path)
