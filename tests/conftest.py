"""Shared test fixtures."""

from __future__ import annotations

import pytest

from coda.models import (
    Circular,
    Color,
    CubicCurveTo,
    CubicCurveToShorthand,
    Document,
    Ellipse,
    EndPath,
    FlipX,
    FlipY,
    Group,
    HorizontalLineTo,
    Line,
    LineTo,
    MoveTo,
    Multiline,
    Path,
    Point,
    Polygon,
    QuadraticCurveTo,
    QuadraticCurveToShorthand,
    Rectangle,
    Style,
    VerticalLineTo,
    Viewport,
)


# Sample documents

RECT_DOC = '''<svg viewport="0 0 100 100">
  <rectangle x="10" y="20" width="30" height="40" />
</svg>
'''

SHAPES_DOC = '''<svg viewport="0 0 200 100">
  <ellipse x="50" y="50" width="20" height="10" fill="#ff0000ff" />
  <line start="0 0" end="200 100" outline="#00ff0080" />
  <multiline points="0 0 10 -10 20 0" />
  <polygon points="0 0 10 0 5 5" rotate="x" />
  <draw data="M 0 0 L 10 10 H -5 V 7 Z" translate="3 -4" />
</svg>
'''

GROUP_DOC = '''<svg viewport="0 0 10 10">
  <group fill="#ff0000ff" rotate="45">
    <rectangle x="0" y="0" width="1" height="1" />
    <ellipse fill="#0000ffff" x="1" y="1" width="2" height="3" />
  </group>
</svg>
'''

NESTED_GROUP_DOC = '''<svg viewport="0 0 10 10">
  <group outline="#112233ff">
    <group translate="1 1">
      <rectangle x="0" y="0" width="5" height="5" />
    </group>
  </group>
</svg>
'''

MISSING_HEIGHT_DOC = '''<svg viewport="0 0 10 10">
  <rectangle x="0" y="0" width="5" />
</svg>
'''


def build_document() -> Document:
    """A document touching every shape, path command and rotate variant."""
    red = Color(red=255, green=0, blue=0, alpha=255)
    translucent = Color(red=16, green=32, blue=48, alpha=128)
    return Document(
        viewport=Viewport(start=Point(x=-10, y=-10), end=Point(x=300, y=200)),
        shapes=[
            Ellipse(cx=50, cy=60, rx=20, ry=10, style=Style(fill=red)),
            Rectangle(
                x=-5,
                y=0,
                width=30,
                height=40,
                style=Style(outline=translucent, rotate=Circular(-30)),
            ),
            Line(start=Point(x=0, y=0), end=Point(x=-100, y=2147483647)),
            Multiline(points=[Point(x=1, y=2), Point(x=-3, y=4)]),
            Polygon(points=[], style=Style(rotate=FlipX())),
            Path(
                elements=[
                    MoveTo(point=Point(x=0, y=0)),
                    LineTo(point=Point(x=10, y=-10)),
                    HorizontalLineTo(x=-5),
                    VerticalLineTo(y=7),
                    CubicCurveTo(
                        control_1=Point(x=1, y=1),
                        control_2=Point(x=2, y=2),
                        end=Point(x=3, y=3),
                    ),
                    CubicCurveToShorthand(control=Point(x=4, y=4), end=Point(x=5, y=5)),
                    QuadraticCurveTo(control=Point(x=6, y=6), end=Point(x=7, y=7)),
                    QuadraticCurveToShorthand(end=Point(x=8, y=-8)),
                    EndPath(),
                ],
                style=Style(translate=Point(x=3, y=-4)),
            ),
            Group(
                style=Style(fill=red, rotate=FlipY()),
                shapes=[
                    Rectangle(x=0, y=0, width=1, height=1),
                    Group(shapes=[Path(elements=[MoveTo(point=Point(x=1, y=1))])]),
                    Group(),
                ],
            ),
        ],
    )


@pytest.fixture
def rect_doc() -> str:
    return RECT_DOC


@pytest.fixture
def group_doc() -> str:
    return GROUP_DOC


@pytest.fixture
def document() -> Document:
    return build_document()
