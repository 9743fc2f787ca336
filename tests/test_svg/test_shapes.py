"""Tests for shape parsing, group nesting, fragments and the shape writer."""

from __future__ import annotations

import io

import pytest

from coda.models import (
    Circular,
    Color,
    Ellipse,
    EndPath,
    ExportConfig,
    FlipX,
    Group,
    Line,
    LineTo,
    MoveTo,
    Multiline,
    Path,
    Point,
    Polygon,
    Rectangle,
    Style,
)
from coda.svg.cursor import Cursor
from coda.svg.errors import DocumentSyntaxError, MissingAttributeError
from coda.svg.shapes import apply_attribute, parse_fragment, parse_shapes, write_shape

RED = Color(red=255, green=0, blue=0, alpha=255)
BLUE = Color(red=0, green=0, blue=255, alpha=255)


def _write(shape, config: ExportConfig, depth: int = 0) -> str:
    buffer = io.StringIO()
    write_shape(Cursor(buffer), config, shape, depth)
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Leaf shapes
# ---------------------------------------------------------------------------

class TestLeafShapes:
    def test_ellipse_maps_width_and_height_to_radii(self):
        shape = parse_fragment('<ellipse x="1" y="2" width="30" height="40" />')
        assert shape == Ellipse(cx=1, cy=2, rx=30, ry=40)

    def test_rectangle(self):
        shape = parse_fragment('<rectangle height="4" width="3" y="2" x="1"/>')
        assert shape == Rectangle(x=1, y=2, width=3, height=4)

    def test_line(self):
        shape = parse_fragment('<line start="0 0" end="-5 5" />')
        assert shape == Line(start=Point(x=0, y=0), end=Point(x=-5, y=5))

    def test_multiline_and_polygon(self):
        assert parse_fragment('<multiline points="1 2 3 4" />') == Multiline(
            points=[Point(x=1, y=2), Point(x=3, y=4)]
        )
        assert parse_fragment('<polygon points="" />') == Polygon(points=[])

    def test_draw(self):
        shape = parse_fragment('<draw data="M 0 0 L 1 1 Z" />')
        assert shape == Path(
            elements=[MoveTo(point=Point(x=0, y=0)), LineTo(point=Point(x=1, y=1)), EndPath()]
        )

    def test_styles_between_attributes(self):
        shape = parse_fragment('<rectangle x="0" fill="#ff0000ff" y="0" rotate="x" width="1" height="1" />')
        assert shape.style.fill == RED
        assert shape.style.rotate == FlipX()

    def test_last_attribute_wins(self):
        shape = parse_fragment('<rectangle x="1" x="2" y="0" width="1" height="1" />')
        assert shape.x == 2

    def test_missing_attribute_named_in_grammar_order(self):
        with pytest.raises(MissingAttributeError) as exc:
            parse_fragment('<rectangle x="0" y="0" width="5" />')
        assert exc.value.attribute == "height"
        assert exc.value.kind == "missing_attribute"
        assert "Missing parameter 'height'." in str(exc.value)

    def test_missing_first_attribute(self):
        with pytest.raises(MissingAttributeError) as exc:
            parse_fragment('<ellipse height="1" width="1" />')
        assert exc.value.attribute == "x"

    def test_self_close_needs_gt(self):
        with pytest.raises(DocumentSyntaxError, match="'>'"):
            parse_fragment('<line start="0 0" end="1 1" /x')

    def test_unknown_shape(self):
        with pytest.raises(DocumentSyntaxError, match="Unknown shape"):
            parse_fragment('<circle r="1" />')

    def test_bad_tag(self):
        with pytest.raises(DocumentSyntaxError) as exc:
            parse_fragment('<rectangel x="1" />')
        assert ("parse_rectangle", "Could not parse rectangle shape") in exc.value.trace

    def test_end_of_stream(self):
        with pytest.raises(DocumentSyntaxError, match="end of stream"):
            parse_fragment('<rectangle x="1"')

    def test_inherited_style_is_copied(self):
        inherited = Style(fill=RED)
        shape = parse_fragment('<rectangle x="0" y="0" width="1" height="1" />', inherited)
        assert shape.style == inherited
        assert shape.style is not inherited

    def test_trailing_content_rejected(self):
        with pytest.raises(DocumentSyntaxError):
            parse_fragment('<rectangle x="0" y="0" width="1" height="1" /> <')


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

class TestGroups:
    def test_children_inherit_group_style(self):
        group = parse_fragment(
            '<group fill="#ff0000ff">'
            '<rectangle x="0" y="0" width="1" height="1" />'
            '<rectangle fill="#0000ffff" x="0" y="0" width="1" height="1" />'
            "</group>"
        )
        assert isinstance(group, Group)
        assert group.style.fill == RED
        assert group.shapes[0].style.fill == RED
        assert group.shapes[1].style.fill == BLUE

    def test_nested_groups(self):
        group = parse_fragment(
            '<group><group rotate="90"><rectangle x="0" y="0" width="1" height="1" /></group></group>'
        )
        inner = group.shapes[0]
        assert isinstance(inner, Group)
        assert isinstance(inner.shapes[0], Rectangle)
        assert inner.shapes[0].style.rotate == Circular(90)

    def test_empty_group(self):
        assert parse_fragment("<group></group>") == Group()

    def test_deep_nesting_does_not_recurse(self):
        depth = 3000
        text = "<group>" * depth + "</group>" * depth
        shape = parse_fragment(text)
        for _ in range(depth - 1):
            shape = shape.shapes[0]
        assert shape.shapes == []

    def test_wrong_closing_tag(self):
        with pytest.raises(DocumentSyntaxError) as exc:
            parse_fragment("<group></svg>")
        assert exc.value.trace[-1] == ("parse_group", "Could not parse group's shapes.")

    def test_child_must_start_with_lt(self):
        with pytest.raises(DocumentSyntaxError, match="'<'"):
            parse_fragment("<group> rectangle </group>")

    def test_parse_shapes_until_closing_tag(self):
        cursor = Cursor(io.StringIO('<line start="0 0" end="1 1" /></svg> trailing'))
        shapes = parse_shapes(cursor, Style(), "svg")
        assert len(shapes) == 1


# ---------------------------------------------------------------------------
# apply_attribute
# ---------------------------------------------------------------------------

class TestApplyAttribute:
    def test_shape_attribute(self):
        shape = Ellipse(cx=0, cy=0, rx=1, ry=1)
        apply_attribute(shape, "width", "25")
        assert shape.rx == 25

    def test_style_attribute(self):
        shape = Rectangle(x=0, y=0, width=1, height=1)
        apply_attribute(shape, "fill", "#0000ffff")
        assert shape.style.fill == BLUE

    def test_group_accepts_styles(self):
        group = Group()
        apply_attribute(group, "rotate", "-45")
        assert group.style.rotate == Circular(-45)

    def test_points(self):
        shape = Polygon(points=[])
        apply_attribute(shape, "points", "1 1 2 2")
        assert shape.points == [Point(x=1, y=1), Point(x=2, y=2)]

    def test_path_data(self):
        shape = Path(elements=[EndPath()])
        apply_attribute(shape, "data", "M 5 5")
        assert shape.elements == [MoveTo(point=Point(x=5, y=5))]

    def test_invalid_value(self):
        shape = Rectangle(x=0, y=0, width=1, height=1)
        with pytest.raises(DocumentSyntaxError):
            apply_attribute(shape, "width", "wide")
        assert shape.width == 1

    def test_unknown_name(self):
        with pytest.raises(DocumentSyntaxError):
            apply_attribute(Rectangle(x=0, y=0, width=1, height=1), "radius", "1")

    def test_injected_quote_rejected(self):
        with pytest.raises(DocumentSyntaxError):
            apply_attribute(Rectangle(x=0, y=0, width=1, height=1), "x", '1" y="2')


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

class TestWriteShape:
    def test_line_break(self):
        shape = Rectangle(x=1, y=2, width=3, height=4)
        assert _write(shape, ExportConfig(tab_size=2), depth=1) == (
            "  <rectangle\n"
            '    fill="#000000ff"\n'
            '    outline="#000000ff"\n'
            '    translate="0 0"\n'
            '    rotate="0"\n'
            '    x="1"\n'
            '    y="2"\n'
            '    width="3"\n'
            '    height="4"\n'
            "  />\n"
        )

    def test_single_line(self):
        shape = Ellipse(cx=1, cy=2, rx=3, ry=4)
        assert _write(shape, ExportConfig(line_break=False)) == (
            '<ellipse fill="#000000ff" outline="#000000ff" translate="0 0" rotate="0" '
            'x="1" y="2" width="3" height="4" />\n'
        )

    def test_group_close_tag(self):
        group = Group(shapes=[Line(start=Point(x=0, y=0), end=Point(x=1, y=1))])
        out = _write(group, ExportConfig(tab_size=1))
        assert out.startswith("<group\n")
        assert ">\n <line\n" in out
        assert out.endswith(" />\n</group>\n")
        assert "<group/>" not in out

    def test_written_shape_parses_back(self):
        group = Group(
            style=Style(fill=RED),
            shapes=[Path(elements=[MoveTo(point=Point(x=-1, y=-1)), EndPath()]), Group()],
        )
        for config in (ExportConfig(), ExportConfig(tab_size=3, line_break=False)):
            assert parse_fragment(_write(group, config)) == group
