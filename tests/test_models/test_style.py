"""Tests for style, color and document models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from coda.models import (
    Circular,
    Color,
    Document,
    Ellipse,
    FlipX,
    Group,
    HorizontalLineTo,
    Point,
    Rectangle,
    Style,
    VerticalLineTo,
)
from coda.models.primitives import INT_MAX, INT_MIN


class TestCircular:
    @pytest.mark.parametrize("degree,expected", [
        (0, 0),
        (359, 359),
        (360, 0),
        (370, 10),
        (-1, -1),
        (-360, 0),
        (-370, -10),
        (725, 5),
    ])
    def test_reduced_with_sign_kept(self, degree, expected):
        assert Circular(degree).degree == expected

    def test_equality_after_reduction(self):
        assert Circular(370) == Circular(10)

    def test_reduction_on_assignment(self):
        rotate = Circular(0)
        rotate.degree = -400
        assert rotate.degree == -40

    def test_keyword_construction(self):
        assert Circular(degree=90).degree == 90


class TestColor:
    def test_default_is_opaque_black(self):
        assert Color().to_hex() == "#000000ff"

    def test_channels_are_bytes(self):
        with pytest.raises(ValidationError):
            Color(red=256)
        with pytest.raises(ValidationError):
            Color(alpha=-1)

    def test_to_hex_lowercase(self):
        assert Color(red=0xAB, green=0xCD, blue=0xEF, alpha=0x01).to_hex() == "#abcdef01"


def test_default_style():
    style = Style()
    assert style.fill == Color()
    assert style.outline == Color()
    assert style.translate == Point(x=0, y=0)
    assert style.rotate == Circular(0)


def test_rotate_union_from_json():
    style = Style.model_validate({"rotate": {"kind": "flip_x"}})
    assert style.rotate == FlipX()
    style = Style.model_validate({"rotate": {"kind": "circular", "degree": 400}})
    assert style.rotate == Circular(40)


def test_document_json_round_trip():
    document = Document(
        shapes=[Group(shapes=[Rectangle(x=1, y=2, width=3, height=4)])],
    )
    assert Document.model_validate_json(document.model_dump_json()) == document


def test_walk_is_depth_first():
    inner = Rectangle(x=1, y=0, width=1, height=1)
    group = Group(shapes=[inner])
    last = Rectangle(x=2, y=0, width=1, height=1)
    document = Document(shapes=[group, last])
    assert [s.kind for s in document.walk()] == ["group", "rectangle", "rectangle"]
    assert list(document.walk())[1] == inner


class TestIntegerRange:
    def test_point_accepts_32_bit_bounds(self):
        point = Point(x=INT_MIN, y=INT_MAX)
        assert (point.x, point.y) == (INT_MIN, INT_MAX)

    @pytest.mark.parametrize("value", [INT_MAX + 1, INT_MIN - 1, 2**40])
    def test_point_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError):
            Point(x=value)
        with pytest.raises(ValidationError):
            Point(y=value)

    def test_point_assignment_is_checked(self):
        point = Point()
        with pytest.raises(ValidationError):
            point.x = 2**31

    def test_shape_sizes_rejected(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=2**31, height=1)
        with pytest.raises(ValidationError):
            Ellipse(cx=0, cy=0, rx=1, ry=-(2**31) - 1)

    def test_path_operands_rejected(self):
        with pytest.raises(ValidationError):
            HorizontalLineTo(x=2**31)
        with pytest.raises(ValidationError):
            VerticalLineTo(y=-(2**31) - 1)
