"""Shape grammar: ``<ellipse .../>`` ... ``<group ...> ... </group>``.

Leaf shapes are described by attribute tables; the attribute loop picks the
parser from the first letter of the attribute name and falls back to the style
parsers. Groups are parsed with an explicit stack of open groups, so nesting
depth is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple

from coda.models.export_config import ExportConfig
from coda.models.shapes import Ellipse, Group, Line, Multiline, Path, Polygon, Rectangle, Shape
from coda.models.style import Style
from coda.svg import writer
from coda.svg.cursor import Cursor, describe
from coda.svg.errors import DocumentError, MissingAttributeError
from coda.svg.paths import parse_path_elements, write_path_elements
from coda.svg.primitives import parse_int_parameter, parse_point_parameter, parse_points_parameter
from coda.svg.styles import parse_style_attribute, write_style

logger = logging.getLogger(__name__)


class _Attribute(NamedTuple):
    name: str
    field: str
    parse: Callable[[Cursor, str], Any]
    write: Callable[..., None]


def _write_data(cursor: Cursor, config: ExportConfig, name: str, elements: list, depth: int) -> None:
    write_path_elements(cursor, config, elements, depth)


_ELLIPSE = (
    _Attribute("x", "cx", parse_int_parameter, writer.write_int_parameter),
    _Attribute("y", "cy", parse_int_parameter, writer.write_int_parameter),
    _Attribute("width", "rx", parse_int_parameter, writer.write_int_parameter),
    _Attribute("height", "ry", parse_int_parameter, writer.write_int_parameter),
)
_RECTANGLE = (
    _Attribute("x", "x", parse_int_parameter, writer.write_int_parameter),
    _Attribute("y", "y", parse_int_parameter, writer.write_int_parameter),
    _Attribute("width", "width", parse_int_parameter, writer.write_int_parameter),
    _Attribute("height", "height", parse_int_parameter, writer.write_int_parameter),
)
_LINE = (
    _Attribute("start", "start", parse_point_parameter, writer.write_point_parameter),
    _Attribute("end", "end", parse_point_parameter, writer.write_point_parameter),
)
_POINTS = (
    _Attribute("points", "points", parse_points_parameter, writer.write_points_parameter),
)
_DRAW = (_Attribute("data", "elements", parse_path_elements, _write_data),)

# Keyed by the first letter of the tag, which is what selects the shape.
_LEAF_SHAPES: dict[str, tuple[type, tuple[_Attribute, ...]]] = {
    "e": (Ellipse, _ELLIPSE),
    "r": (Rectangle, _RECTANGLE),
    "l": (Line, _LINE),
    "m": (Multiline, _POINTS),
    "p": (Polygon, _POINTS),
    "d": (Path, _DRAW),
}

_ATTRIBUTES_BY_KIND: dict[str, tuple[_Attribute, ...]] = {
    cls.model_fields["kind"].default: attributes for cls, attributes in _LEAF_SHAPES.values()
}


def _by_initial(attributes: tuple[_Attribute, ...]) -> dict[str, _Attribute]:
    return {attribute.name[0]: attribute for attribute in attributes}


def _consume_tag(cursor: Cursor, tag: str) -> None:
    try:
        cursor.consume_literal(tag[1:])
    except DocumentError as err:
        err.add_frame(f"parse_{tag}", f"Could not parse {tag} shape")
        raise


def _parse_attribute(cursor: Cursor, attribute: _Attribute, tag: str) -> Any:
    try:
        return attribute.parse(cursor, attribute.name[1:])
    except DocumentError as err:
        err.add_frame(f"parse_{tag}", f"Could not parse '{attribute.name}' parameter.")
        raise


def _parse_leaf(cursor: Cursor, cls: type, attributes: tuple[_Attribute, ...], inherited: Style) -> Shape:
    tag = cls.tag
    operation = f"parse_{tag}"
    _consume_tag(cursor, tag)

    style = inherited.model_copy(deep=True)
    table = _by_initial(attributes)
    values: dict[str, Any] = {}

    while True:
        c = cursor.next_non_whitespace_char()
        if c == "":
            raise cursor.error(operation, f"Reached end of stream inside {tag}.")

        attribute = table.get(c)
        if attribute is not None:
            values[attribute.field] = _parse_attribute(cursor, attribute, tag)
        elif c == "/":
            c = cursor.next_non_whitespace_char()
            if c != ">":
                raise cursor.error(operation, f"Expected char '>' got {describe(c)}")
            for required in attributes:
                if required.field not in values:
                    logger.debug("%s is missing %r at %d:%d", tag, required.name, cursor.line, cursor.column)
                    raise MissingAttributeError(operation, required.name, cursor.line, cursor.column)
            return cls(style=style, **values)
        else:
            parse_style_attribute(cursor, style, tag)


def _parse_group_header(cursor: Cursor, inherited: Style) -> Group:
    """Consume ``roup`` and the group's style attributes up to ``>``."""
    _consume_tag(cursor, Group.tag)
    style = inherited.model_copy(deep=True)
    c = cursor.next_non_whitespace_char()
    while c != ">":
        if c == "":
            raise cursor.error("parse_group", "Reached end of stream inside group header.")
        try:
            parse_style_attribute(cursor, style, Group.tag)
        except DocumentError as err:
            err.add_frame("parse_group", "Could not parse group header")
            raise
        c = cursor.next_non_whitespace_char()
    return Group(style=style)


@dataclass
class _OpenList:
    """A shape list being filled, closed by ``</closing_tag>``."""

    closing_tag: str
    style: Style
    shapes: list[Shape]


def parse_shapes(cursor: Cursor, inherited: Style, closing_tag: str = "svg") -> list[Shape]:
    """Parse shapes until ``</closing_tag>``, descending into nested groups.

    Each open group is pushed on ``stack`` with its own style, which every
    child deep-copies as its baseline.
    """
    shapes: list[Shape] = []
    stack = [_OpenList(closing_tag, inherited, shapes)]
    try:
        while stack:
            current = stack[-1]
            c = cursor.next_non_whitespace_char()
            if c != "<":
                raise cursor.error(f"parse_{current.closing_tag}", f"Expected char '<' got {describe(c)}")

            c = cursor.next_non_whitespace_char()
            if c == "/":
                cursor.consume_literal(f"{current.closing_tag}>")
                stack.pop()
            elif c == "g":
                group = _parse_group_header(cursor, current.style)
                current.shapes.append(group)
                stack.append(_OpenList(Group.tag, group.style, group.shapes))
            else:
                current.shapes.append(_parse_shape(cursor, current.style))
    except DocumentError as err:
        for open_list in reversed(stack):
            if open_list.closing_tag == Group.tag:
                err.add_frame("parse_group", "Could not parse group's shapes.")
        raise
    return shapes


def _parse_shape(cursor: Cursor, inherited: Style) -> Shape:
    entry = _LEAF_SHAPES.get(cursor.last_consumed)
    if entry is None:
        raise cursor.error(
            "parse_shape", f"Could not parse shape. Unknown shape starting with {describe(cursor.last_consumed)}"
        )
    cls, attributes = entry
    return _parse_leaf(cursor, cls, attributes, inherited)


def parse_shape(cursor: Cursor, inherited: Style) -> Shape:
    """Parse one complete shape; the cursor's last consumed char is its initial."""
    if cursor.last_consumed == "g":
        group = _parse_group_header(cursor, inherited)
        group.shapes.extend(parse_shapes(cursor, group.style, Group.tag))
        return group
    return _parse_shape(cursor, inherited)


def _expect_end(cursor: Cursor, operation: str) -> None:
    c = cursor.next_non_whitespace_char()
    if c != "":
        raise cursor.error(operation, f"Unexpected {describe(c)} after the end of input.")


def parse_fragment(text: str, inherited: Style | None = None) -> Shape:
    """Parse a standalone ``<shape .../>`` (or a whole group) from ``text``."""
    cursor = Cursor(io.StringIO(text))
    c = cursor.next_non_whitespace_char()
    if c != "<":
        raise cursor.error("parse_fragment", f"Expected char '<' got {describe(c)}")
    cursor.next_non_whitespace_char()
    shape = parse_shape(cursor, inherited if inherited is not None else Style())
    _expect_end(cursor, "parse_fragment")
    return shape


def apply_attribute(shape: Shape, name: str, value: str) -> None:
    """Parse ``name="value"`` with the shape's grammar and install it on ``shape``.

    Style attributes are accepted for every shape, groups included.
    """
    cursor = Cursor(io.StringIO(f'{name}="{value}"'))
    c = cursor.next_non_whitespace_char()
    if c == "":
        raise cursor.error("apply_attribute", "Missing attribute name.")

    attribute = _by_initial(_ATTRIBUTES_BY_KIND.get(shape.kind, ())).get(c)
    if attribute is not None:
        setattr(shape, attribute.field, _parse_attribute(cursor, attribute, shape.tag))
    else:
        parse_style_attribute(cursor, shape.style, shape.tag)
    _expect_end(cursor, "apply_attribute")


# -- writing -----------------------------------------------------------------


def _indent(cursor: Cursor, config: ExportConfig, depth: int) -> None:
    cursor.write_spaces(depth * config.tab_size)


def write_shape(cursor: Cursor, config: ExportConfig, shape: Shape, depth: int) -> None:
    """Write ``shape`` and, for a group, its whole subtree at ``depth``.

    Groups are walked with an explicit stack of ``(shape, depth, closing)``
    frames, so any nesting the parser accepts can be written back.
    """
    stack: list[tuple[Shape, int, bool]] = [(shape, depth, False)]
    while stack:
        shape, depth, closing = stack.pop()
        if closing:
            _indent(cursor, config, depth)
            cursor.write(f"</{shape.tag}>\n")
            continue

        _indent(cursor, config, depth)
        cursor.write(f"<{shape.tag}")
        cursor.write("\n" if config.line_break else " ")
        write_style(cursor, config, shape.style, depth + 1)

        if isinstance(shape, Group):
            if config.line_break:
                _indent(cursor, config, depth)
            cursor.write(">\n")
            stack.append((shape, depth, True))
            stack.extend((child, depth + 1, False) for child in reversed(shape.shapes))
            continue

        for attribute in _ATTRIBUTES_BY_KIND[shape.kind]:
            attribute.write(cursor, config, attribute.name, getattr(shape, attribute.field), depth + 1)
        if config.line_break:
            _indent(cursor, config, depth)
        cursor.write("/>\n")
