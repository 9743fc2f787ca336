"""Style attributes: fill, outline, translate and rotate."""

from __future__ import annotations

from typing import Callable

from coda.models.export_config import ExportConfig
from coda.models.style import Circular, FlipX, FlipY, Style
from coda.svg import writer
from coda.svg.cursor import Cursor, describe
from coda.svg.errors import DocumentError
from coda.svg.primitives import (
    close_parameter,
    is_digit,
    parse_color_parameter,
    parse_integer_from,
    parse_point_parameter,
)


def parse_fill(cursor: Cursor, style: Style) -> None:
    style.fill = parse_color_parameter(cursor, "ill")


def parse_outline(cursor: Cursor, style: Style) -> None:
    style.outline = parse_color_parameter(cursor, "utline")


def parse_translate(cursor: Cursor, style: Style) -> None:
    style.translate = parse_point_parameter(cursor, "ranslate")


def parse_rotate(cursor: Cursor, style: Style) -> None:
    """``rotate="x"``/``"y"`` flips, ``rotate="<int>"`` rotates by degrees."""
    cursor.consume_literal('otate="')
    c = cursor.next_non_whitespace_char()

    if c in ("x", "X", "y", "Y"):
        closing = cursor.next_non_whitespace_char()
        if closing != '"':
            raise cursor.error(
                "parse_rotate",
                f"Could not parse rotate 'X' / 'Y' variants. Expected char '\"' got {describe(closing)}",
            )
        style.rotate = FlipX() if c in ("x", "X") else FlipY()
        return

    if c != "-" and not is_digit(c):
        raise cursor.error(
            "parse_rotate",
            f"Expected char 'x', 'X', 'y', 'Y' or digit (0-9) got {describe(c)}",
        )
    degree = parse_integer_from(cursor, c, "parse_rotate")
    close_parameter(cursor, "parse_rotate")
    style.rotate = Circular(degree)


_STYLE_PARSERS: dict[str, tuple[str, Callable[[Cursor, Style], None]]] = {
    "f": ("fill", parse_fill),
    "o": ("outline", parse_outline),
    "t": ("translate", parse_translate),
    "r": ("rotate", parse_rotate),
}


def parse_style_attribute(cursor: Cursor, style: Style, shape_name: str) -> None:
    """Parse the style attribute selected by the cursor's last consumed char.

    ``style`` is updated in place, so attributes the shape never mentions keep
    the value inherited from the enclosing group.
    """
    entry = _STYLE_PARSERS.get(cursor.last_consumed)
    if entry is None:
        raise cursor.error(
            f"parse_{shape_name}",
            f"Could not parse {shape_name}. Got unexpected {describe(cursor.last_consumed)}.",
        )
    name, parser = entry
    try:
        parser(cursor, style)
    except DocumentError as err:
        err.add_frame(f"parse_{name}", f"Could not parse {shape_name}. Could not parse '{name}' parameter.")
        raise


def format_rotate(style: Style) -> str:
    rotate = style.rotate
    if isinstance(rotate, FlipX):
        return "X"
    if isinstance(rotate, FlipY):
        return "Y"
    return str(rotate.degree)


def write_style(cursor: Cursor, config: ExportConfig, style: Style, depth: int) -> None:
    writer.write_color_parameter(cursor, config, "fill", style.fill, depth)
    writer.write_color_parameter(cursor, config, "outline", style.outline, depth)
    writer.write_point_parameter(cursor, config, "translate", style.translate, depth)
    writer.write_text_parameter(cursor, config, "rotate", format_rotate(style), depth)
