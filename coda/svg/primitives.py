"""Literal parsers (integers, hex bytes, points, colors) and their
``name="value"`` parameter forms.

Parameter names are passed without their first letter: the attribute loop of
the caller has already consumed it to pick the parser.
"""

from __future__ import annotations

import enum

from coda.models.primitives import INT_MAX, INT_MIN, Color, Point
from coda.svg.cursor import Cursor, describe, is_whitespace
from coda.svg.errors import DocumentError, IntegerOverflowError

_HEX_DIGITS = "0123456789abcdefABCDEF"


def is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def is_hex(c: str) -> bool:
    return len(c) == 1 and c in _HEX_DIGITS


def _accumulate(cursor: Cursor, magnitude: int, digit: str, negative: bool) -> int:
    magnitude = magnitude * 10 + int(digit)
    limit = -INT_MIN if negative else INT_MAX
    if magnitude > limit:
        raise cursor.error(
            "parse_integer",
            "Int overflow occurred while parsing integer.",
            IntegerOverflowError,
        )
    return magnitude


def parse_integer(
    cursor: Cursor,
    seed: int | None = None,
    require_digit: bool = True,
    negative: bool = False,
) -> int:
    """Read digits until the first non-digit, which is left as last consumed.

    ``seed`` is the magnitude of digits the caller already consumed; a leading
    ``-`` is only accepted when there is none.
    """
    c = cursor.next_char()
    if c == "-":
        if seed is not None or negative:
            raise cursor.error("parse_integer", "Unexpected char '-' inside an integer")
        negative = True
        c = cursor.next_char()

    if not is_digit(c):
        if require_digit:
            raise cursor.error("parse_integer", f"Expected digit char (0-9) got {describe(c)}")
        magnitude = seed or 0
        return -magnitude if negative else magnitude

    magnitude = _accumulate(cursor, 0, str(seed), negative) if seed is not None else 0
    while is_digit(c):
        magnitude = _accumulate(cursor, magnitude, c, negative)
        c = cursor.next_char()
    return -magnitude if negative else magnitude


def parse_integer_from(cursor: Cursor, first: str, operation: str = "parse_integer") -> int:
    """Parse an integer whose first char (sign or digit) is already consumed."""
    negative = first == "-"
    if negative:
        first = cursor.next_non_whitespace_char()
    if not is_digit(first):
        raise cursor.error(operation, f"Expected digit char (0-9) got {describe(first)}")
    return parse_integer(cursor, int(first), require_digit=False, negative=negative)


def parse_hex_byte(cursor: Cursor) -> int:
    value = 0
    for _ in range(2):
        c = cursor.next_non_whitespace_char()
        if not is_hex(c):
            raise cursor.error("parse_hex_byte", f"Expected hexa char (0-9 A-F) got {describe(c)}")
        value = value * 16 + int(c, 16)
    return value


def parse_point(cursor: Cursor) -> Point:
    """Two integers separated by whitespace: ``x y``."""
    x = parse_integer_from(cursor, cursor.next_non_whitespace_char(), "parse_point")
    if not is_whitespace(cursor.last_consumed):
        raise cursor.error(
            "parse_point", f"Expected whitespace char got {describe(cursor.last_consumed)}"
        )
    y = parse_integer_from(cursor, cursor.next_non_whitespace_char(), "parse_point")
    return Point(x=x, y=y)


def parse_color(cursor: Cursor) -> Color:
    c = cursor.next_non_whitespace_char()
    if c != "#":
        raise cursor.error("parse_color", f"Expected char '#' got {describe(c)}")
    channels = {}
    for channel in ("red", "green", "blue", "alpha"):
        try:
            channels[channel] = parse_hex_byte(cursor)
        except DocumentError as err:
            err.add_frame("parse_color", f"Could not parse hexa byte for {channel} parameter.")
            raise
    return Color(**channels)


# -- parameters --------------------------------------------------------------


def open_parameter(cursor: Cursor, parameter_name: str) -> None:
    """Consume ``name="`` (the name may be empty)."""
    if parameter_name:
        cursor.consume_literal(parameter_name)
    cursor.consume_literal('="')


def close_parameter(cursor: Cursor, operation: str) -> None:
    """Accept the closing quote either as last consumed or after whitespace."""
    if cursor.last_consumed == '"':
        return
    if not is_whitespace(cursor.last_consumed):
        raise cursor.error(
            operation,
            "Expected char '\"' or whitespace (' ', '\\r', '\\t', '\\n') "
            f"got {describe(cursor.last_consumed)}",
        )
    c = cursor.next_non_whitespace_char()
    if c != '"':
        raise cursor.error(operation, f"Expected char '\"' got {describe(c)}")


def parse_int_parameter(cursor: Cursor, parameter_name: str) -> int:
    open_parameter(cursor, parameter_name)
    value = parse_integer(cursor)
    close_parameter(cursor, "parse_int_parameter")
    return value


def parse_point_parameter(cursor: Cursor, parameter_name: str) -> Point:
    open_parameter(cursor, parameter_name)
    value = parse_point(cursor)
    close_parameter(cursor, "parse_point_parameter")
    return value


def parse_color_parameter(cursor: Cursor, parameter_name: str) -> Color:
    open_parameter(cursor, parameter_name)
    value = parse_color(cursor)
    c = cursor.next_non_whitespace_char()
    if c != '"':
        raise cursor.error("parse_color_parameter", f"Expected char '\"' got {describe(c)}")
    return value


class _PointsState(enum.Enum):
    BOUNDARY = enum.auto()
    FIRST = enum.auto()
    SECOND = enum.auto()


def parse_points_parameter(cursor: Cursor, parameter_name: str) -> list[Point]:
    """Whitespace separated coordinates, read pairwise: ``x1 y1 x2 y2 ...``."""
    open_parameter(cursor, parameter_name)

    points: list[Point] = []
    state = _PointsState.BOUNDARY
    x: int | None = None
    magnitude = 0
    negative = False
    has_digit = False

    while True:
        c = cursor.next_char()
        if c == "":
            raise cursor.error("parse_points_parameter", "Reached end of stream inside points.")

        if is_digit(c) or c == "-":
            if state is _PointsState.BOUNDARY:
                state = _PointsState.FIRST if x is None else _PointsState.SECOND
                magnitude, negative, has_digit = 0, False, False
                if c == "-":
                    negative = True
                    continue
            elif c == "-":
                raise cursor.error("parse_points_parameter", "Unexpected char '-' inside an integer")
            magnitude = _accumulate(cursor, magnitude, c, negative)
            has_digit = True
            continue

        if not (is_whitespace(c) or c == '"'):
            raise cursor.error("parse_points_parameter", f"Unexpected {describe(c)} in points.")

        if state is not _PointsState.BOUNDARY:
            if not has_digit:
                raise cursor.error("parse_points_parameter", "Missing integer value.")
            value = -magnitude if negative else magnitude
            if state is _PointsState.FIRST:
                x = value
            else:
                points.append(Point(x=x, y=value))
                x = None
            state = _PointsState.BOUNDARY

        if c == '"':
            break

    if x is not None:
        raise cursor.error("parse_points_parameter", "Missing integer value.")
    return points
