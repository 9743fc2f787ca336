"""Path mini-language: the ``data="..."`` attribute of ``<draw>``.

Commands are single letters (case-insensitive) followed by their operands:
``M``/``L``/``T`` take a point, ``H``/``V`` an integer, ``S``/``Q`` two points,
``C`` three points and ``Z`` nothing. An operand must be followed by
whitespace or by the closing quote, which also ends the list.
"""

from __future__ import annotations

from typing import Callable

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
from coda.models.primitives import Point
from coda.svg import writer
from coda.svg.cursor import Cursor, describe, is_whitespace
from coda.svg.errors import DocumentError
from coda.svg.primitives import open_parameter, parse_integer_from, parse_point


def _expect_command(cursor: Cursor, letter: str, operation: str) -> None:
    if cursor.last_consumed.upper() != letter:
        raise cursor.error(operation, "Invalid element to parse.")


def _point(cursor: Cursor, operation: str, what: str) -> Point:
    try:
        return parse_point(cursor)
    except DocumentError as err:
        err.add_frame(operation, f"Could not parse {what}.")
        raise


def _integer(cursor: Cursor, operation: str) -> int:
    return parse_integer_from(cursor, cursor.next_non_whitespace_char(), operation)


def _end_operand(cursor: Cursor, operation: str) -> None:
    c = cursor.last_consumed
    if c != '"' and not is_whitespace(c):
        raise cursor.error(
            operation, f"Expected whitespace or char '\"' after operand got {describe(c)}"
        )


# -- commands ----------------------------------------------------------------


def parse_move_to(cursor: Cursor) -> MoveTo:
    _expect_command(cursor, "M", "parse_move_to")
    element = MoveTo(point=_point(cursor, "parse_move_to", "move to point"))
    _end_operand(cursor, "parse_move_to")
    return element


def parse_line_to(cursor: Cursor) -> LineTo:
    _expect_command(cursor, "L", "parse_line_to")
    element = LineTo(point=_point(cursor, "parse_line_to", "line to point"))
    _end_operand(cursor, "parse_line_to")
    return element


def parse_horizontal_line_to(cursor: Cursor) -> HorizontalLineTo:
    _expect_command(cursor, "H", "parse_horizontal_line_to")
    element = HorizontalLineTo(x=_integer(cursor, "parse_horizontal_line_to"))
    _end_operand(cursor, "parse_horizontal_line_to")
    return element


def parse_vertical_line_to(cursor: Cursor) -> VerticalLineTo:
    _expect_command(cursor, "V", "parse_vertical_line_to")
    element = VerticalLineTo(y=_integer(cursor, "parse_vertical_line_to"))
    _end_operand(cursor, "parse_vertical_line_to")
    return element


def parse_cubic_curve_to(cursor: Cursor) -> CubicCurveTo:
    op = "parse_cubic_curve_to"
    _expect_command(cursor, "C", op)
    element = CubicCurveTo(
        control_1=_point(cursor, op, "cubic curve to control point 1"),
        control_2=_point(cursor, op, "cubic curve to control point 2"),
        end=_point(cursor, op, "cubic curve to point"),
    )
    _end_operand(cursor, op)
    return element


def parse_cubic_curve_to_shorthand(cursor: Cursor) -> CubicCurveToShorthand:
    op = "parse_cubic_curve_to_shorthand"
    _expect_command(cursor, "S", op)
    element = CubicCurveToShorthand(
        control=_point(cursor, op, "cubic curve to shorthand control point"),
        end=_point(cursor, op, "cubic curve to shorthand point"),
    )
    _end_operand(cursor, op)
    return element


def parse_quadratic_curve_to(cursor: Cursor) -> QuadraticCurveTo:
    op = "parse_quadratic_curve_to"
    _expect_command(cursor, "Q", op)
    element = QuadraticCurveTo(
        control=_point(cursor, op, "quadratic curve to control point"),
        end=_point(cursor, op, "quadratic curve to point"),
    )
    _end_operand(cursor, op)
    return element


def parse_quadratic_curve_to_shorthand(cursor: Cursor) -> QuadraticCurveToShorthand:
    op = "parse_quadratic_curve_to_shorthand"
    _expect_command(cursor, "T", op)
    element = QuadraticCurveToShorthand(end=_point(cursor, op, "quadratic curve to shorthand point"))
    _end_operand(cursor, op)
    return element


def parse_end_path(cursor: Cursor) -> EndPath:
    _expect_command(cursor, "Z", "parse_end_path")
    return EndPath()


_COMMANDS: dict[str, Callable[[Cursor], PathElement]] = {
    "M": parse_move_to,
    "L": parse_line_to,
    "H": parse_horizontal_line_to,
    "V": parse_vertical_line_to,
    "C": parse_cubic_curve_to,
    "S": parse_cubic_curve_to_shorthand,
    "Q": parse_quadratic_curve_to,
    "T": parse_quadratic_curve_to_shorthand,
    "Z": parse_end_path,
}


def parse_path_element(cursor: Cursor) -> PathElement:
    """Parse the command selected by the cursor's last consumed char."""
    parser = _COMMANDS.get(cursor.last_consumed.upper()) if cursor.last_consumed else None
    if parser is None:
        raise cursor.error(
            "parse_path_element",
            f"Expected path command (M L H V C S Q T Z) got {describe(cursor.last_consumed)}",
        )
    try:
        return parser(cursor)
    except DocumentError as err:
        err.add_frame("parse_path_element", "Could not parse path element")
        raise


def parse_path_elements(cursor: Cursor, parameter_name: str = "ata") -> list[PathElement]:
    open_parameter(cursor, parameter_name)

    elements: list[PathElement] = []
    c = cursor.next_non_whitespace_char()
    while c != "":
        if c == '"':
            if not elements:
                raise cursor.error(
                    "parse_path_elements",
                    "Could not parse path elements. Must contain at least 1 element.",
                )
            return elements

        try:
            element = parse_path_element(cursor)
        except DocumentError as err:
            err.add_frame("parse_path_elements", "Could not parse path elements")
            raise
        elements.append(element)

        # The last operand of a command may have consumed the closing quote.
        if not isinstance(element, EndPath) and cursor.last_consumed == '"':
            return elements
        c = cursor.next_non_whitespace_char()

    raise cursor.error("parse_path_elements", "Reached end of stream inside path data.")


# -- writing -----------------------------------------------------------------


def format_path_element(element: PathElement) -> str:
    if isinstance(element, (MoveTo, LineTo)):
        operands = [writer.format_point(element.point)]
    elif isinstance(element, HorizontalLineTo):
        operands = [str(element.x)]
    elif isinstance(element, VerticalLineTo):
        operands = [str(element.y)]
    elif isinstance(element, CubicCurveTo):
        operands = [writer.format_point(p) for p in (element.control_1, element.control_2, element.end)]
    elif isinstance(element, (CubicCurveToShorthand, QuadraticCurveTo)):
        operands = [writer.format_point(element.control), writer.format_point(element.end)]
    elif isinstance(element, QuadraticCurveToShorthand):
        operands = [writer.format_point(element.end)]
    else:
        operands = []
    return " ".join([element.command, *operands])


def write_path_elements(
    cursor: Cursor, config: ExportConfig, elements: list[PathElement], depth: int
) -> None:
    if not elements:
        raise cursor.error(
            "write_path_elements",
            "Could not export path elements. Must contain at least 1 element.",
            DocumentError,
        )
    data = " ".join(format_path_element(e) for e in elements)
    writer.write_text_parameter(cursor, config, "data", data, depth)
