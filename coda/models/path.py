"""Path drawing commands (the M/L/H/V/C/S/Q/T/Z mini-language)."""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from coda.models.primitives import CodaModel, Int32, Point


class MoveTo(CodaModel):
    command: ClassVar[str] = "M"
    kind: Literal["move_to"] = "move_to"
    point: Point


class LineTo(CodaModel):
    command: ClassVar[str] = "L"
    kind: Literal["line_to"] = "line_to"
    point: Point


class HorizontalLineTo(CodaModel):
    command: ClassVar[str] = "H"
    kind: Literal["horizontal_line_to"] = "horizontal_line_to"
    x: Int32


class VerticalLineTo(CodaModel):
    command: ClassVar[str] = "V"
    kind: Literal["vertical_line_to"] = "vertical_line_to"
    y: Int32


class CubicCurveTo(CodaModel):
    command: ClassVar[str] = "C"
    kind: Literal["cubic_curve_to"] = "cubic_curve_to"
    control_1: Point
    control_2: Point
    end: Point


class CubicCurveToShorthand(CodaModel):
    command: ClassVar[str] = "S"
    kind: Literal["cubic_curve_to_shorthand"] = "cubic_curve_to_shorthand"
    control: Point
    end: Point


class QuadraticCurveTo(CodaModel):
    command: ClassVar[str] = "Q"
    kind: Literal["quadratic_curve_to"] = "quadratic_curve_to"
    control: Point
    end: Point


class QuadraticCurveToShorthand(CodaModel):
    command: ClassVar[str] = "T"
    kind: Literal["quadratic_curve_to_shorthand"] = "quadratic_curve_to_shorthand"
    end: Point


class EndPath(CodaModel):
    command: ClassVar[str] = "Z"
    kind: Literal["end_path"] = "end_path"


PathElement = Annotated[
    Union[
        MoveTo,
        LineTo,
        HorizontalLineTo,
        VerticalLineTo,
        CubicCurveTo,
        CubicCurveToShorthand,
        QuadraticCurveTo,
        QuadraticCurveToShorthand,
        EndPath,
    ],
    Field(discriminator="kind"),
]
