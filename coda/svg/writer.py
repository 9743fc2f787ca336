"""Parameter writers, the mirror of the parameter parsers in ``primitives``.

Each writer emits ``name="value`` indented for ``depth`` (line-break mode
only) and finishes through ``close_parameter``.
"""

from __future__ import annotations

from coda.models.export_config import ExportConfig
from coda.models.primitives import Color, Point
from coda.svg.cursor import Cursor


def format_point(point: Point) -> str:
    return f"{point.x} {point.y}"


def format_color(color: Color) -> str:
    return color.to_hex()


def close_parameter(cursor: Cursor, config: ExportConfig) -> None:
    cursor.write('"\n' if config.line_break else '" ')


def open_parameter(cursor: Cursor, config: ExportConfig, name: str, depth: int) -> None:
    if config.line_break:
        cursor.write_spaces(depth * config.tab_size)
    cursor.write(f'{name}="')


def write_text_parameter(
    cursor: Cursor, config: ExportConfig, name: str, value: str, depth: int
) -> None:
    open_parameter(cursor, config, name, depth)
    cursor.write(value)
    close_parameter(cursor, config)


def write_int_parameter(
    cursor: Cursor, config: ExportConfig, name: str, value: int, depth: int
) -> None:
    write_text_parameter(cursor, config, name, str(value), depth)


def write_color_parameter(
    cursor: Cursor, config: ExportConfig, name: str, color: Color, depth: int
) -> None:
    write_text_parameter(cursor, config, name, format_color(color), depth)


def write_point_parameter(
    cursor: Cursor, config: ExportConfig, name: str, point: Point, depth: int
) -> None:
    write_text_parameter(cursor, config, name, format_point(point), depth)


def write_points_parameter(
    cursor: Cursor, config: ExportConfig, name: str, points: list[Point], depth: int
) -> None:
    write_text_parameter(cursor, config, name, " ".join(format_point(p) for p in points), depth)
