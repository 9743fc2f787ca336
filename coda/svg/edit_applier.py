"""Edit applier: runs shape, point, path element and viewport operations on a
document copy."""

from __future__ import annotations

import logging
from typing import Any, Callable

from coda.models import sequences
from coda.models.document import Document
from coda.models.edit_ops import EditOp, EditResult, SkippedEdit
from coda.models.path import PathElement
from coda.models.primitives import Point
from coda.models.shapes import Group, Multiline, Path, Polygon, Shape
from coda.models.style import Style
from coda.svg.errors import DocumentError
from coda.svg.shapes import apply_attribute, parse_fragment

logger = logging.getLogger(__name__)


def apply_edits(document: Document, ops: list[EditOp]) -> EditResult:
    """Apply ``ops`` in order to a deep copy of ``document``.

    The input document is never modified. An operation that cannot be applied
    (bad index path, unparsable fragment or attribute, missing operand) is
    skipped with a warning and reported in ``EditResult.skipped``; the
    remaining operations still run.
    """
    result = EditResult(document=document.model_copy(deep=True))

    for i, op in enumerate(ops):
        reason = _HANDLERS[op.action](result.document, op)
        if reason is None:
            result.applied += 1
        else:
            logger.warning("Edit op %d (%s %r) skipped: %s", i, op.action, op.target, reason)
            result.skipped.append(SkippedEdit(index=i, reason=reason))

    return result


def _children(document: Document, path: list[int]) -> tuple[list[Shape], Style] | None:
    """Shape list and inherited style of the group addressed by ``path``."""
    shapes = document.shapes
    style = Style()
    for index in path:
        if index < 0 or index >= len(shapes):
            return None
        shape = shapes[index]
        if not isinstance(shape, Group):
            return None
        shapes, style = shape.shapes, shape.style
    return shapes, style


def _shape_at(document: Document, path: list[int]) -> Shape | None:
    if not path:
        return None
    parent = _children(document, path[:-1])
    if parent is None:
        return None
    shapes = parent[0]
    index = path[-1]
    if index < 0 or index >= sequences.length(shapes):
        return None
    return shapes[index]


# -- shapes -------------------------------------------------------------------


def _add(document: Document, op: EditOp) -> str | None:
    if not op.fragment or not op.fragment.strip():
        return "empty fragment"
    parent = _children(document, op.target)
    if parent is None:
        return f"no group at {op.target}"
    shapes, style = parent

    try:
        shape = parse_fragment(op.fragment, style)
    except DocumentError as e:
        return f"could not parse fragment: {e}"

    position = sequences.length(shapes) if op.position is None else op.position
    if not sequences.insert_at(shapes, position, shape):
        return f"position {position} out of range"
    return None


def _delete(document: Document, op: EditOp) -> str | None:
    if not op.target:
        return "delete needs a target"
    parent = _children(document, op.target[:-1])
    if parent is None:
        return f"no group at {op.target[:-1]}"
    if not sequences.remove_at(parent[0], op.target[-1]):
        return f"index {op.target[-1]} out of range"
    return None


def _modify(document: Document, op: EditOp) -> str | None:
    if not op.target:
        return "modify needs a target"
    if not op.attributes:
        return "no attributes to set"
    parent = _children(document, op.target[:-1])
    if parent is None:
        return f"no group at {op.target[:-1]}"
    shapes = parent[0]
    index = op.target[-1]
    if index < 0 or index >= sequences.length(shapes):
        return f"index {index} out of range"

    # Overrides go to a copy first so a failing attribute leaves the shape intact.
    shape = shapes[index].model_copy(deep=True)
    for name, value in op.attributes.items():
        try:
            apply_attribute(shape, name, value)
        except DocumentError as e:
            return f"could not apply {name!r}: {e}"
    shapes[index] = shape
    return None


# -- points and path elements -------------------------------------------------


def _points_of(document: Document, op: EditOp) -> list[Point] | str:
    shape = _shape_at(document, op.target)
    if not isinstance(shape, (Multiline, Polygon)):
        return f"no multiline or polygon at {op.target}"
    return shape.points


def _elements_of(document: Document, op: EditOp) -> list[PathElement] | str:
    shape = _shape_at(document, op.target)
    if not isinstance(shape, Path):
        return f"no draw at {op.target}"
    return shape.elements


def _insert(items: list[Any], op: EditOp, value: Any) -> str | None:
    position = sequences.length(items) if op.position is None else op.position
    if not sequences.insert_at(items, position, value.model_copy(deep=True)):
        return f"position {position} out of range"
    return None


def _replace(items: list[Any], op: EditOp, value: Any) -> str | None:
    if op.position is None:
        return f"{op.action} needs a position"
    if not sequences.remove_at(items, op.position):
        return f"position {op.position} out of range"
    sequences.insert_at(items, op.position, value.model_copy(deep=True))
    return None


def _remove(items: list[Any], op: EditOp) -> str | None:
    if op.position is None:
        return f"{op.action} needs a position"
    if not sequences.remove_at(items, op.position):
        return f"position {op.position} out of range"
    return None


def _add_point(document: Document, op: EditOp) -> str | None:
    if op.point is None:
        return "add_point needs a point"
    points = _points_of(document, op)
    return points if isinstance(points, str) else _insert(points, op, op.point)


def _modify_point(document: Document, op: EditOp) -> str | None:
    if op.point is None:
        return "modify_point needs a point"
    points = _points_of(document, op)
    return points if isinstance(points, str) else _replace(points, op, op.point)


def _delete_point(document: Document, op: EditOp) -> str | None:
    points = _points_of(document, op)
    return points if isinstance(points, str) else _remove(points, op)


def _add_element(document: Document, op: EditOp) -> str | None:
    if op.element is None:
        return "add_element needs an element"
    elements = _elements_of(document, op)
    return elements if isinstance(elements, str) else _insert(elements, op, op.element)


def _modify_element(document: Document, op: EditOp) -> str | None:
    if op.element is None:
        return "modify_element needs an element"
    elements = _elements_of(document, op)
    return elements if isinstance(elements, str) else _replace(elements, op, op.element)


def _delete_element(document: Document, op: EditOp) -> str | None:
    elements = _elements_of(document, op)
    if isinstance(elements, str):
        return elements
    # A draw keeps at least one element.
    if sequences.length(elements) == 1 and op.position == 0:
        return "cannot remove the last path element"
    return _remove(elements, op)


# -- viewport -----------------------------------------------------------------


def _modify_viewport(document: Document, op: EditOp) -> str | None:
    if op.viewport is None:
        return "modify_viewport needs a viewport"
    document.viewport = op.viewport.model_copy(deep=True)
    return None


_HANDLERS: dict[str, Callable[[Document, EditOp], str | None]] = {
    "add": _add,
    "delete": _delete,
    "modify": _modify,
    "add_point": _add_point,
    "modify_point": _modify_point,
    "delete_point": _delete_point,
    "add_element": _add_element,
    "modify_element": _modify_element,
    "delete_element": _delete_element,
    "modify_viewport": _modify_viewport,
}
