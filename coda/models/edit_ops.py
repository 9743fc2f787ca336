"""Edit operation models for index-addressed document modification."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from coda.models.document import Document, Viewport
from coda.models.path import PathElement
from coda.models.primitives import Point

EditAction = Literal[
    "add",
    "delete",
    "modify",
    "add_point",
    "modify_point",
    "delete_point",
    "add_element",
    "modify_element",
    "delete_element",
    "modify_viewport",
]


class EditOp(BaseModel):
    """A single edit operation on the document.

    Shape actions (``add``/``delete``/``modify``) work on the shape tree.
    Point actions address a multiline or polygon by ``target`` and one of its
    points by ``position``; element actions do the same for a draw's path
    elements. ``modify_viewport`` replaces the viewport.
    """

    action: EditAction
    # Index path through nested groups, e.g. [2, 0] is the first child of the
    # group at top-level index 2. For add it addresses the parent ([] = root).
    target: list[int] = Field(default_factory=list)
    position: int | None = None  # Index in the parent list or point/element list, None = end
    fragment: str | None = None  # For add: ``<shape .../>`` text
    attributes: dict[str, str] | None = None  # For modify: attrs to set/override
    point: Point | None = None  # For add_point/modify_point
    element: PathElement | None = None  # For add_element/modify_element
    viewport: Viewport | None = None  # For modify_viewport


class SkippedEdit(BaseModel):
    index: int
    reason: str


class EditResult(BaseModel):
    document: Document
    applied: int = 0
    skipped: list[SkippedEdit] = Field(default_factory=list)
