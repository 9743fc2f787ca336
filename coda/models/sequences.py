"""Index-based operations on the ordered lists of the document model.

Shape lists, point lists and path element lists are plain Python lists, so a
list keeps its identity across every insert and remove. Out-of-range indices
never raise: the operation reports ``False`` and leaves the list untouched.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def length(items: list[T]) -> int:
    return len(items)


def insert_at(items: list[T], index: int, value: T) -> bool:
    """Insert ``value`` so that it ends up at ``index``.

    ``0`` prepends, ``len(items)`` appends, anything in between splices.
    """
    if index < 0 or index > len(items):
        return False
    items.insert(index, value)
    return True


def remove_at(items: list[T], index: int) -> bool:
    """Drop the element at ``index``; the removed value is released with it."""
    if index < 0 or index >= len(items):
        return False
    del items[index]
    return True


def clone(items: list[T]) -> list[T]:
    """Deep copy of every element; the result shares nothing with ``items``."""
    return [item.model_copy(deep=True) for item in items]


def release(items: list[T]) -> None:
    """Drop every element. Only an already empty list is left as is."""
    if not items:
        return
    items.clear()
