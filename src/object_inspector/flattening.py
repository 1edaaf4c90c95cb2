"""Lazy flattening of arbitrarily nested iterables into their leaves.

``iter_leaves`` is a generator: it suspends after each leaf and walks the
source exactly once.  ``flatten`` is the eager entry point; unlike the
recursive step, it rejects a non-iterable input outright (returning an empty
list) instead of yielding it as a single leaf.

Strings, bytes and mappings are leaves, not containers.

There is no cycle detection: a list that contains itself recurses until
``RecursionError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from object_inspector.kinds import is_iterable

__all__ = ["flatten", "iter_leaves"]


def iter_leaves(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield the non-iterable leaves of ``iterable`` in depth-first order."""
    for item in iterable:
        if is_iterable(item):
            yield from iter_leaves(item)
        else:
            yield item


def flatten(value: Any) -> list[Any]:
    """Return the leaves of a nested iterable as a flat list.

    Args:
        value: Any value.  ``None``, scalars, strings and mappings are not
               iterable and produce ``[]``.

    Returns:
        Every leaf of ``value`` in order, e.g. ``[1, [2, [3, 4]], 5]`` gives
        ``[1, 2, 3, 4, 5]``.
    """
    if not is_iterable(value):
        return []
    return list(iter_leaves(value))
