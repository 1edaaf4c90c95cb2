"""Public API functions for object-inspector.

This module provides the user-facing functions: search, flatten and diff.
Each search call creates a fresh KeySearch (and therefore a fresh visited
set) to guarantee zero shared state between calls.
"""

from __future__ import annotations

from typing import Any

from object_inspector.config import SearchConfig
from object_inspector.fields import diff_fields
from object_inspector.flattening import flatten as _flatten
from object_inspector.key_search import KeySearch

__all__ = ["diff", "flatten", "search"]


def search(
    root: Any,
    target_key: Any,
    config: SearchConfig | None = None,
) -> list[list[Any]]:
    """Return the key names of every nested object stored under ``target_key``.

    The walk is depth-first and cycle-safe: each composite node is entered at
    most once, but every edge to it is tested against ``target_key``.  A
    matched node's own descendants are reported before the node itself.

    Args:
        root:       Any value; non-composite roots give ``[]``.
        target_key: Key to match on each parent-to-child edge.
        config:     Traversal options.  Defaults to ``SearchConfig()`` when None.

    Returns:
        One list of key names per matched edge, in discovery order.  Errors
        raised while walking a subtree are logged and that subtree is skipped;
        this function does not raise.
    """
    searcher = KeySearch(config=config if config is not None else SearchConfig())
    return searcher.run(root, target_key)


def flatten(value: Any) -> list[Any]:
    """Return the leaves of a nested iterable as a flat list.

    Args:
        value: Any value.  Non-iterables (``None``, scalars, strings,
               mappings) give ``[]``.

    Returns:
        The leaves in depth-first order.
    """
    return _flatten(value)


def diff(base: Any, updated: Any) -> dict[Any, Any]:
    """Return the fields of ``updated`` whose values differ from ``base``.

    Values are compared shallowly with ``same_value``: NaN matches NaN,
    ``0.0`` and ``-0.0`` differ, and composites match only when identical.

    Args:
        base:    The reference record.
        updated: The record to compare.

    Returns:
        A dict of the changed or added fields of ``updated``.
    """
    return diff_fields(base, updated)
