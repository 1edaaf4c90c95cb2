"""ValueKind StrEnum and the classification helpers shared by every walker.

Every value reaching the search, the flattener or the field diff is first
classified into one of four kinds:

- NULL     -> "null"     : ``None``
- SCALAR   -> "scalar"   : strings, bytes, numbers, booleans, enum members,
                           and any object without iterable or attribute structure
- SEQUENCE -> "sequence" : non-mapping iterables (list, tuple, set, generators, ...)
- RECORD   -> "record"   : mappings and plain objects carrying instance attributes

The kind depends only on ``type(value)``, so it is memoised per type in a
bounded LRU cache.
"""

from __future__ import annotations

import enum
import numbers
import threading
from collections.abc import Iterable, Mapping, Sequence
from enum import StrEnum, auto
from typing import Any

from cachetools import LRUCache, cached

from object_inspector.config import IndexStyle

__all__ = [
    "ValueKind",
    "classify",
    "entries",
    "is_composite",
    "is_iterable",
    "key_names",
]

# Types that behave as single values even when Python would let us iterate them.
_ATOMIC_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    numbers.Number,
    enum.Enum,
)


class ValueKind(StrEnum):
    """The four shapes a value can take while walking an object graph."""

    NULL = auto()
    SCALAR = auto()
    SEQUENCE = auto()
    RECORD = auto()


# The kind depends only on the type, never on the instance.
@cached(cache=LRUCache(maxsize=1024), lock=threading.Lock())
def _classify_type(tp: type) -> ValueKind:
    # Atomic check MUST come before Iterable: str and bytes are iterable.
    if issubclass(tp, _ATOMIC_TYPES):
        return ValueKind.SCALAR
    if issubclass(tp, Mapping):
        return ValueKind.RECORD
    if issubclass(tp, Iterable):
        return ValueKind.SEQUENCE
    if getattr(tp, "__dictoffset__", 0) or hasattr(tp, "__slots__"):
        return ValueKind.RECORD
    return ValueKind.SCALAR


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of ``value``.

    Args:
        value: Any Python object.

    Returns:
        ``ValueKind.NULL`` for ``None``; otherwise the kind memoised for
        ``type(value)``.
    """
    if value is None:
        return ValueKind.NULL
    return _classify_type(type(value))


def is_iterable(value: Any) -> bool:
    """Return True when ``value`` is expanded element by element when flattened."""
    return classify(value) is ValueKind.SEQUENCE


def is_composite(value: Any, include_attributes: bool = True) -> bool:
    """Return True when ``value`` has children a graph walk can descend into.

    Args:
        value:              Any Python object.
        include_attributes: When False, only mappings and sequences count;
                            plain objects are treated as opaque.
    """
    kind = classify(value)
    if kind is ValueKind.SEQUENCE:
        return True
    if kind is ValueKind.RECORD:
        return include_attributes or isinstance(value, Mapping)
    return False


def _slot_names(tp: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(tp.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def _attribute_pairs(value: Any) -> list[tuple[Any, Any]]:
    pairs: list[tuple[Any, Any]] = []
    if hasattr(value, "__dict__"):
        pairs.extend(vars(value).items())
    for name in _slot_names(type(value)):
        # Unfilled slots raise AttributeError on access; they are simply absent.
        if hasattr(value, name):
            pairs.append((name, getattr(value, name)))
    return pairs


def entries(
    value: Any,
    index_style: IndexStyle = IndexStyle.INT,
    include_attributes: bool = True,
) -> list[tuple[Any, Any]]:
    """Return the direct ``(key, child)`` pairs of a composite value.

    Enumeration order is the value's natural order: insertion order for
    mappings, position for sequences, attribute definition order for objects.
    Iterables without positions (sets, generators, iterators) are never
    iterated, so walking them never consumes them; they expose only their
    instance attributes, if any.

    Args:
        value:              The node to enumerate.
        index_style:        Whether sequence positions are reported as ``int``
                            or ``str``.
        include_attributes: When False, instance attributes are never exposed.

    Returns:
        A fresh list of pairs; empty for scalars and ``None``.
    """
    if isinstance(value, Mapping):
        return list(value.items())

    kind = classify(value)
    if kind is ValueKind.SEQUENCE:
        if not isinstance(value, Sequence):
            # Iterable containers may still carry state in their attributes.
            return _attribute_pairs(value) if include_attributes else []
        if index_style is IndexStyle.STR:
            return [(str(idx), item) for idx, item in enumerate(value)]
        return list(enumerate(value))

    if kind is ValueKind.RECORD and include_attributes:
        return _attribute_pairs(value)

    return []


def key_names(
    value: Any,
    index_style: IndexStyle = IndexStyle.INT,
    include_attributes: bool = True,
) -> list[Any]:
    """Return the key names of ``value`` in enumeration order."""
    return [key for key, _ in entries(value, index_style, include_attributes)]
