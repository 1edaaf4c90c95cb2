"""Shallow field comparison between two flat records.

Two equality relations are provided:

- ``same_value`` (used by ``diff_fields``): NaN is the same as NaN and
  ``0.0`` differs from ``-0.0``.
- ``strict_equal`` (used by ``compare_field``): NaN equals nothing and the
  two zeros are equal.

Both relations keep booleans apart from the integers 1 and 0, compare other
scalars by type and value, and compare composites (mappings, sequences,
objects) by identity only.  Nothing is compared recursively.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from object_inspector.kinds import ValueKind, classify, entries

__all__ = ["compare_field", "diff_fields", "same_value", "strict_equal"]

_MISSING = object()


def _is_nan(x: numbers.Real | Decimal) -> bool:
    if isinstance(x, Decimal):
        return x.is_nan()
    # NaN is the only real value that is unequal to itself.
    return x != x


def _is_negative(x: numbers.Real | Decimal) -> bool:
    if isinstance(x, Decimal):
        return x.is_signed()
    return math.copysign(1.0, x) < 0


def _scalar_equal(a: Any, b: Any) -> bool:
    if classify(a) is not ValueKind.SCALAR or classify(b) is not ValueKind.SCALAR:
        return False
    return type(a) is type(b) and bool(a == b)


def _is_number(x: Any) -> bool:
    return isinstance(x, (numbers.Real, Decimal)) and not isinstance(x, bool)


def same_value(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are the same value.

    Real and ``Decimal`` numbers compare numerically (``1 == 1.0``), except
    that NaN is the same as NaN and positive and negative zero are different
    values.
    """
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return _is_nan(a) and _is_nan(b)
        if a == 0 and b == 0:
            return _is_negative(a) == _is_negative(b)
        return bool(a == b)
    return _scalar_equal(a, b)


def strict_equal(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are equal under strict equality.

    Same as ``same_value`` except that NaN is never equal to anything and
    ``0.0 == -0.0``.
    """
    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return False
        return bool(a == b)
    if a is b:
        return True
    return _scalar_equal(a, b)


def _as_record(value: Any, name: str) -> Mapping[Any, Any]:
    if isinstance(value, Mapping):
        return value
    if classify(value) is ValueKind.RECORD:
        return dict(entries(value))
    msg = f"{name} must be a mapping or an object with attributes, got {type(value)!r}"
    raise TypeError(msg)


def diff_fields(base: Any, updated: Any) -> dict[Any, Any]:
    """Return the fields of ``updated`` whose values differ from ``base``.

    Args:
        base:    The reference record (mapping or attribute-backed object).
        updated: The record to compare against ``base``.

    Returns:
        A new dict holding every key of ``updated`` that is absent from
        ``base`` or whose value is not ``same_value`` with ``base[key]``, in
        ``updated``'s order.  Keys found only in ``base`` are ignored.

    Raises:
        TypeError: If either argument is not a record.
    """
    old = _as_record(base, "base")
    new = _as_record(updated, "updated")

    changed: dict[Any, Any] = {}
    for key, value in new.items():
        previous = old.get(key, _MISSING)
        if previous is not _MISSING and same_value(previous, value):
            continue
        changed[key] = value
    return changed


def compare_field(base: Any, updated: Any, field: Any) -> bool:
    """Return True when ``field`` holds strictly equal values in both records.

    A field missing from both records compares equal; a field missing from
    only one does not.
    """
    left = _as_record(base, "base").get(field, _MISSING)
    right = _as_record(updated, "updated").get(field, _MISSING)
    if left is _MISSING or right is _MISSING:
        return left is right
    return strict_equal(left, right)
