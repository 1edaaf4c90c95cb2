"""Tests for iter_leaves and flatten.

Covers:
- Empty, None and scalar inputs give an empty list at the entry point
- Nested lists, tuples, sets, ranges and generators expand in order
- Strings, bytes and mappings are leaves
- iter_leaves is lazy and single-pass
- A self-containing list is not guarded against
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from object_inspector.flattening import flatten, iter_leaves

# ---------------------------------------------------------------------------
# Entry point base cases
# ---------------------------------------------------------------------------


class TestFlattenBaseCases:
    def test_empty_list(self) -> None:
        assert flatten([]) == []

    def test_none(self) -> None:
        assert flatten(None) == []

    @pytest.mark.parametrize("value", [0, 3.5, True, "text", b"raw", {"a": [1]}])
    def test_non_iterable_rejected(self, value: Any) -> None:
        assert flatten(value) == []

    def test_flat_list_unchanged(self) -> None:
        assert flatten([1, 2, 3]) == [1, 2, 3]


# ---------------------------------------------------------------------------
# Nesting
# ---------------------------------------------------------------------------


class TestFlattenNesting:
    def test_nested_lists(self) -> None:
        assert flatten([1, [2, [3, 4]], 5]) == [1, 2, 3, 4, 5]

    def test_deeply_nested_single_leaf(self) -> None:
        assert flatten([[[[["deep"]]]]]) == ["deep"]

    def test_empty_inner_lists_vanish(self) -> None:
        assert flatten([[], [1, []], [[]]]) == [1]

    def test_mixed_containers(self) -> None:
        assert flatten((1, [2, (3,)], range(4, 6))) == [1, 2, 3, 4, 5]

    def test_generator_input(self) -> None:
        assert flatten(x for x in [[1, 2], [3]]) == [1, 2, 3]

    def test_set_elements_included(self) -> None:
        assert sorted(flatten([{1, 2}, 3])) == [1, 2, 3]

    def test_strings_are_leaves(self) -> None:
        assert flatten(["ab", ["cd"]]) == ["ab", "cd"]

    def test_mappings_are_leaves(self) -> None:
        record = {"k": [1, 2]}
        result = flatten([record, [None]])
        assert result == [record, None]
        assert result[0] is record

    def test_none_elements_kept(self) -> None:
        assert flatten([None, [None]]) == [None, None]


# ---------------------------------------------------------------------------
# Laziness
# ---------------------------------------------------------------------------


class TestIterLeaves:
    def test_returns_iterator(self) -> None:
        assert isinstance(iter_leaves([1]), Iterator)

    def test_yields_one_leaf_at_a_time(self) -> None:
        pulled: list[int] = []

        def source() -> Iterator[Any]:
            for i in range(3):
                pulled.append(i)
                yield [i]

        leaves = iter_leaves(source())
        assert next(leaves) == 0
        assert pulled == [0]
        assert next(leaves) == 1
        assert pulled == [0, 1]

    def test_single_pass_over_generator(self) -> None:
        leaves = iter_leaves(x for x in [1, [2]])
        assert list(leaves) == [1, 2]
        assert list(leaves) == []

    def test_repeatable_over_list(self) -> None:
        data = [1, [2, [3]]]
        assert list(iter_leaves(data)) == list(iter_leaves(data)) == [1, 2, 3]


class TestNoCycleGuard:
    def test_self_containing_list_exhausts_recursion(self) -> None:
        loop: list[Any] = [1]
        loop.append(loop)
        with pytest.raises(RecursionError):
            flatten(loop)
