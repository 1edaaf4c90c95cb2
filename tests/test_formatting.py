"""Tests for the text and numeric helpers."""

from __future__ import annotations

import math

import pytest

from object_inspector.formatting import (
    class_from_template,
    clear_string,
    decimal,
    degrees,
    race_from_template,
    split_string,
)


class TestClearString:
    def test_extracts_font_text(self) -> None:
        assert clear_string('<FONT>hello there</FONT>') == "hello there"

    def test_first_element_only(self) -> None:
        assert clear_string("<FONT>one</FONT><FONT>two</FONT>") == "one"

    def test_no_markup(self) -> None:
        assert clear_string("plain text") is None

    def test_repeated_calls_are_independent(self) -> None:
        raw = "<FONT>again</FONT>"
        assert clear_string(raw) == clear_string(raw) == "again"


class TestSplitString:
    def test_strips_and_lowercases(self) -> None:
        assert split_string("  Hello World ") == ["hello", "world"]

    def test_double_space_gives_empty_item(self) -> None:
        assert split_string("a  b") == ["a", "", "b"]

    def test_single_word(self) -> None:
        assert split_string("Word") == ["word"]


class TestDegrees:
    def test_right_angle(self) -> None:
        assert degrees(math.pi / 2) == "90\N{DEGREE SIGN}"

    def test_zero(self) -> None:
        assert degrees(0) == "0\N{DEGREE SIGN}"

    def test_negative(self) -> None:
        assert degrees(-math.pi) == "-180\N{DEGREE SIGN}"

    def test_nan_passes_through(self) -> None:
        assert degrees(math.nan) == "nan\N{DEGREE SIGN}"

    def test_infinities_pass_through(self) -> None:
        assert degrees(math.inf) == "inf\N{DEGREE SIGN}"
        assert degrees(-math.inf) == "-inf\N{DEGREE SIGN}"


class TestDecimal:
    def test_rounds_to_places(self) -> None:
        assert decimal(3.14159, 2) == 3.14

    @pytest.mark.parametrize(
        ("number", "places", "expected"),
        [(2.5, 0, 3.0), (-2.5, 0, -2.0), (0.125, 2, 0.13), (7, 0, 7.0)],
    )
    def test_half_up(self, number: float, places: int, expected: float) -> None:
        assert decimal(number, places) == expected

    def test_infinity_passes_through(self) -> None:
        assert decimal(math.inf, 2) == math.inf
        assert decimal(-math.inf, 0) == -math.inf

    def test_nan_passes_through(self) -> None:
        assert math.isnan(decimal(math.nan, 1))


class TestTemplates:
    def test_race_and_class(self) -> None:
        # race 2, class 5
        template_id = 10101 + 2 * 100 + 5
        assert race_from_template(template_id) == 2
        assert class_from_template(template_id) == 5

    def test_base_template(self) -> None:
        assert race_from_template(10101) == 0
        assert class_from_template(10101) == 0

    def test_below_base_truncates_toward_zero(self) -> None:
        assert race_from_template(10001) == -1
        assert race_from_template(10100) == 0
        assert class_from_template(10100) == -1
