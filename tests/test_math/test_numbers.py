"""Tests for numeric helpers: clamp, one-decimal rounding, lenient parsing."""

import math

import pytest

from lean90.math.numbers import clamp, coerce_number, parse_number, round1


class TestClamp:
    def test_inside_and_outside(self) -> None:
        assert clamp(5, 2, 60) == 5
        assert clamp(-3, 2, 60) == 2
        assert clamp(75, 2, 60) == 60


class TestRound1:
    def test_halves_round_up(self) -> None:
        assert round1(0.25) == 0.3
        assert round1(2.5) == 2.5
        assert round1(0.75) == 0.8

    def test_whole_numbers_unchanged(self) -> None:
        assert round1(150.0) == 150.0
        assert round1(0.0) == 0.0

    def test_negative(self) -> None:
        assert round1(-0.6) == pytest.approx(-0.6)
        assert round1(-1.04) == pytest.approx(-1.0)


class TestParseNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (60, 60.0),
            (62.5, 62.5),
            ("62.5", 62.5),
            (" 80 ", 80.0),
            ("62,5", 62.5),
            ("-5", -5.0),
        ],
    )
    def test_numeric(self, value: object, expected: float) -> None:
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "BW", "8/8/7", True, False, float("nan"), math.inf, [1]]
    )
    def test_not_a_number(self, value: object) -> None:
        assert parse_number(value) is None


class TestCoerceNumber:
    def test_fallback(self) -> None:
        assert coerce_number("abc") == 0.0
        assert coerce_number(None, 70.0) == 70.0
        assert coerce_number("2.5", 70.0) == 2.5
