"""Tests for phase and split selection from the day index."""

import pytest

from lean90.models.enums import PhaseName, SplitKey
from lean90.program.phases import (
    PHASES,
    REST_DAY,
    phase_by_name,
    phase_for_day_index,
    phase_for_week,
    split_for_day_index,
    week_number,
    weekday_split,
)


class TestWeekNumber:
    def test_first_and_last_day(self) -> None:
        assert week_number(0) == 1
        assert week_number(6) == 1
        assert week_number(7) == 2
        assert week_number(89) == 13

    def test_clamped_outside_window(self) -> None:
        assert week_number(-10) == 1
        assert week_number(500) == 13


class TestPhaseForDayIndex:
    @pytest.mark.parametrize("index", [0, 13, 27])
    def test_foundation(self, index: int) -> None:
        assert phase_for_day_index(index).name == PhaseName.FOUNDATION

    @pytest.mark.parametrize("index", [28, 40, 55])
    def test_hypertrophy(self, index: int) -> None:
        assert phase_for_day_index(index).name == PhaseName.HYPERTROPHY

    @pytest.mark.parametrize("index", [56, 70, 89])
    def test_recomp(self, index: int) -> None:
        assert phase_for_day_index(index).name == PhaseName.RECOMP

    def test_outside_window_uses_boundary_phase(self) -> None:
        assert phase_for_day_index(-3).name == PhaseName.FOUNDATION
        assert phase_for_day_index(120).name == PhaseName.RECOMP

    def test_calorie_baselines(self) -> None:
        assert phase_for_week(1).calories == 2700
        assert phase_for_week(5).calories == 2800
        assert phase_for_week(13).calories == 2600

    def test_phases_are_contiguous(self) -> None:
        order = list(PhaseName)
        previous = order.index(phase_for_day_index(0).name)
        for index in range(1, 90):
            current = order.index(phase_for_day_index(index).name)
            assert current in (previous, previous + 1)
            previous = current


class TestSplitForDayIndex:
    def test_first_week_order(self) -> None:
        keys = [split_for_day_index(i).key for i in range(7)]
        assert keys == [
            SplitKey.CHEST_TRI,
            SplitKey.BACK_BI,
            SplitKey.LEGS,
            SplitKey.SHOULDERS_ABS,
            SplitKey.UPPER_STRENGTH,
            SplitKey.CONDITIONING,
            SplitKey.REST,
        ]

    def test_period_seven_inside_window(self) -> None:
        for index in range(0, 83):
            assert split_for_day_index(index) == split_for_day_index(index + 7)

    def test_rest_outside_window(self) -> None:
        for index in (-1, -5, 90, 92, 200):
            assert split_for_day_index(index) == REST_DAY

    def test_raw_weekday_lookup_ignores_window(self) -> None:
        assert weekday_split(-5).key == SplitKey.LEGS
        assert weekday_split(93).key == SplitKey.LEGS

    def test_titles(self) -> None:
        assert split_for_day_index(2).title == "Legs"
        assert split_for_day_index(0).title == "Chest + Triceps"


class TestPhaseByName:
    def test_lookup(self) -> None:
        assert phase_by_name("Recomp") is PHASES[PhaseName.RECOMP]

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            phase_by_name("Bulk")
