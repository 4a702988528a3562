"""Tests for weekly rollups and the programme week history."""

import dataclasses

from lean90.models.app_state import AppState
from lean90.models.daily_log import DailyMetrics
from lean90.progress.weekly import program_weekly_history, weekly_summary


class TestWeeklySummary:
    def test_averages_over_recorded_dates_only(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(
            fresh_state,
            daily={
                "2026-02-16": DailyMetrics(protein=100.0),
                "2026-02-17": DailyMetrics(protein=200.0),
            },
        )
        summary = weekly_summary(state, "2026-02-18")
        assert summary.avg_protein == 150.0
        assert summary.days_recorded == 2

    def test_first_week(self, first_week_state: AppState) -> None:
        summary = weekly_summary(first_week_state)
        assert summary.start_iso == "2026-02-16"
        assert summary.end_iso == "2026-02-22"
        assert summary.avg_protein == 150.0
        assert summary.avg_sleep == 7.0
        assert summary.weight_delta == -0.6
        assert summary.workouts_done == 1
        assert summary.label == "2026-02-16 → 2026-02-22"

    def test_any_day_of_week_gives_same_summary(self, first_week_state: AppState) -> None:
        monday = weekly_summary(first_week_state, "2026-02-16")
        sunday = weekly_summary(first_week_state, "2026-02-22")
        assert monday == sunday

    def test_empty_week(self, fresh_state: AppState) -> None:
        summary = weekly_summary(fresh_state)
        assert summary.avg_protein == 0.0
        assert summary.avg_sleep == 0.0
        assert summary.weight_delta == 0.0
        assert summary.workouts_done == 0

    def test_single_weight_has_no_delta(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(
            fresh_state, daily={"2026-02-17": DailyMetrics(weight_kg=71.0)}
        )
        assert weekly_summary(state).weight_delta == 0.0

    def test_seeded_but_untouched_log_not_counted(self, seeded_state: AppState) -> None:
        assert weekly_summary(seeded_state).workouts_done == 0

    def test_other_weeks_ignored(self, first_week_state: AppState) -> None:
        summary = weekly_summary(first_week_state, "2026-02-23")
        assert summary.days_recorded == 0
        assert summary.workouts_done == 0


class TestProgramWeeklyHistory:
    def test_monday_start_has_thirteen_weeks(self, fresh_state: AppState) -> None:
        history = program_weekly_history(fresh_state)
        assert len(history) == 13
        assert history[0].start_iso == "2026-02-16"
        assert history[-1].start_iso == "2026-05-11"

    def test_midweek_start_covers_last_day(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(fresh_state, start_date_iso="2026-02-18")
        history = program_weekly_history(state)
        starts = [s.start_iso for s in history]
        assert len(starts) == len(set(starts))
        # Day 89 is 2026-05-18, a Monday
        assert starts[-1] == "2026-05-18"
        assert starts[0] == "2026-02-16"
        assert len(history) == 14


class TestWeeklyEdges:
    def test_cleared_weight_ignored(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(
            fresh_state,
            daily={
                "2026-02-16": DailyMetrics(weight_kg=70.0),
                "2026-02-18": DailyMetrics(weight_kg=69.5),
                "2026-02-20": DailyMetrics(protein=120.0, weight_kg=0.0),
            },
        )
        summary = weekly_summary(state)
        assert summary.weight_delta == -0.5
        assert summary.days_recorded == 3

    def test_last_representable_week(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(
            fresh_state,
            selected_date_iso="9999-12-31",
            daily={"9999-12-29": DailyMetrics(protein=100.0)},
        )
        summary = weekly_summary(state)
        assert summary.start_iso == "9999-12-27"
        assert summary.end_iso == "9999-12-31"
        assert summary.avg_protein == 100.0

    def test_history_near_date_max(self, fresh_state: AppState) -> None:
        state = dataclasses.replace(fresh_state, start_date_iso="9999-12-20")
        history = program_weekly_history(state)
        assert [s.start_iso for s in history] == ["9999-12-20", "9999-12-27"]
