"""Tests for the log store reducers: seeding, metrics, exercises, settings."""

from __future__ import annotations

from typing import Callable

import pytest

from lean90 import log_store
from lean90.models.app_state import AppState
from lean90.models.daily_log import DailyMetrics, LiftValue
from lean90.models.enums import Sex, Tab
from lean90.program.video_links import video_search_url


class TestSeeding:
    def test_selecting_a_date_seeds_its_template(
        self, fresh_state: AppState, id_factory: Callable[[], str]
    ) -> None:
        state = log_store.ensure_workout_log(fresh_state, id_factory=id_factory)
        log = state.workout_logs["2026-02-16"]
        assert [ex.name for ex in log.exercises][0] == "Barbell Bench Press"
        assert len(log.exercises) == 6
        assert all(not ex.done for ex in log.exercises)
        assert [ex.id for ex in log.exercises] == [f"ex-{i}" for i in range(1, 7)]
        assert log.exercises[0].video_url == video_search_url("Barbell Bench Press")

    def test_seeding_is_idempotent(self, seeded_state: AppState) -> None:
        assert log_store.ensure_workout_log(seeded_state) is seeded_state

    def test_edits_survive_revisit(self, seeded_state: AppState) -> None:
        first = seeded_state.workout_logs["2026-02-16"].exercises[0]
        state = log_store.update_exercise(seeded_state, first.id, done=True)
        state = log_store.step_selected_date(state, 1)
        state = log_store.step_selected_date(state, -1)
        assert state.workout_logs["2026-02-16"].exercises[0].done

    def test_input_state_not_mutated(self, fresh_state: AppState) -> None:
        log_store.change_selected_date(fresh_state, "2026-02-18")
        assert fresh_state.workout_logs == {}
        assert fresh_state.selected_date_iso == "2026-02-16"

    def test_date_outside_program_gets_rest_day(self, fresh_state: AppState) -> None:
        state = log_store.change_selected_date(fresh_state, "2026-02-01")
        names = [ex.name for ex in state.workout_logs["2026-02-01"].exercises]
        assert names == ["Steps", "Light stretch", "Optional easy walk"]

    def test_emptied_log_is_reseeded_on_revisit(self, seeded_state: AppState) -> None:
        state = seeded_state
        for ex in state.workout_logs["2026-02-16"].exercises:
            state = log_store.remove_exercise(state, ex.id)
        state = log_store.update_workout_notes(state, "felt tired")
        assert state.workout_logs["2026-02-16"].is_empty

        state = log_store.step_selected_date(state, 1)
        state = log_store.step_selected_date(state, -1)
        log = state.workout_logs["2026-02-16"]
        assert len(log.exercises) == 6
        assert log.notes == "felt tired"

    def test_emptied_log_kept_empty_when_reseed_disabled(self, seeded_state: AppState) -> None:
        state = seeded_state
        for ex in state.workout_logs["2026-02-16"].exercises:
            state = log_store.remove_exercise(state, ex.id)

        state = log_store.step_selected_date(state, 1, reseed_empty=False)
        state = log_store.step_selected_date(state, -1, reseed_empty=False)
        assert state.workout_logs["2026-02-16"].is_empty

    def test_invalid_date_raises(self, fresh_state: AppState) -> None:
        with pytest.raises(ValueError):
            log_store.change_selected_date(fresh_state, "2026-13-01")

    def test_step_past_date_max_is_noop(self, fresh_state: AppState) -> None:
        state = log_store.change_selected_date(fresh_state, "9999-12-31")
        assert log_store.step_selected_date(state, 1) is state
        assert log_store.step_selected_date(state, -1).selected_date_iso == "9999-12-30"

    def test_step_crosses_month(self, fresh_state: AppState) -> None:
        state = log_store.change_selected_date(fresh_state, "2026-02-28")
        state = log_store.step_selected_date(state, 1)
        assert state.selected_date_iso == "2026-03-01"
        assert "2026-03-01" in state.workout_logs


class TestDailyMetrics:
    def test_unrecorded_date_defaults_to_profile_weight(self, fresh_state: AppState) -> None:
        metrics = log_store.daily_metrics_for(fresh_state)
        assert metrics == DailyMetrics(weight_kg=70.0)
        assert "2026-02-16" not in fresh_state.daily

    def test_first_edit_creates_record(self, fresh_state: AppState) -> None:
        state = log_store.update_daily_metrics(fresh_state, protein=120)
        assert state.daily["2026-02-16"] == DailyMetrics(protein=120.0, weight_kg=70.0)

    def test_patches_merge(self, fresh_state: AppState) -> None:
        state = log_store.update_daily_metrics(fresh_state, protein=120)
        state = log_store.update_daily_metrics(state, sleep_h="7.5", water_l=2)
        metrics = state.daily["2026-02-16"]
        assert metrics.protein == 120.0
        assert metrics.sleep_h == 7.5
        assert metrics.water_l == 2.0

    def test_non_numeric_becomes_zero(self, fresh_state: AppState) -> None:
        state = log_store.update_daily_metrics(fresh_state, calories="lots")
        assert state.daily["2026-02-16"].calories == 0.0

    def test_negative_floored(self, fresh_state: AppState) -> None:
        state = log_store.update_daily_metrics(fresh_state, protein=-20)
        assert state.daily["2026-02-16"].protein == 0.0

    def test_unknown_field_raises(self, fresh_state: AppState) -> None:
        with pytest.raises(ValueError, match="steps"):
            log_store.update_daily_metrics(fresh_state, steps=10000)


class TestExercises:
    def test_update_fields(self, seeded_state: AppState) -> None:
        state = log_store.update_exercise(
            seeded_state, "ex-1", done=True, weight=62.5, reps="6", notes="easy"
        )
        ex = state.workout_logs["2026-02-16"].find("ex-1")
        assert ex is not None
        assert ex.done
        assert ex.weight == LiftValue("62.5")
        assert ex.weight.number == 62.5
        assert ex.reps.raw == "6"
        assert ex.notes == "easy"

    def test_free_text_lift_values_kept(self, seeded_state: AppState) -> None:
        state = log_store.update_exercise(seeded_state, "ex-1", weight="BW", reps="8/8/7")
        ex = state.workout_logs["2026-02-16"].find("ex-1")
        assert ex.weight.raw == "BW"
        assert ex.weight.number is None
        assert ex.reps.raw == "8/8/7"

    def test_unknown_id_is_noop(self, seeded_state: AppState) -> None:
        assert log_store.update_exercise(seeded_state, "nope", done=True) is seeded_state
        assert log_store.remove_exercise(seeded_state, "nope") is seeded_state

    def test_unknown_field_raises(self, seeded_state: AppState) -> None:
        with pytest.raises(ValueError):
            log_store.update_exercise(seeded_state, "ex-1", id="other")

    def test_rename_refreshes_video(self, seeded_state: AppState) -> None:
        state = log_store.update_exercise(seeded_state, "ex-1", name="Dumbbell Bench Press")
        ex = state.workout_logs["2026-02-16"].find("ex-1")
        assert ex.video_url == video_search_url("Dumbbell Bench Press")

    def test_add_exercise(self, seeded_state: AppState) -> None:
        state = log_store.add_exercise(
            seeded_state, "Push-ups", "3×AMRAP", id_factory=lambda: "custom"
        )
        log = state.workout_logs["2026-02-16"]
        assert len(log.exercises) == 7
        added = log.exercises[-1]
        assert added.id == "custom"
        assert added.name == "Push-ups"
        assert added.sets == "3×AMRAP"
        assert not added.done
        assert added.video_url == video_search_url("Push-ups")

    def test_add_blank_name_uses_default(self, seeded_state: AppState) -> None:
        state = log_store.add_exercise(seeded_state, "  ", id_factory=lambda: "x")
        assert state.workout_logs["2026-02-16"].find("x").name == "New exercise"

    def test_remove_exercise(self, seeded_state: AppState) -> None:
        state = log_store.remove_exercise(seeded_state, "ex-2")
        ids = [ex.id for ex in state.workout_logs["2026-02-16"].exercises]
        assert ids == ["ex-1", "ex-3", "ex-4", "ex-5", "ex-6"]

    def test_other_dates_untouched(self, seeded_state: AppState) -> None:
        state = log_store.change_selected_date(seeded_state, "2026-02-17")
        before = state.workout_logs["2026-02-16"]
        state = log_store.add_exercise(state, "Push-ups")
        assert state.workout_logs["2026-02-16"] is before

    def test_workout_notes(self, seeded_state: AppState) -> None:
        state = log_store.update_workout_notes(seeded_state, "gym was busy")
        assert state.workout_logs["2026-02-16"].notes == "gym was busy"


class TestSettings:
    def test_update_profile(self, fresh_state: AppState) -> None:
        state = log_store.update_profile(
            fresh_state, name="Sam", sex="female", height_cm="165", weight_kg=60
        )
        assert state.profile.name == "Sam"
        assert state.profile.sex == Sex.FEMALE
        assert state.profile.height_cm == 165.0
        assert state.profile.weight_kg == 60.0

    def test_invalid_profile_values_ignored(self, fresh_state: AppState) -> None:
        state = log_store.update_profile(fresh_state, sex="robot", height_cm=0, weight_kg="abc")
        assert state.profile == fresh_state.profile

    def test_update_measurements_and_targets(self, fresh_state: AppState) -> None:
        state = log_store.update_measurements(fresh_state, waist_cm=84, neck_cm=-1)
        state = log_store.update_targets(state, protein_goal_g=165, water_goal_l="3.5")
        assert state.measurements.waist_cm == 84.0
        assert state.measurements.neck_cm == 38.0
        assert state.targets.protein_goal_g == 165.0
        assert state.targets.water_goal_l == 3.5

    def test_set_tab(self, fresh_state: AppState) -> None:
        assert log_store.set_tab(fresh_state, "progress").tab == Tab.PROGRESS
        assert log_store.set_tab(fresh_state, "charts") is fresh_state

    def test_reset_state(self) -> None:
        state = log_store.reset_state("2026-03-01", "2026-02-16")
        assert state.selected_date_iso == "2026-03-01"
        assert state.daily == {}
        assert list(state.workout_logs) == ["2026-03-01"]
