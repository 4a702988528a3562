"""ProgramEngine — derives the day's plan and the dashboard view of a state."""

from __future__ import annotations

from dataclasses import dataclass

from lean90.log_store import daily_metrics_for, workout_log_for
from lean90.math.body_composition import BodyComposition, estimate_body_composition
from lean90.math.calendar import day_index, in_program
from lean90.models.app_state import AppState
from lean90.models.daily_log import DailyMetrics, WorkoutLog
from lean90.models.enums import PROGRAM_DAYS, SplitKey
from lean90.models.plan import DayPlan
from lean90.models.profile import Targets
from lean90.models.weekly_summary import WeeklySummary
from lean90.program.meal_templates import meal_template
from lean90.program.phases import phase_for_day_index, split_for_day_index, week_number
from lean90.program.workout_templates import workout_template
from lean90.progress.weekly import weekly_summary


@dataclass(frozen=True)
class Dashboard:
    """Everything the UI shows for the selected date."""

    plan: DayPlan
    metrics: DailyMetrics
    has_metrics: bool
    log: WorkoutLog
    body_composition: BodyComposition
    week: WeeklySummary


def day_title(index: int) -> str:
    """Header text: "Day N / 90", or where the date sits outside the programme."""
    if in_program(index):
        return f"Day {index + 1} / {PROGRAM_DAYS}"
    if index < 0:
        return "Before Program Start"
    return "Program Completed"


class ProgramEngine:
    """Pure derivations over the programme and an AppState.

    Usage:
        engine = ProgramEngine()
        plan = engine.day_plan("2026-02-16", "2026-02-18")
        view = engine.dashboard(state)
    """

    def day_plan(
        self,
        start_date_iso: str,
        selected_date_iso: str,
        targets: Targets | None = None,
    ) -> DayPlan:
        """Phase, split, workout and meal plan for one date.

        Args:
            start_date_iso: Programme start date.
            selected_date_iso: Date to plan.
            targets: User targets; the protein goal overrides the programme's.

        Returns:
            The DayPlan. Dates outside the 90-day window get the boundary
            phase and a rest day.
        """
        targets = targets or Targets()
        index = day_index(start_date_iso, selected_date_iso)
        phase = phase_for_day_index(index)
        split = split_for_day_index(index)
        return DayPlan(
            date_iso=selected_date_iso,
            day_index=index,
            week=week_number(index),
            in_range=in_program(index),
            title=day_title(index),
            phase=phase,
            split=split,
            workout=workout_template(split.key, phase.name),
            meals=meal_template(
                phase.name,
                is_leg_day=split.key == SplitKey.LEGS,
                protein_goal_g=targets.protein_goal_g,
            ),
        )

    def dashboard(self, state: AppState) -> Dashboard:
        """Derive the full view of the selected date."""
        iso = state.selected_date_iso
        metrics = daily_metrics_for(state, iso)
        return Dashboard(
            plan=self.day_plan(state.start_date_iso, iso, state.targets),
            metrics=metrics,
            has_metrics=iso in state.daily,
            log=workout_log_for(state, iso),
            body_composition=estimate_body_composition(
                state.profile, state.measurements, metrics.weight_kg or None
            ),
            week=weekly_summary(state, iso),
        )
