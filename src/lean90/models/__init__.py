"""Data models for the Lean90 engine."""

from lean90.models.app_state import AppState, default_state
from lean90.models.daily_log import (
    DailyMetrics,
    Exercise,
    LiftValue,
    WorkoutLog,
    new_exercise_id,
)
from lean90.models.enums import PhaseName, Sex, SplitKey, Tab
from lean90.models.plan import (
    DayPlan,
    ExerciseBlock,
    MealItem,
    MealPlan,
    Phase,
    SplitDay,
    WorkoutTemplate,
)
from lean90.models.profile import Measurements, Profile, Targets
from lean90.models.weekly_summary import WeeklySummary

__all__ = [
    "AppState",
    "DailyMetrics",
    "DayPlan",
    "Exercise",
    "ExerciseBlock",
    "LiftValue",
    "MealItem",
    "MealPlan",
    "Measurements",
    "Phase",
    "PhaseName",
    "Profile",
    "Sex",
    "SplitDay",
    "SplitKey",
    "Tab",
    "Targets",
    "WeeklySummary",
    "WorkoutLog",
    "WorkoutTemplate",
    "default_state",
    "new_exercise_id",
]
