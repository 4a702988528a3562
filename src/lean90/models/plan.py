"""Derived programme objects: phase, split, workout/meal templates, day plan.

None of these are persisted; they are recomputed from the day index.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lean90.models.enums import PhaseName, SplitKey


@dataclass(frozen=True)
class Phase:
    """A training phase and its calorie baseline."""

    name: PhaseName
    calories: int


@dataclass(frozen=True)
class SplitDay:
    """Muscle-group focus for a programme weekday."""

    key: SplitKey
    title: str


@dataclass(frozen=True)
class ExerciseBlock:
    """One prescribed exercise with its set/rep target."""

    name: str
    sets: str
    video_url: str = ""


@dataclass(frozen=True)
class WorkoutTemplate:
    """The prescribed session for a split key in a phase."""

    title: str
    blocks: tuple[ExerciseBlock, ...] = field(default_factory=tuple)
    notes: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MealItem:
    title: str
    description: str


@dataclass(frozen=True)
class MealPlan:
    """Nutrition targets and the fixed meal list for a day."""

    calories: int
    protein_target: float
    items: tuple[MealItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DayPlan:
    """Everything the programme prescribes for one selected date."""

    date_iso: str
    day_index: int
    week: int  # 1-indexed, clamped to the programme window
    in_range: bool
    title: str
    phase: Phase
    split: SplitDay
    workout: WorkoutTemplate
    meals: MealPlan

    @property
    def is_leg_day(self) -> bool:
        return self.split.key == SplitKey.LEGS
