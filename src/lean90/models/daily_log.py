"""Per-date logs: daily metrics and the workout log with its exercises."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from lean90.math.numbers import parse_number


def new_exercise_id() -> str:
    """Opaque id assigned once when an exercise is created."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class DailyMetrics:
    """What the user logged for one calendar date."""

    calories: float = 0.0
    protein: float = 0.0
    water_l: float = 0.0
    sleep_h: float = 0.0
    weight_kg: float = 0.0


@dataclass(frozen=True)
class LiftValue:
    """A weight or rep count exactly as typed.

    The raw text is what gets stored and shown back in the form. ``number`` is
    the parsed value used by charts; it is None for empty or non-numeric text
    such as "BW" or "8/8/7", which means "no data point".
    """

    raw: str = ""

    @classmethod
    def of(cls, value: object) -> LiftValue:
        """Build from form input or a stored value (str, int, float, None)."""
        if value is None or isinstance(value, bool):
            return cls("")
        if isinstance(value, LiftValue):
            return value
        if isinstance(value, float) and value.is_integer():
            return cls(str(int(value)))
        return cls(str(value))

    @property
    def number(self) -> float | None:
        return parse_number(self.raw)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Exercise:
    """One line of a day's workout log."""

    id: str
    name: str
    sets: str = ""
    done: bool = False
    weight: LiftValue = field(default_factory=LiftValue)
    reps: LiftValue = field(default_factory=LiftValue)
    notes: str = ""
    video_url: str = ""


@dataclass(frozen=True)
class WorkoutLog:
    """The ordered exercise list for one date plus free-form session notes."""

    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    notes: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.exercises

    @property
    def completed_count(self) -> int:
        """Number of exercises ticked off."""
        return sum(1 for ex in self.exercises if ex.done)

    @property
    def any_done(self) -> bool:
        return any(ex.done for ex in self.exercises)

    def find(self, exercise_id: str) -> Exercise | None:
        for ex in self.exercises:
            if ex.id == exercise_id:
                return ex
        return None
