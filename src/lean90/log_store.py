"""Daily log store — reducers over AppState.

Every function here takes an AppState and returns a new one; nothing is
mutated in place. The caller (UI session, CLI) holds the current state and
replaces it with whatever a reducer returns.

Seeding protocol: whenever a date is selected, its workout log is populated
from the day's programme template if it has no log or an empty one. Once a
log has at least one exercise the template is never reapplied, so edits
survive revisits. A log the user emptied by removing every exercise is seeded
again on the next visit unless ``reseed_empty=False``.
"""

from __future__ import annotations

import dataclasses
from typing import Callable

from lean90.math.calendar import add_days, day_index, parse_iso_date
from lean90.math.numbers import coerce_number, parse_number
from lean90.models.app_state import AppState, default_state
from lean90.models.daily_log import (
    DailyMetrics,
    Exercise,
    LiftValue,
    WorkoutLog,
    new_exercise_id,
)
from lean90.models.enums import DEFAULT_START_DATE_ISO, Sex, Tab
from lean90.program.phases import phase_for_day_index, split_for_day_index
from lean90.program.video_links import video_search_url
from lean90.program.workout_templates import workout_template

DEFAULT_EXERCISE_NAME = "New exercise"

_METRIC_FIELDS = frozenset(f.name for f in dataclasses.fields(DailyMetrics))
_EXERCISE_TEXT_FIELDS = frozenset({"name", "sets", "notes"})
_EXERCISE_LIFT_FIELDS = frozenset({"weight", "reps"})


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def daily_metrics_for(state: AppState, date_iso: str | None = None) -> DailyMetrics:
    """Recorded metrics for a date, or zero metrics at the profile bodyweight."""
    iso = date_iso or state.selected_date_iso
    recorded = state.daily.get(iso)
    if recorded is not None:
        return recorded
    return DailyMetrics(weight_kg=state.profile.weight_kg)


def workout_log_for(state: AppState, date_iso: str | None = None) -> WorkoutLog:
    """The workout log for a date, or an empty one if the date was never seeded."""
    iso = date_iso or state.selected_date_iso
    return state.workout_logs.get(iso, WorkoutLog())


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


def seed_workout_log(
    start_date_iso: str,
    date_iso: str,
    id_factory: Callable[[], str] = new_exercise_id,
) -> WorkoutLog:
    """Build a fresh log from the programme template for *date_iso*."""
    index = day_index(start_date_iso, date_iso)
    split = split_for_day_index(index)
    phase = phase_for_day_index(index)
    template = workout_template(split.key, phase.name)
    exercises = tuple(
        Exercise(
            id=id_factory(),
            name=block.name,
            sets=block.sets,
            video_url=block.video_url,
        )
        for block in template.blocks
    )
    return WorkoutLog(exercises=exercises)


def ensure_workout_log(
    state: AppState,
    date_iso: str | None = None,
    reseed_empty: bool = True,
    id_factory: Callable[[], str] = new_exercise_id,
) -> AppState:
    """Seed the date's workout log if it needs seeding, else return *state*.

    Args:
        state: Current state.
        date_iso: Date to seed; defaults to the selected date.
        reseed_empty: Seed a log that exists but has no exercises. When
            False, only dates with no log at all are seeded.
        id_factory: Exercise id generator.
    """
    iso = date_iso or state.selected_date_iso
    existing = state.workout_logs.get(iso)
    if existing is not None and (not existing.is_empty or not reseed_empty):
        return state

    seeded = seed_workout_log(state.start_date_iso, iso, id_factory)
    if existing is not None:
        seeded = dataclasses.replace(seeded, notes=existing.notes)
    return dataclasses.replace(
        state, workout_logs={**state.workout_logs, iso: seeded}
    )


# ---------------------------------------------------------------------------
# Date selection
# ---------------------------------------------------------------------------


def change_selected_date(
    state: AppState, date_iso: str, reseed_empty: bool = True
) -> AppState:
    """Select a date and seed its workout log.

    Raises:
        ValueError: If *date_iso* is not a valid ISO date.
    """
    parse_iso_date(date_iso)
    selected = dataclasses.replace(state, selected_date_iso=date_iso)
    return ensure_workout_log(selected, reseed_empty=reseed_empty)


def step_selected_date(state: AppState, delta: int, reseed_empty: bool = True) -> AppState:
    """Move the selected date by *delta* days (the ◀ ▶ stepper).

    A step past the first or last representable date leaves *state* as is.
    """
    try:
        target = add_days(state.selected_date_iso, delta)
    except ValueError:
        return state
    return change_selected_date(state, target, reseed_empty=reseed_empty)


# ---------------------------------------------------------------------------
# Daily metrics
# ---------------------------------------------------------------------------


def update_daily_metrics(state: AppState, **patch: object) -> AppState:
    """Merge metric fields into the selected date's DailyMetrics.

    The first edit of a date starts from zero metrics at the profile
    bodyweight. Non-numeric values become 0; negatives are floored at 0.

    Raises:
        ValueError: On an unknown field name.
    """
    unknown = set(patch) - _METRIC_FIELDS
    if unknown:
        raise ValueError(f"Unknown daily metric field(s): {sorted(unknown)}")

    iso = state.selected_date_iso
    base = daily_metrics_for(state, iso)
    values = {key: max(0.0, coerce_number(value)) for key, value in patch.items()}
    updated = dataclasses.replace(base, **values)
    return dataclasses.replace(state, daily={**state.daily, iso: updated})


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------


def _replace_log(state: AppState, log: WorkoutLog) -> AppState:
    iso = state.selected_date_iso
    return dataclasses.replace(state, workout_logs={**state.workout_logs, iso: log})


def update_exercise(state: AppState, exercise_id: str, **patch: object) -> AppState:
    """Edit one exercise of the selected date, matched by id.

    Accepted fields: ``done``, ``weight``, ``reps``, ``notes``, ``name``,
    ``sets``. Renaming an exercise also refreshes its video link. An id that
    is not in the day's log leaves the state unchanged.

    Raises:
        ValueError: On an unknown field name.
    """
    allowed = _EXERCISE_TEXT_FIELDS | _EXERCISE_LIFT_FIELDS | {"done"}
    unknown = set(patch) - allowed
    if unknown:
        raise ValueError(f"Unknown exercise field(s): {sorted(unknown)}")

    log = workout_log_for(state)
    current = log.find(exercise_id)
    if current is None:
        return state

    changes: dict[str, object] = {}
    for key, value in patch.items():
        if key == "done":
            changes[key] = bool(value)
        elif key in _EXERCISE_LIFT_FIELDS:
            changes[key] = LiftValue.of(value)
        else:
            changes[key] = "" if value is None else str(value)
    if "name" in changes and changes["name"] != current.name:
        changes["video_url"] = video_search_url(str(changes["name"]))

    updated = dataclasses.replace(current, **changes)
    exercises = tuple(updated if ex.id == exercise_id else ex for ex in log.exercises)
    return _replace_log(state, dataclasses.replace(log, exercises=exercises))


def add_exercise(
    state: AppState,
    name: str = DEFAULT_EXERCISE_NAME,
    sets: str = "",
    id_factory: Callable[[], str] = new_exercise_id,
) -> AppState:
    """Append a user-defined exercise to the selected date's log."""
    name = name.strip() or DEFAULT_EXERCISE_NAME
    log = workout_log_for(state)
    exercise = Exercise(
        id=id_factory(),
        name=name,
        sets=sets,
        video_url=video_search_url(name),
    )
    return _replace_log(state, dataclasses.replace(log, exercises=log.exercises + (exercise,)))


def remove_exercise(state: AppState, exercise_id: str) -> AppState:
    """Drop an exercise from the selected date's log for good."""
    log = workout_log_for(state)
    if log.find(exercise_id) is None:
        return state
    exercises = tuple(ex for ex in log.exercises if ex.id != exercise_id)
    return _replace_log(state, dataclasses.replace(log, exercises=exercises))


def update_workout_notes(state: AppState, notes: str) -> AppState:
    """Replace the session notes of the selected date."""
    log = workout_log_for(state)
    return _replace_log(state, dataclasses.replace(log, notes=notes))


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def _positive_or(value: object, prior: float) -> float:
    """Parse a strictly positive number, keeping *prior* otherwise."""
    number = parse_number(value)
    return number if number is not None and number > 0 else prior


def update_profile(state: AppState, **patch: object) -> AppState:
    """Settings form: name, sex, height_cm, weight_kg. Invalid input keeps the prior value."""
    profile = state.profile
    changes: dict[str, object] = {}
    if "name" in patch:
        changes["name"] = str(patch["name"] or "")
    if "sex" in patch:
        try:
            changes["sex"] = Sex(patch["sex"])
        except ValueError:
            pass
    for key in ("height_cm", "weight_kg"):
        if key in patch:
            changes[key] = _positive_or(patch[key], getattr(profile, key))
    return dataclasses.replace(state, profile=dataclasses.replace(profile, **changes))


def update_measurements(state: AppState, **patch: object) -> AppState:
    """Settings form: neck_cm, waist_cm, hip_cm."""
    current = state.measurements
    changes = {
        key: _positive_or(value, getattr(current, key))
        for key, value in patch.items()
        if key in ("neck_cm", "waist_cm", "hip_cm")
    }
    return dataclasses.replace(state, measurements=dataclasses.replace(current, **changes))


def update_targets(state: AppState, **patch: object) -> AppState:
    """Settings form: water_goal_l, sleep_goal_h, protein_goal_g."""
    current = state.targets
    changes = {
        key: _positive_or(value, getattr(current, key))
        for key, value in patch.items()
        if key in ("water_goal_l", "sleep_goal_h", "protein_goal_g")
    }
    return dataclasses.replace(state, targets=dataclasses.replace(current, **changes))


def set_tab(state: AppState, tab: Tab | str) -> AppState:
    """Switch the active tab; unknown tab names are ignored."""
    try:
        return dataclasses.replace(state, tab=Tab(tab))
    except ValueError:
        return state


def reset_state(
    today_iso: str,
    start_date_iso: str = DEFAULT_START_DATE_ISO,
    reseed_empty: bool = True,
) -> AppState:
    """Fresh defaults with today selected and seeded.

    The reset record itself holds no workout logs. Selecting today is a date
    selection like any other, so today's log is seeded from the template
    straight away, exactly as the stepper or date picker would do.
    """
    return ensure_workout_log(
        default_state(today_iso, start_date_iso), reseed_empty=reseed_empty
    )
