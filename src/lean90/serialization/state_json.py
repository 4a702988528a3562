"""AppState <-> JSON-compatible dict.

The document layout keeps the camelCase field names of the browser
storage blob:

    {
      "profile": {"name", "sex", "heightCm", "weightKg"},
      "measurements": {"neckCm", "waistCm", "hipCm"},
      "targets": {"waterGoalL", "sleepGoalH", "proteinGoalG"},
      "startDateIso": "YYYY-MM-DD",
      "selectedDateIso": "YYYY-MM-DD",
      "daily": {iso: {"calories", "protein", "waterL", "sleepH", "weightKg"}},
      "workoutLogs": {iso: {"exercises": [...], "notes"}},
      "ui": {"tab": "workout"}
    }

All functions are pure (no I/O). Decoding raises ValueError, TypeError or
KeyError on structurally malformed input; individual non-numeric numbers are
coerced rather than rejected.
"""

from __future__ import annotations

import json
from typing import Any

from lean90.math.calendar import parse_iso_date
from lean90.math.numbers import coerce_number
from lean90.models.app_state import AppState
from lean90.models.daily_log import DailyMetrics, Exercise, LiftValue, WorkoutLog
from lean90.models.enums import DEFAULT_START_DATE_ISO, Sex, Tab
from lean90.models.profile import Measurements, Profile, Targets

# (python attribute, json key) pairs
_PROFILE_FIELDS = (("height_cm", "heightCm"), ("weight_kg", "weightKg"))
_MEASUREMENT_FIELDS = (("neck_cm", "neckCm"), ("waist_cm", "waistCm"), ("hip_cm", "hipCm"))
_TARGET_FIELDS = (
    ("water_goal_l", "waterGoalL"),
    ("sleep_goal_h", "sleepGoalH"),
    ("protein_goal_g", "proteinGoalG"),
)
_METRIC_FIELDS = (
    ("calories", "calories"),
    ("protein", "protein"),
    ("water_l", "waterL"),
    ("sleep_h", "sleepH"),
    ("weight_kg", "weightKg"),
)


def state_to_dict(state: AppState) -> dict:
    """Convert an AppState to a JSON-compatible dict."""
    profile = state.profile
    return {
        "profile": {
            "name": profile.name,
            "sex": Sex(profile.sex).value,
            **{key: getattr(profile, attr) for attr, key in _PROFILE_FIELDS},
        },
        "measurements": {
            key: getattr(state.measurements, attr) for attr, key in _MEASUREMENT_FIELDS
        },
        "targets": {key: getattr(state.targets, attr) for attr, key in _TARGET_FIELDS},
        "startDateIso": state.start_date_iso,
        "selectedDateIso": state.selected_date_iso,
        "daily": {
            iso: {key: getattr(metrics, attr) for attr, key in _METRIC_FIELDS}
            for iso, metrics in state.daily.items()
        },
        "workoutLogs": {
            iso: _log_to_dict(log) for iso, log in state.workout_logs.items()
        },
        "ui": {"tab": Tab(state.tab).value},
    }


def state_to_json_string(state: AppState, indent: int | None = None) -> str:
    """Serialize an AppState to a JSON string."""
    return json.dumps(state_to_dict(state), indent=indent, ensure_ascii=False)


def state_from_dict(data: dict) -> AppState:
    """Rebuild an AppState from a dict produced by :func:`state_to_dict`.

    Sections missing from older documents fall back to defaults.

    Raises:
        TypeError: If the document or a section has the wrong shape.
        ValueError: If a date key or enum value is invalid.
    """
    _require_mapping(data, "state")

    raw_profile = _section(data, "profile")
    defaults = Profile()
    profile = Profile(
        name=str(raw_profile.get("name", defaults.name)),
        sex=Sex(raw_profile.get("sex", defaults.sex)),
        **_numbers(raw_profile, _PROFILE_FIELDS, defaults),
    )
    measurements = Measurements(
        **_numbers(_section(data, "measurements"), _MEASUREMENT_FIELDS, Measurements())
    )
    targets = Targets(**_numbers(_section(data, "targets"), _TARGET_FIELDS, Targets()))

    start_iso = data.get("startDateIso", DEFAULT_START_DATE_ISO)
    selected_iso = data["selectedDateIso"]
    parse_iso_date(start_iso)
    parse_iso_date(selected_iso)

    daily = {}
    for iso, raw in _section(data, "daily").items():
        parse_iso_date(iso)
        _require_mapping(raw, f"daily[{iso}]")
        daily[iso] = DailyMetrics(**_numbers(raw, _METRIC_FIELDS, DailyMetrics()))

    workout_logs = {}
    for iso, raw in _section(data, "workoutLogs").items():
        parse_iso_date(iso)
        workout_logs[iso] = _log_from_dict(raw, iso)

    tab = Tab(_section(data, "ui").get("tab", Tab.WORKOUT))

    return AppState(
        selected_date_iso=selected_iso,
        start_date_iso=start_iso,
        profile=profile,
        measurements=measurements,
        targets=targets,
        daily=daily,
        workout_logs=workout_logs,
        tab=tab,
    )


def state_from_json_string(text: str) -> AppState:
    """Parse a JSON string into an AppState.

    Raises:
        ValueError: On invalid JSON (json.JSONDecodeError) or invalid content.
        TypeError, KeyError: On structurally malformed content.
    """
    return state_from_dict(json.loads(text))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _log_to_dict(log: WorkoutLog) -> dict:
    return {
        "exercises": [
            {
                "id": ex.id,
                "name": ex.name,
                "sets": ex.sets,
                "done": ex.done,
                "weight": ex.weight.raw,
                "reps": ex.reps.raw,
                "notes": ex.notes,
                "videoUrl": ex.video_url,
            }
            for ex in log.exercises
        ],
        "notes": log.notes,
    }


def _log_from_dict(raw: Any, iso: str) -> WorkoutLog:
    _require_mapping(raw, f"workoutLogs[{iso}]")
    raw_exercises = raw.get("exercises", [])
    if not isinstance(raw_exercises, list):
        raise TypeError(f"workoutLogs[{iso}].exercises must be a list")

    exercises = []
    for item in raw_exercises:
        _require_mapping(item, f"workoutLogs[{iso}] exercise")
        exercises.append(
            Exercise(
                id=str(item["id"]),
                name=str(item.get("name", "")),
                sets=str(item.get("sets", "")),
                done=bool(item.get("done", False)),
                weight=LiftValue.of(item.get("weight")),
                reps=LiftValue.of(item.get("reps")),
                notes=str(item.get("notes", "")),
                video_url=str(item.get("videoUrl", "")),
            )
        )
    return WorkoutLog(exercises=tuple(exercises), notes=str(raw.get("notes", "")))


def _numbers(raw: dict, fields: tuple[tuple[str, str], ...], defaults: object) -> dict:
    """Map camelCase numeric keys to attribute kwargs, coercing bad values."""
    return {
        attr: coerce_number(raw[key], getattr(defaults, attr)) if key in raw else getattr(defaults, attr)
        for attr, key in fields
    }


def _section(data: dict, key: str) -> dict:
    value = data.get(key, {})
    _require_mapping(value, key)
    return value


def _require_mapping(value: Any, what: str) -> None:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
