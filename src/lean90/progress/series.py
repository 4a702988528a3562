"""Chart series for the Progress tab, as pandas objects.

The UI plots these directly; the index is always a sorted DatetimeIndex.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from lean90.models.app_state import AppState

METRIC_COLUMNS = ("calories", "protein", "water_l", "sleep_h", "weight_kg")


def metrics_frame(state: AppState) -> pd.DataFrame:
    """All recorded daily metrics, one row per date."""
    if not state.daily:
        return pd.DataFrame(
            columns=list(METRIC_COLUMNS),
            index=pd.DatetimeIndex([], name="date"),
            dtype=np.float64,
        )
    rows = {
        iso: [getattr(metrics, column) for column in METRIC_COLUMNS]
        for iso, metrics in state.daily.items()
    }
    frame = pd.DataFrame.from_dict(rows, orient="index", columns=list(METRIC_COLUMNS))
    frame.index = pd.to_datetime(frame.index)
    frame.index.name = "date"
    return frame.sort_index().astype(np.float64)


def bodyweight_series(state: AppState, window: int = 7) -> pd.DataFrame:
    """Recorded morning weights with a rolling mean over *window* entries.

    A weight of 0 means the field was cleared and is treated as missing.
    """
    weights = metrics_frame(state)["weight_kg"]
    weights = weights[weights > 0]
    return pd.DataFrame(
        {
            "weight_kg": weights,
            "rolling_kg": weights.rolling(window=window, min_periods=1).mean().round(1),
        }
    )


def lift_progress(state: AppState, exercise_name: str) -> pd.Series:
    """Heaviest numeric weight logged per date for one exercise name.

    Entries whose weight is empty or not a number contribute no point.
    """
    points: dict[str, float] = {}
    for iso, log in state.workout_logs.items():
        for exercise in log.exercises:
            if exercise.name != exercise_name:
                continue
            weight = exercise.weight.number
            if weight is None:
                continue
            points[iso] = max(weight, points.get(iso, weight))

    series = pd.Series(points, dtype=np.float64, name=exercise_name)
    series.index = pd.to_datetime(series.index)
    series.index.name = "date"
    return series.sort_index()


def logged_exercise_names(state: AppState) -> list[str]:
    """Exercise names with at least one numeric weight, for the chart picker."""
    names = {
        exercise.name
        for log in state.workout_logs.values()
        for exercise in log.exercises
        if exercise.weight.number is not None
    }
    return sorted(names)
