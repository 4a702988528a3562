"""Weekly rollups over the daily log.

A week is Monday..Sunday. Averages only count dates that have recorded
metrics: a day the user never opened does not drag the protein average down.
"""

from __future__ import annotations

import math

import numpy as np

from lean90.math.calendar import add_days, week_dates
from lean90.math.numbers import round1
from lean90.models.app_state import AppState
from lean90.models.enums import DAYS_PER_WEEK, PROGRAM_DAYS
from lean90.models.weekly_summary import WeeklySummary


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return round1(float(np.mean(np.asarray(values, dtype=np.float64))))


def _is_weight(value: object) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def weekly_summary(state: AppState, reference_iso: str | None = None) -> WeeklySummary:
    """Roll up the Monday-start week containing *reference_iso*.

    Args:
        state: Current app state.
        reference_iso: Any date in the week; defaults to the selected date.

    Returns:
        WeeklySummary with workout-days done, mean protein and sleep over
        recorded dates, and the first-to-last recorded weight change (weights
        of 0 are ignored).
    """
    dates = week_dates(reference_iso or state.selected_date_iso)

    proteins: list[float] = []
    sleeps: list[float] = []
    weights: list[float] = []
    workouts_done = 0

    for iso in dates:
        metrics = state.daily.get(iso)
        if metrics is not None:
            proteins.append(metrics.protein)
            sleeps.append(metrics.sleep_h)
            # 0 means the field was cleared, as in the bodyweight chart
            if _is_weight(metrics.weight_kg):
                weights.append(float(metrics.weight_kg))

        log = state.workout_logs.get(iso)
        if log is not None and log.any_done:
            workouts_done += 1

    weight_delta = round1(weights[-1] - weights[0]) if len(weights) >= 2 else 0.0

    return WeeklySummary(
        start_iso=dates[0],
        end_iso=dates[-1],
        workouts_done=workouts_done,
        avg_protein=_mean(proteins),
        avg_sleep=_mean(sleeps),
        weight_delta=weight_delta,
        days_recorded=len(proteins),
    )


def program_weekly_history(state: AppState) -> list[WeeklySummary]:
    """One summary per calendar week touched by the 90-day programme.

    Weeks past ``date.max`` are left out.
    """
    summaries: list[WeeklySummary] = []
    seen: set[str] = set()
    for offset in range(0, PROGRAM_DAYS, DAYS_PER_WEEK):
        try:
            reference = add_days(state.start_date_iso, offset)
        except ValueError:
            return summaries
        summary = weekly_summary(state, reference)
        if summary.start_iso not in seen:
            seen.add(summary.start_iso)
            summaries.append(summary)
    try:
        last = weekly_summary(state, add_days(state.start_date_iso, PROGRAM_DAYS - 1))
    except ValueError:
        return summaries
    if last.start_iso not in seen:
        summaries.append(last)
    return summaries
