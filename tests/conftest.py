"""Shared test fixtures: app states at known dates, deterministic exercise ids."""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from lean90 import log_store
from lean90.models.app_state import AppState, default_state
from lean90.models.daily_log import DailyMetrics

START = "2026-02-16"  # Monday, day 0


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Sequential exercise ids: ex-1, ex-2, ..."""
    counter = itertools.count(1)
    return lambda: f"ex-{next(counter)}"


@pytest.fixture
def fresh_state() -> AppState:
    """Defaults on the start date, nothing seeded yet."""
    return default_state(START, START)


@pytest.fixture
def seeded_state(fresh_state: AppState, id_factory: Callable[[], str]) -> AppState:
    """Start date selected with the Chest + Triceps log seeded (6 exercises)."""
    return log_store.ensure_workout_log(fresh_state, id_factory=id_factory)


@pytest.fixture
def first_week_state(id_factory: Callable[[], str]) -> AppState:
    """Week of 2026-02-16 with metrics on three days and one completed session.

    Mon: protein 100, sleep 7.0, 70.0 kg, bench done
    Wed: protein 200, sleep 8.0, 69.6 kg
    Fri: protein 150, sleep 6.0, 69.4 kg
    """
    state = default_state(START, START)
    state = log_store.ensure_workout_log(state, id_factory=id_factory)
    first = state.workout_logs[START].exercises[0]
    state = log_store.update_exercise(state, first.id, done=True, weight="60", reps="6")
    daily = {
        "2026-02-16": DailyMetrics(protein=100.0, sleep_h=7.0, weight_kg=70.0),
        "2026-02-18": DailyMetrics(protein=200.0, sleep_h=8.0, weight_kg=69.6),
        "2026-02-20": DailyMetrics(protein=150.0, sleep_h=6.0, weight_kg=69.4),
    }
    return AppState(
        selected_date_iso=START,
        start_date_iso=START,
        daily=daily,
        workout_logs=state.workout_logs,
    )
