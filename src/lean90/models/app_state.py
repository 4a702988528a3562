"""The single application state container.

Frozen: reducers in ``lean90.log_store`` return a new AppState per change.
The two dicts are never mutated after construction; reducers copy them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lean90.models.daily_log import DailyMetrics, WorkoutLog
from lean90.models.enums import DEFAULT_START_DATE_ISO, Tab
from lean90.models.profile import Measurements, Profile, Targets


@dataclass(frozen=True)
class AppState:
    """Everything that is persisted, keyed by ISO date where per-day."""

    selected_date_iso: str
    start_date_iso: str = DEFAULT_START_DATE_ISO
    profile: Profile = field(default_factory=Profile)
    measurements: Measurements = field(default_factory=Measurements)
    targets: Targets = field(default_factory=Targets)
    daily: dict[str, DailyMetrics] = field(default_factory=dict)
    workout_logs: dict[str, WorkoutLog] = field(default_factory=dict)
    tab: Tab = Tab.WORKOUT


def default_state(today_iso: str, start_date_iso: str = DEFAULT_START_DATE_ISO) -> AppState:
    """Fresh state: fixed profile/measurements/targets, empty logs."""
    return AppState(selected_date_iso=today_iso, start_date_iso=start_date_iso)
