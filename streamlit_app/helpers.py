"""Utility helpers bridging the Streamlit UI and the Lean90 engine.

Pure functions for formatting, progress bars and table construction, plus the
store factory.
"""

from __future__ import annotations

import pandas as pd

from lean90 import config
from lean90.math.numbers import clamp, round1
from lean90.models.enums import PhaseName, SplitKey, Tab
from lean90.models.weekly_summary import WeeklySummary
from state_store import JsonStateStore

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """One decimal, dropping a trailing .0. e.g. 150.0 -> '150', 7.25 -> '7.3'."""
    rounded = round1(value)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"


def format_delta_kg(delta: float) -> str:
    """Signed weight change. e.g. -0.4 -> '-0.4 kg', 0.6 -> '+0.6 kg'."""
    if delta == 0:
        return "0 kg"
    sign = "+" if delta > 0 else "-"
    return f"{sign}{format_number(abs(delta))} kg"


def progress_label(value: float, target: float) -> str:
    """'value / target' with one decimal each."""
    return f"{format_number(value)} / {format_number(target)}"


def progress_fraction(value: float, target: float) -> float:
    """Fraction for st.progress, 0.0-1.0. A non-positive target shows empty."""
    if target <= 0:
        return 0.0
    return clamp(value / target, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Labels and color maps
# ---------------------------------------------------------------------------

TAB_ORDER: tuple[Tab, ...] = (Tab.WORKOUT, Tab.NUTRITION, Tab.PROGRESS, Tab.SETTINGS)

TAB_LABELS: dict[Tab, str] = {
    Tab.WORKOUT: "Workout",
    Tab.NUTRITION: "Nutrition",
    Tab.PROGRESS: "Progress",
    Tab.SETTINGS: "Settings",
}

PHASE_COLORS: dict[PhaseName, str] = {
    PhaseName.FOUNDATION: "#4A90D9",    # blue
    PhaseName.HYPERTROPHY: "#E67E22",   # orange
    PhaseName.RECOMP: "#2ECC71",        # green
}

SPLIT_ICONS: dict[SplitKey, str] = {
    SplitKey.CHEST_TRI: "🏋️",
    SplitKey.BACK_BI: "💪",
    SplitKey.LEGS: "🦵",
    SplitKey.SHOULDERS_ABS: "🎯",
    SplitKey.UPPER_STRENGTH: "⚡",
    SplitKey.CONDITIONING: "🚴",
    SplitKey.REST: "😴",
}


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def weekly_history_frame(summaries: list[WeeklySummary]) -> pd.DataFrame:
    """Weekly summaries as a table for st.dataframe."""
    return pd.DataFrame(
        [
            {
                "Week": i,
                "Dates": s.label,
                "Workouts": s.workouts_done,
                "Avg protein (g)": s.avg_protein,
                "Avg sleep (h)": s.avg_sleep,
                "Weight Δ (kg)": s.weight_delta,
            }
            for i, s in enumerate(summaries, start=1)
        ]
    )


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


def get_store() -> JsonStateStore:
    """State store configured from the environment."""
    return JsonStateStore(data_dir=config.DATA_DIR, key=config.STORAGE_KEY)
