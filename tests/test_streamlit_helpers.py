"""Tests for the Streamlit helper functions (no Streamlit runtime needed)."""

from helpers import (
    TAB_LABELS,
    TAB_ORDER,
    format_delta_kg,
    format_number,
    progress_fraction,
    progress_label,
    weekly_history_frame,
)
from lean90.models.app_state import AppState
from lean90.models.enums import Tab
from lean90.progress.weekly import program_weekly_history


class TestFormatting:
    def test_format_number(self) -> None:
        assert format_number(150.0) == "150"
        assert format_number(7.25) == "7.3"
        assert format_number(3) == "3"

    def test_format_delta(self) -> None:
        assert format_delta_kg(-0.4) == "-0.4 kg"
        assert format_delta_kg(0.6) == "+0.6 kg"
        assert format_delta_kg(0.0) == "0 kg"

    def test_progress(self) -> None:
        assert progress_label(120, 150) == "120 / 150"
        assert progress_fraction(75, 150) == 0.5
        assert progress_fraction(300, 150) == 1.0
        assert progress_fraction(10, 0) == 0.0


class TestTables:
    def test_tab_labels_cover_all_tabs(self) -> None:
        assert set(TAB_ORDER) == set(Tab)
        assert set(TAB_LABELS) == set(Tab)

    def test_weekly_history_frame(self, first_week_state: AppState) -> None:
        frame = weekly_history_frame(program_weekly_history(first_week_state))
        assert len(frame) == 13
        assert frame.iloc[0]["Avg protein (g)"] == 150.0
        assert frame.iloc[0]["Workouts"] == 1
        assert frame.iloc[1]["Workouts"] == 0
