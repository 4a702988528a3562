"""Weekly rollup model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeeklySummary:
    """7-day rollup for a Monday-start calendar week."""

    start_iso: str
    end_iso: str
    workouts_done: int = 0  # 0-7 dates with at least one exercise done
    avg_protein: float = 0.0  # over dates with recorded metrics only
    avg_sleep: float = 0.0
    weight_delta: float = 0.0  # last - first recorded weight
    days_recorded: int = 0

    @property
    def label(self) -> str:
        return f"{self.start_iso} → {self.end_iso}"
