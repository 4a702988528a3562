"""Phase and split selection from the programme day index.

The 90-day block is three phases of whole weeks:

    weeks 1-4   Foundation   (2700 kcal)
    weeks 5-8   Hypertrophy  (2800 kcal)
    weeks 9-13  Recomp       (2600 kcal)

The weekday split is a fixed 7-entry table. Both lookups are pure functions
of the day index; nothing is stored.
"""

from __future__ import annotations

from lean90.math.calendar import day_of_week, in_program
from lean90.math.numbers import clamp
from lean90.models.enums import (
    DAYS_PER_WEEK,
    FOUNDATION_CALORIES,
    FOUNDATION_LAST_WEEK,
    HYPERTROPHY_CALORIES,
    HYPERTROPHY_LAST_WEEK,
    PROGRAM_DAYS,
    RECOMP_CALORIES,
    PhaseName,
    SplitKey,
)
from lean90.models.plan import Phase, SplitDay

FOUNDATION = Phase(name=PhaseName.FOUNDATION, calories=FOUNDATION_CALORIES)
HYPERTROPHY = Phase(name=PhaseName.HYPERTROPHY, calories=HYPERTROPHY_CALORIES)
RECOMP = Phase(name=PhaseName.RECOMP, calories=RECOMP_CALORIES)

PHASES: dict[PhaseName, Phase] = {
    PhaseName.FOUNDATION: FOUNDATION,
    PhaseName.HYPERTROPHY: HYPERTROPHY,
    PhaseName.RECOMP: RECOMP,
}

# Indexed by programme weekday; 0 is the start date's weekday (Monday).
WEEK_SPLIT: tuple[SplitDay, ...] = (
    SplitDay(SplitKey.CHEST_TRI, "Chest + Triceps"),
    SplitDay(SplitKey.BACK_BI, "Back + Biceps"),
    SplitDay(SplitKey.LEGS, "Legs"),
    SplitDay(SplitKey.SHOULDERS_ABS, "Shoulders + Abs"),
    SplitDay(SplitKey.UPPER_STRENGTH, "Upper Strength + Arms"),
    SplitDay(SplitKey.CONDITIONING, "Conditioning + Core"),
    SplitDay(SplitKey.REST, "Rest"),
)

REST_DAY = WEEK_SPLIT[-1]


def week_number(day_index: int) -> int:
    """1-indexed programme week, after clamping to the 90-day window."""
    clamped = int(clamp(day_index, 0, PROGRAM_DAYS - 1))
    return clamped // DAYS_PER_WEEK + 1


def phase_for_week(week: int) -> Phase:
    """Phase for a 1-indexed programme week."""
    if week <= FOUNDATION_LAST_WEEK:
        return FOUNDATION
    if week <= HYPERTROPHY_LAST_WEEK:
        return HYPERTROPHY
    return RECOMP


def phase_for_day_index(day_index: int) -> Phase:
    """Phase for a day index. Dates outside the window reuse the boundary phase."""
    return phase_for_week(week_number(day_index))


def weekday_split(day_index: int) -> SplitDay:
    """Raw weekday table lookup (period 7), ignoring the programme window."""
    return WEEK_SPLIT[day_of_week(day_index)]


def split_for_day_index(day_index: int) -> SplitDay:
    """Split for a day index; anything outside [0, 90) is a rest day."""
    if not in_program(day_index):
        return REST_DAY
    return weekday_split(day_index)


def phase_by_name(name: PhaseName | str) -> Phase:
    """Look up a phase by name.

    Raises:
        ValueError: If *name* is not a phase name.
    """
    return PHASES[PhaseName(name)]
