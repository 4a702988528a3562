"""Enumerations and programme constants for the Lean90 engine.

The programme is a fixed 90-day block split into three phases. Calorie
baselines and rep schemes are the programme's own numbers, not derived from
any formula.
"""

from enum import Enum


class Sex(str, Enum):
    """Biological sex as used by the US Navy body-fat equations."""

    MALE = "male"
    FEMALE = "female"


class PhaseName(str, Enum):
    """Training phases of the 90-day programme, in chronological order."""

    FOUNDATION = "Foundation"
    HYPERTROPHY = "Hypertrophy"
    RECOMP = "Recomp"


class SplitKey(str, Enum):
    """Weekday muscle-group focus."""

    CHEST_TRI = "chest_tri"
    BACK_BI = "back_bi"
    LEGS = "legs"
    SHOULDERS_ABS = "shoulders_abs"
    UPPER_STRENGTH = "upper_strength"
    CONDITIONING = "conditioning"
    REST = "rest"


class Tab(str, Enum):
    """Top-level UI tabs."""

    WORKOUT = "workout"
    NUTRITION = "nutrition"
    PROGRESS = "progress"
    SETTINGS = "settings"


# ---------------------------------------------------------------------------
# Programme constants
# ---------------------------------------------------------------------------

PROGRAM_DAYS = 90
DAYS_PER_WEEK = 7

# Phase boundaries, 1-indexed inclusive last week of each phase
FOUNDATION_LAST_WEEK = 4
HYPERTROPHY_LAST_WEEK = 8

# Daily calorie baselines (kcal)
FOUNDATION_CALORIES = 2700
HYPERTROPHY_CALORIES = 2800
RECOMP_CALORIES = 2600
LEG_DAY_CALORIE_BONUS = 150

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_START_DATE_ISO = "2026-02-16"  # a Monday

DEFAULT_PROTEIN_GOAL_G = 150.0
DEFAULT_WATER_GOAL_L = 3.0
DEFAULT_SLEEP_GOAL_H = 7.5

DEFAULT_PROFILE_NAME = "Daljeet"
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_NECK_CM = 38.0
DEFAULT_WAIST_CM = 86.0
DEFAULT_HIP_CM = 95.0

# ---------------------------------------------------------------------------
# Body composition: US Navy circumference method, Hodgdon & Beckett (1984)
# ---------------------------------------------------------------------------

CM_PER_INCH = 2.54
BODY_FAT_MIN_PCT = 2.0
BODY_FAT_MAX_PCT = 60.0
LOG_ARGUMENT_FLOOR = 0.1  # inches; keeps log10 defined for waist <= neck

NAVY_MALE_CIRCUMFERENCE_COEF = 86.010
NAVY_MALE_HEIGHT_COEF = 70.041
NAVY_MALE_CONSTANT = 36.76

NAVY_FEMALE_CIRCUMFERENCE_COEF = 163.205
NAVY_FEMALE_HEIGHT_COEF = 97.684
NAVY_FEMALE_CONSTANT = 78.387

# ---------------------------------------------------------------------------
# Outbound links
# ---------------------------------------------------------------------------

VIDEO_SEARCH_BASE_URL = "https://www.youtube.com/results?search_query="
VIDEO_SEARCH_SUFFIX = "proper form"
