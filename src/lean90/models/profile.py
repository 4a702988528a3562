"""User profile, tape measurements and daily targets."""

from __future__ import annotations

from dataclasses import dataclass

from lean90.models.enums import (
    DEFAULT_HEIGHT_CM,
    DEFAULT_HIP_CM,
    DEFAULT_NECK_CM,
    DEFAULT_PROFILE_NAME,
    DEFAULT_PROTEIN_GOAL_G,
    DEFAULT_SLEEP_GOAL_H,
    DEFAULT_WAIST_CM,
    DEFAULT_WATER_GOAL_L,
    DEFAULT_WEIGHT_KG,
    Sex,
)


@dataclass(frozen=True)
class Profile:
    """Who is training. One instance for the lifetime of the app."""

    name: str = DEFAULT_PROFILE_NAME
    sex: Sex = Sex.MALE
    height_cm: float = DEFAULT_HEIGHT_CM
    weight_kg: float = DEFAULT_WEIGHT_KG


@dataclass(frozen=True)
class Measurements:
    """Circumferences for the body-fat estimate. hip_cm is female-only."""

    neck_cm: float = DEFAULT_NECK_CM
    waist_cm: float = DEFAULT_WAIST_CM
    hip_cm: float = DEFAULT_HIP_CM


@dataclass(frozen=True)
class Targets:
    """User-adjustable daily goals."""

    water_goal_l: float = DEFAULT_WATER_GOAL_L
    sleep_goal_h: float = DEFAULT_SLEEP_GOAL_H
    protein_goal_g: float = DEFAULT_PROTEIN_GOAL_G
