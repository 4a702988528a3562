"""Body composition from tape measurements (US Navy circumference method).

References:
    Hodgdon & Beckett (1984), Prediction of percent body fat for U.S. Navy
        men and women from body circumferences and height. Naval Health
        Research Center Report 84-11 / 84-29.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from lean90.math.numbers import clamp, round1
from lean90.models.enums import (
    BODY_FAT_MAX_PCT,
    BODY_FAT_MIN_PCT,
    CM_PER_INCH,
    LOG_ARGUMENT_FLOOR,
    NAVY_FEMALE_CIRCUMFERENCE_COEF,
    NAVY_FEMALE_CONSTANT,
    NAVY_FEMALE_HEIGHT_COEF,
    NAVY_MALE_CIRCUMFERENCE_COEF,
    NAVY_MALE_CONSTANT,
    NAVY_MALE_HEIGHT_COEF,
    Sex,
)
from lean90.models.profile import Measurements, Profile


@dataclass(frozen=True)
class BodyComposition:
    """Display-ready estimate, both values rounded to one decimal."""

    body_fat_pct: float
    lean_mass_kg: float


def _safe_log10(inches: float) -> float:
    if not math.isfinite(inches):
        inches = LOG_ARGUMENT_FLOOR
    return math.log10(max(inches, LOG_ARGUMENT_FLOOR))


def navy_body_fat(
    sex: Sex | str,
    height_cm: float,
    neck_cm: float,
    waist_cm: float,
    hip_cm: float = 0.0,
) -> float:
    """Estimate body-fat percentage.

    Male:   86.010·log10(waist − neck) − 70.041·log10(height) + 36.76
    Female: 163.205·log10(waist + hip − neck) − 97.684·log10(height) − 78.387

    All circumferences in inches. Log arguments are floored at 0.1 so a waist
    at or below the neck is a degenerate input, not an error.

    Args:
        sex: "male" or "female". Anything that is not female uses the male
            equation.
        height_cm: Standing height in cm.
        neck_cm: Neck circumference in cm.
        waist_cm: Waist circumference at the navel in cm.
        hip_cm: Hip circumference in cm (female only).

    Returns:
        Body fat percent, clamped to [2, 60]. Unrounded.
    """
    height = height_cm / CM_PER_INCH
    neck = neck_cm / CM_PER_INCH
    waist = waist_cm / CM_PER_INCH
    hip = hip_cm / CM_PER_INCH

    if sex == Sex.FEMALE:
        value = (
            NAVY_FEMALE_CIRCUMFERENCE_COEF * _safe_log10(waist + hip - neck)
            - NAVY_FEMALE_HEIGHT_COEF * _safe_log10(height)
            - NAVY_FEMALE_CONSTANT
        )
    else:
        value = (
            NAVY_MALE_CIRCUMFERENCE_COEF * _safe_log10(waist - neck)
            - NAVY_MALE_HEIGHT_COEF * _safe_log10(height)
            + NAVY_MALE_CONSTANT
        )
    return clamp(value, BODY_FAT_MIN_PCT, BODY_FAT_MAX_PCT)


def lean_mass_kg(bodyweight_kg: float, body_fat_pct: float) -> float:
    """Fat-free mass for a bodyweight and body-fat percentage. Unrounded."""
    return bodyweight_kg * (1 - body_fat_pct / 100)


def estimate_body_composition(
    profile: Profile,
    measurements: Measurements,
    bodyweight_kg: float | None = None,
) -> BodyComposition:
    """Body fat and lean mass for display.

    Lean mass uses *bodyweight_kg* (the day's logged weight) when given,
    otherwise the profile weight. It is computed from the rounded body-fat
    figure so the two displayed numbers agree.
    """
    body_fat = round1(
        navy_body_fat(
            profile.sex,
            profile.height_cm,
            measurements.neck_cm,
            measurements.waist_cm,
            measurements.hip_cm,
        )
    )
    weight = profile.weight_kg if bodyweight_kg is None else bodyweight_kg
    return BodyComposition(
        body_fat_pct=body_fat,
        lean_mass_kg=round1(lean_mass_kg(weight, body_fat)),
    )
