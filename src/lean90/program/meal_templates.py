"""Daily nutrition plan.

Only the calorie number depends on the day: the phase baseline, plus a leg-day
bonus outside Recomp. The meal list itself is the same every day.
"""

from __future__ import annotations

from lean90.models.enums import (
    DEFAULT_PROTEIN_GOAL_G,
    LEG_DAY_CALORIE_BONUS,
    RECOMP_CALORIES,
    PhaseName,
)
from lean90.models.plan import MealItem, MealPlan
from lean90.program.phases import PHASES

MEAL_ITEMS: tuple[MealItem, ...] = (
    MealItem("Breakfast", "3 whole eggs + 1 egg white, oats (60–80g), banana"),
    MealItem("Lunch (2–3 hrs pre-gym)", "200g chicken, rice, veggies, curd"),
    MealItem("Pre-workout (45–60m)", "Coffee + banana (or dates) + water"),
    MealItem("Post-workout", "Whey (25–30g protein) + 5g creatine"),
    MealItem("Dinner", "150–200g chicken/fish + rice/sweet potato + salad"),
    MealItem("Before bed", "Milk or Greek yogurt"),
)


def target_calories(phase_name: PhaseName | str, is_leg_day: bool) -> int:
    """Phase baseline, +150 kcal on leg day unless in Recomp.

    Unknown phase names get the Recomp baseline.
    """
    try:
        phase = PHASES[PhaseName(phase_name)]
    except ValueError:
        return RECOMP_CALORIES
    if is_leg_day and phase.name != PhaseName.RECOMP:
        return phase.calories + LEG_DAY_CALORIE_BONUS
    return phase.calories


def meal_template(
    phase_name: PhaseName | str,
    is_leg_day: bool,
    protein_goal_g: float = DEFAULT_PROTEIN_GOAL_G,
) -> MealPlan:
    """Nutrition plan for a day.

    Args:
        phase_name: Current training phase.
        is_leg_day: Whether today's split is legs.
        protein_goal_g: Protein target; the user's Targets override the
            programme default of 150 g.
    """
    return MealPlan(
        calories=target_calories(phase_name, is_leg_day),
        protein_target=protein_goal_g,
        items=MEAL_ITEMS,
    )
