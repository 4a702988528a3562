"""Programme templates — phase/split selection, workouts, meals, video links."""

from lean90.program.meal_templates import meal_template, target_calories
from lean90.program.phases import (
    phase_for_day_index,
    split_for_day_index,
    week_number,
    weekday_split,
)
from lean90.program.video_links import video_search_url
from lean90.program.workout_templates import workout_template

__all__ = [
    "meal_template",
    "phase_for_day_index",
    "split_for_day_index",
    "target_calories",
    "video_search_url",
    "week_number",
    "weekday_split",
    "workout_template",
]
