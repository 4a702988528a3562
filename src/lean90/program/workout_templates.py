"""Workout templates — the prescribed session for each split key and phase.

Set/rep targets come from three bias tiers:

    Foundation   strength bias   main 4×6     aux 3×8–10   iso 3×12
    Hypertrophy  volume bias     main 4×8–10  aux 4×10–12  iso 4×12–15
    Recomp       default         main 3×8–10  aux 3×10–12  iso 3×12–15

Recomp pairs some accessories as supersets. The tag is part of the exercise
name only and has no effect on anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from lean90.models.enums import PhaseName, SplitKey
from lean90.models.plan import ExerciseBlock, WorkoutTemplate
from lean90.program.video_links import video_search_url

SUPERSET_TAG = " (superset)"


@dataclass(frozen=True)
class RepScheme:
    """Set/rep targets for the three exercise tiers in one phase."""

    main: str
    aux: str
    iso: str


REP_SCHEMES: dict[PhaseName, RepScheme] = {
    PhaseName.FOUNDATION: RepScheme(main="4×6", aux="3×8–10", iso="3×12"),
    PhaseName.HYPERTROPHY: RepScheme(main="4×8–10", aux="4×10–12", iso="4×12–15"),
    PhaseName.RECOMP: RepScheme(main="3×8–10", aux="3×10–12", iso="3×12–15"),
}

COMMON_NOTES: tuple[str, ...] = (
    "Warm-up: 5–7 min incline walk + 2 warm-up sets before first lift.",
    "Main lift progression: if all reps hit with clean form → add +2.5kg next week (+1.25kg if needed).",
    "Accessories: add reps first, then weight.",
    "Rest: main lifts 2–3 min, accessories 60–90 sec.",
    "Finish: 3–5 min stretch for trained muscles.",
)

LEG_DAY_NOTE = "Leg day: bump carbs by +40–60g (extra rice/sweet potato)."
CONDITIONING_NOTES = ("Keep this easy-moderate. You should finish fresher, not destroyed.",)
REST_NOTES = ("Recovery builds muscle. Sleep 7.5–9 hrs.",)


def _block(name: str, sets: str) -> ExerciseBlock:
    return ExerciseBlock(name=name, sets=sets, video_url=video_search_url(name))


def _chest_tri(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    return WorkoutTemplate(
        title="Chest + Triceps",
        blocks=(
            _block("Barbell Bench Press", reps.main),
            _block("Incline Dumbbell Press", reps.aux),
            _block("Machine Chest Press", reps.aux),
            _block("Cable Fly", reps.iso),
            _block(f"Tricep Pushdown{tag}", reps.iso),
            _block(f"Overhead Tricep Extension{tag}", reps.iso),
        ),
        notes=COMMON_NOTES,
    )


def _back_bi(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    pull_up_sets = "4×6–8" if phase == PhaseName.FOUNDATION else "4×8–10"
    return WorkoutTemplate(
        title="Back + Biceps",
        blocks=(
            _block("Pull-ups (assisted if needed)", pull_up_sets),
            _block("Barbell Row", reps.main),
            _block("Lat Pulldown", reps.aux),
            _block("Seated Cable Row", reps.aux),
            _block(f"Hammer Curl{tag}", reps.iso),
            _block(f"Barbell Curl{tag}", reps.iso),
        ),
        notes=COMMON_NOTES,
    )


def _legs(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    volume = phase == PhaseName.HYPERTROPHY
    return WorkoutTemplate(
        title="Legs",
        blocks=(
            _block("Back Squat", reps.main),
            _block("Romanian Deadlift", reps.aux),
            _block("Leg Press", "4×12" if volume else "3×12"),
            _block("Walking Lunges", "3×20 steps"),
            _block("Leg Curl", reps.iso),
            _block("Standing Calf Raise", "5×12–15" if volume else "4×15"),
        ),
        notes=COMMON_NOTES + (LEG_DAY_NOTE,),
    )


def _shoulders_abs(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    lateral_sets = "5×12–15" if phase == PhaseName.HYPERTROPHY else "4×12–15"
    return WorkoutTemplate(
        title="Shoulders + Abs",
        blocks=(
            _block("Overhead Press", reps.main),
            _block("Lateral Raise", lateral_sets),
            _block("Rear Delt Fly", reps.iso),
            _block("Face Pull", "3×15–20"),
            _block(f"Hanging Leg Raise{tag}", "3×12–15"),
            _block(f"Plank{tag}", "3×45–60s"),
        ),
        notes=COMMON_NOTES,
    )


def _upper_strength(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    deadlift_sets = {
        PhaseName.FOUNDATION: "4×5",
        PhaseName.HYPERTROPHY: "3×5–6",
    }.get(phase, "3×5")
    incline_sets = "4×6" if phase == PhaseName.FOUNDATION else "3×8–10"
    return WorkoutTemplate(
        title="Upper Strength + Arms",
        blocks=(
            _block("Deadlift (or Trap-bar)", deadlift_sets),
            _block("Incline Bench Press", incline_sets),
            _block("Weighted Pull-up / Pulldown", "3×6–8"),
            _block(f"Preacher Curl{tag}", reps.iso),
            _block(f"Close-grip Bench / Dips{tag}", reps.aux),
            _block(f"Lateral Raise Burnout{tag}", "2×AMRAP"),
        ),
        notes=COMMON_NOTES,
    )


def _conditioning(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    cardio = "25–30 min" if phase == PhaseName.RECOMP else "20 min"
    return WorkoutTemplate(
        title="Conditioning + Core",
        blocks=(
            _block("Incline Walk or Bike", cardio),
            _block("Cable Crunch", "3×12–15"),
            _block("Russian Twist", "3×20"),
            _block("Back Extension", "3×12"),
            _block("Mobility (hips/shoulders)", "10 min"),
        ),
        notes=CONDITIONING_NOTES,
    )


def _rest(phase: PhaseName, reps: RepScheme, tag: str) -> WorkoutTemplate:
    return WorkoutTemplate(
        title="Rest Day",
        blocks=(
            _block("Steps", "7k–10k"),
            _block("Light stretch", "10 min"),
            _block("Optional easy walk", "20–30 min"),
        ),
        notes=REST_NOTES,
    )


_TemplateBuilder = Callable[[PhaseName, RepScheme, str], WorkoutTemplate]

WORKOUT_TEMPLATES: dict[SplitKey, _TemplateBuilder] = {
    SplitKey.CHEST_TRI: _chest_tri,
    SplitKey.BACK_BI: _back_bi,
    SplitKey.LEGS: _legs,
    SplitKey.SHOULDERS_ABS: _shoulders_abs,
    SplitKey.UPPER_STRENGTH: _upper_strength,
    SplitKey.CONDITIONING: _conditioning,
    SplitKey.REST: _rest,
}


def workout_template(split_key: SplitKey | str, phase_name: PhaseName | str) -> WorkoutTemplate:
    """Look up the prescribed session for a split key in a phase.

    Args:
        split_key: One of the seven split keys. Unrecognized keys fall back
            to the rest-day template.
        phase_name: Foundation, Hypertrophy or Recomp. Unrecognized names get
            the default (Recomp) rep tier without superset tags.

    Returns:
        The WorkoutTemplate for that day.
    """
    try:
        builder = WORKOUT_TEMPLATES[SplitKey(split_key)]
    except ValueError:
        builder = _rest

    try:
        phase = PhaseName(phase_name)
    except ValueError:
        phase = None

    reps = REP_SCHEMES.get(phase, REP_SCHEMES[PhaseName.RECOMP])
    tag = SUPERSET_TAG if phase == PhaseName.RECOMP else ""
    return builder(phase, reps, tag)
