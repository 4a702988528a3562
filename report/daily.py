"""Daily report — prints the programme plan and log for one date.

Usage:
    python -m report.daily                   # today
    python -m report.daily --date 2026-02-18
    python -m report.daily --week            # add the weekly rollup
    python -m report.daily --json            # machine-readable output

Reads the same JSON store as the Streamlit app. Nothing is written back.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from lean90 import config, log_store
from lean90.engine import Dashboard, ProgramEngine
from lean90.math.calendar import parse_iso_date, today_iso
from state_store import JsonStateStore

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _iso_date(value: str) -> str:
    """argparse type: validate an ISO date and return it unchanged."""
    try:
        parse_iso_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def build_report(view: Dashboard, include_week: bool = False) -> dict:
    """Flatten a dashboard into a JSON-compatible dict."""
    plan = view.plan
    report = {
        "date": plan.date_iso,
        "title": plan.title,
        "inProgram": plan.in_range,
        "week": plan.week,
        "phase": plan.phase.name.value,
        "split": plan.split.title,
        "workout": {
            "title": plan.workout.title,
            "exercises": [
                {
                    "name": ex.name,
                    "sets": ex.sets,
                    "done": ex.done,
                    "weight": ex.weight.raw,
                    "reps": ex.reps.raw,
                }
                for ex in view.log.exercises
            ],
            "notes": list(plan.workout.notes),
        },
        "nutrition": {
            "calories": plan.meals.calories,
            "proteinTarget": plan.meals.protein_target,
            "meals": [{"title": m.title, "description": m.description} for m in plan.meals.items],
        },
        "metrics": {
            "recorded": view.has_metrics,
            "calories": view.metrics.calories,
            "protein": view.metrics.protein,
            "waterL": view.metrics.water_l,
            "sleepH": view.metrics.sleep_h,
            "weightKg": view.metrics.weight_kg,
        },
        "bodyComposition": {
            "bodyFatPct": view.body_composition.body_fat_pct,
            "leanMassKg": view.body_composition.lean_mass_kg,
        },
    }
    if include_week:
        week = view.week
        report["weekSummary"] = {
            "start": week.start_iso,
            "end": week.end_iso,
            "workoutsDone": week.workouts_done,
            "avgProtein": week.avg_protein,
            "avgSleep": week.avg_sleep,
            "weightDelta": week.weight_delta,
        }
    return report


def format_report(view: Dashboard, include_week: bool = False) -> str:
    """Plain-text rendering for the terminal."""
    plan = view.plan
    lines = [
        f"{plan.date_iso}  {plan.title}",
        f"Phase: {plan.phase.name.value} | Week {plan.week} | Focus: {plan.split.title}",
        "",
        plan.workout.title,
    ]
    for ex in view.log.exercises:
        mark = "x" if ex.done else " "
        lift = ""
        if ex.weight.raw or ex.reps.raw:
            lift = f"  {ex.weight.raw or '-'} kg x {ex.reps.raw or '-'}"
        lines.append(f"  [{mark}] {ex.name} ({ex.sets}){lift}")
    lines.append("")
    lines.append(
        f"Calories: {plan.meals.calories} kcal | Protein: {plan.meals.protein_target:g} g"
    )
    for item in plan.meals.items:
        lines.append(f"  {item.title}: {item.description}")
    comp = view.body_composition
    lines.append(f"Body fat: {comp.body_fat_pct}% | Lean mass: {comp.lean_mass_kg} kg")

    if include_week:
        week = view.week
        lines += [
            "",
            f"Week {week.label}",
            f"  Workout days: {week.workouts_done} / 7",
            f"  Avg protein: {week.avg_protein:g} g | Avg sleep: {week.avg_sleep:g} h",
            f"  Weight change: {week.weight_delta:+g} kg",
        ]
    return "\n".join(lines)


def run(date_iso: str, include_week: bool, as_json: bool, store: JsonStateStore) -> str:
    """Load the stored state, derive the view for *date_iso* and render it."""
    state = store.load_or_default(
        today_iso(), config.START_DATE_ISO, reseed_empty=config.RESEED_EMPTY
    )
    state = log_store.change_selected_date(state, date_iso, reseed_empty=config.RESEED_EMPTY)
    view = ProgramEngine().dashboard(state)
    logger.debug("Rendering %s (%s)", date_iso, view.plan.title)
    if as_json:
        return json.dumps(build_report(view, include_week), indent=2, ensure_ascii=False)
    return format_report(view, include_week)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lean90 daily report")
    parser.add_argument(
        "--date", type=_iso_date, default=None, help="ISO date (default: today)"
    )
    parser.add_argument("--week", action="store_true", help="Include the weekly rollup")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    args = parser.parse_args(argv)

    store = JsonStateStore(data_dir=config.DATA_DIR, key=config.STORAGE_KEY)
    print(run(args.date or today_iso(), args.week, args.json, store))
    return 0


if __name__ == "__main__":
    sys.exit(main())
