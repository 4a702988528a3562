"""Lean90 — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

State lives in ``st.session_state["state"]`` and is saved to the JSON store
after every change.
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from lean90 import config, log_store
from lean90.engine import ProgramEngine
from lean90.math.calendar import format_iso_date, parse_iso_date, today_iso
from lean90.models.app_state import AppState
from lean90.models.enums import Sex, Tab
from lean90.progress.series import (
    bodyweight_series,
    lift_progress,
    logged_exercise_names,
    metrics_frame,
)
from lean90.progress.weekly import program_weekly_history

from helpers import (
    PHASE_COLORS,
    SPLIT_ICONS,
    TAB_LABELS,
    TAB_ORDER,
    format_delta_kg,
    format_number,
    get_store,
    progress_fraction,
    progress_label,
    weekly_history_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Lean90",
    page_icon="💪",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached resources and state plumbing
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> ProgramEngine:
    return ProgramEngine()


store = get_store()
engine = get_engine()


def _state() -> AppState:
    return st.session_state["state"]


def _commit(new_state: AppState) -> None:
    """Replace the session state and persist it (best effort)."""
    if new_state is _state():
        return
    st.session_state["state"] = new_state
    store.save(new_state)


def _reduce(reducer, *args, **kwargs) -> None:
    """Apply a log_store reducer to the current state and commit the result."""
    _commit(reducer(_state(), *args, **kwargs))


def _bump_widget_version() -> None:
    """Increment widget version counter to force Streamlit to recreate widgets.

    Streamlit caches widget values by key. After a reset the state changes
    under the widgets, which would otherwise keep showing their old values.
    """
    st.session_state["_wv"] = st.session_state.get("_wv", 0) + 1


def _wk(name: str) -> str:
    """Return a versioned widget key like ``set_name_v0``."""
    v = st.session_state.get("_wv", 0)
    return f"{name}_v{v}"


if "state" not in st.session_state:
    initial = store.load_or_default(
        today_iso(), config.START_DATE_ISO, reseed_empty=config.RESEED_EMPTY
    )
    # A restored record may point at a date whose log was emptied
    st.session_state["state"] = log_store.ensure_workout_log(
        initial, reseed_empty=config.RESEED_EMPTY
    )


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------


def _on_step(delta: int) -> None:
    _reduce(log_store.step_selected_date, delta, reseed_empty=config.RESEED_EMPTY)


def _on_pick_date(key: str) -> None:
    picked: date = st.session_state[key]
    _reduce(
        log_store.change_selected_date,
        format_iso_date(picked),
        reseed_empty=config.RESEED_EMPTY,
    )


def _on_tab(key: str) -> None:
    _reduce(log_store.set_tab, st.session_state[key])


def _on_field(reducer, field: str, key: str) -> None:
    """Generic single-field form callback (metrics and settings)."""
    _reduce(reducer, **{field: st.session_state[key]})


def _on_exercise(exercise_id: str, field: str, key: str) -> None:
    _reduce(log_store.update_exercise, exercise_id, **{field: st.session_state[key]})


def _on_remove(exercise_id: str) -> None:
    _reduce(log_store.remove_exercise, exercise_id)


def _on_add(name_key: str, sets_key: str) -> None:
    _reduce(
        log_store.add_exercise,
        st.session_state.get(name_key, ""),
        st.session_state.get(sets_key, ""),
    )
    st.session_state[name_key] = ""
    st.session_state[sets_key] = ""


def _on_log_notes(key: str) -> None:
    _reduce(log_store.update_workout_notes, st.session_state[key])


def _on_reset() -> None:
    fresh = store.reset(today_iso(), config.START_DATE_ISO, reseed_empty=config.RESEED_EMPTY)
    st.session_state["state"] = fresh
    store.save(fresh)
    _bump_widget_version()


# ---------------------------------------------------------------------------
# Header: date stepper and tab bar
# ---------------------------------------------------------------------------

state = _state()
view = engine.dashboard(state)
plan = view.plan
iso = state.selected_date_iso

st.title("Lean90")
st.caption("90 days: strength, hypertrophy, recomp")

prev_col, mid_col, next_col = st.columns([1, 4, 1])
with prev_col:
    st.button("◀", on_click=_on_step, args=(-1,), use_container_width=True)
with mid_col:
    st.subheader(plan.title)
    picker_key = _wk(f"date_{iso}")
    st.date_input(
        "Date",
        value=parse_iso_date(iso),
        key=picker_key,
        on_change=_on_pick_date,
        args=(picker_key,),
        label_visibility="collapsed",
    )
    phase_color = PHASE_COLORS.get(plan.phase.name, "#CCCCCC")
    st.markdown(
        f'Phase: <span style="color:{phase_color};font-weight:bold;">'
        f"{plan.phase.name.value}</span> • Week {plan.week} • Focus: "
        f"<b>{SPLIT_ICONS.get(plan.split.key, '')} {plan.split.title}</b>",
        unsafe_allow_html=True,
    )
with next_col:
    st.button("▶", on_click=_on_step, args=(1,), use_container_width=True)

tab_key = _wk("tab")
current_tab = Tab(
    st.radio(
        "Section",
        [t.value for t in TAB_ORDER],
        index=TAB_ORDER.index(Tab(state.tab)),
        format_func=lambda value: TAB_LABELS[Tab(value)],
        horizontal=True,
        key=tab_key,
        on_change=_on_tab,
        args=(tab_key,),
        label_visibility="collapsed",
    )
)
st.divider()

# ---------------------------------------------------------------------------
# Workout
# ---------------------------------------------------------------------------

if current_tab == Tab.WORKOUT:
    st.header(plan.workout.title)
    log = view.log
    st.progress(
        progress_fraction(log.completed_count, len(log.exercises)),
        text=f"{log.completed_count} / {len(log.exercises)} done",
    )

    for ex in log.exercises:
        prefix = _wk(f"{iso}_{ex.id}")
        with st.container(border=True):
            c_done, c_name, c_weight, c_reps, c_link, c_del = st.columns([1, 4, 2, 2, 1, 1])
            c_done.checkbox(
                "Done", value=ex.done, key=f"{prefix}_done",
                on_change=_on_exercise, args=(ex.id, "done", f"{prefix}_done"),
                label_visibility="collapsed",
            )
            c_name.markdown(f"**{ex.name}**  \n{ex.sets}")
            c_weight.text_input(
                "Weight (kg)", value=ex.weight.raw, key=f"{prefix}_weight",
                on_change=_on_exercise, args=(ex.id, "weight", f"{prefix}_weight"),
            )
            c_reps.text_input(
                "Reps", value=ex.reps.raw, key=f"{prefix}_reps",
                on_change=_on_exercise, args=(ex.id, "reps", f"{prefix}_reps"),
            )
            if ex.video_url:
                c_link.link_button("▶ Form", ex.video_url)
            c_del.button("✕", key=f"{prefix}_remove", on_click=_on_remove, args=(ex.id,))
            st.text_input(
                "Notes", value=ex.notes, key=f"{prefix}_notes",
                on_change=_on_exercise, args=(ex.id, "notes", f"{prefix}_notes"),
                label_visibility="collapsed", placeholder="Notes",
            )

    with st.expander("Add exercise"):
        name_key, sets_key = _wk(f"{iso}_add_name"), _wk(f"{iso}_add_sets")
        a_name, a_sets, a_btn = st.columns([4, 2, 1])
        a_name.text_input("Exercise", key=name_key)
        a_sets.text_input("Sets", key=sets_key, placeholder="3×10")
        a_btn.button("Add", on_click=_on_add, args=(name_key, sets_key))

    with st.expander("Session notes"):
        notes_key = _wk(f"{iso}_log_notes")
        st.text_area(
            "Session notes", value=log.notes, key=notes_key,
            on_change=_on_log_notes, args=(notes_key,),
            label_visibility="collapsed",
        )

    st.subheader("Coaching notes")
    for note in plan.workout.notes:
        st.markdown(f"• {note}")

# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------

elif current_tab == Tab.NUTRITION:
    meals = plan.meals
    metrics = view.metrics
    targets = state.targets

    n1, n2, n3, n4 = st.columns(4)
    n1.metric("Target calories", f"{meals.calories} kcal")
    n2.metric("Protein target", f"{format_number(meals.protein_target)} g")
    n3.metric("Est. body fat", f"{view.body_composition.body_fat_pct}%")
    n4.metric("Est. lean mass", f"{view.body_composition.lean_mass_kg} kg")

    st.subheader("Daily tracker")
    fields = (
        ("calories", "Calories eaten", 50.0),
        ("protein", "Protein (g)", 5.0),
        ("water_l", "Water (L)", 0.1),
        ("sleep_h", "Sleep (hours)", 0.1),
        ("weight_kg", "Morning weight (kg)", 0.1),
    )
    for col, (field, label, step) in zip(st.columns(len(fields)), fields):
        key = _wk(f"{iso}_{field}")
        col.number_input(
            label, min_value=0.0, value=float(getattr(metrics, field)), step=step,
            key=key, on_change=_on_field,
            args=(log_store.update_daily_metrics, field, key),
        )

    for label, value, target in (
        ("Protein", metrics.protein, meals.protein_target),
        (f"Water (goal {format_number(targets.water_goal_l)}L)", metrics.water_l, targets.water_goal_l),
        (f"Sleep (goal {format_number(targets.sleep_goal_h)}h)", metrics.sleep_h, targets.sleep_goal_h),
    ):
        st.progress(
            progress_fraction(value, target),
            text=f"{label}: {progress_label(value, target)}",
        )

    st.subheader("Meals")
    for item in meals.items:
        st.markdown(f"**{item.title}** — {item.description}")

# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------

elif current_tab == Tab.PROGRESS:
    week = view.week
    st.subheader(f"This week ({week.label})")
    w1, w2, w3, w4 = st.columns(4)
    w1.metric("Workout days", f"{week.workouts_done} / 7")
    w2.metric("Avg protein", f"{format_number(week.avg_protein)} g")
    w3.metric("Avg sleep", f"{format_number(week.avg_sleep)} h")
    w4.metric("Weight change", format_delta_kg(week.weight_delta))

    st.subheader("Bodyweight")
    weights = bodyweight_series(state)
    if weights.empty:
        st.info("Log a morning weight on the Nutrition tab to see the trend.")
    else:
        st.line_chart(weights)

    st.subheader("Lift progress")
    lift_names = logged_exercise_names(state)
    if lift_names:
        chosen = st.selectbox("Exercise", lift_names)
        st.line_chart(lift_progress(state, chosen))
    else:
        st.info("Enter a numeric weight for an exercise to chart it.")

    frame = metrics_frame(state)
    if not frame.empty:
        st.subheader("Protein and sleep")
        st.bar_chart(frame[["protein"]])
        st.line_chart(frame[["sleep_h"]])

    st.subheader("Programme weeks")
    st.dataframe(weekly_history_frame(program_weekly_history(state)), hide_index=True)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

else:
    profile = state.profile
    measurements = state.measurements
    targets = state.targets
    sex_values = [s.value for s in Sex]

    st.subheader("Profile")
    p1, p2, p3, p4 = st.columns(4)
    p1.text_input(
        "Name", value=profile.name, key=_wk("set_name"),
        on_change=_on_field, args=(log_store.update_profile, "name", _wk("set_name")),
    )
    p2.selectbox(
        "Sex", sex_values, index=sex_values.index(Sex(profile.sex).value),
        key=_wk("set_sex"),
        on_change=_on_field, args=(log_store.update_profile, "sex", _wk("set_sex")),
    )
    p3.number_input(
        "Height (cm)", min_value=0.0, value=float(profile.height_cm), step=0.5,
        key=_wk("set_height"),
        on_change=_on_field, args=(log_store.update_profile, "height_cm", _wk("set_height")),
    )
    p4.number_input(
        "Weight (kg)", min_value=0.0, value=float(profile.weight_kg), step=0.1,
        key=_wk("set_weight"),
        on_change=_on_field, args=(log_store.update_profile, "weight_kg", _wk("set_weight")),
    )

    st.subheader("Measurements (US Navy)")
    m1, m2, m3 = st.columns(3)
    m1.number_input(
        "Neck (cm)", min_value=0.0, value=float(measurements.neck_cm), step=0.5,
        key=_wk("set_neck"),
        on_change=_on_field, args=(log_store.update_measurements, "neck_cm", _wk("set_neck")),
    )
    m2.number_input(
        "Waist (cm)", min_value=0.0, value=float(measurements.waist_cm), step=0.5,
        key=_wk("set_waist"),
        on_change=_on_field, args=(log_store.update_measurements, "waist_cm", _wk("set_waist")),
    )
    m3.number_input(
        "Hip (cm, female)", min_value=0.0, value=float(measurements.hip_cm), step=0.5,
        key=_wk("set_hip"),
        on_change=_on_field, args=(log_store.update_measurements, "hip_cm", _wk("set_hip")),
        disabled=profile.sex != Sex.FEMALE,
    )
    st.caption("Tip: measure in the morning, relaxed. Waist at navel level.")

    st.subheader("Targets")
    t1, t2, t3 = st.columns(3)
    t1.number_input(
        "Water goal (L)", min_value=0.0, value=float(targets.water_goal_l), step=0.1,
        key=_wk("set_water"),
        on_change=_on_field, args=(log_store.update_targets, "water_goal_l", _wk("set_water")),
    )
    t2.number_input(
        "Sleep goal (h)", min_value=0.0, value=float(targets.sleep_goal_h), step=0.1,
        key=_wk("set_sleep"),
        on_change=_on_field, args=(log_store.update_targets, "sleep_goal_h", _wk("set_sleep")),
    )
    t3.number_input(
        "Protein goal (g)", min_value=0.0, value=float(targets.protein_goal_g), step=5.0,
        key=_wk("set_protein"),
        on_change=_on_field,
        args=(log_store.update_targets, "protein_goal_g", _wk("set_protein")),
    )

    st.divider()
    st.caption(f"Data file: {store.path}")
    st.button("Reset app data", on_click=_on_reset, type="secondary")
