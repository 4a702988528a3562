"""Calendar arithmetic: ISO dates, programme day index, week boundaries.

Everything works on ``datetime.date`` (year/month/day only). Differences are
computed from proleptic ordinals, so there is no time-of-day and no timezone
involved and a 23- or 25-hour DST day can never shift the result.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from lean90.models.enums import DAYS_PER_WEEK, PROGRAM_DAYS

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(iso: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If *iso* is not a valid calendar date in that form.
    """
    if not isinstance(iso, str) or not _ISO_DATE_RE.fullmatch(iso):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {iso!r}")
    return date.fromisoformat(iso)


def format_iso_date(d: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return d.isoformat()


def today_iso() -> str:
    """Today's local calendar date as an ISO string."""
    return date.today().isoformat()


def day_index(start_iso: str, selected_iso: str) -> int:
    """Whole days from the programme start to the selected date.

    Negative before the start, >= PROGRAM_DAYS after the programme ends.
    """
    return parse_iso_date(selected_iso).toordinal() - parse_iso_date(start_iso).toordinal()


def day_of_week(index: int) -> int:
    """Programme weekday 0..6, where 0 is the weekday of the start date."""
    return ((index % DAYS_PER_WEEK) + DAYS_PER_WEEK) % DAYS_PER_WEEK


def in_program(index: int) -> bool:
    """True when *index* falls inside the 90-day window."""
    return 0 <= index < PROGRAM_DAYS


def start_of_week(d: date) -> date:
    """The Monday on or before *d*. Sunday maps back six days."""
    return d - timedelta(days=d.weekday())


def add_days(iso: str, delta: int) -> str:
    """Shift an ISO date by *delta* calendar days.

    Raises:
        ValueError: If *iso* is invalid or the result falls outside
            ``date.min``..``date.max``.
    """
    try:
        shifted = parse_iso_date(iso) + timedelta(days=delta)
    except OverflowError as exc:
        raise ValueError(f"{iso} shifted by {delta} days is out of range") from exc
    return format_iso_date(shifted)


def week_dates(iso: str) -> tuple[str, ...]:
    """The ISO dates (Monday..Sunday) of the week containing *iso*.

    Seven dates, except in the last week of year 9999, which stops at
    ``date.max``.
    """
    monday = start_of_week(parse_iso_date(iso))
    last = min(DAYS_PER_WEEK, date.max.toordinal() - monday.toordinal() + 1)
    return tuple(
        format_iso_date(monday + timedelta(days=offset))
        for offset in range(last)
    )
