"""Dashboard statistics derived from a snapshot of stored workouts.

All functions are pure: they take already-loaded workouts and never touch
storage. Fractional results are rounded half up (1.5 -> 2, 2.5 -> 3), which
is what the dashboards have always shown.
"""

import math
from collections.abc import Sequence
from datetime import UTC, date, datetime, time, timedelta
from typing import Any

import structlog

from ..schemas.stats import HistoryStats

logger = structlog.get_logger(__name__)

ONE_DAY = timedelta(days=1)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def total_count(workouts: Sequence[Any]) -> int:
    return len(workouts)


def days_since_last(workouts: Sequence[Any], now: datetime | None = None) -> int:
    """Whole days between today and the date of ``workouts[0]`` (most recent first)."""
    if not workouts:
        return 0

    raw_date = workouts[0].date
    try:
        last = date.fromisoformat(str(raw_date))
    except ValueError:
        logger.warning("workout_date_unparseable", date=raw_date)
        return 0

    today = (now or datetime.now(UTC)).date()
    elapsed = datetime.combine(today, time.min) - datetime.combine(last, time.min)
    return round_half_up(elapsed / ONE_DAY)


def total_trained_hours(workouts: Sequence[Any]) -> int:
    minutes = sum(w.duration or 0 for w in workouts)
    return round_half_up(minutes / 60)


def compute_stats(workouts: Sequence[Any], now: datetime | None = None) -> HistoryStats:
    return HistoryStats(
        total_workouts=total_count(workouts),
        days_since_last=days_since_last(workouts, now=now),
        total_hours=total_trained_hours(workouts),
    )
