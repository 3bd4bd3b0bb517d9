from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from fitness_tracker.services.history_aggregator import (
    compute_stats,
    days_since_last,
    round_half_up,
    total_count,
    total_trained_hours,
)


def _on(day: date, duration=None):
    return SimpleNamespace(date=day.isoformat(), duration=duration)


def test_total_count():
    assert total_count([]) == 0
    assert total_count([_on(date(2024, 1, 1)), _on(date(2024, 1, 2))]) == 2


def test_days_since_last_empty():
    assert days_since_last([]) == 0


def test_days_since_last_today_is_zero(fixed_now):
    assert days_since_last([_on(fixed_now.date())], now=fixed_now) == 0


def test_days_since_last_counts_calendar_days(fixed_now):
    three_days_ago = fixed_now.date() - timedelta(days=3)
    assert days_since_last([_on(three_days_ago)], now=fixed_now) == 3


def test_days_since_last_uses_first_workout_only(fixed_now):
    workouts = [_on(fixed_now.date() - timedelta(days=2)), _on(fixed_now.date() - timedelta(days=10))]
    assert days_since_last(workouts, now=fixed_now) == 2


def test_days_since_last_ignores_time_of_day():
    late = datetime(2024, 3, 15, 23, 59, tzinfo=timezone.utc)
    early = datetime(2024, 3, 15, 0, 1, tzinfo=timezone.utc)
    workouts = [_on(date(2024, 3, 14))]
    assert days_since_last(workouts, now=late) == 1
    assert days_since_last(workouts, now=early) == 1


def test_days_since_last_defaults_to_current_time():
    assert days_since_last([_on(datetime.now(timezone.utc).date())]) == 0


def test_days_since_last_unparseable_date_is_zero(fixed_now):
    assert days_since_last([SimpleNamespace(date="yesterday", duration=None)], now=fixed_now) == 0


def test_total_trained_hours_rounds_half_up():
    assert total_trained_hours([_on(date(2024, 1, 1), 60), _on(date(2024, 1, 2), 30)]) == 2
    assert total_trained_hours([_on(date(2024, 1, 1), 150)]) == 3


def test_total_trained_hours_treats_absent_duration_as_zero():
    workouts = [_on(date(2024, 1, 1), None), _on(date(2024, 1, 2), 80)]
    assert total_trained_hours(workouts) == 1
    assert total_trained_hours([]) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-0.5, 0), (-1.5, -1)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_compute_stats(fixed_now):
    workouts = [
        _on(fixed_now.date() - timedelta(days=1), 45),
        _on(fixed_now.date() - timedelta(days=4), 45),
    ]
    stats = compute_stats(workouts, now=fixed_now)
    assert stats.total_workouts == 2
    assert stats.days_since_last == 1
    assert stats.total_hours == 2
