import pytest

from fitness_tracker.exceptions import InvalidInputError, WriteError
from fitness_tracker.repositories.workout_repository import WorkoutRepository
from fitness_tracker.services.dashboard_service import build_dashboard
from fitness_tracker.services.workout_log_service import log_workout


def _log_payload(**overrides):
    payload = {
        "name": "Leg Day",
        "date": "2024-03-14",
        "duration": "50",
        "exercises": [
            {"name": "Squat", "sets": "3", "reps": "10", "weight": "135"},
            {"name": "Lunge", "sets": "3", "reps": "12"},
            {"name": "Bike", "type": "cardio", "duration": "10"},
        ],
    }
    payload.update(overrides)
    return payload


def test_log_workout_creates_workout_and_exercises(repository: WorkoutRepository):
    result = log_workout(repository, _log_payload())

    (workout,) = repository.list_workouts()
    assert workout.id == result.workout_id
    assert workout.duration == 50
    exercises = repository.list_exercises_for_workout(result.workout_id)
    assert [e.id for e in exercises] == result.exercise_ids
    assert [e.name for e in exercises] == ["Squat", "Lunge", "Bike"]


def test_log_workout_skips_unnamed_exercises(repository: WorkoutRepository):
    payload = _log_payload(exercises=[{"name": ""}, {"name": "Squat", "sets": 1, "reps": 1}])

    result = log_workout(repository, payload)

    assert len(result.exercise_ids) == 1


def test_unnamed_row_with_bad_numbers_is_skipped(repository: WorkoutRepository):
    payload = _log_payload(
        exercises=[
            {"name": "Squat", "sets": 1, "reps": 1},
            {"name": "", "sets": "abc", "weight": "heavy"},
            {"name": "  ", "type": "rowing", "distance": "far"},
        ]
    )

    result = log_workout(repository, payload)

    assert [e.name for e in repository.list_exercises_for_workout(result.workout_id)] == ["Squat"]


def test_only_unnamed_rows_saves_bare_workout(repository: WorkoutRepository):
    result = log_workout(repository, _log_payload(exercises=[{"name": "", "sets": "abc"}]))

    assert result.exercise_ids == []
    (workout,) = repository.list_workouts()
    assert workout.id == result.workout_id
    assert repository.list_exercises_for_workout(workout.id) == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "   "},
        {"exercises": []},
        {"exercises": [{"name": "Squat", "sets": "lots"}]},
    ],
)
def test_log_workout_rejects_invalid_form(repository: WorkoutRepository, overrides):
    with pytest.raises(InvalidInputError):
        log_workout(repository, _log_payload(**overrides))
    assert repository.list_workouts() == []


def test_partial_failure_keeps_earlier_writes(repository: WorkoutRepository, monkeypatch):
    original = repository.create_exercise
    calls = []

    def flaky_create_exercise(workout_id, data):
        calls.append(data.name)
        if len(calls) == 2:
            raise WriteError("create_exercise")
        return original(workout_id, data)

    monkeypatch.setattr(repository, "create_exercise", flaky_create_exercise)

    with pytest.raises(WriteError):
        log_workout(repository, _log_payload())

    (workout,) = repository.list_workouts()
    assert [e.name for e in repository.list_exercises_for_workout(workout.id)] == ["Squat"]
    assert calls == ["Squat", "Lunge"]


def test_dashboard_summary(repository: WorkoutRepository, fixed_now):
    for day, duration in ((10, 30), (12, 45), (13, None), (14, 15)):
        repository.create_workout({"name": f"Day {day}", "date": f"2024-03-{day}", "duration": duration})

    dashboard = build_dashboard(repository, now=fixed_now)

    assert dashboard.total_workouts == 4
    assert dashboard.days_since_last == 1
    assert dashboard.total_hours == 2
    assert [w.name for w in dashboard.recent_workouts] == ["Day 14", "Day 13", "Day 12"]


def test_dashboard_empty(repository: WorkoutRepository, fixed_now):
    dashboard = build_dashboard(repository, now=fixed_now)

    assert dashboard.total_workouts == 0
    assert dashboard.days_since_last == 0
    assert dashboard.total_hours == 0
    assert dashboard.recent_workouts == []
