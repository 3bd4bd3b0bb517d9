from datetime import datetime

from ..repositories.workout_repository import WorkoutRepository
from ..schemas.stats import DashboardResponse
from .history_aggregator import days_since_last, total_count, total_trained_hours

DASHBOARD_RECENT_WORKOUTS = 3


def build_dashboard(repository: WorkoutRepository, now: datetime | None = None) -> DashboardResponse:
    workouts = repository.list_workouts()
    return DashboardResponse(
        total_workouts=total_count(workouts),
        days_since_last=days_since_last(workouts, now=now),
        total_hours=total_trained_hours(workouts),
        recent_workouts=workouts[:DASHBOARD_RECENT_WORKOUTS],
    )
