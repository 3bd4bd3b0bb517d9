from pydantic import BaseModel, Field

from .workout import WorkoutResponse


class HistoryStats(BaseModel):
    total_workouts: int
    days_since_last: int
    total_hours: int


class DashboardResponse(HistoryStats):
    recent_workouts: list[WorkoutResponse] = Field(default_factory=list)
