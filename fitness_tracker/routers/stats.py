from fastapi import APIRouter, Depends

from ..dependencies import get_workout_repository
from ..repositories.workout_repository import WorkoutRepository
from ..schemas import DashboardResponse, HistoryStats
from ..services.dashboard_service import build_dashboard
from ..services.history_aggregator import compute_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/", response_model=HistoryStats)
def get_stats(repository: WorkoutRepository = Depends(get_workout_repository)):
    return compute_stats(repository.list_workouts())


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(repository: WorkoutRepository = Depends(get_workout_repository)):
    return build_dashboard(repository)
