import structlog
from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_workout_repository
from ..repositories.workout_repository import WorkoutRepository
from ..schemas import (
    CreatedResponse,
    ExercisePayload,
    ExerciseResponse,
    WorkoutCreate,
    WorkoutLogRequest,
    WorkoutLogResponse,
    WorkoutResponse,
)
from ..services.workout_log_service import log_workout

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("/", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutCreate,
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    logger.info("workout_create_requested", name=payload.name, date=payload.date)
    return CreatedResponse(id=repository.create_workout(payload))


@router.get("/", response_model=list[WorkoutResponse])
def list_workouts(repository: WorkoutRepository = Depends(get_workout_repository)):
    return repository.list_workouts()


@router.get("/recent", response_model=list[WorkoutResponse])
def list_recent_workouts(
    limit: int = Query(5, gt=0),
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    return repository.list_recent_workouts(limit)


@router.post("/log", response_model=WorkoutLogResponse, status_code=status.HTTP_201_CREATED)
def log_workout_with_exercises(
    payload: WorkoutLogRequest,
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    logger.info("workout_log_requested", name=payload.name, exercises=len(payload.exercises))
    return log_workout(repository, payload)


@router.post("/{workout_id}/exercises", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_exercise(
    workout_id: int,
    payload: ExercisePayload,
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    return CreatedResponse(id=repository.create_exercise(workout_id, payload))


@router.get("/{workout_id}/exercises", response_model=list[ExerciseResponse])
def list_exercises_for_workout(
    workout_id: int,
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    return repository.list_exercises_for_workout(workout_id)
