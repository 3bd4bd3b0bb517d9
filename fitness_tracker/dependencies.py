from fastapi import Depends, Request

from .config import Settings, get_settings
from .database import StorageEngine
from .repositories.workout_repository import WorkoutRepository
from .services.generation_client import GenerationClient


def get_storage(request: Request) -> StorageEngine:
    return request.app.state.storage


def get_workout_repository(
    storage: StorageEngine = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> WorkoutRepository:
    return WorkoutRepository(storage, enforce_workout_reference=settings.ENFORCE_WORKOUT_REFERENCE)


def get_generation_client(settings: Settings = Depends(get_settings)) -> GenerationClient:
    return GenerationClient.from_settings(settings)
