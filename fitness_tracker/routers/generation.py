from fastapi import APIRouter, Depends

from ..dependencies import get_generation_client, get_workout_repository
from ..repositories.workout_repository import WorkoutRepository
from ..schemas import GeneratedWorkoutResponse, Preferences, PromptResponse
from ..services.generation_client import GenerationClient
from ..services.prompt_builder import build_prompt, load_recent_history
from ..services.workout_generation_service import generate_workout

router = APIRouter(prefix="/generation", tags=["generation"])


@router.post("/prompt", response_model=PromptResponse)
def preview_prompt(
    preferences: Preferences,
    repository: WorkoutRepository = Depends(get_workout_repository),
):
    history = load_recent_history(repository)
    return PromptResponse(prompt=build_prompt(preferences, history))


@router.post("/generate", response_model=GeneratedWorkoutResponse)
async def generate(
    preferences: Preferences,
    repository: WorkoutRepository = Depends(get_workout_repository),
    client: GenerationClient = Depends(get_generation_client),
):
    return await generate_workout(repository, preferences, client)
