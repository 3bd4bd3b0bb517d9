import structlog

from ..repositories.workout_repository import WorkoutRepository
from ..schemas.generation import GeneratedWorkoutResponse
from ..schemas.preferences import Preferences
from .generation_client import GenerationClient
from .prompt_builder import build_prompt, load_recent_history

logger = structlog.get_logger(__name__)


async def generate_workout(
    repository: WorkoutRepository,
    preferences: Preferences,
    client: GenerationClient,
) -> GeneratedWorkoutResponse:
    """Build a history-aware prompt and ask the generator for a workout.

    Nothing is written to storage, so a failed request leaves history as it was.
    """
    history = load_recent_history(repository)
    prompt = build_prompt(preferences, history)
    logger.info("generation_requested", history_workouts=len(history), prompt_characters=len(prompt))
    workout = await client.request_workout(prompt)
    return GeneratedWorkoutResponse(prompt=prompt, workout=workout)
