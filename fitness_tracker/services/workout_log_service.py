from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from ..exceptions import InvalidInputError
from ..repositories.workout_repository import WorkoutRepository
from ..schemas.workout import WorkoutCreate, WorkoutLogRequest, WorkoutLogResponse

logger = structlog.get_logger(__name__)


def log_workout(
    repository: WorkoutRepository,
    request: WorkoutLogRequest | Mapping[str, Any],
) -> WorkoutLogResponse:
    """Save a workout and its exercises as one user action.

    The writes are not wrapped in a transaction. If an exercise fails to save
    the ``WriteError`` propagates and the workout plus any exercises already
    written stay in storage.
    """
    if not isinstance(request, WorkoutLogRequest):
        try:
            request = WorkoutLogRequest.model_validate(dict(request))
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False, include_input=False)
            raise InvalidInputError("Invalid workout log data", errors=errors) from exc

    if not request.submitted_exercises:
        raise InvalidInputError("Please add at least one exercise")

    workout = WorkoutCreate.model_validate(request.model_dump(include=set(WorkoutCreate.model_fields)))
    workout_id = repository.create_workout(workout, source="log")

    exercise_ids = []
    for exercise in request.exercises:
        # Rows built as models can still carry a blank name.
        if not exercise.name:
            continue
        exercise_ids.append(repository.create_exercise(workout_id, exercise))

    logger.info("workout_logged", workout_id=workout_id, exercises=len(exercise_ids))
    return WorkoutLogResponse(workout_id=workout_id, exercise_ids=exercise_ids)
