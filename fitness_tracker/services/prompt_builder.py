from collections.abc import Sequence

from ..formatting import format_number
from ..repositories.workout_repository import WorkoutRepository
from ..schemas.exercise import ExerciseResponse
from ..schemas.preferences import Preferences
from ..schemas.workout import WorkoutWithExercises

RECENT_HISTORY_WINDOW = 5

HISTORY_HEADING = "Recent workout history:"

HISTORY_INSTRUCTION = (
    "Please consider this history to avoid repetition and ensure progressive overload where appropriate."
)

FORMAT_INSTRUCTION = (
    "Format the response as a structured workout with:\n"
    "1. Warm-up (5-10 minutes)\n"
    "2. Main workout with specific exercises, sets, reps, and rest periods\n"
    "3. Cool-down (5-10 minutes)\n"
    "\n"
    "Include brief explanations for exercise selection and any modifications for different fitness levels."
)


def load_recent_history(repository: WorkoutRepository) -> list[WorkoutWithExercises]:
    """The most recent workouts, newest first, each with its exercises attached."""
    history = []
    for workout in repository.list_recent_workouts(RECENT_HISTORY_WINDOW):
        exercises = repository.list_exercises_for_workout(workout.id)
        history.append(WorkoutWithExercises(**workout.model_dump(), exercises=exercises))
    return history


def render_exercise_line(exercise: ExerciseResponse) -> str:
    line = f"   - {exercise.name}"
    if exercise.sets is not None and exercise.reps is not None:
        line += f" ({format_number(exercise.sets)} sets × {format_number(exercise.reps)} reps"
        if exercise.weight is not None:
            line += f" @ {format_number(exercise.weight)} lbs"
        line += ")"
    if exercise.duration is not None:
        line += f" ({format_number(exercise.duration)} min)"
    return line


def build_prompt(preferences: Preferences, history: Sequence[WorkoutWithExercises]) -> str:
    prompt = (
        f"Generate a {preferences.duration}-minute {preferences.intensity.value} intensity "
        f"{preferences.focus.value} workout for someone with {preferences.experience.value} "
        f"experience level using {preferences.equipment.value} equipment."
    )

    if history:
        prompt += f"\n\n{HISTORY_HEADING}\n"
        for index, workout in enumerate(history, start=1):
            prompt += f"{index}. {workout.name} ({workout.date}):\n"
            for exercise in workout.exercises:
                prompt += render_exercise_line(exercise) + "\n"
        prompt += f"\n{HISTORY_INSTRUCTION}"

    prompt += f"\n\n{FORMAT_INSTRUCTION}"
    return prompt
