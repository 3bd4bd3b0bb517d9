# This file makes the schemas directory a Python package

from .common import CreatedResponse
from .exercise import (
    CardioExercise,
    ExercisePayload,
    ExerciseResponse,
    ExerciseType,
    StrengthExercise,
    exercise_payload_adapter,
)
from .generation import GeneratedWorkoutResponse, PromptResponse
from .preferences import Equipment, Experience, Focus, Intensity, Preferences
from .stats import DashboardResponse, HistoryStats
from .workout import (
    WorkoutCreate,
    WorkoutLogRequest,
    WorkoutLogResponse,
    WorkoutResponse,
    WorkoutWithExercises,
)
