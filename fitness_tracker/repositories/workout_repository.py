from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..database import StorageEngine
from ..exceptions import InvalidInputError, ReadFailure, WriteError
from ..metrics import EXERCISES_CREATED_TOTAL, STORAGE_READ_FAILURES_TOTAL, WORKOUTS_CREATED_TOTAL
from ..schemas.exercise import CardioExercise, ExerciseResponse, StrengthExercise, exercise_payload_adapter
from ..schemas.workout import WorkoutCreate, WorkoutResponse

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _invalid_input(exc: ValidationError, what: str) -> InvalidInputError:
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    fields = sorted({".".join(str(p) for p in err["loc"]) for err in errors})
    return InvalidInputError(f"Invalid {what} data: {', '.join(fields) or 'payload'}", errors=errors)


class WorkoutRepository:
    """Create/read access to workouts and exercises.

    Writes raise ``WriteError`` so the caller can tell the user. Reads never
    raise on query failure: the fault is logged and an empty list is returned
    so history views fall back to their empty state.
    """

    def __init__(self, storage: StorageEngine, *, enforce_workout_reference: bool = False):
        self.storage = storage
        self.enforce_workout_reference = enforce_workout_reference

    def _read(self, operation: str, query: Callable[[Session], list[T]]) -> list[T]:
        with self.storage.session() as db:
            try:
                return query(db)
            except SQLAlchemyError as exc:
                failure = ReadFailure(operation, exc)
                STORAGE_READ_FAILURES_TOTAL.labels(operation=operation).inc()
                logger.error("storage_read_failed", operation=operation, error=str(failure))
                return []

    def create_workout(self, data: WorkoutCreate | Mapping[str, Any], *, source: str = "manual") -> int:
        if not isinstance(data, WorkoutCreate):
            try:
                data = WorkoutCreate.model_validate(dict(data))
            except ValidationError as exc:
                raise _invalid_input(exc, "workout") from exc

        item = models.Workout(**data.model_dump())
        with self.storage.session() as db:
            try:
                db.add(item)
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception("workout_create_failed", name=data.name, date=data.date)
                raise WriteError("create_workout") from exc

        WORKOUTS_CREATED_TOTAL.labels(source=source).inc()
        logger.info("workout_created", workout_id=item.id, date=item.date)
        return item.id

    def create_exercise(
        self,
        workout_id: int,
        data: StrengthExercise | CardioExercise | Mapping[str, Any],
    ) -> int:
        if not isinstance(data, BaseModel):
            try:
                data = exercise_payload_adapter.validate_python(dict(data))
            except ValidationError as exc:
                raise _invalid_input(exc, "exercise") from exc
        if not data.name:
            raise InvalidInputError("Exercise name must not be empty")

        item = models.Exercise(workout_id=workout_id, **data.model_dump())
        with self.storage.session() as db:
            try:
                if self.enforce_workout_reference and db.get(models.Workout, workout_id) is None:
                    raise WriteError("create_exercise", f"Workout {workout_id} does not exist")
                db.add(item)
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception("exercise_create_failed", workout_id=workout_id, name=data.name)
                raise WriteError("create_exercise") from exc

        EXERCISES_CREATED_TOTAL.labels(type=item.type).inc()
        logger.info("exercise_created", exercise_id=item.id, workout_id=workout_id, type=item.type)
        return item.id

    def list_workouts(self) -> list[WorkoutResponse]:
        return self._read("list_workouts", lambda db: self._query_workouts(db, None))

    def list_recent_workouts(self, limit: int) -> list[WorkoutResponse]:
        if limit <= 0:
            raise InvalidInputError(f"limit must be positive, got {limit}")
        return self._read("list_recent_workouts", lambda db: self._query_workouts(db, limit))

    def list_exercises_for_workout(self, workout_id: int) -> list[ExerciseResponse]:
        def query(db: Session) -> list[ExerciseResponse]:
            rows = db.scalars(
                select(models.Exercise).where(models.Exercise.workout_id == workout_id).order_by(models.Exercise.id)
            ).all()
            return [ExerciseResponse.model_validate(row) for row in rows]

        return self._read("list_exercises_for_workout", query)

    @staticmethod
    def _query_workouts(db: Session, limit: int | None) -> list[WorkoutResponse]:
        # Several workouts can share a date; the earlier insert stays first.
        stmt = select(models.Workout).order_by(models.Workout.date.desc(), models.Workout.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return [WorkoutResponse.model_validate(row) for row in db.scalars(stmt).all()]
