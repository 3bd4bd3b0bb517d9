from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from .common import is_blank, parse_optional_int
from .exercise import ExercisePayload, ExerciseResponse


class WorkoutCreate(BaseModel):
    name: str = Field(..., max_length=255)
    date: str = Field(..., description="Calendar date as YYYY-MM-DD")
    duration: int | None = Field(None, ge=0, description="Minutes")
    notes: str | None = None

    class Config:
        extra = "forbid"

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("workout name must not be empty")
        return value

    @field_validator("date")
    @classmethod
    def _date_present(cls, value: str) -> str:
        # Only presence is checked; the format is trusted to the caller.
        value = value.strip()
        if not value:
            raise ValueError("workout date is required")
        return value

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_duration(cls, value):
        return parse_optional_int(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _blank_notes_are_absent(cls, value):
        return None if is_blank(value) else value


class WorkoutResponse(BaseModel):
    id: int
    date: str
    name: str
    duration: int | None = None
    notes: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        frozen = True


class WorkoutWithExercises(WorkoutResponse):
    exercises: list[ExerciseResponse] = Field(default_factory=list)


class WorkoutLogRequest(WorkoutCreate):
    exercises: list[ExercisePayload] = Field(default_factory=list)

    _submitted_exercises: int = PrivateAttr(0)

    @model_validator(mode="wrap")
    @classmethod
    def _skip_unnamed_exercises(cls, data: Any, handler):
        # A form row without a name is ignored whatever else it holds, but it
        # still counts as a submitted row.
        rows = data.get("exercises") if isinstance(data, dict) else None
        if isinstance(rows, list):
            named = [row for row in rows if not (isinstance(row, dict) and is_blank(row.get("name")))]
            data = {**data, "exercises": named}
        request = handler(data)
        if isinstance(rows, list):
            request._submitted_exercises = len(rows)
        elif request is not data:
            request._submitted_exercises = len(request.exercises)
        return request

    @property
    def submitted_exercises(self) -> int:
        return self._submitted_exercises


class WorkoutLogResponse(BaseModel):
    workout_id: int
    exercise_ids: list[int] = Field(default_factory=list)
