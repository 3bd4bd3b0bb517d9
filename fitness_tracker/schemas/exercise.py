from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    computed_field,
    field_validator,
    model_validator,
)

from ..formatting import format_exercise_details
from .common import is_blank, parse_optional_float, parse_optional_int


class ExerciseType(str, Enum):
    strength = "strength"
    cardio = "cardio"


class ExerciseBase(BaseModel):
    name: str = Field(..., max_length=255)

    class Config:
        extra = "forbid"

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_metrics(cls, data: Any) -> Any:
        # Forms send every input; an empty one means "not recorded".
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k == "name" or not is_blank(v)}
        return data

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()


class StrengthExercise(ExerciseBase):
    type: Literal["strength"] = "strength"
    sets: int | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0, description="Pounds")

    @field_validator("sets", "reps", mode="before")
    @classmethod
    def _parse_counts(cls, value):
        return parse_optional_int(value)

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_weight(cls, value):
        return parse_optional_float(value)


class CardioExercise(ExerciseBase):
    type: Literal["cardio"] = "cardio"
    distance: float | None = Field(None, ge=0, description="Miles")
    duration: int | None = Field(None, ge=0, description="Minutes")

    @field_validator("distance", mode="before")
    @classmethod
    def _parse_distance(cls, value):
        return parse_optional_float(value)

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_duration(cls, value):
        return parse_optional_int(value)


def _exercise_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        tag = value.get("type") or ExerciseType.strength.value
    else:
        tag = getattr(value, "type", None)
    return getattr(tag, "value", tag)


ExercisePayload = Annotated[
    Annotated[StrengthExercise, Tag("strength")] | Annotated[CardioExercise, Tag("cardio")],
    Discriminator(_exercise_tag),
]

exercise_payload_adapter: TypeAdapter[StrengthExercise | CardioExercise] = TypeAdapter(ExercisePayload)


class ExerciseResponse(BaseModel):
    id: int
    workout_id: int | None = None
    name: str
    type: ExerciseType = ExerciseType.strength
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None
    distance: float | None = None
    duration: int | None = None

    class Config:
        from_attributes = True
        frozen = True

    @computed_field
    @property
    def details(self) -> str:
        return format_exercise_details(self)
