from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .common import parse_optional_int


class Intensity(str, Enum):
    light = "light"
    moderate = "moderate"
    intense = "intense"


class Focus(str, Enum):
    full_body = "full-body"
    upper_body = "upper-body"
    lower_body = "lower-body"
    cardio = "cardio"
    strength = "strength"


class Equipment(str, Enum):
    gym = "gym"
    home = "home"
    bodyweight = "bodyweight"


class Experience(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class Preferences(BaseModel):
    """What the user asked for; lives only as long as one generation request."""

    duration: int = Field(45, gt=0, description="Minutes; accepts text such as '45'")
    intensity: Intensity = Intensity.moderate
    focus: Focus = Focus.full_body
    equipment: Equipment = Equipment.gym
    experience: Experience = Experience.intermediate

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_duration(cls, value):
        parsed = parse_optional_int(value)
        if parsed is None:
            raise ValueError("duration is required")
        return parsed
