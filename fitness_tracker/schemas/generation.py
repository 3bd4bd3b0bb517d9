from pydantic import BaseModel


class PromptResponse(BaseModel):
    prompt: str


class GeneratedWorkoutResponse(BaseModel):
    prompt: str
    workout: str
