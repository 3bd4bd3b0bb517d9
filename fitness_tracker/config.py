from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    FITNESS_DATABASE_URL: str = "sqlite:///./fitness_tracker.db"
    ENFORCE_WORKOUT_REFERENCE: bool = False

    OPENAI_API_KEY: str | None = None
    GENERATION_API_URL: str = "https://api.openai.com/v1/chat/completions"
    GENERATION_MODEL: str = "gpt-3.5-turbo"
    GENERATION_TIMEOUT_SECONDS: float = 60.0

    APP_ENV: str = "local"
    SERVICE_NAME: str = "fitness-tracker"
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0

    METRICS_ENABLED: bool = True
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
