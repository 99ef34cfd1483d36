from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Question generator
    GENERATOR_MAX_ATTEMPTS: int = 50  # Outer cap; binds only below GENERATOR_MAX_RESAMPLES + 1
    GENERATOR_MAX_RESAMPLES: int = 20
    RANDOM_SEED: int | None = None  # Fixed seed makes sessions reproducible

    # Progression
    QUESTIONS_PER_LEVEL: int = 25

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
