"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache

from app.validators.reference_data import (
    DEFAULT_COMMENT_MAX_LENGTH,
    DEFAULT_PRESSURE_WARN_MAX,
    DEFAULT_PRESSURE_WARN_MIN,
    DEFAULT_TEMPERATURE_WARN_MAX,
    DEFAULT_TEMPERATURE_WARN_MIN,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    APP_NAME: str = "Measurement Form"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = "*"  # Comma-separated list, or "*" for all

    # Advisory ranges (values outside are warnings, not errors)
    TEMPERATURE_WARN_MIN: float = DEFAULT_TEMPERATURE_WARN_MIN
    TEMPERATURE_WARN_MAX: float = DEFAULT_TEMPERATURE_WARN_MAX
    PRESSURE_WARN_MIN: float = DEFAULT_PRESSURE_WARN_MIN
    PRESSURE_WARN_MAX: float = DEFAULT_PRESSURE_WARN_MAX

    # Comment
    COMMENT_MAX_LENGTH: int = DEFAULT_COMMENT_MAX_LENGTH

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


@lru_cache
def get_settings() -> Settings:
    return Settings()
