"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "EuroMillions Analyzer"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    # Generation
    DEFAULT_COMBINATION_COUNT: int = Field(5, ge=1, le=10)
    MIN_COMBINATIONS: int = Field(1, ge=1, le=10)
    MAX_COMBINATIONS: int = Field(10, ge=1, le=10)

    # Seed for the frequency-based pick when no generator is passed
    FILLER_SEED: int = 42


settings = Settings()
