"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database
    database_url: str = "sqlite:///./fitness_tracker.db"

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"

    # Frontend
    cors_origins: List[str] = ["http://localhost:3000"]

    # App settings
    app_name: str = "Fitness Tracker"
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
