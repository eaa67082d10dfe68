"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application.
        debug: Enable debug mode.
        environment: Deployment environment name.
        database_url: Database connection URL for the roster storage slot.
        default_student_password: Placeholder password given to new records.
        cors_origins: Origins allowed to call the API.
        log_level: Root log level for the API and CLI.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RosterDesk"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Database
    database_url: str = "sqlite:///./rosterdesk.db"

    # Roster
    default_student_password: str = "student"

    # CORS (for the admin front end)
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()
