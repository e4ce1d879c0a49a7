"""
Configuration management for the trip planner.
Selects where the trip collection is stored and how the server runs.
"""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage Configuration
    storage_backend: Literal["file", "memory"] = "file"
    storage_path: str = "data/trips.json"
    storage_key: str = "trips"

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "TRIP_PLANNER_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_storage_config() -> dict:
    """Get storage configuration for the selected backend."""
    config = {
        "backend": settings.storage_backend,
        "key": settings.storage_key,
    }
    if settings.storage_backend == "file":
        config["path"] = settings.storage_path
    return config
