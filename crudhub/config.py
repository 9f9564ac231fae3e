from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Recipes & Catalog API"
    app_version: str = "0.1.0"
    app_env: str = "production"
    cors_origins: list[str] = ["http://localhost:3000"]

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "recipe_meal_planning"
    mongodb_timeout_ms: int = 10_000               # per-operation deadline
    mongodb_server_selection_timeout_ms: int = 5_000

    # Session gate on write routes
    auth_enabled: bool = True
    session_secret: str = "change-me-in-production"
    session_max_age_seconds: int = 24 * 3600
    session_https_only: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "WARNING"         # pymongo / motor driver
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
