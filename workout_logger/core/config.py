"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from workout_logger.core.constants import STORAGE_KEY_APP_STATE, STORAGE_PREFIX


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Logger API"
    debug: bool = False
    environment: str = "development"

    # API
    api_v1_prefix: str = "/api/v1"

    # On-device store (SQLite file; ":memory:" for throwaway runs)
    database_path: str = "workout_logger.db"

    # Key under which the whole app-state document is persisted
    storage_key: str = STORAGE_KEY_APP_STATE
    storage_prefix: str = STORAGE_PREFIX

    # Fill an empty exercise library with the built-in exercises on startup
    seed_exercise_library: bool = True

    # CORS: comma-separated list of allowed origins outside development
    cors_origins: str = ""

    @property
    def async_database_url(self) -> str:
        """Async URL for the key-value store (aiosqlite driver)."""
        return f"sqlite+aiosqlite:///{self.database_path}"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
