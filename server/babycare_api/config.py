"""Application configuration loaded from environment variables."""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="BABYCARE_", env_file=".env", extra="ignore")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Implicit single caregiver
    default_user_id: str = "default-user"
    default_username: str = "marina"
    default_password: str = "password"

    # Dashboard
    feeding_interval_hours: int = 3
    recent_notes_limit: int = 3

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
