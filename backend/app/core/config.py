"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="TASKBOARD_",
        extra="ignore",
    )

    app_name: str = "Taskboard"
    secret_key: str = "dev-session-secret-change-me"

    # Storage
    data_dir: Path = Path("./data")

    # Sessions
    session_cookie_name: str = "sid"
    session_idle_seconds: int = 60 * 60 * 24 * 7
    session_cookie_secure: bool = False
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Frontend
    static_dir: Path | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
