"""Runner settings loaded from the environment (``STATEMENT_RUNNER_*``) or a ``.env`` file."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .base.commit import CommitMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STATEMENT_RUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database file, created on first connect
    database_path: str = "employees.db"

    # "auto" commits after every mutating statement, "manual" waits for commit()
    commit_mode: CommitMode = CommitMode.AUTO

    # Echo emitted SQL through SQLAlchemy's own logger
    echo: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
