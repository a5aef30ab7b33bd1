from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for tgplay.

    Values are loaded from environment variables and `.env`.

    Notes:
    - The app directory holds config.json, options.json, goto_frequency.json
      and the cmd-exec file the shell wrapper sources.
    - Log files go under TGPLAY_LOG_DIR, relative to the app directory unless
      absolute.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    TGPLAY_HOME: Path = Field(default=Path("~/.terminal-gameplay"))

    # Navigator
    TGPLAY_MAX_VISIBLE: int = Field(default=10, ge=1)

    # Logging (file only; the terminal belongs to the navigator)
    TGPLAY_LOG_DIR: Path = Field(default=Path("logs"))
    TGPLAY_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    TGPLAY_LOG_BACKUP_COUNT: int = Field(default=7)


def load_settings() -> Settings:
    s = Settings()
    s.TGPLAY_HOME = s.TGPLAY_HOME.expanduser()
    return s
