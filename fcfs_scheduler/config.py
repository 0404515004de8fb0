"""
Environment-driven defaults for the command-line tool.

Values are read from ``FCFS_*`` environment variables or a ``.env`` file;
command-line flags take precedence over them.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "WARNING"
    STEP_DELAY: float = 0.3  # seconds between animation ticks
    REALISTIC_MODE: bool = True

    model_config = SettingsConfigDict(env_prefix="FCFS_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> Settings:
    return Settings()
