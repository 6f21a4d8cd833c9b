"""Runtime settings, read from ``VERSIONITIS_*`` environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MANIFEST_DIR,
    DEFAULT_REPO_FILE,
    ENV_PREFIX,
    LOG_LEVELS,
)


def normalize_log_level(value: str) -> str:
    """
    Return the canonical lower-case name of a log level.

    ``warn`` is accepted as an alias for ``warning``.

    Raises:
        ValueError: If the level is not supported
    """
    level = value.lower()
    if level == "warn":
        level = "warning"
    if level not in LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level: '{value}'. Supported levels: {', '.join(LOG_LEVELS)}"
        )
    return level


class Settings(BaseSettings):
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    repo_file: str = DEFAULT_REPO_FILE
    manifest_dir: str = DEFAULT_MANIFEST_DIR

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the supported names"""
        return normalize_log_level(v)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget cached settings (useful when tests change the environment)."""
    get_settings.cache_clear()
