# schools_api/config.py
"""
Environment-driven settings. Every value can be overridden through the
environment or a local .env file, e.g. PORT=8080 or DATA_FILE_PATH=/srv/data.json.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
DEFAULT_DATA_FILE = "data.json"
DEFAULT_LOG_LEVEL = "info"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, validate_default=True,
    )

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    data_file_path: str = DEFAULT_DATA_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level == "WARN":
            level = "WARNING"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
