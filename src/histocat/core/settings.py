"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod

The host integration layer (CLI, HTTP API) reads `format_text` as the
default rendering preference when the caller does not pass one explicitly.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `HISTOCAT_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    format_text : Optional[str]
        Default note format preference (`markdown` or anything else for plain
        text); maps from `HISTOCAT_FORMAT_TEXT`.
    default_language : str
        Language tag used when a command is invoked without one; maps from
        `HISTOCAT_LANGUAGE`.
    """

    environment: EnvName = Field(default="dev", alias="HISTOCAT_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    format_text: str | None = Field(default=None, alias="HISTOCAT_FORMAT_TEXT")
    default_language: str = Field(default="fr", alias="HISTOCAT_LANGUAGE")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_prod(self) -> bool:
        """Return True if running in the production environment."""
        return self.environment == "prod"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("HISTOCAT_ENV", "dev")
    return Settings()


# Import-time read of env / .env files.
settings: Settings = load_settings()


def get_logger(name: str = "histocat") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
