"""
core/config.py -- Centralized configuration via pydantic-settings.

All environment variable reads happen here. No module should call
os.getenv() or os.environ.get() directly -- import get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      with the VALIDAUTH_ prefix (e.g. github_repo -> VALIDAUTH_GITHUB_REPO).

  @model_validator(mode="after"): Cross-field validation after all fields are
      resolved. Rejects settings that would make the release lookup or the
      logging setup fail later at a less obvious place.

The validators themselves take no configuration from here: their defaults
are part of the documented contract and live in core/models.py.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("validauth.config")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="VALIDAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    log_level: str = "WARNING"

    # ------------------------------------------------------------------
    # Release lookup (GitHub releases API)
    # ------------------------------------------------------------------

    github_repo: str = "Adiksuu/validauth"
    github_api_url: str = "https://api.github.com"
    request_timeout: float = 10.0

    # ------------------------------------------------------------------
    # Documentation pages
    # ------------------------------------------------------------------

    # None = use the pages bundled with the docsite package.
    docs_dir: Optional[Path] = None

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Normalize the log level and reject unusable values.

        VALIDAUTH_DEBUG=true forces the DEBUG log level regardless of VALIDAUTH_LOG_LEVEL.
        """
        level = self.log_level.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"VALIDAUTH_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got {self.log_level!r}).")
        self.log_level = "DEBUG" if self.debug else level

        if self.request_timeout <= 0:
            raise ValueError("VALIDAUTH_REQUEST_TIMEOUT must be greater than 0.")
        if "/" not in self.github_repo.strip("/"):
            raise ValueError("VALIDAUTH_GITHUB_REPO must look like 'owner/name'.")
        self.github_api_url = self.github_api_url.rstrip("/")

        if self.docs_dir is not None and not self.docs_dir.is_dir():
            logger.warning("VALIDAUTH_DOCS_DIR %s is not a directory; pages will not be found.", self.docs_dir)
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
