"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_USERNAME = "User"
DEFAULT_PROMPT = ">"
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_LOG_LEVEL = "WARNING"


class Settings:
    """Application settings loaded from environment variables.

    Keyword arguments take precedence over the environment, so the CLI can
    override any value with its own flags.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        start_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        self.username: str = username or self._get_env(
            "FILE_MANAGER_USERNAME", DEFAULT_USERNAME
        )
        self.start_dir: str = self._normalize_start_dir(
            start_dir or self._get_env("FILE_MANAGER_START_DIR", "")
        )
        self.prompt: str = self._get_env("FILE_MANAGER_PROMPT", DEFAULT_PROMPT)
        self.chunk_size: int = self._get_positive_int(
            "FILE_MANAGER_CHUNK_SIZE", DEFAULT_CHUNK_SIZE
        )
        self.log_level: int = self._parse_log_level(
            log_level or self._get_env("FILE_MANAGER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        )
        self.log_file: Optional[str] = os.getenv("FILE_MANAGER_LOG_FILE") or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

    @staticmethod
    def _normalize_start_dir(path: str) -> str:
        if not path:
            return os.path.expanduser("~")
        return os.path.abspath(os.path.expanduser(path))

    @staticmethod
    def _parse_log_level(name: str) -> int:
        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name}")
        return level
