"""
Configuration settings for the file manager.
"""

import logging
import os

from dotenv import load_dotenv

from fileman.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_USERNAME = "Anonymous"
DEFAULT_CHUNK_SIZE = 64 * 1024


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.username: str = self._get_env("FILEMAN_USERNAME", DEFAULT_USERNAME)
        self.start_dir: str = self._get_start_dir()
        self.log_level: str = self._get_log_level()
        self.log_file: str = self._get_env("FILEMAN_LOG_FILE", "")
        self.chunk_size: int = self._get_positive_int_env(
            "FILEMAN_CHUNK_SIZE", DEFAULT_CHUNK_SIZE
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer: {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive: {value}")
        return value

    def _get_start_dir(self) -> str:
        """Initial virtual workdir: FILEMAN_START_DIR or the user's home."""
        raw = os.path.expanduser(self._get_env("FILEMAN_START_DIR", "~"))
        if not os.path.isabs(raw):
            raise ConfigurationError(f"FILEMAN_START_DIR must be an absolute path: {raw!r}")
        return os.path.normpath(raw)

    def _get_log_level(self) -> str:
        level = self._get_env("FILEMAN_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level in FILEMAN_LOG_LEVEL: {level}")
        return level

