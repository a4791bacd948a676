"""Runtime settings for arithtree.

Read from environment variables (a ``.env`` file in the working
directory is honored):

- ARITHTREE_LOG_LEVEL: logging level name (default WARNING)
- ARITHTREE_LOG_FORMAT: logging format string
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Logging configuration."""

    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (after loading .env)."""
        load_dotenv()
        return cls(
            log_level=os.environ.get("ARITHTREE_LOG_LEVEL", "WARNING"),
            log_format=os.environ.get("ARITHTREE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure the root logger from settings."""
    level = logging.DEBUG if verbose else settings.level
    logging.basicConfig(level=level, format=settings.log_format)
    logging.getLogger().setLevel(level)
