"""Settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from topictree.observability import set_log_level

DEFAULT_LOG_LEVEL = "INFO"
# Upper bound on segments per topic.
DEFAULT_MAX_LEVELS = 128


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for a TopicTree.

    max_levels applies per tree. log_level is process-wide: all trees share the
    "topictree" logger, and it is applied only by get_settings() or an explicit
    set_log_level() call, never by constructing a tree.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    max_levels: int = DEFAULT_MAX_LEVELS

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load .env (existing environment variables win), then build Settings from TOPICTREE_* variables."""
    load_dotenv(env_file)
    log_level = (os.environ.get("TOPICTREE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip()
    try:
        max_levels = int(os.environ.get("TOPICTREE_MAX_LEVELS", DEFAULT_MAX_LEVELS))
    except (ValueError, TypeError):
        max_levels = DEFAULT_MAX_LEVELS
    if max_levels < 1:
        max_levels = DEFAULT_MAX_LEVELS
    return Settings(log_level=log_level or DEFAULT_LOG_LEVEL, max_levels=max_levels)


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Process-wide settings: read the environment once and apply the log level."""
    settings = load_settings()
    set_log_level(settings.log_level_value)
    return settings
