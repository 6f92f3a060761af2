"""Structured logging for topic tree events (subscribe, publish, deliver)."""

import logging
import sys

ROOT_LOGGER_NAME = "topictree"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _root_logger() -> logging.Logger:
    """The package logger; owns the single stdout handler that child loggers propagate to."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def set_log_level(level: int) -> None:
    """Set the level for every topictree logger."""
    _root_logger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the topictree namespace (e.g. "topictree.tree")."""
    _root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
