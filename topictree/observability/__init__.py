"""Observability: logging and metrics for the topic tree."""

from topictree.observability.logger import get_logger, set_log_level
from topictree.observability.metrics import Metrics

__all__ = ["get_logger", "set_log_level", "Metrics"]
