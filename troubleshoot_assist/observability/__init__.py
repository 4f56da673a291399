"""Logging setup and helpers."""

from troubleshoot_assist.observability.log_utils import (
    log_exception_with_context,
    safe_log_value,
)
from troubleshoot_assist.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "safe_log_value",
]
