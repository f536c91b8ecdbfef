"""
Observability module.

Exports: configure_logging, get_logger, log_with_context, log_exception_with_context
"""

from aws_adapters.observability.logger import configure_logging, get_logger
from aws_adapters.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
]
