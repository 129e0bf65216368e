"""Logging bootstrap: loguru sinks with stdlib logging bridged in."""

from .loguru_bootstrap import InterceptHandler, get_logger, setup_logging

__all__ = ["InterceptHandler", "get_logger", "setup_logging"]
