"""Utility package: the exception hierarchy shared by all components."""

from .exceptions import (
    ConfigurationError,
    ErrorSeverity,
    ToyRobotError,
    ValidationError,
    format_error_details,
)

__all__ = [
    "ConfigurationError",
    "ErrorSeverity",
    "ToyRobotError",
    "ValidationError",
    "format_error_details",
]
