"""
Exception hierarchy for toy_robot_sim construction-time and configuration failures.

Robot commands never raise: they return :class:`toy_robot_sim.core.results.CommandError`
values. The exceptions defined here cover everything that happens *before* a
session starts, such as invalid table dimensions, incomplete message catalogs,
malformed direction lists, and unreadable configuration files.
"""

import enum
import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Union

# Global constants for error handling configuration
RECOVERY_SUGGESTION_MAX_LENGTH = 500
ERROR_CONTEXT_MAX_LENGTH = 1000

__all__ = [
    "ToyRobotError",
    "ValidationError",
    "ConfigurationError",
    "ErrorSeverity",
    "format_error_details",
]


class ErrorSeverity(enum.IntEnum):
    """Severity levels used to pick the log level when an error is logged."""

    LOW = 1  # Minor issues like validation warnings
    MEDIUM = 2  # Rejected input that the caller can correct
    HIGH = 3  # Broken configuration, the session cannot start
    CRITICAL = 4  # Unrecoverable failures

    def get_description(self) -> str:
        """Get human-readable description of error severity level.

        Returns:
            str: Description of severity level for logging and user display
        """
        severity_descriptions = {
            ErrorSeverity.LOW: "Minor issue with suggested improvements",
            ErrorSeverity.MEDIUM: "Recoverable error, correct the input and retry",
            ErrorSeverity.HIGH: "Significant error requiring attention",
            ErrorSeverity.CRITICAL: "Critical failure requiring immediate action",
        }
        return severity_descriptions.get(self, "Unknown severity level")

    def should_escalate(self) -> bool:
        """Check if error severity requires escalation to higher-level error handling."""
        return self in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL)


class ToyRobotError(Exception):
    """Base exception class for all toy_robot_sim package errors.

    Carries a unique ``error_id``, a timestamp, a severity, an optional context
    dictionary and a recovery suggestion so that callers (mostly the CLI) can
    log and display failures consistently.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        severity: Union[ErrorSeverity, str] = ErrorSeverity.MEDIUM,
    ):
        """Initialize base exception with message, context, and severity level.

        Args:
            message (str): Primary error description
            context (Optional[dict]): Extra debugging data about the failure
            severity (ErrorSeverity): Error severity level, or its name
        """
        super().__init__(message)

        self.message = message
        self.context: Dict[str, Any] = dict(context) if context else {}
        # Normalize severity names like "high" into the enum
        if isinstance(severity, str):
            try:
                self.severity = ErrorSeverity[severity.upper()]
            except KeyError:
                self.severity = ErrorSeverity.MEDIUM
        else:
            self.severity = severity
        self.timestamp = time.time()
        self.error_id = str(uuid.uuid4())
        # Set by subclasses
        self.recovery_suggestion: Optional[str] = None
        self.logged = False

    def get_error_details(self) -> Dict[str, Any]:
        """Get error details including context, timestamp, and recovery information.

        Returns:
            dict: Dictionary containing all error details and metadata
        """
        details = {
            "error_id": self.error_id,
            "message": self.message,
            "timestamp": self.timestamp,
            "severity": self.severity.name,
            "severity_description": self.severity.get_description(),
            "exception_type": self.__class__.__name__,
            "module": self.__class__.__module__,
        }
        if self.context:
            details["context"] = dict(self.context)
        if self.recovery_suggestion:
            details["recovery_suggestion"] = self.recovery_suggestion
        return details

    def format_for_user(self, include_suggestions: bool = True) -> str:
        """Format error message for display on the command line.

        Args:
            include_suggestions (bool): Whether to append the recovery suggestion

        Returns:
            str: User-friendly error message
        """
        user_message = self.message
        if include_suggestions and self.recovery_suggestion:
            user_message += f"\n\nSuggestion: {self.recovery_suggestion}"
        return user_message

    def log_error(self, logger: Optional[logging.Logger] = None) -> None:
        """Log error once, at a level chosen from its severity.

        Args:
            logger (Optional[logging.Logger]): Logger instance or None for default
        """
        if self.logged:
            return  # Prevent duplicate logging

        if logger is None:
            logger = logging.getLogger("toy_robot_sim.exceptions")

        log_message = f"[{self.error_id}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            log_message += f" | Context: {context_str[:ERROR_CONTEXT_MAX_LENGTH]}"

        if self.severity == ErrorSeverity.LOW:
            logger.info(log_message)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning(log_message)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error(log_message)
        else:  # CRITICAL
            logger.critical(log_message)

        self.logged = True

    def set_recovery_suggestion(self, suggestion: str) -> None:
        """Set recovery suggestion for user guidance.

        Args:
            suggestion (str): Recovery suggestion text
        """
        if len(suggestion) > RECOVERY_SUGGESTION_MAX_LENGTH:
            suggestion = suggestion[: RECOVERY_SUGGESTION_MAX_LENGTH - 3] + "..."
        self.recovery_suggestion = suggestion


class ValidationError(ToyRobotError, ValueError):
    """Exception class for invalid construction parameters.

    Raised for things like negative table dimensions. Inherits from
    ``ValueError`` so generic callers can catch it without importing the
    package hierarchy.
    """

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Optional[Any] = None,
        expected_format: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize validation error with parameter details.

        Args:
            message (str): Primary error description
            parameter_name (Optional[str]): Name of parameter that failed validation
            parameter_value (Optional[Any]): The value that was provided for the parameter
            expected_format (Optional[str]): Expected format or constraint description
        """
        super().__init__(message, context=context, severity=ErrorSeverity.MEDIUM)

        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
        self.expected_format = expected_format

        if expected_format and parameter_name:
            self.set_recovery_suggestion(
                f"Provide {parameter_name} as {expected_format}."
            )
        else:
            self.set_recovery_suggestion(
                "Check input parameters and ensure they meet the expected format and constraints."
            )

    def get_validation_details(self) -> Dict[str, Any]:
        """Get validation error details including parameter information and expected format."""
        details = self.get_error_details()
        details.update(
            {
                "parameter_name": self.parameter_name,
                "parameter_value": self.parameter_value,
                "expected_format": self.expected_format,
            }
        )
        return details


class ConfigurationError(ToyRobotError):
    """Exception class for invalid or unreadable configuration.

    Covers incomplete message catalogs, malformed direction lists and config
    files that cannot be loaded.
    """

    def __init__(
        self,
        message: str,
        config_parameter: Optional[str] = None,
        parameter_value: Optional[Any] = None,
        valid_options: Optional[Dict[str, Any]] = None,
    ):
        """Initialize configuration error with parameter details and valid options.

        Args:
            message (str): Primary error description
            config_parameter (Optional[str]): Configuration parameter that is invalid
            parameter_value (Optional[Any]): Value that was provided for the parameter
            valid_options (Optional[dict]): Dictionary of valid configuration options
        """
        super().__init__(message, severity=ErrorSeverity.HIGH)

        self.config_parameter = config_parameter
        self.parameter_value = parameter_value
        self.valid_options = valid_options or {}
        self.validation_errors: List[str] = []

        if self.valid_options and self.config_parameter:
            options_str = str(list(self.valid_options.keys())[:3])  # Show first 3 options
            self.set_recovery_suggestion(
                f"Use valid options for {self.config_parameter}: {options_str}"
            )
        else:
            self.set_recovery_suggestion(
                "Check configuration parameters against documentation"
            )

    def add_validation_error(self, error_message: str) -> None:
        """Record one of several problems found in the same configuration."""
        if not error_message or not isinstance(error_message, str):
            raise ValueError("Error message must be a non-empty string")
        self.validation_errors.append(error_message)


def format_error_details(error: Exception, include_suggestions: bool = True) -> str:
    """Render any exception as a single user-facing string.

    Package errors use :meth:`ToyRobotError.format_for_user`; anything else
    falls back to ``"<ExceptionType>: <message>"``.
    """
    if isinstance(error, ToyRobotError):
        return error.format_for_user(include_suggestions=include_suggestions)
    return f"{type(error).__name__}: {error}"
