"""Contract enforcement tests for exception classes.

These tests prevent accidental API changes to the exception hierarchy that the
CLI and config loader rely on.
"""

import inspect
import logging

import pytest

from toy_robot_sim.utils.exceptions import (
    ConfigurationError,
    ErrorSeverity,
    ToyRobotError,
    ValidationError,
    format_error_details,
)


class TestValidationErrorContract:
    def test_signature_is_stable(self):
        params = list(inspect.signature(ValidationError.__init__).parameters)
        assert params == [
            "self",
            "message",
            "parameter_name",
            "parameter_value",
            "expected_format",
            "context",
        ]

    def test_only_message_is_required(self):
        error = ValidationError("test message")
        assert error.message == "test message"
        assert error.parameter_name is None
        assert error.parameter_value is None
        assert error.expected_format is None

    def test_is_value_error_and_package_error(self):
        error = ValidationError("bad", parameter_name="width", parameter_value=-1)
        assert isinstance(error, ValueError)
        assert isinstance(error, ToyRobotError)

    def test_recovery_suggestion_uses_expected_format(self):
        error = ValidationError("bad", parameter_name="width", expected_format="an int")
        assert error.recovery_suggestion == "Provide width as an int."
        details = error.get_validation_details()
        assert details["parameter_name"] == "width"
        assert details["expected_format"] == "an int"


class TestConfigurationErrorContract:
    def test_signature_is_stable(self):
        params = list(inspect.signature(ConfigurationError.__init__).parameters)
        assert params == [
            "self",
            "message",
            "config_parameter",
            "parameter_value",
            "valid_options",
        ]

    def test_severity_is_high(self):
        error = ConfigurationError("broken")
        assert error.severity is ErrorSeverity.HIGH
        assert error.severity.should_escalate()
        assert error.valid_options == {}

    def test_add_validation_error(self):
        error = ConfigurationError("broken")
        error.add_validation_error("missing key")
        assert error.validation_errors == ["missing key"]
        with pytest.raises(ValueError):
            error.add_validation_error("")

    def test_suggestion_lists_options(self):
        error = ConfigurationError("bad", config_parameter="config", valid_options={".yaml": "YAML"})
        assert "['.yaml']" in error.recovery_suggestion


class TestToyRobotError:
    def test_details(self):
        error = ToyRobotError("boom", context={"x": 1}, severity="low")
        details = error.get_error_details()
        assert details["severity"] == "LOW"
        assert details["context"] == {"x": 1}
        assert details["exception_type"] == "ToyRobotError"
        assert error.error_id

    def test_unknown_severity_name_defaults_to_medium(self):
        assert ToyRobotError("x", severity="weird").severity is ErrorSeverity.MEDIUM

    def test_long_suggestion_is_truncated(self):
        error = ToyRobotError("x")
        error.set_recovery_suggestion("a" * 800)
        assert len(error.recovery_suggestion) == 500
        assert error.recovery_suggestion.endswith("...")

    @pytest.mark.parametrize(
        "severity,level",
        [
            (ErrorSeverity.LOW, logging.INFO),
            (ErrorSeverity.MEDIUM, logging.WARNING),
            (ErrorSeverity.HIGH, logging.ERROR),
            (ErrorSeverity.CRITICAL, logging.CRITICAL),
        ],
    )
    def test_log_error_level_follows_severity(self, caplog, severity, level):
        error = ToyRobotError("logged once", severity=severity)
        with caplog.at_level(logging.DEBUG, logger="toy_robot_sim.exceptions"):
            error.log_error()
            error.log_error()
        records = [r for r in caplog.records if "logged once" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == level
        assert error.logged


def test_format_error_details():
    error = ConfigurationError("bad config")
    assert format_error_details(error).startswith("bad config\n\nSuggestion: ")
    assert format_error_details(error, include_suggestions=False) == "bad config"
    assert format_error_details(KeyError("k")) == "KeyError: 'k'"
