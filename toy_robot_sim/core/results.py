"""
Result values returned by robot commands.

Every public robot command returns either the robot itself (success) or a
:class:`CommandError` (failure). Command errors are plain values, never raised,
so a front-end can print ``error.message`` and keep reading commands.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import (
    MSG_FACE_NOT_STRING,
    MSG_INVALID_PLACE_ARGUMENTS,
    MSG_NO_FACE,
    MSG_NO_INITIAL_COMMAND,
    MSG_NO_NEGATIVE_COORDINATES,
    MSG_NON_INT_COORDINATES,
    MSG_UNKNOWN_COMMAND,
    MSG_WRONG_DIRECTION,
    MSG_WRONG_MOVE,
    MSG_WRONG_PLACE,
)

__all__ = ["ErrorCategory", "ErrorKind", "CommandError", "is_error"]


class ErrorCategory(Enum):
    """Broad classes of command failures."""

    VALIDATION = "validation"  # bad PLACE arguments
    DOMAIN = "domain"  # off the table, or not placed yet
    COMMAND = "command"  # text the parser could not turn into a call


class ErrorKind(Enum):
    """Enumeration of command failures, valued by their message catalog key."""

    NO_FACE = MSG_NO_FACE
    FACE_NOT_STRING = MSG_FACE_NOT_STRING
    NON_INT_COORDINATES = MSG_NON_INT_COORDINATES
    NO_NEGATIVE_COORDINATES = MSG_NO_NEGATIVE_COORDINATES
    WRONG_DIRECTION = MSG_WRONG_DIRECTION
    WRONG_PLACE = MSG_WRONG_PLACE
    WRONG_MOVE = MSG_WRONG_MOVE
    NO_INITIAL_COMMAND = MSG_NO_INITIAL_COMMAND
    UNKNOWN_COMMAND = MSG_UNKNOWN_COMMAND
    INVALID_PLACE_ARGUMENTS = MSG_INVALID_PLACE_ARGUMENTS

    @property
    def message_key(self) -> str:
        """Catalog key used to render this failure."""
        return self.value

    @property
    def category(self) -> ErrorCategory:
        if self in _VALIDATION_KINDS:
            return ErrorCategory.VALIDATION
        if self in _COMMAND_KINDS:
            return ErrorCategory.COMMAND
        return ErrorCategory.DOMAIN


_VALIDATION_KINDS = frozenset(
    {
        ErrorKind.NO_FACE,
        ErrorKind.FACE_NOT_STRING,
        ErrorKind.NON_INT_COORDINATES,
        ErrorKind.NO_NEGATIVE_COORDINATES,
        ErrorKind.WRONG_DIRECTION,
    }
)

_COMMAND_KINDS = frozenset({ErrorKind.UNKNOWN_COMMAND, ErrorKind.INVALID_PLACE_ARGUMENTS})


@dataclass(frozen=True)
class CommandError:
    """Failure outcome of a robot command.

    Attributes:
        kind: Which check failed
        message: The text rendered by the robot's messenger for ``kind``
    """

    kind: ErrorKind
    message: str

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category

    def __str__(self) -> str:
        return self.message


def is_error(result: Any) -> bool:
    """Return True when a command result is a failure."""
    return isinstance(result, CommandError)
