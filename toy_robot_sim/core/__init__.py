"""
Core package for toy_robot_sim: constants, geometry, the table (boundary
checker), the compass (direction strategy), command results and the robot.
"""

from .compass import Compass
from .constants import (
    DEFAULT_DIRECTIONS,
    DEFAULT_TABLE_HEIGHT,
    DEFAULT_TABLE_SIZE,
    DEFAULT_TABLE_WIDTH,
    PACKAGE_NAME,
    PACKAGE_VERSION,
    REQUIRED_MESSAGE_KEYS,
)
from .geometry import Position, TableSize
from .results import CommandError, ErrorCategory, ErrorKind, is_error
from .robot import CommandResult, Robot
from .table import Table

__all__ = [
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "DEFAULT_DIRECTIONS",
    "DEFAULT_TABLE_HEIGHT",
    "DEFAULT_TABLE_SIZE",
    "DEFAULT_TABLE_WIDTH",
    "REQUIRED_MESSAGE_KEYS",
    "Compass",
    "CommandError",
    "CommandResult",
    "ErrorCategory",
    "ErrorKind",
    "Position",
    "Robot",
    "Table",
    "TableSize",
    "is_error",
]
