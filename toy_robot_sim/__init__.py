"""Public package initializer exposing the robot, its collaborators and factories."""

from __future__ import annotations

from typing import Dict

from .config import (
    MessengerConfig,
    RobotConfig,
    SimulationConfig,
    TableConfig,
    create_robot,
    load_simulation_config,
)
from .core import (
    DEFAULT_DIRECTIONS,
    DEFAULT_TABLE_SIZE,
    PACKAGE_NAME,
    PACKAGE_VERSION,
    CommandError,
    Compass,
    ErrorKind,
    Position,
    Robot,
    Table,
    TableSize,
    is_error,
)
from .messaging import DEFAULT_MESSAGES, Messenger
from .utils.exceptions import ConfigurationError, ToyRobotError, ValidationError

__version__ = PACKAGE_VERSION


def get_package_info() -> Dict[str, object]:
    """Return basic package metadata."""
    return {
        "name": PACKAGE_NAME,
        "version": __version__,
        "default_table_size": DEFAULT_TABLE_SIZE,
        "default_directions": DEFAULT_DIRECTIONS,
    }


__all__ = [
    "__version__",
    "CommandError",
    "Compass",
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "ErrorKind",
    "Messenger",
    "MessengerConfig",
    "Position",
    "Robot",
    "RobotConfig",
    "SimulationConfig",
    "Table",
    "TableConfig",
    "TableSize",
    "ToyRobotError",
    "ValidationError",
    "create_robot",
    "get_package_info",
    "is_error",
    "load_simulation_config",
]
