"""
Factory functions for creating components from configs.

This module provides functions to instantiate the table, compass, messenger
and robot from Pydantic configuration models, enabling config-driven
session creation.

Example:
    >>> from toy_robot_sim.config import load_simulation_config, create_robot
    >>>
    >>> config = load_simulation_config("conf/simulation.yaml")
    >>> robot = create_robot(config)
"""

from typing import Optional

from ..core.compass import Compass
from ..core.robot import Robot
from ..core.table import Table
from ..messaging.messenger import Messenger
from .component_configs import MessengerConfig, RobotConfig, SimulationConfig, TableConfig

__all__ = [
    "create_table",
    "create_compass",
    "create_messenger",
    "create_robot",
]


def create_table(config: TableConfig) -> Table:
    """Create the boundary checker from configuration.

    Example:
        >>> create_table(TableConfig(width=5, height=5)).is_out_of_table(5, 0)
        True
    """
    return Table(config.width, config.height)


def create_compass(config: RobotConfig) -> Compass:
    """Create the direction strategy from configuration."""
    return Compass(config.directions)


def create_messenger(config: MessengerConfig) -> Messenger:
    """Create the messenger from configuration."""
    return Messenger(config.messages, config.sub_messages)


def create_robot(config: Optional[SimulationConfig] = None) -> Robot:
    """Create a fully wired, unplaced robot.

    Args:
        config: Complete session configuration; defaults to a 5x5 table with
            the built-in compass and message catalog

    Returns:
        Robot: New robot in the unplaced state
    """
    if config is None:
        config = SimulationConfig()

    return Robot(
        create_compass(config.robot),
        create_table(config.table),
        create_messenger(config.messenger),
    )
