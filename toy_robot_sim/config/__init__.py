"""Configuration layer: pydantic models, file loading and component factories."""

from .component_configs import (
    MessengerConfig,
    RobotConfig,
    SimulationConfig,
    TableConfig,
    load_simulation_config,
)
from .factories import create_compass, create_messenger, create_robot, create_table

__all__ = [
    "MessengerConfig",
    "RobotConfig",
    "SimulationConfig",
    "TableConfig",
    "create_compass",
    "create_messenger",
    "create_robot",
    "create_table",
    "load_simulation_config",
]
