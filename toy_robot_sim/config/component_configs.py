"""
Pydantic configuration models for simulation components.

This module defines validated, immutable configuration classes for the table,
the robot's compass and the messenger, plus a composite model used by the CLI
and by config files.

Example:
    >>> from toy_robot_sim.config import SimulationConfig, create_robot
    >>>
    >>> config = SimulationConfig(table={"width": 8, "height": 8})
    >>> robot = create_robot(config)
"""

from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.constants import (
    DEFAULT_DIRECTIONS,
    DEFAULT_TABLE_HEIGHT,
    DEFAULT_TABLE_WIDTH,
    DIRECTION_COUNT,
    REQUIRED_MESSAGE_KEYS,
)
from ..messaging.catalog import DEFAULT_MESSAGES, DEFAULT_SUB_MESSAGES
from ..utils.exceptions import ConfigurationError

__all__ = [
    "TableConfig",
    "RobotConfig",
    "MessengerConfig",
    "SimulationConfig",
    "load_simulation_config",
]


class TableConfig(BaseModel):
    """Configuration for the table (boundary checker).

    Attributes:
        width: Number of columns, valid x is ``[0, width)``
        height: Number of rows, valid y is ``[0, height)``
    """

    width: int = Field(
        default=DEFAULT_TABLE_WIDTH, ge=0, strict=True, description="Table width in cells"
    )
    height: int = Field(
        default=DEFAULT_TABLE_HEIGHT, ge=0, strict=True, description="Table height in cells"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class RobotConfig(BaseModel):
    """Configuration for the robot's direction labels.

    Attributes:
        directions: Four labels in clockwise order starting from +y. Labels are
            stored uppercase and must be unique.

    Example:
        >>> RobotConfig(directions=("n", "e", "s", "w")).directions
        ('N', 'E', 'S', 'W')
    """

    directions: Tuple[str, ...] = Field(
        default=DEFAULT_DIRECTIONS,
        description="Direction labels in rotational order (index = direction)",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("directions")
    @classmethod
    def validate_directions(cls, v):
        """Require exactly four unique, non-empty labels; normalize to uppercase."""
        if len(v) != DIRECTION_COUNT:
            raise ValueError(
                f"directions must hold exactly {DIRECTION_COUNT} labels, got {len(v)}"
            )
        labels = tuple(label.strip().upper() for label in v)
        if not all(labels):
            raise ValueError("direction labels must be non-empty")
        if len(set(labels)) != DIRECTION_COUNT:
            raise ValueError(f"direction labels must be unique, got {labels}")
        return labels


class MessengerConfig(BaseModel):
    """Configuration for the messenger.

    Attributes:
        messages: Message key to ``{name}`` template. Defaults to the built-in
            catalog; a partial catalog is rejected.
        sub_messages: Default substitution values merged under every message
    """

    messages: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_MESSAGES),
        description="Message catalog (key -> template)",
    )
    sub_messages: Dict[str, Any] = Field(
        default_factory=lambda: dict(DEFAULT_SUB_MESSAGES),
        description="Default placeholder values",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("messages")
    @classmethod
    def validate_required_keys(cls, v):
        """Reject catalogs that lack any message the robot can emit."""
        missing = [key for key in REQUIRED_MESSAGE_KEYS if key not in v]
        if missing:
            raise ValueError(f"messages is missing required keys: {missing}")
        return v


class SimulationConfig(BaseModel):
    """Complete configuration for one robot session.

    Example:
        >>> config = SimulationConfig(
        ...     table=TableConfig(width=10, height=10),
        ...     robot=RobotConfig(directions=("N", "E", "S", "W")),
        ... )
    """

    table: TableConfig = Field(default_factory=TableConfig)
    robot: RobotConfig = Field(default_factory=RobotConfig)
    messenger: MessengerConfig = Field(default_factory=MessengerConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_simulation_config(path: Union[str, Path]) -> SimulationConfig:
    """Load a :class:`SimulationConfig` from a YAML or JSON file.

    Args:
        path: File ending in ``.yaml``, ``.yml`` or ``.json``

    Returns:
        SimulationConfig: Validated configuration

    Raises:
        ConfigurationError: If the suffix is unsupported, the file cannot be
            read or parsed, or its content fails validation
    """
    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported config file type: {config_path.name}",
            config_parameter="config",
            parameter_value=str(config_path),
            valid_options={".yaml": "YAML", ".yml": "YAML", ".json": "JSON"},
        )

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Cannot read config file {config_path}: {exc}",
            config_parameter="config",
            parameter_value=str(config_path),
        ) from exc

    try:
        if suffix == ".json":
            return SimulationConfig.model_validate_json(text or "{}")
        data = yaml.safe_load(text) or {}
        return SimulationConfig.model_validate(data)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {exc}",
            config_parameter="config",
            parameter_value=str(config_path),
        ) from exc
    except PydanticValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in detail['loc']) or '<root>'}: {detail['msg']}"
            for detail in exc.errors()
        ]
        error = ConfigurationError(
            f"Invalid configuration in {config_path}: {'; '.join(problems)}",
            config_parameter="config",
            parameter_value=str(config_path),
        )
        for problem in problems:
            error.add_validation_error(problem)
        raise error from exc
