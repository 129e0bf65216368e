"""
Core geometry types for the toy robot simulation.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import DIRECTION_COUNT, MOVEMENT_VECTORS


@dataclass(frozen=True)
class TableSize:
    """Immutable data class for table dimensions.

    Valid cells are ``[0, width) x [0, height)``. A zero dimension is allowed
    and describes a table on which nothing can be placed.
    """

    width: int
    height: int

    def __post_init__(self):
        from ..utils.exceptions import ValidationError

        for name in ("width", "height"):
            value = getattr(self, name)
            # bool is an int subclass, reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"Invalid table size: {name} must be an integer, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                    expected_format="non-negative integer",
                )
            if value < 0:
                raise ValidationError(
                    f"Invalid table size: {name} must be non-negative, got {value}",
                    parameter_name=name,
                    parameter_value=value,
                    expected_format="non-negative integer",
                )

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) is a cell of the table.

        Returns: True if 0 <= x < width AND 0 <= y < height
        """
        return (0 <= x < self.width) and (0 <= y < self.height)

    def total_cells(self) -> int:
        """Calculate the total number of cells on the table."""
        return self.width * self.height

    def to_tuple(self) -> Tuple[int, int]:
        """Convert table size to a tuple."""
        return (self.width, self.height)


@dataclass(frozen=True)
class Position:
    """Immutable placed state of the robot: coordinates plus direction index.

    The unplaced state is represented by ``None`` at the robot level, never by
    a partially filled Position.
    """

    x: int
    y: int
    direction: int

    def __post_init__(self):
        from ..utils.exceptions import ValidationError

        if not 0 <= self.direction < DIRECTION_COUNT:
            raise ValidationError(
                f"Direction index must be in [0, {DIRECTION_COUNT - 1}], got {self.direction}",
                parameter_name="direction",
                parameter_value=self.direction,
            )

    def advanced(self) -> "Position":
        """Return the position one unit ahead along the current direction."""
        dx, dy = MOVEMENT_VECTORS[self.direction]
        return Position(self.x + dx, self.y + dy, self.direction)

    def to_tuple(self) -> Tuple[int, int, int]:
        """Convert position to an (x, y, direction) tuple."""
        return (self.x, self.y, self.direction)
