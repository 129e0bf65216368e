"""
Direction strategy: an ordered set of four direction labels.

Directions are stored by the robot as an index into this ordering, so
rotation is modular arithmetic and the label set stays configurable (for
example ``("N", "E", "S", "W")`` or localized names).
"""

from typing import Iterable, Optional, Tuple

from ..utils.exceptions import ConfigurationError
from .constants import DEFAULT_DIRECTIONS, DIRECTION_COUNT

__all__ = ["Compass"]


class Compass:
    """Ordered direction labels with index lookup and rotation.

    Index 0 points along +y, then clockwise: index 1 is +x, 2 is -y, 3 is -x.
    """

    def __init__(self, directions: Iterable[str] = DEFAULT_DIRECTIONS):
        labels = tuple(directions)
        if len(labels) != DIRECTION_COUNT:
            raise ConfigurationError(
                f"Exactly {DIRECTION_COUNT} direction labels are required, got {len(labels)}",
                config_parameter="directions",
                parameter_value=labels,
            )
        if not all(isinstance(label, str) and label for label in labels):
            raise ConfigurationError(
                "Direction labels must be non-empty strings",
                config_parameter="directions",
                parameter_value=labels,
            )
        normalized = tuple(label.upper() for label in labels)
        if len(set(normalized)) != DIRECTION_COUNT:
            raise ConfigurationError(
                f"Direction labels must be unique ignoring case, got {labels}",
                config_parameter="directions",
                parameter_value=labels,
            )
        self._labels: Tuple[str, ...] = normalized

    @classmethod
    def from_config(cls, config) -> "Compass":
        """Build a compass from anything exposing a ``directions`` sequence."""
        if isinstance(config, Compass):
            return config
        return cls(config.directions)

    @property
    def directions(self) -> Tuple[str, ...]:
        return self._labels

    def index_of(self, label: str) -> Optional[int]:
        """Return the direction index for an uppercase label, or None if unknown."""
        try:
            return self._labels.index(label)
        except ValueError:
            return None

    def is_valid(self, label: str) -> bool:
        return label in self._labels

    def label(self, index: int) -> str:
        return self._labels[index]

    def rotate(self, index: int, step: int) -> int:
        """Rotate a direction index by ``step`` quarter turns (positive is clockwise)."""
        return (index + step) % DIRECTION_COUNT

    def __repr__(self) -> str:
        return f"Compass({list(self._labels)!r})"
