"""
Robot: position/orientation state and the command surface.

The robot starts unplaced. A successful ``place`` puts it on the table; after
that ``move``, ``left`` and ``right`` change its state and ``report`` describes
it. Every command returns the robot itself on success, so calls chain, or a
:class:`CommandError` on failure, in which case the state is left untouched.

Boundary questions go to the injected :class:`Table`, all user-facing text to
the injected :class:`Messenger`, and direction labels to the :class:`Compass`
built from the robot config.
"""

import logging
import numbers
import re
from typing import Any, Optional, Union

from ..messaging.messenger import Messenger
from .compass import Compass
from .constants import MSG_PLACE_ME_FIRST, MSG_POSITION
from .geometry import Position
from .results import CommandError, ErrorKind
from .table import Table

__all__ = ["Robot", "CommandResult"]

logger = logging.getLogger(__name__)

CommandResult = Union["Robot", CommandError]

# Decimal text whose fractional digits, if any, are all zero
INTEGRAL_TEXT = re.compile(r"([+-]?\d+)(?:\.0*)?")


class Robot:
    """Single robot on a bounded table.

    Args:
        config: Object exposing ``directions`` (four labels in rotational
            order), typically a :class:`~toy_robot_sim.config.RobotConfig`, or a
            ready :class:`Compass`
        table: Boundary checker for the table
        messenger: Renders every message the robot returns

    Example:
        >>> robot = create_robot()
        >>> robot.place(1, 2, "east").move().move().left().move().report()
        '3,3,NORTH'
    """

    def __init__(self, config: Any, table: Table, messenger: Messenger):
        self._compass = Compass.from_config(config)
        self._table = table
        self._messenger = messenger
        self._has_been_placed = False
        self._position: Optional[Position] = None

    @property
    def messenger(self) -> Messenger:
        """The injected messenger, for front-ends that echo errors."""
        return self._messenger

    @property
    def table(self) -> Table:
        return self._table

    @property
    def compass(self) -> Compass:
        return self._compass

    @property
    def position(self) -> Optional[Position]:
        """Current placed state, or None while unplaced."""
        return self._position

    @property
    def has_been_placed(self) -> bool:
        return self._has_been_placed

    @property
    def facing(self) -> Optional[str]:
        """Label of the current direction, or None while unplaced."""
        if self._position is None:
            return None
        return self._compass.label(self._position.direction)

    def place(self, x: Any, y: Any, f: Any) -> CommandResult:
        """Put the robot at (x, y) facing ``f``.

        Input is validated first (direction present and textual, integer
        non-negative coordinates, known direction label, case-insensitive),
        then the target is checked against the table.
        """
        validated = self._validate_input(x, y, f)
        if isinstance(validated, CommandError):
            return validated

        if self._is_out_of_table(validated.x, validated.y):
            return self._error(ErrorKind.WRONG_PLACE)

        self._position = validated
        self._has_been_placed = True
        logger.info(
            "Robot placed at %d,%d facing %s",
            validated.x,
            validated.y,
            self._compass.label(validated.direction),
        )
        return self

    def move(self) -> CommandResult:
        """Advance one unit in the current direction unless that leaves the table."""
        if not self._has_been_placed:
            return self._error(ErrorKind.NO_INITIAL_COMMAND)

        candidate = self._position.advanced()
        if self._is_out_of_table(candidate.x, candidate.y):
            return self._error(ErrorKind.WRONG_MOVE)

        self._position = candidate
        logger.debug("Robot moved to %d,%d", candidate.x, candidate.y)
        return self

    def right(self) -> CommandResult:
        """Rotate a quarter turn clockwise."""
        return self._turn(1)

    def left(self) -> CommandResult:
        """Rotate a quarter turn counter-clockwise."""
        return self._turn(-1)

    def report(self) -> str:
        """Describe the current state, or ask to be placed first."""
        if self._position is None:
            return self._messenger.render(MSG_PLACE_ME_FIRST)
        return self._messenger.render(
            MSG_POSITION,
            x=self._position.x,
            y=self._position.y,
            f=self._compass.label(self._position.direction),
        )

    def _turn(self, step: int) -> CommandResult:
        if not self._has_been_placed:
            return self._error(ErrorKind.NO_INITIAL_COMMAND)

        current = self._position
        self._position = Position(
            current.x, current.y, self._compass.rotate(current.direction, step)
        )
        logger.debug("Robot turned to face %s", self.facing)
        return self

    def _validate_input(self, x: Any, y: Any, f: Any) -> Union[Position, CommandError]:
        # Order matters: the first failing check decides the error
        if not f:
            return self._error(ErrorKind.NO_FACE)

        if not isinstance(f, str):
            return self._error(ErrorKind.FACE_NOT_STRING)

        face = f.upper()
        parsed_x = _parse_int(x)
        parsed_y = _parse_int(y)
        if parsed_x is None or parsed_y is None:
            return self._error(ErrorKind.NON_INT_COORDINATES)

        if parsed_x < 0 or parsed_y < 0:
            return self._error(ErrorKind.NO_NEGATIVE_COORDINATES)

        direction = self._compass.index_of(face)
        if direction is None:
            return self._error(
                ErrorKind.WRONG_DIRECTION,
                directions=", ".join(self._compass.directions),
            )

        return Position(parsed_x, parsed_y, direction)

    def _is_out_of_table(self, x: int, y: int) -> bool:
        return self._table.is_out_of_table(x, y)

    def _error(self, kind: ErrorKind, **values: Any) -> CommandError:
        message = self._messenger.render(kind.message_key, **values)
        logger.debug("Command rejected (%s): %s", kind.name, message)
        return CommandError(kind=kind, message=message)

    def __repr__(self) -> str:
        if self._position is None:
            return "Robot(unplaced)"
        return f"Robot(x={self._position.x}, y={self._position.y}, f={self.facing})"


def _parse_int(value: Any) -> Optional[int]:
    """Parse an integer coordinate from a number or decimal text.

    Numbers and text follow the same rule: the value must be integral, so
    ``4``, ``4.0``, ``"4"`` and ``" 4.0 "`` all give 4 while ``4.5`` and
    ``"4.5"`` give None. Booleans, non-finite floats, exponent notation and
    other text give None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value) if float(value).is_integer() else None
    if isinstance(value, str):
        match = INTEGRAL_TEXT.fullmatch(value.strip())
        return int(match.group(1)) if match else None
    return None
