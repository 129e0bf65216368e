"""
Text command front-end for the robot.

Turns lines such as ``PLACE 1,2,NORTH`` or ``move`` into robot calls. Command
words are case-insensitive and spaces around commas are ignored. The PLACE
arguments themselves are validated by :meth:`Robot.place`, so a script and a
direct API call produce the same errors.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.results import CommandError, ErrorKind
from ..core.robot import Robot

__all__ = [
    "COMMAND_NAMES",
    "ParsedCommand",
    "parse_command",
    "execute",
    "run_commands",
]

logger = logging.getLogger(__name__)

PLACE = "PLACE"
MOVE = "MOVE"
LEFT = "LEFT"
RIGHT = "RIGHT"
REPORT = "REPORT"
COMMAND_NAMES = (PLACE, MOVE, LEFT, RIGHT, REPORT)

COMMENT_PREFIX = "#"
PLACE_ARITY = 3


@dataclass(frozen=True)
class ParsedCommand:
    """A command word (uppercased) and its raw comma-separated arguments."""

    name: str
    args: Tuple[str, ...] = ()
    raw: str = ""


def parse_command(line: str) -> Optional[ParsedCommand]:
    """Split one input line into a command.

    Returns None for blank lines and ``#`` comments. The command word is
    uppercased; everything after the first run of whitespace is split on
    commas and stripped.

    Example:
        >>> parse_command("place 1, 2,north")
        ParsedCommand(name='PLACE', args=('1', '2', 'north'), raw='place 1, 2,north')
    """
    text = line.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    word, *tail = text.split(None, 1)
    rest = tail[0].strip() if tail else ""
    args = tuple(part.strip() for part in rest.split(",")) if rest else ()
    return ParsedCommand(name=word.upper(), args=args, raw=text)


def execute(robot: Robot, command: ParsedCommand) -> Optional[str]:
    """Run a parsed command against ``robot``.

    Returns:
        The report text for REPORT, the error message when the command fails,
        or None when a movement command succeeds.
    """
    if command.name == PLACE:
        if len(command.args) != PLACE_ARITY:
            return _command_error(
                robot,
                ErrorKind.INVALID_PLACE_ARGUMENTS,
                arguments=",".join(command.args),
            ).message
        result = robot.place(*command.args)
    elif command.name == MOVE:
        result = robot.move()
    elif command.name == LEFT:
        result = robot.left()
    elif command.name == RIGHT:
        result = robot.right()
    elif command.name == REPORT:
        return robot.report()
    else:
        return _command_error(robot, ErrorKind.UNKNOWN_COMMAND, command=command.raw).message

    if isinstance(result, CommandError):
        return result.message
    return None


def run_commands(robot: Robot, lines: Iterable[str]) -> List[str]:
    """Execute a script line by line, collecting every produced output."""
    outputs: List[str] = []
    for line_number, line in enumerate(lines, start=1):
        command = parse_command(line)
        if command is None:
            continue
        output = execute(robot, command)
        if output is not None:
            logger.debug("line %d (%s): %s", line_number, command.name, output)
            outputs.append(output)
    return outputs


def _command_error(robot: Robot, kind: ErrorKind, **values) -> CommandError:
    return CommandError(kind=kind, message=robot.messenger.render(kind.message_key, **values))
