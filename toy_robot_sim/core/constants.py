"""Core constants used throughout the `toy_robot_sim` package.

Defaults for the table, the compass and the message catalog keys live here
so that config models, factories and tests agree on a single set of values.
"""

from __future__ import annotations

PACKAGE_NAME = "toy_robot_sim"
PACKAGE_VERSION = "0.1.0"


# Table defaults
DEFAULT_TABLE_WIDTH = 5
DEFAULT_TABLE_HEIGHT = 5
DEFAULT_TABLE_SIZE = (DEFAULT_TABLE_WIDTH, DEFAULT_TABLE_HEIGHT)


# Compass: index into the label tuple is the direction
DIRECTION_NORTH = 0
DIRECTION_EAST = 1
DIRECTION_SOUTH = 2
DIRECTION_WEST = 3
DIRECTION_COUNT = 4
DEFAULT_DIRECTIONS = ("NORTH", "EAST", "SOUTH", "WEST")
MOVEMENT_VECTORS = {
    DIRECTION_NORTH: (0, 1),
    DIRECTION_EAST: (1, 0),
    DIRECTION_SOUTH: (0, -1),
    DIRECTION_WEST: (-1, 0),
}


# Message catalog keys
MSG_NEED_MESSAGE_CONFIG = "needMessageConfig"
MSG_MESSAGE_KEY_NOT_FOUND = "messageKeyNotFound"
MSG_WRONG_PLACE = "wrongPlace"
MSG_NO_INITIAL_COMMAND = "noInitialCommand"
MSG_WRONG_MOVE = "wrongMove"
MSG_NO_FACE = "noFace"
MSG_FACE_NOT_STRING = "faceNotString"
MSG_NON_INT_COORDINATES = "nonIntCoordinates"
MSG_NO_NEGATIVE_COORDINATES = "noNegativeCoordinates"
MSG_WRONG_DIRECTION = "wrongDirection"
MSG_PLACE_ME_FIRST = "placeMeFirst"
MSG_POSITION = "position"
MSG_UNKNOWN_COMMAND = "unknownCommand"
MSG_INVALID_PLACE_ARGUMENTS = "invalidPlaceArguments"

REQUIRED_MESSAGE_KEYS = (
    MSG_NEED_MESSAGE_CONFIG,
    MSG_MESSAGE_KEY_NOT_FOUND,
    MSG_WRONG_PLACE,
    MSG_NO_INITIAL_COMMAND,
    MSG_WRONG_MOVE,
    MSG_NO_FACE,
    MSG_FACE_NOT_STRING,
    MSG_NON_INT_COORDINATES,
    MSG_NO_NEGATIVE_COORDINATES,
    MSG_WRONG_DIRECTION,
    MSG_PLACE_ME_FIRST,
    MSG_POSITION,
)


# Logging defaults
LOG_LEVEL_DEFAULT = "INFO"
