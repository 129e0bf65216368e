"""Default message catalog.

Templates use ``{name}`` placeholders that the messenger fills from the
message config merged over ``DEFAULT_SUB_MESSAGES``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from ..core.constants import (
    MSG_FACE_NOT_STRING,
    MSG_INVALID_PLACE_ARGUMENTS,
    MSG_MESSAGE_KEY_NOT_FOUND,
    MSG_NEED_MESSAGE_CONFIG,
    MSG_NO_FACE,
    MSG_NO_INITIAL_COMMAND,
    MSG_NO_NEGATIVE_COORDINATES,
    MSG_NON_INT_COORDINATES,
    MSG_PLACE_ME_FIRST,
    MSG_POSITION,
    MSG_UNKNOWN_COMMAND,
    MSG_WRONG_DIRECTION,
    MSG_WRONG_MOVE,
    MSG_WRONG_PLACE,
)

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        MSG_NEED_MESSAGE_CONFIG: "{robot}: I need a message config to talk to you.",
        MSG_MESSAGE_KEY_NOT_FOUND: "{robot}: I don't know the message '{key}'.",
        MSG_WRONG_PLACE: "{robot}: I can't be placed there, it's off the table.",
        MSG_NO_INITIAL_COMMAND: "{robot}: Place me on the table first, with PLACE X,Y,F.",
        MSG_WRONG_MOVE: "{robot}: I won't move, I would fall off the table.",
        MSG_NO_FACE: "{robot}: Tell me which way to face.",
        MSG_FACE_NOT_STRING: "{robot}: The direction I face must be text.",
        MSG_NON_INT_COORDINATES: "{robot}: Coordinates must be whole numbers.",
        MSG_NO_NEGATIVE_COORDINATES: "{robot}: Coordinates can't be negative.",
        MSG_WRONG_DIRECTION: "{robot}: I can only face {directions}.",
        MSG_PLACE_ME_FIRST: "{robot}: I'm not on the table yet, place me first.",
        MSG_POSITION: "{x},{y},{f}",
        MSG_UNKNOWN_COMMAND: "{robot}: I don't understand '{command}'.",
        MSG_INVALID_PLACE_ARGUMENTS: "{robot}: PLACE needs exactly X,Y,F, got '{arguments}'.",
    }
)
"""Built-in templates covering every required catalog key."""

DEFAULT_SUB_MESSAGES: Mapping[str, Any] = MappingProxyType(
    {
        "robot": "Robot",
        "directions": "NORTH, EAST, SOUTH or WEST",
    }
)
"""Substitution values merged under every formatted message."""
