"""
Messenger: renders user-facing text from a catalog of ``{name}`` templates.

All text the robot shows to a user goes through here, including its error
messages, so swapping the catalog changes the wording (or the language) of the
whole simulation without touching robot logic.
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..core.constants import (
    MSG_MESSAGE_KEY_NOT_FOUND,
    MSG_NEED_MESSAGE_CONFIG,
    REQUIRED_MESSAGE_KEYS,
)
from ..utils.exceptions import ConfigurationError

__all__ = ["Messenger"]

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"{(\w+)}")


class Messenger:
    """Template lookup plus placeholder substitution.

    Args:
        messages: Mapping of message key to template string. Must contain every
            key in ``REQUIRED_MESSAGE_KEYS``.
        sub_messages: Default substitution values merged under the values of
            each message config. Message-specific values win on collision.

    Raises:
        ConfigurationError: If the catalog is missing required keys or holds
            non-string templates.

    Example:
        >>> messenger = Messenger(DEFAULT_MESSAGES)
        >>> messenger.format({"msg": "position", "x": 3, "y": 3, "f": "NORTH"})
        '3,3,NORTH'
    """

    def __init__(
        self,
        messages: Mapping[str, str],
        sub_messages: Optional[Mapping[str, Any]] = None,
    ):
        missing = [key for key in REQUIRED_MESSAGE_KEYS if key not in messages]
        if missing:
            error = ConfigurationError(
                f"Message catalog is missing required keys: {', '.join(missing)}",
                config_parameter="messages",
                valid_options={key: "template string" for key in missing},
            )
            for key in missing:
                error.add_validation_error(f"missing message key '{key}'")
            raise error

        bad_templates = [key for key, value in messages.items() if not isinstance(value, str)]
        if bad_templates:
            raise ConfigurationError(
                f"Message templates must be strings: {', '.join(map(str, bad_templates))}",
                config_parameter="messages",
            )

        # Copies, so later changes to the caller's dicts never leak in
        self._messages: Mapping[str, str] = MappingProxyType(dict(messages))
        self._sub_messages: Mapping[str, Any] = MappingProxyType(dict(sub_messages or {}))

    @property
    def messages(self) -> Mapping[str, str]:
        return self._messages

    @property
    def sub_messages(self) -> Mapping[str, Any]:
        return self._sub_messages

    def format(self, message_config: Optional[Mapping[str, Any]] = None) -> str:
        """Render the message named by ``message_config["msg"]``.

        Args:
            message_config: ``{"msg": "messageKey", **values}``

        Returns:
            str: The rendered message. A missing or empty config renders the
            ``needMessageConfig`` message; an unknown key renders
            ``messageKeyNotFound`` with ``key`` set to the offending name.
        """
        if not message_config:
            return self.format({"msg": MSG_NEED_MESSAGE_CONFIG})

        key = message_config.get("msg")
        if not isinstance(key, str) or key not in self._messages:
            logger.debug("Unknown message key requested: %r", key)
            return self.format({"msg": MSG_MESSAGE_KEY_NOT_FOUND, "key": key})

        return self._generate_message(key, message_config)

    def render(self, key: str, **values: Any) -> str:
        """Shorthand for ``format({"msg": key, **values})``."""
        return self.format({"msg": key, **values})

    def _generate_message(self, key: str, message_config: Mapping[str, Any]) -> str:
        combined = {**self._sub_messages, **message_config}

        def substitute(match: "re.Match[str]") -> str:
            # Unmatched placeholders render empty rather than failing
            value = combined.get(match.group(1))
            return "" if value is None else str(value)

        return PLACEHOLDER_PATTERN.sub(substitute, self._messages[key])

    def __repr__(self) -> str:
        return f"Messenger(messages={len(self._messages)} templates)"
