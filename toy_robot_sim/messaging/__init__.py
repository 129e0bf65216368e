"""Message catalog and template rendering."""

from .catalog import DEFAULT_MESSAGES, DEFAULT_SUB_MESSAGES
from .messenger import Messenger

__all__ = ["DEFAULT_MESSAGES", "DEFAULT_SUB_MESSAGES", "Messenger"]
