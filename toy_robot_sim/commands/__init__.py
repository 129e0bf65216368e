"""Text command parsing and execution."""

from .parser import COMMAND_NAMES, ParsedCommand, execute, parse_command, run_commands

__all__ = ["COMMAND_NAMES", "ParsedCommand", "execute", "parse_command", "run_commands"]
