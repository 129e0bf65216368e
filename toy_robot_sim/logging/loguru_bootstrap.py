"""
Loguru sinks for the robot session.

Library modules log through ``logging.getLogger(__name__)``; ``setup_logging``
routes those records into loguru. Sinks go to stderr and an optional file,
never stdout, which carries REPORT output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger as _logger

from ..core.constants import LOG_LEVEL_DEFAULT, PACKAGE_NAME
from ..utils.exceptions import ConfigurationError

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

STANDARD_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        _logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def resolve_level(level: str) -> str:
    """Return the loguru level name for ``level`` (case-insensitive).

    Raises:
        ConfigurationError: If loguru does not know the level
    """
    name = str(level).strip().upper()
    try:
        return _logger.level(name).name
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown log level: {level!r}",
            config_parameter="log_level",
            parameter_value=level,
            valid_options={lvl: lvl.lower() for lvl in STANDARD_LEVELS},
        ) from exc


def setup_logging(
    *,
    level: str = LOG_LEVEL_DEFAULT,
    console: bool = True,
    file_path: Optional[str | Path] = None,
    rotation: Optional[str | int] = None,
    retention: Optional[str | int] = None,
    serialize: bool = False,
) -> List[int]:
    """Replace loguru sinks with a stderr sink and an optional file sink.

    The level is validated before any sink is touched, so a bad level leaves
    the current configuration in place.

    Returns:
        list[int]: Ids of the added sinks

    Raises:
        ConfigurationError: If ``level`` is not a loguru level
    """
    lvl = resolve_level(level)
    _logger.remove()

    sink_ids: List[int] = []
    if console:
        sink_ids.append(
            _logger.add(
                sys.stderr,
                level=lvl,
                format=CONSOLE_FORMAT,
                backtrace=False,
                diagnose=False,
                serialize=serialize,
            )
        )
    if file_path:
        sink_ids.append(
            _logger.add(
                str(file_path),
                level=lvl,
                format=FILE_FORMAT,
                rotation=rotation,
                retention=retention,
                backtrace=False,
                diagnose=False,
                serialize=serialize,
            )
        )
    _bridge_stdlib(lvl)
    return sink_ids


def _bridge_stdlib(level: str) -> None:
    """Send root and ``toy_robot_sim.*`` stdlib records to loguru."""
    logging.root.handlers = [InterceptHandler()]
    # loguru-only names such as TRACE or SUCCESS have no stdlib constant
    logging.root.setLevel(getattr(logging, level, logging.DEBUG))
    prefix = PACKAGE_NAME + "."
    for name in list(logging.Logger.manager.loggerDict):
        if name == PACKAGE_NAME or name.startswith(prefix):
            package_logger = logging.getLogger(name)
            package_logger.handlers = []
            package_logger.propagate = True


def get_logger():
    """Return the configured loguru logger instance."""
    return _logger
