"""
Shared fixtures for the toy_robot_sim test suite.

Fixture Categories:
1. Core fixtures: a default 5x5 table, the default messenger and an unplaced robot
2. Factory fixtures: build robots on custom tables or with custom direction labels
3. Logging isolation: undo loguru sinks and the stdlib bridge after each test
"""

import logging

import pytest
from loguru import logger as loguru_logger

from toy_robot_sim.config import RobotConfig
from toy_robot_sim.core.robot import Robot
from toy_robot_sim.core.table import Table
from toy_robot_sim.messaging import DEFAULT_MESSAGES, DEFAULT_SUB_MESSAGES, Messenger


@pytest.fixture
def table():
    """Default 5x5 table."""
    return Table(5, 5)


@pytest.fixture
def messenger():
    """Messenger with the built-in catalog and substitution defaults."""
    return Messenger(DEFAULT_MESSAGES, DEFAULT_SUB_MESSAGES)


@pytest.fixture
def robot_config():
    return RobotConfig()


@pytest.fixture
def robot(robot_config, table, messenger):
    """Unplaced robot on the default table."""
    return Robot(robot_config, table, messenger)


@pytest.fixture
def make_robot(messenger):
    """Factory for robots on arbitrary tables or with custom direction labels."""

    def _make(width=5, height=5, directions=None):
        config = RobotConfig() if directions is None else RobotConfig(directions=directions)
        return Robot(config, Table(width, height), messenger)

    return _make


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Restore stdlib root handlers and drop loguru sinks added by a test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    loguru_logger.remove()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
