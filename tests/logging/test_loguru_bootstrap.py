import logging
from pathlib import Path

import pytest

from toy_robot_sim.logging.loguru_bootstrap import (
    InterceptHandler,
    get_logger,
    resolve_level,
    setup_logging,
)
from toy_robot_sim.utils.exceptions import ConfigurationError


def test_setup_logging_console_and_file(tmp_path: Path):
    logfile = tmp_path / "app.log"
    setup_logging(level="INFO", console=True, file_path=logfile)
    logger = get_logger()
    logger.info("hello from loguru")

    std = logging.getLogger("std")
    std.info("hello from stdlib")

    # Removing sinks closes the file sink
    logger.remove()

    data = logfile.read_text(encoding="utf-8")
    assert "hello from loguru" in data
    assert "hello from stdlib" in data


def test_package_loggers_are_bridged(tmp_path: Path):
    from toy_robot_sim.config import create_robot

    logfile = tmp_path / "robot.log"
    setup_logging(level="DEBUG", console=False, file_path=logfile)
    robot = create_robot()
    robot.place(0, 0, "SOUTH")
    robot.move()
    get_logger().remove()

    data = logfile.read_text(encoding="utf-8")
    assert "Robot placed at 0,0 facing SOUTH" in data
    assert "WRONG_MOVE" in data


def test_level_filters_records(tmp_path: Path):
    logfile = tmp_path / "quiet.log"
    setup_logging(level="warning", console=False, file_path=logfile)
    logging.getLogger("toy_robot_sim.test").info("not shown")
    logging.getLogger("toy_robot_sim.test").warning("shown")
    get_logger().remove()

    data = logfile.read_text(encoding="utf-8")
    assert "shown" in data
    assert "not shown" not in data


def test_root_logger_uses_intercept_handler():
    setup_logging(level="INFO", console=False)
    assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)


def test_import_has_no_side_effects():
    import importlib

    m = importlib.import_module("toy_robot_sim.logging.loguru_bootstrap")
    assert hasattr(m, "setup_logging")


@pytest.mark.parametrize("level,expected", [("info", "INFO"), (" Debug ", "DEBUG"), ("success", "SUCCESS")])
def test_resolve_level_is_case_insensitive(level, expected):
    assert resolve_level(level) == expected


def test_unknown_level_raises_before_touching_sinks(tmp_path: Path):
    logfile = tmp_path / "kept.log"
    setup_logging(level="INFO", console=False, file_path=logfile)

    with pytest.raises(ConfigurationError) as exc_info:
        setup_logging(level="LOUD", console=False)
    assert exc_info.value.config_parameter == "log_level"
    assert "WARNING" in exc_info.value.valid_options

    # The earlier file sink is still installed
    logging.getLogger("toy_robot_sim.test").warning("still logging")
    get_logger().remove()
    assert "still logging" in logfile.read_text(encoding="utf-8")


def test_returns_sink_ids(tmp_path: Path):
    ids = setup_logging(level="INFO", console=True, file_path=tmp_path / "x.log")
    assert len(ids) == 2
    for sink_id in ids:
        get_logger().remove(sink_id)


def test_only_package_loggers_are_rewired():
    foreign = logging.getLogger("someone.else")
    own = logging.getLogger("toy_robot_sim.rewired")
    foreign_handler = logging.NullHandler()
    foreign.addHandler(foreign_handler)
    own.addHandler(logging.NullHandler())
    try:
        setup_logging(level="INFO", console=False)
        assert foreign.handlers == [foreign_handler]
        assert own.handlers == []
    finally:
        foreign.removeHandler(foreign_handler)
