from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from toy_robot_sim.commands.parser import REPORT, execute, parse_command
from toy_robot_sim.config import SimulationConfig, TableConfig, create_robot, load_simulation_config
from toy_robot_sim.core.constants import LOG_LEVEL_DEFAULT
from toy_robot_sim.logging import get_logger, setup_logging
from toy_robot_sim.logging.loguru_bootstrap import STANDARD_LEVELS
from toy_robot_sim.utils.exceptions import ToyRobotError, format_error_details

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="toy-robot",
        description="Drive a robot around a table with PLACE X,Y,F / MOVE / LEFT / RIGHT / REPORT",
    )
    p.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Command files to run in order (reads stdin when omitted)",
    )
    p.add_argument("--width", type=int, default=None, help="Table width (override)")
    p.add_argument("--height", type=int, default=None, help="Table height (override)")
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON simulation config (table, robot, messenger)",
    )
    p.add_argument(
        "--quiet-errors",
        action="store_true",
        help="Only print REPORT output, drop rejected-command messages",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        help=(
            "Log level for stderr, case-insensitive: "
            f"{', '.join(STANDARD_LEVELS)} (default WARNING, library default {LOG_LEVEL_DEFAULT})"
        ),
    )
    p.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load the config file (if any), then apply --width/--height overrides."""
    config = load_simulation_config(args.config) if args.config else SimulationConfig()
    if args.width is None and args.height is None:
        return config

    table = TableConfig(
        width=config.table.width if args.width is None else args.width,
        height=config.table.height if args.height is None else args.height,
    )
    return config.model_copy(update={"table": table})


def _iter_lines(files: List[Path], stdin: TextIO) -> Iterator[str]:
    if not files:
        yield from stdin
        return
    for path in files:
        with path.open("r", encoding="utf-8") as handle:
            yield from handle


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        setup_logging(level=args.log_level, file_path=args.log_file)
    except ToyRobotError as exc:
        # No sinks yet, so stderr is the only channel
        print(format_error_details(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR
    log = get_logger()

    try:
        config = _build_config(args)
        robot = create_robot(config)
    except (ToyRobotError, ValueError) as exc:
        # pydantic's ValidationError is a ValueError
        if isinstance(exc, ToyRobotError):
            exc.log_error()
        print(format_error_details(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    log.debug("Robot ready on a {}x{} table", config.table.width, config.table.height)

    try:
        for line in _iter_lines(args.files, sys.stdin):
            command = parse_command(line)
            if command is None:
                continue
            output = execute(robot, command)
            if output is None:
                continue
            if args.quiet_errors and command.name != REPORT:
                continue
            print(output, flush=True)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Reading commands failed: {}", exc)
        print(f"Cannot read commands: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
