"""Terminal CLI entrypoint for Workout Tool."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from workout_tool.core.config import APP_NAME, APP_VERSION, DashboardConfig
from workout_tool.core.controller import DashboardController
from workout_tool.core.errors import DashboardError
from workout_tool.core.events import EventChannel, EventSource
from workout_tool.ui.renderer import RichRenderer
from workout_tool.ui.terminal import TerminalSession

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-tool",
        description="Terminal dashboard for splits, sets and rest timing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug logs to this file (the terminal is used by the dashboard)",
    )
    return parser


def configure_logging(log_file: Path | None) -> None:
    root = logging.getLogger("workout_tool")
    if log_file is None:
        # The dashboard owns the screen; keep records off stderr.
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def run_dashboard(config: DashboardConfig | None = None) -> int:
    config = config or DashboardConfig()
    channel = EventChannel()

    with TerminalSession() as terminal:
        source = EventSource(
            terminal.keyboard(),
            channel,
            tick_period_sec=config.tick_period_sec,
        )
        controller = DashboardController(channel, RichRenderer(title=config.title), config)
        source.start()
        try:
            state = controller.run()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return 0
    logger.info("Session ended with %d sets on split %d", state.set_counter, state.selected_split)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    try:
        return run_dashboard()
    except DashboardError as exc:
        logger.exception("Dashboard failed")
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
