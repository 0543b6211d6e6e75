"""Application entry point."""

import argparse
import logging
import shutil
import sys

from .app.app import StopwatchApp, TimerApp, WatchApp
from .app.app_config import AppConfig, build_scheduler, build_stopwatch
from .app.notifier import BellNotifier
from .common.app import app_dirs
from .common.duration import DurationError, parse_durations
from .common.log import setup_logging
from .events import create_event_bus

logger = logging.getLogger(__name__)


def reset_all() -> None:
    """Delete the app data directory."""
    if app_dirs.app_data_dir.exists():
        shutil.rmtree(app_dirs.app_data_dir)
        print(f"App data directory deleted: {app_dirs.app_data_dir}")
    else:
        print(f"App data directory does not exist: {app_dirs.app_data_dir}")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="termwatch",
        description="A clock with a stopwatch and a timer. "
        "Specify durations to run a queue of timers, or leave them out to start a stopwatch.",
    )
    parser.add_argument("durations", nargs="*", metavar="DURATION", help="supported formats - [[hh:]mm:]ss")
    parser.add_argument("--log", action="store_true", help="Log to a file in the app data directory")
    parser.add_argument("--temp", action="store_true", help="Run in temporary mode")
    parser.add_argument("--reset-config", action="store_true", help="Delete all app data")
    return parser


def load_config() -> AppConfig:
    """Load the app config, falling back to defaults."""
    if not app_dirs.app_config_path.exists():
        return AppConfig()
    return AppConfig.model_validate_json(app_dirs.app_config_path.read_text())


def build_app(config: AppConfig, durations: list[int]) -> WatchApp:
    """Build the stopwatch app, or the timer app when durations are given."""
    if not durations:
        return StopwatchApp(config, build_stopwatch())

    event_bus = create_event_bus()
    notifier = BellNotifier(chime_count=config.chime_count, chime_gap=config.chime_gap)
    scheduler = build_scheduler(durations, notifier, event_bus)
    app = TimerApp(config, scheduler, event_bus)
    notifier.set_ring(app.ring_bell)
    return app


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.reset_config:
        reset_all()
        return 0

    try:
        durations = parse_durations(args.durations)
    except DurationError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1

    if args.temp:
        app_dirs.use_temp_app_data_dir()

    log_path = setup_logging(app_dirs.app_logs_dir if args.log else None)
    if log_path is not None:
        logger.info("Logging to %s", log_path)

    config = load_config()
    app = build_app(config, durations)
    try:
        app.run()
    finally:
        app_dirs.app_config_path.parent.mkdir(parents=True, exist_ok=True)
        app_dirs.app_config_path.write_text(config.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
