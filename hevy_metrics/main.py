"""
Main entry point for Hevy metrics.

Provides CLI interface for appending the latest workout to the workout
log and for saving the current workout count.
"""

import sys
import logging
import argparse
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, PathConfig
from .errors import HevyMetricsError
from .formatting import format_workout
from .hevy_client import HevyClient
from .metrics_store import append_workout_block, save_workout_count


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def cmd_last_workout(args: argparse.Namespace, config: AppConfig) -> None:
    """Append the most recent workout to the workout log."""
    client = HevyClient(config.require_hevy())
    workout = client.fetch_latest_workout()

    # render fully before touching the file
    block = format_workout(
        workout, logged_at=datetime.now(timezone.utc), tz=config.display.timezone
    )

    filepath = config.paths.workouts_file
    append_workout_block(block, filepath)
    print(f'Appended workout "{workout.title}" to {filepath}')


def cmd_count(args: argparse.Namespace, config: AppConfig) -> None:
    """Save the total workout count."""
    client = HevyClient(config.require_hevy())
    count = client.fetch_workout_count()

    filepath = config.paths.count_file
    save_workout_count(count, filepath)
    print(f"Saved workout_count={count} to {filepath}")


COMMANDS = {
    "last-workout": (cmd_last_workout, "Error appending workout data"),
    "count": (cmd_count, "Error fetching workouts count"),
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Hevy workout metrics")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # last-workout command
    last_parser = subparsers.add_parser(
        "last-workout", help="Append the most recent workout to the workout log"
    )

    # count command
    count_parser = subparsers.add_parser(
        "count", help="Save the total workout count"
    )

    for sub in (last_parser, count_parser):
        sub.add_argument(
            "--output-dir",
            "-o",
            type=str,
            help="Metrics directory (default: ./.metrics)",
        )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    command, error_context = COMMANDS[args.command]

    try:
        config = AppConfig.load()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if args.output_dir:
        config = replace(config, paths=PathConfig(metrics_dir=Path(args.output_dir)))

    try:
        command(args, config)
    except (HevyMetricsError, OSError) as e:
        logger.error(f"{error_context}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
