"""Writers for the metrics text files."""

import logging
from pathlib import Path

from .models import WorkoutCount


logger = logging.getLogger(__name__)


def append_workout_block(block: str, filepath: Path) -> None:
    """Append a rendered workout block, creating the directory if needed."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "a", encoding="utf-8") as f:
        f.write(block)

    logger.info(f"Appended {len(block)} characters to {filepath}")


def save_workout_count(count: WorkoutCount, filepath: Path) -> None:
    """Overwrite the count file with the decimal count, no newline."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(str(count))

    logger.info(f"Saved workout count to {filepath}")
