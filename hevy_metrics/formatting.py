"""
Text rendering for workout log entries.

Formats timestamps, durations and sets into the plain-text block that
is appended to the workout log.
"""

import math
from datetime import datetime, tzinfo
from typing import List, Optional

from .models import Workout, WorkoutSet, Number


SEPARATOR = "---"
EMPTY_SET = "—"

# en-US names, independent of the process locale
WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def format_local(moment: datetime, tz: tzinfo) -> str:
    """
    Render a timestamp in the given timezone.

    Parameters:
        moment: Timezone-aware datetime.
        tz: Zone to render in.

    Returns:
        String like "2024-08-14 at 07:05 - Wednesday".
    """
    local = moment.astimezone(tz)
    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d} "
        f"at {local.hour:02d}:{local.minute:02d} - {WEEKDAYS[local.weekday()]}"
    )


def format_duration_hms(total_seconds: Optional[float]) -> str:
    """
    Render a workout duration as "Hh Mm Ss", dropping leading zero units.

    Negative or missing values render as "0s".
    """
    seconds = max(0, math.floor(total_seconds or 0))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes or hours:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


def format_clock(total_seconds: Number) -> str:
    """Render a set duration as M:SS, or H:MM:SS past the hour."""
    seconds = math.floor(total_seconds % 60)
    minutes = math.floor((total_seconds / 60) % 60)
    hours = math.floor(total_seconds / 3600)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_number(value: Number) -> str:
    """Render a number without a trailing ".0" when it is integral."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_set(workout_set: WorkoutSet) -> str:
    """
    Summarize a set on one line.

    Weight, reps and RPE come first, then distance and duration, joined
    by " | ". RPE is only shown for sets that carry weight or reps. A set
    with nothing to show renders as an em-dash.
    """
    parts: List[str] = []

    if workout_set.has_weight_or_reps:
        weight_reps = []
        if workout_set.weight_kg is not None:
            weight_reps.append(f"{workout_set.weight_kg:.2f} kg")
        if workout_set.reps is not None:
            weight_reps.append(f"{format_number(workout_set.reps)} reps")
        if weight_reps:
            parts.append(" x ".join(weight_reps))
        if workout_set.rpe is not None:
            parts.append(f"RPE {format_number(workout_set.rpe)}")

    if workout_set.distance_meters is not None:
        parts.append(f"{format_number(workout_set.distance_meters)} m")
    if workout_set.duration_seconds is not None:
        parts.append(format_clock(workout_set.duration_seconds))

    return " | ".join(parts) if parts else EMPTY_SET


def format_workout(workout: Workout, logged_at: datetime, tz: tzinfo) -> str:
    """
    Render a workout as a log block.

    Parameters:
        workout: Workout to render.
        logged_at: Time the entry is recorded.
        tz: Zone used for every timestamp in the block.

    Returns:
        Block starting with the separator line and ending with a newline.
    """
    lines = [
        SEPARATOR,
        f"title: {workout.title}",
        f"logged_at: {format_local(logged_at, tz)}",
        f"start_time: {format_local(workout.start_time, tz)}",
        f"end_time: {format_local(workout.end_time, tz)}",
        f"duration: {format_duration_hms(workout.duration_seconds)}",
        "exercises:",
    ]

    for exercise in workout.exercises:
        lines.append(f"  - name: {exercise.title}")
        if exercise.notes:
            lines.append(f"    notes: {exercise.notes}")
        lines.append("    sets:")
        for workout_set in exercise.sets:
            lines.append(f"      - {format_set(workout_set)}")

    # empty last line so the block ends with a newline
    lines.append("")
    return "\n".join(lines)
