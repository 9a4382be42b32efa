"""Data models for Hevy workouts."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from .errors import MalformedResponseError


Number = Union[int, float]


def finite_number(value: Any) -> Optional[Number]:
    """
    Return value if it is a finite JSON number, otherwise None.

    Booleans are rejected even though they subclass int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        if not math.isfinite(value):
            return None
    except OverflowError:
        return None
    return value


def parse_timestamp(value: Any, field_name: str) -> datetime:
    """
    Parse an ISO 8601 timestamp from the API into an aware datetime.

    Naive timestamps are assumed to be UTC.
    """
    if not isinstance(value, str) or not value:
        raise MalformedResponseError(f"Workout is missing {field_name}")

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedResponseError(
            f"Invalid {field_name} timestamp: {value!r}"
        ) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class WorkoutSet:
    """Represents a single performed set of an exercise."""

    weight_kg: Optional[Number] = None
    reps: Optional[Number] = None
    rpe: Optional[Number] = None
    distance_meters: Optional[Number] = None
    duration_seconds: Optional[Number] = None
    # weight_kg or reps was non-null in the payload, even if not a number
    weight_or_reps_logged: bool = False

    @property
    def has_weight_or_reps(self) -> bool:
        """True when the set carries a weight or rep count."""
        return (
            self.weight_or_reps_logged
            or self.weight_kg is not None
            or self.reps is not None
        )

    @classmethod
    def from_hevy_api(cls, data: dict) -> "WorkoutSet":
        """Create a set from a Hevy API set object."""
        return cls(
            weight_kg=finite_number(data.get("weight_kg")),
            reps=finite_number(data.get("reps")),
            rpe=finite_number(data.get("rpe")),
            distance_meters=finite_number(data.get("distance_meters")),
            duration_seconds=finite_number(data.get("duration_seconds")),
            weight_or_reps_logged=(
                data.get("weight_kg") is not None or data.get("reps") is not None
            ),
        )


@dataclass
class Exercise:
    """Represents one exercise performed within a workout."""

    title: str
    notes: Optional[str] = None
    sets: List[WorkoutSet] = field(default_factory=list)

    @classmethod
    def from_hevy_api(cls, data: dict) -> "Exercise":
        """Create an exercise from a Hevy API exercise object."""
        return cls(
            title=data.get("title") or "",
            notes=data.get("notes") or None,
            sets=[WorkoutSet.from_hevy_api(s) for s in data.get("sets") or []],
        )


@dataclass
class Workout:
    """Represents a logged workout session."""

    title: str
    start_time: datetime
    end_time: datetime
    exercises: List[Exercise] = field(default_factory=list)

    @property
    def duration_seconds(self) -> int:
        """Whole seconds between start and end, never negative."""
        return max(0, math.floor((self.end_time - self.start_time).total_seconds()))

    @classmethod
    def from_hevy_api(cls, data: dict) -> "Workout":
        """
        Create Workout from a Hevy API workout object.

        Raises:
            MalformedResponseError: If the object is not a mapping or its
                timestamps are missing or invalid.
        """
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Unexpected workout shape: {data!r}")

        return cls(
            title=data.get("title") or "",
            start_time=parse_timestamp(data.get("start_time"), "start_time"),
            end_time=parse_timestamp(data.get("end_time"), "end_time"),
            exercises=[
                Exercise.from_hevy_api(e) for e in data.get("exercises") or []
            ],
        )


@dataclass(frozen=True)
class WorkoutCount:
    """Total number of workouts recorded for the account."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_hevy_api(cls, data: Any) -> "WorkoutCount":
        """
        Create WorkoutCount from a Hevy API count response.

        Accepts a JSON number or numeric string that is finite, integral
        and non-negative.
        """
        raw = data.get("workout_count") if isinstance(data, dict) else None

        count: Optional[float] = None
        if isinstance(raw, str):
            try:
                count = float(raw.strip())
            except ValueError:
                count = None
        else:
            count = finite_number(raw)

        if count is None or not math.isfinite(count) or count < 0 or count != int(count):
            raise MalformedResponseError(f"Unexpected response shape: {data!r}")

        return cls(value=int(count))
