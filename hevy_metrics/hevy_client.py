"""Hevy API client for fetching workout data."""

import logging
from typing import Optional

import requests

from .config import HevyConfig
from .errors import HevyHTTPError, MalformedResponseError
from .models import Workout, WorkoutCount


logger = logging.getLogger(__name__)


class HevyClient:
    """
    Client for the read-only Hevy workout endpoints.

    Each call issues exactly one GET request. There is no retry; a
    failed run is expected to be repeated by whatever scheduled it.
    """

    def __init__(self, config: HevyConfig):
        """
        Initialize Hevy client with configuration.
        """
        self._config = config

    def _get_headers(self) -> dict:
        """Build authentication headers for API requests."""
        return {"accept": "application/json", "api-key": self._config.api_key}

    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        """
        Issue a GET request and decode the JSON body.

        Raises:
            HevyHTTPError: On transport failure or non-2xx status.
            MalformedResponseError: If the body is not a JSON object.
        """
        url = f"{self._config.api_base}{path}"
        logger.info(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers=self._get_headers(),
                params=params,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            raise HevyHTTPError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise HevyHTTPError.from_response(response)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response from {url} is not JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponseError(f"Unexpected response shape: {data!r}")
        return data

    def fetch_workouts_page(self, page: int = 1, page_size: int = 1) -> dict:
        """
        Fetch a single page of workouts, most recent first.
        """
        return self._get("/workouts", params={"page": page, "pageSize": page_size})

    def fetch_latest_workout(self) -> Workout:
        """
        Fetch the most recent workout.

        Raises:
            MalformedResponseError: If no workout is returned or it
                cannot be parsed.
        """
        data = self.fetch_workouts_page(page=1, page_size=1)
        workouts = data.get("workouts")
        if not isinstance(workouts, list) or not workouts:
            raise MalformedResponseError("No workouts found in response.")

        try:
            workout = Workout.from_hevy_api(workouts[0])
        except (AttributeError, TypeError) as e:
            raise MalformedResponseError(f"Failed to parse workout: {e}") from e

        logger.info(f"Fetched workout {workout.title!r}")
        return workout

    def fetch_workout_count(self) -> WorkoutCount:
        """
        Fetch the total number of workouts.
        """
        count = WorkoutCount.from_hevy_api(self._get("/workouts/count"))
        logger.info(f"Fetched workout_count={count}")
        return count
