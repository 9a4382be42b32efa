"""Exceptions raised while fetching and recording Hevy metrics."""

from typing import Optional


class HevyMetricsError(Exception):
    """Base class for failures handled by the CLI."""


class MissingCredentialError(HevyMetricsError, ValueError):
    """Raised when no Hevy API key is configured."""


class HevyHTTPError(HevyMetricsError):
    """
    Raised on a non-success HTTP response or a transport failure.

    For transport failures (connection refused, timeout) there is no
    response, so ``status`` is None.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: str = "",
        body: str = "",
    ):
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.body = body

    @classmethod
    def from_response(cls, response) -> "HevyHTTPError":
        """Build an error from a failed ``requests.Response``."""
        body = response.text or ""
        message = f"HTTP {response.status_code} {response.reason or ''}".rstrip()
        if body:
            message = f"{message} - {body}"
        return cls(
            message,
            status=response.status_code,
            reason=response.reason or "",
            body=body,
        )


class MalformedResponseError(HevyMetricsError, ValueError):
    """Raised when the API response is missing or has invalid fields."""
