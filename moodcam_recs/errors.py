"""
Error Types
===========

Failure kinds raised by the MoodCam Recs components. Components only raise;
the HTTP layer is the one place that turns them into status codes.
"""

from typing import Any, Optional


class MoodCamError(Exception):
    """
    Base class for all MoodCam Recs failures.

    Attributes:
        message: Human readable summary
        status: Upstream HTTP status, if the failure came from an API call
        details: Upstream payload or error text for diagnostics
    """

    def __init__(self, message: str, status: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details

    def __str__(self) -> str:
        if self.details is None:
            return self.message
        return f"{self.message}: {self.details}"


class InvalidInput(MoodCamError):
    """A required request field is missing or malformed."""


class AuthenticationFailure(MoodCamError):
    """The client-credentials token exchange failed."""


class ClassificationFailure(MoodCamError):
    """The vision model call failed or returned nothing usable."""


class SearchFailure(MoodCamError):
    """The catalog search call failed."""
