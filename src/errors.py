"""Failures raised by the movie client and the add/edit flows."""

from typing import Optional


class MovieAppError(Exception):
    """Base class for every failure shown to the user."""


class NetworkError(MovieAppError):
    """The endpoint could not be reached (refused, DNS, timeout)."""


class RemoteError(MovieAppError):
    """The server answered with a non-success status."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = int(status)
        super().__init__(message or f"Server returned {self.status}")


class ValidationError(MovieAppError):
    """Required input missing or malformed; raised before any request."""
