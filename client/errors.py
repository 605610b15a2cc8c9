"""Failures surfaced by the readings API client."""

from __future__ import annotations


class DashboardClientError(Exception):
    """Base class for every failure raised by the API client."""


class NetworkFailure(DashboardClientError):
    """The request failed before any response was received."""


class RequestFailed(DashboardClientError):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Request failed with status {status_code}: {status_text or 'no status text'}")


class DecodeFailure(DashboardClientError):
    """The response body does not match the expected shape."""
