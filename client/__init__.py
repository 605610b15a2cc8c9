"""Asynchronous client for the sensor readings API."""

from client.api import SensorApiClient
from client.errors import DashboardClientError, DecodeFailure, NetworkFailure, RequestFailed

__all__ = [
    "DashboardClientError",
    "DecodeFailure",
    "NetworkFailure",
    "RequestFailed",
    "SensorApiClient",
]
