from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest

from client.api import SensorApiClient
from models.records import QueryWindow
from settings import get_settings

BASE_URL = "http://testserver/api"
WINDOW = QueryWindow(start_time=1_700_000_000_000, end_time=1_700_003_600_000)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[[Callable], SensorApiClient]:
    def factory(handler: Callable) -> SensorApiClient:
        return SensorApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    return factory


def readings_payload(sensor_id: str = "tilt-1", data_points=None) -> dict:
    return {
        "sensorId": sensor_id,
        "gatewayId": "gw1",
        "gatewayName": "Kitchen",
        "dataPoints": data_points,
    }


def point(timestamp: int, gravity: float = 1.050) -> dict:
    return {
        "timestamp": timestamp,
        "gravity": gravity,
        "tilt": 45.5,
        "temp": 20.1,
        "volt": 3.9,
        "interval": 900,
    }
