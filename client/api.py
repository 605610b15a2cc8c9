from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from client.errors import DecodeFailure, NetworkFailure, RequestFailed
from models.records import QueryWindow
from models.schemas import SensorData
from settings import get_settings

logger = logging.getLogger(__name__)

_SENSOR_IDS = TypeAdapter(List[str])


class SensorApiClient:
    """Async HTTP client for the ``/api`` sensor endpoints.

    Every failure propagates to the caller as a ``DashboardClientError``
    subclass; nothing is replaced by an empty placeholder.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls) -> "SensorApiClient":
        settings = get_settings()
        return cls(base_url=settings.api_base_url, timeout=settings.request_timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SensorApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def list_sensors(self) -> List[str]:
        response = await self._get("/sensors")
        payload = self._decode_json(response)
        try:
            return _SENSOR_IDS.validate_python(payload)
        except ValidationError as exc:
            raise DecodeFailure(f"Unexpected sensor list payload: {exc.error_count()} error(s).") from exc

    async def fetch_sensor_data(self, sensor_id: str, window: QueryWindow) -> SensorData:
        if not isinstance(sensor_id, str) or not sensor_id.strip():
            raise ValueError("A non-empty sensor id is required.")
        if not isinstance(window, QueryWindow):
            raise TypeError(f"Expected a QueryWindow, got {type(window).__name__}.")

        response = await self._get(
            f"/readings/{quote(sensor_id, safe='')}",
            params=window.to_params(),
            sensor_id=sensor_id,
        )
        payload = self._decode_json(response, sensor_id=sensor_id)
        try:
            data = SensorData.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "Readings payload did not match schema",
                extra={"sensor_id": sensor_id, "reason": f"{exc.error_count()} validation error(s)"},
            )
            raise DecodeFailure(f"Unexpected readings payload for sensor {sensor_id!r}.") from exc

        logger.debug(
            "Fetched sensor readings",
            extra={
                "sensor_id": sensor_id,
                "start_time": window.start_time,
                "end_time": window.end_time,
                "point_count": len(data.data_points),
            },
        )
        return data

    async def _get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        sensor_id: Optional[str] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.get(path, params=params)
        except httpx.TransportError as exc:
            logger.warning(
                "Request to %s failed before a response was received",
                path,
                extra={"sensor_id": sensor_id, "reason": type(exc).__name__},
            )
            raise NetworkFailure(f"Could not reach the sensor API: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Request to %s returned an error status",
                path,
                extra={"sensor_id": sensor_id, "status": response.status_code},
            )
            raise RequestFailed(response.status_code, response.reason_phrase)
        return response

    @staticmethod
    def _decode_json(response: httpx.Response, sensor_id: Optional[str] = None) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(
                "Response body is not valid JSON",
                extra={"sensor_id": sensor_id, "status": response.status_code},
            )
            raise DecodeFailure("Response body is not valid JSON.") from exc
