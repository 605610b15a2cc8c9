"""Drives fetches and writes their outcome into a ``DashboardStore``."""

from __future__ import annotations

import logging
from typing import Optional

from client.api import SensorApiClient
from client.errors import DashboardClientError
from models.records import QueryWindow
from models.schemas import SensorData
from state.store import DashboardStore

logger = logging.getLogger(__name__)


class DashboardController:
    """Runs one fetch per interaction and applies only the newest result.

    Every readings fetch is tagged with a generation number. A fetch that
    resolves after a newer one has started is discarded without touching
    the store; the newer fetch owns ``loading``.
    """

    def __init__(self, store: DashboardStore, client: SensorApiClient) -> None:
        self.store = store
        self.client = client
        self._generation = 0
        self._sensor_list_generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def load_sensors(self, select_first: bool = True) -> None:
        """Populate ``sensor_ids`` and optionally select the first sensor."""
        self._sensor_list_generation += 1
        generation = self._sensor_list_generation
        try:
            sensor_ids = await self.client.list_sensors()
        except DashboardClientError as exc:
            if generation == self._sensor_list_generation:
                self.store.error_message.set(str(exc))
            return

        if generation != self._sensor_list_generation:
            return
        self.store.sensor_ids.set(tuple(sensor_ids))
        self.store.error_message.set(None)
        if select_first and sensor_ids and self.store.selected_sensor_id.value is None:
            await self.select_sensor(sensor_ids[0])

    async def select_sensor(self, sensor_id: str) -> Optional[SensorData]:
        if not isinstance(sensor_id, str) or not sensor_id.strip():
            raise ValueError("A non-empty sensor id is required.")
        self.store.selected_sensor_id.set(sensor_id)
        return await self.refresh()

    async def clear_selection(self) -> None:
        self.store.selected_sensor_id.set(None)
        await self.refresh()

    async def set_window(self, window: QueryWindow) -> Optional[SensorData]:
        if not isinstance(window, QueryWindow):
            raise TypeError(f"Expected a QueryWindow, got {type(window).__name__}.")
        self.store.query_window.set(window)
        return await self.refresh()

    async def set_hours_back(self, hours: int, now: Optional[int] = None) -> Optional[SensorData]:
        return await self.set_window(QueryWindow.last_hours(hours, now=now))

    async def refresh(self) -> Optional[SensorData]:
        """Fetch readings for the current selection and window.

        Returns the applied result, or ``None`` when nothing was applied
        (no selection, failure, or superseded by a newer fetch).
        """
        self._generation += 1
        generation = self._generation
        sensor_id = self.store.selected_sensor_id.value
        window = self.store.query_window.value

        if sensor_id is None:
            self.store.loading.set(False)
            return None

        self.store.loading.set(True)
        self.store.error_message.set(None)
        try:
            data = await self.client.fetch_sensor_data(sensor_id, window)
        except DashboardClientError as exc:
            if not self._is_current(generation, sensor_id):
                return None
            self.store.error_message.set(str(exc))
            self.store.loading.set(False)
            return None
        except BaseException:
            if generation == self._generation:
                self.store.loading.set(False)
            raise

        if not self._is_current(generation, sensor_id):
            return None
        self.store.sensor_data.set(data)
        self.store.error_message.set(None)
        self.store.loading.set(False)
        return data

    def _is_current(self, generation: int, sensor_id: str) -> bool:
        if generation == self._generation:
            return True
        logger.info(
            "Discarding superseded readings response",
            extra={"sensor_id": sensor_id, "generation": generation},
        )
        return False
