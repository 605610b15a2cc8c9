"""Observable state containers for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from models.records import QueryWindow
from models.schemas import SensorData
from settings import get_settings

T = TypeVar("T")
Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[T]):
    """A single last-write-wins value that notifies subscribers on every set.

    Subscribers receive the current value as soon as they subscribe, then
    every new value in write order.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


@dataclass(frozen=True)
class DashboardSnapshot:
    selected_sensor_id: Optional[str]
    query_window: QueryWindow
    sensor_data: Optional[SensorData]
    loading: bool
    error_message: Optional[str]
    sensor_ids: Tuple[str, ...] = ()


@dataclass
class DashboardStore:
    """Owned set of containers shared by the controller and the renderers.

    Build one per session and pass it to whatever renders it.
    """

    query_window: Observable[QueryWindow]
    selected_sensor_id: Observable[Optional[str]] = field(default_factory=lambda: Observable(None))
    sensor_data: Observable[Optional[SensorData]] = field(default_factory=lambda: Observable(None))
    loading: Observable[bool] = field(default_factory=lambda: Observable(False))
    error_message: Observable[Optional[str]] = field(default_factory=lambda: Observable(None))
    sensor_ids: Observable[Tuple[str, ...]] = field(default_factory=lambda: Observable(()))

    @classmethod
    def create(cls, window: Optional[QueryWindow] = None) -> "DashboardStore":
        if window is None:
            window = QueryWindow.last_hours(get_settings().default_window_hours)
        return cls(query_window=Observable(window))

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            selected_sensor_id=self.selected_sensor_id.value,
            query_window=self.query_window.value,
            sensor_data=self.sensor_data.value,
            loading=self.loading.value,
            error_message=self.error_message.value,
            sensor_ids=self.sensor_ids.value,
        )
