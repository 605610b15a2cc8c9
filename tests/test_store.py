from __future__ import annotations

from conftest import WINDOW
from models.records import MS_PER_HOUR
from models.schemas import SensorData
from state.store import DashboardStore, Observable


def test_subscriber_receives_current_then_new_values() -> None:
    container = Observable(1)
    received = []

    container.subscribe(received.append)
    container.set(2)
    container.set(3)

    assert received == [1, 2, 3]
    assert container.value == 3


def test_unsubscribe_stops_notifications() -> None:
    container = Observable("a")
    received = []

    unsubscribe = container.subscribe(received.append)
    unsubscribe()
    unsubscribe()
    container.set("b")

    assert received == ["a"]
    assert container.subscriber_count == 0


def test_independent_observers_see_same_writes() -> None:
    container = Observable(False)
    first, second = [], []
    container.subscribe(first.append)
    container.subscribe(second.append)

    container.set(True)

    assert first == second == [False, True]


def test_store_defaults_to_configured_hours(monkeypatch) -> None:
    monkeypatch.setenv("SENSOR_DEFAULT_WINDOW_HOURS", "6")

    store = DashboardStore.create()
    window = store.query_window.value

    assert window.duration_ms == 6 * MS_PER_HOUR
    assert store.selected_sensor_id.value is None
    assert store.sensor_data.value is None
    assert store.loading.value is False
    assert store.error_message.value is None
    assert store.sensor_ids.value == ()


def test_stores_do_not_share_containers() -> None:
    first = DashboardStore.create(WINDOW)
    second = DashboardStore.create(WINDOW)

    first.selected_sensor_id.set("tilt-1")

    assert second.selected_sensor_id.value is None


def test_snapshot_reflects_container_values() -> None:
    store = DashboardStore.create(WINDOW)
    data = SensorData(sensor_id="tilt-1")
    store.selected_sensor_id.set("tilt-1")
    store.sensor_data.set(data)
    store.error_message.set("boom")

    snapshot = store.snapshot()

    assert snapshot.selected_sensor_id == "tilt-1"
    assert snapshot.query_window == WINDOW
    assert snapshot.sensor_data is data
    assert snapshot.error_message == "boom"
    assert snapshot.loading is False
