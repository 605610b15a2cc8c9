"""Pydantic schemas for payloads exchanged with the readings API."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Reading(_WireModel):
    """Raw sample as reported by a sensor."""

    sensor_id: str
    gravity: float
    tilt: float
    temp: float
    volt: float
    interval: int = Field(..., ge=0, description="Seconds between samples.")


class SensorReading(_WireModel):
    """A reading together with the gateway that relayed it."""

    reading: Reading
    gateway_id: str
    gateway_name: str


class DataPoint(_WireModel):
    """Normalized time-series sample rendered by the dashboard."""

    timestamp: int = Field(..., description="Unix time in milliseconds.")
    gravity: float = 0.0
    tilt: float = 0.0
    temp: float = 0.0
    volt: float = 0.0
    interval: int = 0


class SensorData(_WireModel):
    """Readings of one sensor over one query window."""

    sensor_id: str
    gateway_id: str = ""
    gateway_name: str = ""
    data_points: List[DataPoint] = Field(default_factory=list)

    @field_validator("data_points", mode="before")
    @classmethod
    def _coerce_missing_points(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("data_points")
    @classmethod
    def _order_points(cls, value: List[DataPoint]) -> List[DataPoint]:
        return sorted(value, key=lambda point: point.timestamp)

    @property
    def is_empty(self) -> bool:
        return not self.data_points
