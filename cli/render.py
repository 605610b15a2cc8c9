from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

import typer

from state.store import DashboardSnapshot


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def format_timestamp(timestamp_ms: int) -> str:
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def render_sensor_ids(sensor_ids: Sequence[str]) -> None:
    echo_heading("Sensors")
    if not sensor_ids:
        typer.echo("No sensors reported.")
        return
    for sensor_id in sensor_ids:
        typer.echo(f"  - {sensor_id}")


def render_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)


def render_snapshot(snapshot: DashboardSnapshot) -> None:
    window = snapshot.query_window
    echo_heading("Sensor Readings")
    echo_key_values(
        [
            ("sensor_id", snapshot.selected_sensor_id),
            ("window_start", format_timestamp(window.start_time)),
            ("window_end", format_timestamp(window.end_time)),
        ]
    )

    data = snapshot.sensor_data
    if data is None:
        return
    echo_key_values(
        [
            ("gateway_id", data.gateway_id or "-"),
            ("gateway_name", data.gateway_name or "-"),
            ("points", len(data.data_points)),
        ]
    )

    typer.echo()
    echo_heading("Data Points")
    if data.is_empty:
        typer.echo("No data points in range.")
        return
    for point in data.data_points:
        typer.echo(
            f"  {format_timestamp(point.timestamp)}  "
            f"gravity={point.gravity:.4f} tilt={point.tilt:.2f} "
            f"temp={point.temp:.1f} volt={point.volt:.2f} interval={point.interval}"
        )
