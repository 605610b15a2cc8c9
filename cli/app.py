from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional

import typer

from cli.config import CLIConfig, load_config
from cli.render import render_error, render_sensor_ids, render_snapshot
from client.api import SensorApiClient
from client.errors import DashboardClientError
from logging_config import configure_logging
from models.records import InvalidQueryWindow, QueryWindow
from state.controller import DashboardController
from state.store import DashboardSnapshot, DashboardStore


@dataclass
class CLIState:
    config: CLIConfig


app = typer.Typer(
    help="Browse sensors and their readings from the tilt dashboard API.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _build_client(config: CLIConfig) -> SensorApiClient:
    return SensorApiClient(base_url=config.base_url, timeout=config.timeout)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Sensor API base URL (defaults to SENSOR_API_BASE_URL env or http://localhost:8080/api).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each API response.",
    ),
) -> None:
    """Entry point for the CLI."""
    ctx.obj = CLIState(config=load_config(base_url=base_url, timeout=timeout))


async def _list_sensors(config: CLIConfig) -> List[str]:
    client = _build_client(config)
    try:
        return await client.list_sensors()
    finally:
        await client.aclose()


async def _load_readings(config: CLIConfig, sensor_id: str, window: QueryWindow) -> DashboardSnapshot:
    client = _build_client(config)
    store = DashboardStore.create(window)
    controller = DashboardController(store, client)
    try:
        await controller.select_sensor(sensor_id)
    finally:
        await client.aclose()
    return store.snapshot()


def _resolve_window(
    hours: Optional[int],
    start: Optional[int],
    end: Optional[int],
    default_hours: int,
) -> QueryWindow:
    if hours is not None and (start is not None or end is not None):
        raise typer.BadParameter("Use either --hours or --start/--end, not both.")
    try:
        if start is not None or end is not None:
            if start is None or end is None:
                raise typer.BadParameter("--start and --end must be given together.")
            return QueryWindow(start_time=start, end_time=end)
        return QueryWindow.last_hours(hours if hours is not None else default_hours)
    except InvalidQueryWindow as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("sensors")
def sensors_command(ctx: typer.Context) -> None:
    """List the sensors known to the server."""
    state = _get_state(ctx)
    try:
        sensor_ids = asyncio.run(_list_sensors(state.config))
    except DashboardClientError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc
    render_sensor_ids(sensor_ids)


@app.command("readings")
def readings_command(
    ctx: typer.Context,
    sensor_id: str = typer.Argument(..., help="Identifier of the sensor to query."),
    hours: Optional[int] = typer.Option(
        None,
        "--hours",
        min=1,
        help="Query the last N hours (defaults to SENSOR_DEFAULT_WINDOW_HOURS or 24).",
    ),
    start: Optional[int] = typer.Option(None, "--start", help="Window start, Unix milliseconds."),
    end: Optional[int] = typer.Option(None, "--end", help="Window end, Unix milliseconds."),
) -> None:
    """Fetch readings for one sensor over a time window."""
    state = _get_state(ctx)
    if not sensor_id.strip():
        raise typer.BadParameter("Sensor id must not be blank.")
    window = _resolve_window(hours, start, end, state.config.default_hours)
    snapshot = asyncio.run(_load_readings(state.config, sensor_id, window))
    if snapshot.error_message:
        render_error(snapshot.error_message)
        raise typer.Exit(code=1)
    render_snapshot(snapshot)


def run() -> None:
    configure_logging()
    app()


if __name__ == "__main__":
    run()
