"""Shared test fixtures."""

import json
import sqlite3
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from weatherwidget.config.schema import WidgetConfig
from weatherwidget.models.location import Location
from weatherwidget.storage.database import connect, run_migrations
from weatherwidget.storage.selection_store import SelectionStore

FORECAST_START = datetime(2026, 10, 19)  # a Monday


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def paris_geocoding(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "geocoding_paris.json") as f:
        return json.load(f)


@pytest.fixture
def paris() -> Location:
    return Location(
        id=2988507,
        name="Paris",
        latitude=48.85341,
        longitude=2.3488,
        country="France",
        admin1="Île-de-France",
    )


@pytest.fixture
def london() -> Location:
    return Location(
        id=2643743,
        name="London",
        latitude=51.50853,
        longitude=-0.12574,
        country="United Kingdom",
        admin1="England",
    )


@pytest.fixture
def make_forecast() -> Callable[..., dict]:
    """Build an Open-Meteo style forecast payload with `hours` hourly samples."""

    def _make(
        hours: int = 168,
        temperatures: list[float] | None = None,
        current_temp: float = 18.4,
    ) -> dict:
        times = [
            (FORECAST_START + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M")
            for i in range(hours)
        ]
        temps = temperatures if temperatures is not None else [
            round(10.0 + (i % 24) * 0.5, 1) for i in range(hours)
        ]
        return {
            "latitude": 48.86,
            "longitude": 2.35,
            "timezone": "Europe/Paris",
            "current": {
                "time": "2026-10-19T10:00",
                "temperature_2m": current_temp,
                "wind_speed_10m": 11.2,
                "rain": 0.3,
            },
            "hourly": {
                "time": times,
                "temperature_2m": temps,
                "relative_humidity_2m": [60 + (i % 30) for i in range(hours)],
                "wind_speed_10m": [round(5.0 + (i % 12) * 0.4, 1) for i in range(hours)],
            },
        }

    return _make


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    return conn


@pytest.fixture
def store(db: sqlite3.Connection) -> SelectionStore:
    return SelectionStore(db)


@pytest.fixture
def test_config(tmp_path: Path) -> WidgetConfig:
    """Default config pointed at fake API hosts and a temp database."""
    return WidgetConfig(
        api={
            "geocoding_url": "https://test-geo.example.com/v1/search",
            "forecast_url": "https://test-forecast.example.com/v1/forecast",
        },
        storage={"db_path": str(tmp_path / "widget.db")},
    )
