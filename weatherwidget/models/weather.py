"""Forecast snapshot and projection models."""

from dataclasses import dataclass
from enum import StrEnum


class Icon(StrEnum):
    SUN = "sun"
    CLOUD = "cloud"


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float  # °C
    wind_speed: float  # km/h
    rain: float  # mm


@dataclass(frozen=True)
class HourlySeries:
    """Index-aligned hourly readings. All four tuples share one length."""

    time: tuple[str, ...]
    temperature: tuple[float, ...]
    humidity: tuple[float, ...]
    wind_speed: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class WeatherSnapshot:
    current: CurrentConditions
    hourly: HourlySeries
    fetched_at: str

    @property
    def current_humidity(self) -> float | None:
        if len(self.hourly) == 0:
            return None
        return self.hourly.humidity[0]


@dataclass(frozen=True)
class HourlyEntry:
    time: str
    hour_label: str  # e.g. "13:00"
    temperature: float
    humidity: float
    wind_speed: float
    icon: Icon


@dataclass(frozen=True)
class DailyEntry:
    time: str
    day_label: str  # e.g. "Mon"
    temperature: float
    humidity: float
    wind_speed: float
    icon: Icon
