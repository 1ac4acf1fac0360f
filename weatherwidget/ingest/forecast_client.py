"""Open-Meteo forecast API client and response normalization."""

import logging
from typing import Any

from weatherwidget.config.schema import DEFAULT_USER_AGENT, FORECAST_URL
from weatherwidget.ingest.http_json import get_json
from weatherwidget.models.common import utc_now_iso
from weatherwidget.models.errors import ParseError
from weatherwidget.models.weather import CurrentConditions, HourlySeries, WeatherSnapshot

logger = logging.getLogger(__name__)

SOURCE = "forecast"
CURRENT_FIELDS = ("temperature_2m", "wind_speed_10m", "rain")
HOURLY_FIELDS = ("temperature_2m", "relative_humidity_2m", "wind_speed_10m")


class ForecastClient:
    def __init__(
        self,
        base_url: str = FORECAST_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent

    def get_forecast(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Fetch current conditions and the hourly series for a coordinate pair.

        The timezone is resolved upstream from the coordinates.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "timezone": "auto",
        }
        raw = get_json(self.base_url, params, SOURCE, self.timeout, self.user_agent)
        return normalize_forecast(raw)


def normalize_forecast(raw: Any) -> WeatherSnapshot:
    """Rename upstream fields into a WeatherSnapshot. No unit conversion.

    Values must be numbers or null and times must be strings; anything else
    raises ParseError.
    """
    if not isinstance(raw, dict):
        raise ParseError("Forecast response is not an object", SOURCE)
    current = raw.get("current")
    hourly = raw.get("hourly")
    if not isinstance(current, dict) or not isinstance(hourly, dict):
        raise ParseError("Forecast response lacks current/hourly blocks", SOURCE)

    try:
        conditions = CurrentConditions(
            temperature=_number(current["temperature_2m"], "current.temperature_2m"),
            wind_speed=_number(current["wind_speed_10m"], "current.wind_speed_10m"),
            rain=_number(current["rain"], "current.rain"),
        )
    except KeyError as e:
        raise ParseError(f"Forecast current block missing {e}", SOURCE) from e

    series = {
        "time": _series(hourly, "time", str),
        "temperature": _series(hourly, "temperature_2m"),
        "humidity": _series(hourly, "relative_humidity_2m"),
        "wind_speed": _series(hourly, "wind_speed_10m"),
    }
    lengths = {name: len(values) for name, values in series.items()}
    if len(set(lengths.values())) > 1:
        logger.error("Forecast hourly series lengths differ: %s", lengths)
        raise ParseError(f"Hourly series lengths differ: {lengths}", SOURCE)

    return WeatherSnapshot(
        current=conditions,
        hourly=HourlySeries(**series),
        fetched_at=utc_now_iso(),
    )


def _number(value: Any, name: str) -> float | int | None:
    # bool is an int subclass but never a measurement
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    raise ParseError(f"Forecast `{name}` is not a number: {value!r}", SOURCE)


def _series(hourly: dict, key: str, kind: type | None = None) -> tuple:
    values = hourly.get(key)
    if not isinstance(values, list):
        raise ParseError(f"Forecast hourly `{key}` is missing or not a list", SOURCE)
    if kind is None:
        return tuple(_number(v, f"hourly.{key}") for v in values)
    for v in values:
        if not isinstance(v, kind):
            raise ParseError(f"Forecast hourly `{key}` has a bad entry: {v!r}", SOURCE)
    return tuple(values)
