"""Derive the 24-hour and 7-day display views from a weather snapshot."""

from datetime import datetime

from weatherwidget.models.weather import DailyEntry, HourlyEntry, Icon, WeatherSnapshot

HOURS_PER_DAY = 24
SUN_THRESHOLD_C = 25.0
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def weather_icon(temperature: float | None, threshold: float = SUN_THRESHOLD_C) -> Icon:
    """Sun strictly above the threshold, cloud otherwise."""
    if temperature is not None and temperature > threshold:
        return Icon.SUN
    return Icon.CLOUD


def hourly_view(
    snapshot: WeatherSnapshot,
    hours: int = HOURS_PER_DAY,
    threshold: float = SUN_THRESHOLD_C,
) -> list[HourlyEntry]:
    """First `hours` entries of the hourly series, index-aligned."""
    h = snapshot.hourly
    count = min(hours, len(h))
    return [
        HourlyEntry(
            time=h.time[i],
            hour_label=_hour_label(h.time[i]),
            temperature=h.temperature[i],
            humidity=h.humidity[i],
            wind_speed=h.wind_speed[i],
            icon=weather_icon(h.temperature[i], threshold),
        )
        for i in range(count)
    ]


def daily_view(
    snapshot: WeatherSnapshot,
    days: int = 7,
    threshold: float = SUN_THRESHOLD_C,
) -> list[DailyEntry]:
    """One sample per 24-hour stride, clamped to the full days available."""
    h = snapshot.hourly
    count = min(days, len(h) // HOURS_PER_DAY)
    entries = []
    for day in range(count):
        i = day * HOURS_PER_DAY
        entries.append(
            DailyEntry(
                time=h.time[i],
                day_label=_day_label(h.time[i]),
                temperature=h.temperature[i],
                humidity=h.humidity[i],
                wind_speed=h.wind_speed[i],
                icon=weather_icon(h.temperature[i], threshold),
            )
        )
    return entries


def _parse_time(iso_str: str) -> datetime | None:
    try:
        return datetime.fromisoformat(iso_str)
    except (ValueError, TypeError):
        return None


def _hour_label(iso_str: str) -> str:
    dt = _parse_time(iso_str)
    return f"{dt.hour}:00" if dt is not None else ""


def _day_label(iso_str: str) -> str:
    dt = _parse_time(iso_str)
    return _WEEKDAYS[dt.weekday()] if dt is not None else ""
