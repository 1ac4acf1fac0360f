"""Output formatters for suggestions and forecasts."""

import json

from weatherwidget.models.location import Location
from weatherwidget.models.weather import DailyEntry, HourlyEntry, WeatherSnapshot
from weatherwidget.pipeline.widget import WeatherWidget

_ICON_GLYPHS = {"sun": "☀", "cloud": "☁"}


def format_suggestions_text(locations: list[Location]) -> str:
    """Numbered suggestion list, one location per line."""
    if not locations:
        return "No matches"
    return "\n".join(
        f"{n}. {loc.label} ({loc.id})" for n, loc in enumerate(locations, start=1)
    )


def format_weather_text(
    location: Location,
    snapshot: WeatherSnapshot,
    hourly: list[HourlyEntry],
    daily: list[DailyEntry],
) -> str:
    """Plain text forecast: current cards, hourly strip, 7-day table."""
    cur = snapshot.current
    humidity = snapshot.current_humidity
    lines = [
        f"=== {location.label} ===",
        f"Temperature: {cur.temperature}°C",
        f"Wind Speed: {cur.wind_speed} km/h",
        f"Rain: {cur.rain} mm",
        f"Humidity: {humidity if humidity is not None else 'n/a'}%",
    ]

    if hourly:
        lines.append("")
        lines.append(f"Hourly Forecast (Next {len(hourly)} hours)")
        for e in hourly:
            lines.append(
                f"  {e.hour_label:>5} {_ICON_GLYPHS[e.icon]} {e.temperature}°C"
            )

    if daily:
        lines.append("")
        lines.append(f"{len(daily)}-Day Forecast")
        for d in daily:
            lines.append(
                f"  {d.day_label:<3} {_ICON_GLYPHS[d.icon]} {d.temperature}°C "
                f"| {d.humidity}% | {d.wind_speed} km/h"
            )
    return "\n".join(lines)


def format_widget_text(widget: WeatherWidget) -> str:
    """Render whatever the widget currently holds, error line first."""
    s = widget.state
    lines = []
    if s.error:
        lines.append(s.error)
    if s.selected is not None and s.snapshot is not None:
        lines.append(
            format_weather_text(
                s.selected, s.snapshot, widget.hourly_view(), widget.daily_view()
            )
        )
    return "\n".join(lines)


def format_state_json(widget: WeatherWidget) -> str:
    """JSON state for programmatic consumption."""
    return json.dumps(widget.view(), indent=2)
