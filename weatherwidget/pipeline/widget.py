"""Widget controller: search -> select -> persist -> fetch -> project.

Owns the transient UI state. Each search and each weather fetch takes a
request token; a response is applied only if its token is still the latest
of its kind, so a slow response for an older request never overwrites a
newer one.
"""

import itertools
import logging
import threading
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from weatherwidget.config.schema import WidgetConfig
from weatherwidget.forecast.projection import (
    SUN_THRESHOLD_C,
    daily_view,
    hourly_view,
    weather_icon,
)
from weatherwidget.ingest.forecast_client import ForecastClient
from weatherwidget.ingest.geocoding_client import GeocodingClient
from weatherwidget.models.errors import SUGGESTIONS_ERROR, WEATHER_ERROR, FetchError
from weatherwidget.models.location import Location
from weatherwidget.models.weather import DailyEntry, HourlyEntry, Icon, WeatherSnapshot
from weatherwidget.search.location_search import LocationSearch
from weatherwidget.storage.database import connect, run_migrations
from weatherwidget.storage.selection_store import SelectionStore

logger = logging.getLogger(__name__)


@dataclass
class WidgetState:
    query: str = ""
    suggestions: list[Location] = field(default_factory=list)
    selected: Location | None = None
    snapshot: WeatherSnapshot | None = None
    loading: bool = False
    error: str | None = None


class WeatherWidget:
    def __init__(
        self,
        search: LocationSearch,
        forecast_client: ForecastClient,
        store: SelectionStore,
        hourly_hours: int = 24,
        daily_days: int = 7,
        icon_threshold: float = SUN_THRESHOLD_C,
    ):
        self.search = search
        self.forecast = forecast_client
        self.store = store
        self.hourly_hours = hourly_hours
        self.daily_days = daily_days
        self.icon_threshold = icon_threshold
        self.state = WidgetState()
        self._lock = threading.Lock()
        self._search_tokens = itertools.count(1)
        self._fetch_tokens = itertools.count(1)
        self._latest_search = 0
        self._latest_fetch = 0

    # --- Location search ---

    def set_query(self, text: str) -> list[Location]:
        """Record new search input and refresh the suggestion list."""
        with self._lock:
            self.state.query = text
            token = self._latest_search = next(self._search_tokens)
            if not self.search.should_search(text):
                self.state.suggestions = []
                return []

        try:
            results = self.search.search(text)
        except FetchError as e:
            logger.warning("Suggestion lookup failed (%s): %s", type(e).__name__, e)
            with self._lock:
                if token == self._latest_search:
                    self.state.suggestions = []
                    self.state.error = SUGGESTIONS_ERROR
            return []

        with self._lock:
            if token != self._latest_search:
                logger.debug("Discarding stale suggestions for search #%d", token)
                return self.state.suggestions
            self.state.suggestions = results
        return results

    # --- Selection ---

    def select(self, location: Location) -> bool:
        """Select and persist `location`, then fetch its weather."""
        with self._lock:
            self.state.selected = location
            self.state.suggestions = []
            # Invalidate any in-flight search so it cannot repopulate the list
            self._latest_search = next(self._search_tokens)
        self.store.save(location)
        logger.info("Selected location id=%d (%s)", location.id, location.label)
        return self.fetch_weather(location)

    def select_suggestion(self, location_id: int) -> bool:
        with self._lock:
            match = next(
                (s for s in self.state.suggestions if s.id == location_id), None
            )
        if match is None:
            raise KeyError(f"No suggestion with id {location_id}")
        return self.select(match)

    def restore(self) -> Location | None:
        """Reselect the persisted location, if any, and fetch its weather."""
        location = self.store.load()
        if location is None:
            return None
        with self._lock:
            self.state.selected = location
        logger.info("Restored location id=%d (%s)", location.id, location.label)
        self.fetch_weather(location)
        return location

    def refresh(self) -> bool:
        """Re-fetch weather for the current selection. False if none."""
        location = self.state.selected
        if location is None:
            return False
        return self.fetch_weather(location)

    # --- Weather fetch ---

    def fetch_weather(self, location: Location) -> bool:
        """Fetch and apply a snapshot. Returns True if a fresh snapshot was applied.

        On failure the previous snapshot stays in place.
        """
        with self._lock:
            token = self._latest_fetch = next(self._fetch_tokens)
            self.state.loading = True
            self.state.error = None

        try:
            snapshot = self.forecast.get_forecast(location.latitude, location.longitude)
        except FetchError as e:
            logger.warning(
                "Weather fetch failed for id=%d (%s): %s",
                location.id, type(e).__name__, e,
            )
            with self._lock:
                if token == self._latest_fetch:
                    self.state.error = WEATHER_ERROR
            return False
        else:
            with self._lock:
                if token != self._latest_fetch:
                    logger.debug("Discarding stale forecast for fetch #%d", token)
                    return False
                self.state.snapshot = snapshot
            return True
        finally:
            # Busy clears however the latest call settles, unexpected errors included
            with self._lock:
                if token == self._latest_fetch:
                    self.state.loading = False

    # --- Views ---

    def hourly_view(self) -> list[HourlyEntry]:
        snapshot = self.state.snapshot
        if snapshot is None:
            return []
        return hourly_view(snapshot, self.hourly_hours, self.icon_threshold)

    def daily_view(self) -> list[DailyEntry]:
        snapshot = self.state.snapshot
        if snapshot is None:
            return []
        return daily_view(snapshot, self.daily_days, self.icon_threshold)

    def current_icon(self) -> Icon | None:
        snapshot = self.state.snapshot
        if snapshot is None:
            return None
        return weather_icon(snapshot.current.temperature, self.icon_threshold)

    def view(self) -> dict[str, Any]:
        """JSON-ready rendering of the whole widget state."""
        with self._lock:
            s = replace(self.state, suggestions=list(self.state.suggestions))
        data: dict[str, Any] = {
            "query": s.query,
            "suggestions": [loc.to_dict() | {"label": loc.label} for loc in s.suggestions],
            "selected": (
                s.selected.to_dict() | {"label": s.selected.label} if s.selected else None
            ),
            "loading": s.loading,
            "error": s.error,
            "weather": None,
        }
        snap = s.snapshot
        if snap is not None:
            data["weather"] = {
                "current": {
                    "temperature": snap.current.temperature,
                    "wind_speed": snap.current.wind_speed,
                    "rain": snap.current.rain,
                    "humidity": snap.current_humidity,
                    "icon": str(weather_icon(snap.current.temperature, self.icon_threshold)),
                },
                "hourly": [
                    _entry_dict(e)
                    for e in hourly_view(snap, self.hourly_hours, self.icon_threshold)
                ],
                "daily": [
                    _entry_dict(e)
                    for e in daily_view(snap, self.daily_days, self.icon_threshold)
                ],
                "fetched_at": snap.fetched_at,
            }
        return data


def _entry_dict(entry: HourlyEntry | DailyEntry) -> dict[str, Any]:
    data = asdict(entry)
    data["icon"] = str(entry.icon)
    return data


def build_widget(config: WidgetConfig, db_path: str | None = None) -> WeatherWidget:
    """Wire clients, store and controller from config."""
    api = config.api
    geocoder = GeocodingClient(api.geocoding_url, api.timeout_seconds, api.user_agent)
    forecaster = ForecastClient(api.forecast_url, api.timeout_seconds, api.user_agent)

    conn = connect(db_path or config.storage.db_path)
    run_migrations(conn)

    return WeatherWidget(
        search=LocationSearch(
            geocoder,
            min_query_length=config.search.min_query_length,
            max_results=config.search.max_results,
            language=config.search.language,
        ),
        forecast_client=forecaster,
        store=SelectionStore(conn, config.storage.selection_key),
        hourly_hours=config.forecast.hourly_hours,
        daily_days=config.forecast.daily_days,
        icon_threshold=config.forecast.sun_threshold_c,
    )
