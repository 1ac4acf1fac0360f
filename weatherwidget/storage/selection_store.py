"""Single-slot store for the last selected location."""

import json
import logging
import sqlite3
import threading

from weatherwidget.models.errors import ParseError
from weatherwidget.models.location import Location
from weatherwidget.storage import settings_repo

logger = logging.getLogger(__name__)

DEFAULT_KEY = "selectedLocation"


class SelectionStore:
    """Typed get/set over one settings key.

    Missing or unreadable data loads as "no selection".
    """

    def __init__(self, conn: sqlite3.Connection, key: str = DEFAULT_KEY):
        self.conn = conn
        self.key = key
        self._lock = threading.Lock()

    def save(self, location: Location) -> None:
        with self._lock:
            settings_repo.set_setting(self.conn, self.key, json.dumps(location.to_dict()))

    def load(self) -> Location | None:
        with self._lock:
            raw = settings_repo.get_setting(self.conn, self.key)
        if raw is None:
            return None
        try:
            return Location.from_api(json.loads(raw), source="store")
        except (ValueError, ParseError):
            logger.warning("Ignoring unreadable persisted selection under %s", self.key)
            return None

    def clear(self) -> bool:
        with self._lock:
            return settings_repo.delete_setting(self.conn, self.key)
