"""Open-Meteo geocoding API client."""

import logging

from weatherwidget.config.schema import DEFAULT_USER_AGENT, GEOCODING_URL
from weatherwidget.ingest.http_json import get_json
from weatherwidget.models.errors import ParseError
from weatherwidget.models.location import Location

logger = logging.getLogger(__name__)

SOURCE = "geocoding"


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent

    def search(
        self, query: str, count: int = 10, language: str = "en"
    ) -> list[Location]:
        """Look up places matching `query`, in upstream relevance order.

        A missing or null `results` array means no matches.
        """
        params = {
            "name": query,
            "count": count,
            "language": language,
            "format": "json",
        }
        data = get_json(self.base_url, params, SOURCE, self.timeout, self.user_agent)
        if not isinstance(data, dict):
            raise ParseError("Geocoding response is not an object", SOURCE)

        results = data.get("results") or []
        if not isinstance(results, list):
            raise ParseError("Geocoding `results` is not a list", SOURCE)

        locations = [Location.from_api(r, SOURCE) for r in results]
        logger.debug("Geocoding returned %d matches", len(locations))
        return locations
