"""Location search: gates free-text queries before hitting the geocoder."""

import logging

from weatherwidget.ingest.geocoding_client import GeocodingClient
from weatherwidget.models.location import Location

logger = logging.getLogger(__name__)


class LocationSearch:
    def __init__(
        self,
        client: GeocodingClient,
        min_query_length: int = 3,
        max_results: int = 10,
        language: str = "en",
    ):
        self.client = client
        self.min_query_length = min_query_length
        self.max_results = max_results
        self.language = language

    def should_search(self, query: str) -> bool:
        return len(query.strip()) >= self.min_query_length

    def search(self, query: str) -> list[Location]:
        """Return candidate locations for `query`.

        Short queries return an empty list without a request. FetchError from
        the client propagates to the caller.
        """
        if not self.should_search(query):
            return []
        return self.client.search(
            query.strip(), count=self.max_results, language=self.language
        )
