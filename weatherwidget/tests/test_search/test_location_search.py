"""Tests for the query gate in front of the geocoder."""

from unittest.mock import MagicMock

import pytest

from weatherwidget.ingest.geocoding_client import GeocodingClient
from weatherwidget.models.errors import NetworkError
from weatherwidget.models.location import Location
from weatherwidget.search.location_search import LocationSearch


@pytest.fixture
def geocoder(paris_geocoding: dict) -> MagicMock:
    mock = MagicMock(spec=GeocodingClient)
    mock.search.return_value = [Location.from_api(r) for r in paris_geocoding["results"]]
    return mock


class TestShouldSearch:
    @pytest.mark.parametrize("query", ["", "a", "ab", "  ab  ", "   "])
    def test_short_queries_gated(self, geocoder: MagicMock, query: str):
        assert LocationSearch(geocoder).should_search(query) is False

    @pytest.mark.parametrize("query", ["abc", " Rom ", "Paris"])
    def test_three_chars_pass(self, geocoder: MagicMock, query: str):
        assert LocationSearch(geocoder).should_search(query) is True


class TestSearch:
    def test_short_query_no_request(self, geocoder: MagicMock):
        assert LocationSearch(geocoder).search(" ab ") == []
        geocoder.search.assert_not_called()

    def test_trims_and_forwards_options(self, geocoder: MagicMock):
        search = LocationSearch(geocoder, max_results=5, language="fr")
        results = search.search("  Paris ")
        geocoder.search.assert_called_once_with("Paris", count=5, language="fr")
        assert len(results) == 3

    def test_defaults(self, geocoder: MagicMock):
        LocationSearch(geocoder).search("Paris")
        geocoder.search.assert_called_once_with("Paris", count=10, language="en")

    def test_errors_propagate(self, geocoder: MagicMock):
        geocoder.search.side_effect = NetworkError("down", "geocoding")
        with pytest.raises(NetworkError):
            LocationSearch(geocoder).search("Paris")
