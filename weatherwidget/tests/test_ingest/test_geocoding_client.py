"""Tests for the geocoding client with mocked httpx."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from weatherwidget.ingest.geocoding_client import GeocodingClient
from weatherwidget.models.errors import NetworkError, ParseError, UpstreamError

GEO_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def geocoder() -> GeocodingClient:
    return GeocodingClient(base_url=GEO_URL)


class TestSearch:
    @respx.mock
    def test_success_preserves_order(self, geocoder: GeocodingClient, paris_geocoding: dict):
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json=paris_geocoding))

        results = geocoder.search("Paris")
        assert [r.id for r in results] == [2988507, 4717560, 4647963]
        assert results[1].admin1 == "Texas"

    @respx.mock
    def test_query_params(self, geocoder: GeocodingClient, paris_geocoding: dict):
        route = respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json=paris_geocoding)
        )

        geocoder.search("Paris")
        params = route.calls[0].request.url.params
        assert params["name"] == "Paris"
        assert params["count"] == "10"
        assert params["language"] == "en"
        assert params["format"] == "json"

    @respx.mock
    def test_user_agent_header(self, geocoder: GeocodingClient, paris_geocoding: dict):
        route = respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json=paris_geocoding)
        )

        geocoder.search("Paris")
        assert "weatherwidget" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_missing_results_is_empty(self, geocoder: GeocodingClient, fixtures_dir: Path):
        with open(fixtures_dir / "geocoding_empty.json") as f:
            body = json.load(f)
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, json=body))
        assert geocoder.search("Xyzzyville") == []

    @respx.mock
    def test_null_results_is_empty(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(
            return_value=httpx.Response(200, json={"results": None})
        )
        assert geocoder.search("Xyzzyville") == []

    @respx.mock
    def test_http_error(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(UpstreamError) as exc:
            geocoder.search("Paris")
        assert exc.value.status_code == 500
        assert exc.value.source == "geocoding"

    @respx.mock
    def test_network_error(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(NetworkError):
            geocoder.search("Paris")

    @respx.mock
    def test_invalid_json(self, geocoder: GeocodingClient):
        respx.get(GEO_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(ParseError):
            geocoder.search("Paris")

    @respx.mock
    def test_no_retry(self, geocoder: GeocodingClient):
        route = respx.get(GEO_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(UpstreamError):
            geocoder.search("Paris")
        assert route.call_count == 1
