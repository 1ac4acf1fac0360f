"""Fetch failures raised by the upstream API clients.

Callers see one of three kinds. The widget folds all of them into a single
message per operation, but the kind and status survive for logging.
"""

SUGGESTIONS_ERROR = "Failed to fetch location suggestions"
WEATHER_ERROR = "Failed to fetch weather data"


class FetchError(Exception):
    """Base class for failed geocoding or forecast lookups."""

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source


class NetworkError(FetchError):
    """The request never produced a response (DNS, connect, timeout)."""


class ParseError(FetchError):
    """The response body was not the JSON shape we expect."""


class UpstreamError(FetchError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, message: str, source: str, status_code: int):
        super().__init__(message, source)
        self.status_code = status_code
