"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_USER_AGENT = "weatherwidget/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    min_query_length: int = Field(default=3, ge=1)
    max_results: int = Field(default=10, ge=1, le=100)
    language: str = "en"


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_hours: int = Field(default=24, ge=1, le=168)
    daily_days: int = Field(default=7, ge=1, le=16)
    sun_threshold_c: float = 25.0


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/widget.db"
    selection_key: str = "selectedLocation"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    forecast: ForecastConfig = ForecastConfig()
    storage: StorageConfig = StorageConfig()
    server: ServerConfig = ServerConfig()
