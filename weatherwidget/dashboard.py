"""Weather widget web surface: FastAPI backend plus a single HTML page."""

import logging
import os
import threading
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from weatherwidget.config.loader import load_config
from weatherwidget.pipeline.widget import WeatherWidget, build_widget

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(os.environ.get("WEATHERWIDGET_CONFIG", "configs/default.yaml"))
WIDGET_HTML = Path(__file__).parent / "static" / "widget.html"
DB_PATH: str | None = None

app = FastAPI(title="Weather Widget", version="0.1.0")

_widget: WeatherWidget | None = None
_widget_lock = threading.Lock()


def get_widget() -> WeatherWidget:
    """Build the shared widget on first use and restore the last selection."""
    global _widget
    with _widget_lock:
        if _widget is None:
            _widget = build_widget(load_config(CONFIG_PATH), DB_PATH)
            restored = _widget.restore()
            if restored is not None:
                logger.info("Dashboard restored %s", restored.label)
        return _widget


class SelectRequest(BaseModel):
    id: int


@app.get("/api/suggestions")
def get_suggestions(q: str = "", widget: WeatherWidget = Depends(get_widget)):
    """Search-as-you-type. Short queries clear the list without a lookup."""
    results = widget.set_query(q)
    return {
        "suggestions": [loc.to_dict() | {"label": loc.label} for loc in results],
        "error": widget.state.error,
    }


@app.post("/api/select")
def select_location(req: SelectRequest, widget: WeatherWidget = Depends(get_widget)):
    try:
        widget.select_suggestion(req.id)
    except KeyError:
        raise HTTPException(404, f"No suggestion with id {req.id}")
    return widget.view()


@app.post("/api/refresh")
def refresh_weather(widget: WeatherWidget = Depends(get_widget)):
    if widget.state.selected is None:
        raise HTTPException(409, "No location selected")
    widget.refresh()
    return widget.view()


@app.get("/api/state")
def get_state(widget: WeatherWidget = Depends(get_widget)):
    return widget.view()


@app.get("/")
def serve_widget():
    if WIDGET_HTML.exists():
        return FileResponse(WIDGET_HTML, media_type="text/html")
    return HTMLResponse("<h1>Widget not found</h1>", status_code=404)


def run(host: str = "127.0.0.1", port: int = 8777) -> None:
    import uvicorn
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    config = load_config(CONFIG_PATH)
    run(config.server.host, config.server.port)
