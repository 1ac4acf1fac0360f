"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from weatherwidget.config.schema import WidgetConfig


def load_config(path: str | Path | None) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults.
    """
    if path is None:
        return WidgetConfig()
    path = Path(path)
    if not path.exists():
        return WidgetConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return WidgetConfig(**raw)


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.max_results'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: WidgetConfig, dotted_key: str, value: Any) -> WidgetConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new WidgetConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return WidgetConfig(**data)


def save_config(config: WidgetConfig, path: str | Path) -> None:
    """Write config back to YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(json.loads(config.model_dump_json()), f, sort_keys=False)
