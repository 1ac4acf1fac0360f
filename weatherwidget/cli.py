"""CLI entry point for the weather widget."""

import argparse
import logging

from weatherwidget.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherwidget.config.schema import WidgetConfig
from weatherwidget.pipeline.widget import build_widget
from weatherwidget.render.formatters import (
    format_state_json,
    format_suggestions_text,
    format_widget_text,
)

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherwidget",
        description="Look up current weather and forecasts by city",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--json", action="store_true", help="Print widget state as JSON"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="List matching locations")
    search_p.add_argument("query")

    # select
    select_p = sub.add_parser("select", help="Pick a location and show its weather")
    select_p.add_argument("query")
    pick = select_p.add_mutually_exclusive_group()
    pick.add_argument("--index", type=int, default=1, help="1-based suggestion index")
    pick.add_argument("--id", type=int, dest="location_id", help="Suggestion id")

    # weather / forget
    sub.add_parser("weather", help="Show weather for the saved location")
    sub.add_parser("forget", help="Clear the saved location")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web widget")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "select":
        return _cmd_select(config, args)
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "forget":
        return _cmd_forget(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _print_widget(widget, args) -> None:
    if args.json:
        print(format_state_json(widget))
    else:
        print(format_widget_text(widget))


def _cmd_search(config: WidgetConfig, args) -> int:
    widget = build_widget(config, args.db)
    results = widget.set_query(args.query)
    if args.json:
        print(format_state_json(widget))
        return 0 if widget.state.error is None else 1
    if widget.state.error:
        print(widget.state.error)
        return 1
    print(format_suggestions_text(results))
    return 0


def _cmd_select(config: WidgetConfig, args) -> int:
    widget = build_widget(config, args.db)
    results = widget.set_query(args.query)
    if widget.state.error:
        print(widget.state.error)
        return 1
    if not results:
        print("No matches")
        return 1

    if args.location_id is not None:
        try:
            widget.select_suggestion(args.location_id)
        except KeyError:
            print(f"Error: no match with id {args.location_id}")
            return 1
    else:
        if not 1 <= args.index <= len(results):
            print(f"Error: index must be between 1 and {len(results)}")
            return 1
        widget.select(results[args.index - 1])

    _print_widget(widget, args)
    return 0 if widget.state.error is None else 1


def _cmd_weather(config: WidgetConfig, args) -> int:
    widget = build_widget(config, args.db)
    if widget.restore() is None:
        print("No saved location. Use: weatherwidget select <city>")
        return 1
    _print_widget(widget, args)
    return 0 if widget.state.error is None else 1


def _cmd_forget(config: WidgetConfig, args) -> int:
    widget = build_widget(config, args.db)
    removed = widget.store.clear()
    print("Saved location cleared" if removed else "No saved location")
    return 0


def _cmd_config(config: WidgetConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config: WidgetConfig, args) -> int:
    from weatherwidget import dashboard

    dashboard.CONFIG_PATH = args.config
    dashboard.DB_PATH = args.db
    dashboard.run(args.host or config.server.host, args.port or config.server.port)
    return 0
