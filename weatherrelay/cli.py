"""CLI entry point for the JMA forecast relay."""

import argparse
import json
import logging

from dotenv import load_dotenv

from weatherrelay.config.loader import load_config
from weatherrelay.config.schema import RelayConfig
from weatherrelay.errors import ConfigError, DeliveryError, WeatherRelayError
from weatherrelay.pipeline.forecast_pipeline import ForecastPipeline
from weatherrelay.reporting.formatters import render_summary

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_CONFIG = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherrelay",
        description="JMA forecast reporter and Discord notifier",
    )
    parser.add_argument("--config", default=None, help="Optional config YAML path")
    parser.add_argument("--env-file", default=".env", help="dotenv file to load")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("table", help="Print weather and temperature tables")

    dump_p = sub.add_parser("dump", help="Print the full forecast summary")
    dump_p.add_argument(
        "--raw", action="store_true", help="Also print the parsed document as JSON"
    )

    sub.add_parser("notify", help="Post the forecast to the Discord webhook")

    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display resolved config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv(args.env_file, override=False)

    try:
        config = load_config(
            args.config, require_webhook=args.command in ("notify", "serve")
        )
    except ConfigError as e:
        logger.error("%s", e)
        print(f"Error: {e}")
        return EXIT_CONFIG

    if args.command == "table":
        return _cmd_table(config)
    elif args.command == "dump":
        return _cmd_dump(config, args)
    elif args.command == "notify":
        return _cmd_notify(config)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_table(config: RelayConfig) -> int:
    pipeline = ForecastPipeline(config)
    try:
        print(pipeline.table_report())
    except WeatherRelayError as e:
        logger.error("Table report failed: %s", e)
        return EXIT_FAILURE
    return 0


def _cmd_dump(config: RelayConfig, args) -> int:
    pipeline = ForecastPipeline(config)
    try:
        doc = pipeline.fetch_document()
    except WeatherRelayError as e:
        logger.error("Forecast fetch failed: %s", e)
        return EXIT_FAILURE
    if args.raw:
        print(json.dumps(doc.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    print(f"Weather information:\n{render_summary(doc)}")
    return 0


def _cmd_notify(config: RelayConfig) -> int:
    pipeline = ForecastPipeline(config)
    try:
        pipeline.notify()
    except DeliveryError as e:
        logger.error("Webhook delivery failed: %s", e)
        print("failed to send discord")
        return EXIT_FAILURE
    except WeatherRelayError as e:
        logger.error("Forecast fetch failed: %s", e)
        print("failed to fetch weather overview")
        return EXIT_FAILURE
    print("sent")
    return 0


def _cmd_serve(config: RelayConfig, args) -> int:
    import uvicorn

    from weatherrelay.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Listening on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config: RelayConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
