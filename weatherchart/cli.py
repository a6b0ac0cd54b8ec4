"""CLI entry point for the forecast report renderer."""

import argparse
import logging
import sys

from pydantic import BaseModel

from weatherchart.config.loader import get_config_value, load_config, redacted
from weatherchart.ingest.forecast_source import build_forecast_source
from weatherchart.models.common import Format
from weatherchart.render.report import render

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherchart",
        description="Short-range weather report for a US zip code",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--verbose", action="store_true", help="Log upstream requests"
    )

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Print the report for a zip code")
    report_p.add_argument("zipcode")
    report_p.add_argument(
        "--format",
        choices=[f.value for f in Format],
        default=Format.TTY.value,
        help="Output format",
    )

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP front end")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_report(config, args) -> int:
    source = build_forecast_source(config)
    try:
        forecast = source.get_forecast(args.zipcode)
    except Exception as e:
        logger.debug("Report failed for zipcode=%s", args.zipcode, exc_info=True)
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"Error: {message}", file=sys.stderr)
        return 1
    sys.stdout.write(render(forecast, Format(args.format)))
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherchart.server import create_app

    app = create_app(build_forecast_source(config))
    uvicorn.run(
        app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted(config).model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(redacted(config), args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show | config get key")
    return 1
