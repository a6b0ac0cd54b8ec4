"""HTTP front end: renders the forecast report for a zip code."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from weatherchart.config.loader import load_config
from weatherchart.ingest.forecast_source import ForecastSource, build_forecast_source
from weatherchart.models.common import Format, format_for_accept
from weatherchart.render.report import render

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WEATHERCHART_CONFIG"


class BadRequest(ValueError):
    pass


def _single_zipcode(request: Request) -> str:
    values = request.query_params.getlist("zipcode")
    if not values or not values[0]:
        raise BadRequest("Missing zipcode parameter")
    if len(values) > 1:
        raise BadRequest("Cannot specify multiple zipcodes")
    return values[0]


def create_app(source: ForecastSource) -> FastAPI:
    app = FastAPI(title="weatherchart", version="0.1.0")

    @app.get("/")
    def report(request: Request) -> Response:
        """Render the report; browsers get HTML, everything else tty text."""
        try:
            zipcode = _single_zipcode(request)
            fmt = format_for_accept(request.headers.get("accept"))
            forecast = source.get_forecast(zipcode)
            body = render(forecast, fmt)
        except BadRequest as e:
            logger.warning("Rejected request %s: %s", request.url.query, e)
            return PlainTextResponse(str(e), status_code=500)
        except Exception as e:
            logger.exception("Failed to render report for %s", request.url.query)
            return PlainTextResponse(_message(e), status_code=500)

        if fmt == Format.HTML:
            return HTMLResponse(body)
        return PlainTextResponse(body)

    return app


def _message(e: Exception) -> str:
    # KeyError wraps its message in quotes
    if isinstance(e, KeyError) and e.args:
        return str(e.args[0])
    return str(e)


app = create_app(build_forecast_source(load_config(os.environ.get(CONFIG_ENV_VAR))))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
