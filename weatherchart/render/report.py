"""Report composer: the single rendering entry point."""

from weatherchart.models.common import Format
from weatherchart.models.forecast import Forecast
from weatherchart.render.layout import round_half_up
from weatherchart.render.precipitation import render_precipitation_graph
from weatherchart.render.styles import STYLES, bold, escape
from weatherchart.render.temperature import render_temperature_graph
from weatherchart.render.time_axis import render_time_axis


def render(forecast: Forecast, fmt: Format) -> str:
    """Render the full report for a forecast.

    Sections are joined by newlines, empty sections are dropped and the
    result ends with a blank line.
    """
    style = STYLES[fmt]
    alerts = ""
    if forecast.alerts:
        alerts = bold(f"Alerts:  {escape(', '.join(forecast.alerts), fmt)}", fmt)

    now = f"Now:     {round_half_up(forecast.feels_like)}F, {forecast.current_summary}"
    later = f"Later:   {forecast.future_summary}"

    sections = [
        style.document_open,
        alerts,
        bold(escape(now, fmt), fmt),
        bold(escape(later, fmt), fmt) + "\n",
        render_time_axis(forecast, fmt),
        render_temperature_graph(forecast, fmt),
        render_precipitation_graph(forecast, fmt),
        style.document_close,
    ]
    return "\n".join(s for s in sections if s) + "\n\n"
