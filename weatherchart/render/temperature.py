"""Feels-like temperature bar chart."""

from weatherchart.models.common import Format
from weatherchart.models.forecast import Forecast
from weatherchart.render.layout import FILLED, GUTTER, bar_row, gutter_label, round_half_up
from weatherchart.render.styles import bold

GRAPH_HEIGHT = 7


def scale_temperatures(temps: list[float], height: int = GRAPH_HEIGHT) -> list[int]:
    """Scale temperatures onto 0..height relative to the window's low and high.

    A window with no temperature range is drawn fully filled.
    """
    low, high = min(temps), max(temps)
    if high == low:
        return [height] * len(temps)
    return [round_half_up((t - low) / (high - low) * height) for t in temps]


def render_temperature_graph(forecast: Forecast, fmt: Format) -> str:
    """Bars grow upward from the low; the top row carries the high, the
    baseline row the low."""
    temps = [h.feels_like for h in forecast.hourly]
    high, low = max(temps), min(temps)
    scaled = scale_temperatures(temps)

    rows = []
    for level in range(GRAPH_HEIGHT, 0, -1):
        prefix = GUTTER
        if level == GRAPH_HEIGHT:
            prefix = bold(gutter_label(f"H {round_half_up(high)}F"), fmt)
        rows.append(prefix + bar_row(scaled, level))

    rows.append(
        bold(gutter_label(f"L {round_half_up(low)}F"), fmt) + FILLED * len(scaled)
    )
    return "\n".join(rows)
