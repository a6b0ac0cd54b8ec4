"""Chance-of-rain bar chart, hung below the temperature chart.

Bars grow downward as the probability rises. The row matching the peak
probability is labelled with it.
"""

from weatherchart.models.common import Format
from weatherchart.models.forecast import Forecast
from weatherchart.render.layout import GUTTER, bar_row, gutter_label, round_half_up
from weatherchart.render.styles import bold, cyan

GRAPH_HEIGHT = 5


def scale_probabilities(probs: list[float], height: int = GRAPH_HEIGHT) -> list[int]:
    return [round_half_up(p * height) for p in probs]


def render_precipitation_graph(forecast: Forecast, fmt: Format) -> str:
    probs = [h.precipitation_probability for h in forecast.hourly]
    peak = max(probs)
    if peak == 0:
        return ""

    scaled = scale_probabilities(probs)
    peak_level = round_half_up(peak * GRAPH_HEIGHT)

    rows = []
    for level in range(1, GRAPH_HEIGHT + 1):
        prefix = GUTTER
        if level == peak_level:
            label = gutter_label(f"R {round_half_up(peak * 100)}%")
            prefix = cyan(bold(label, fmt), fmt)
        # bars get their own colour span: a tty reset in the label would
        # otherwise end the colour for the rest of the row
        rows.append(prefix + cyan(bar_row(scaled, level), fmt))
    return "\n".join(rows)
