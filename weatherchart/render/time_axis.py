"""Hour-offset ruler shown above the charts."""

from weatherchart.models.common import Format
from weatherchart.models.forecast import Forecast
from weatherchart.render.layout import COLUMN_WIDTH, EMPTY, GUTTER, fit_left
from weatherchart.render.styles import bold

LABEL_EVERY = 6


def render_time_axis(forecast: Forecast, fmt: Format) -> str:
    """Label every sixth hour and the final hour.

    A periodic label is two columns wide, so the column after it is skipped.
    """
    last = len(forecast.hourly) - 1
    parts = [GUTTER]
    i = 0
    while i <= last:
        if i == last:
            parts.append(bold(f"{i}h", fmt))
            break
        if i % LABEL_EVERY == 0:
            parts.append(bold(fit_left(f"{i}h", COLUMN_WIDTH * 2), fmt))
            i += 2
            continue
        parts.append(EMPTY)
        i += 1
    return "".join(parts)
