"""Fixed-width helpers shared by the chart renderers."""

import math

GUTTER_WIDTH = 9
GUTTER = " " * GUTTER_WIDTH
COLUMN_WIDTH = 2
FILLED = "**"
EMPTY = "  "


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def fit_right(text: str, width: int) -> str:
    """Keep the last ``width`` characters, right justified to exactly ``width``."""
    if width <= 0:
        return ""
    return text[-width:].rjust(width)


def fit_left(text: str, width: int) -> str:
    """Keep the first ``width`` characters, left justified to exactly ``width``."""
    if width <= 0:
        return ""
    return text[:width].ljust(width)


def gutter_label(text: str) -> str:
    """Label for the chart gutter: right aligned, two spaces before the bars."""
    return fit_right(text + "  ", GUTTER_WIDTH)


def bar_row(scaled: list[int], level: int) -> str:
    return "".join(FILLED if s >= level else EMPTY for s in scaled)
