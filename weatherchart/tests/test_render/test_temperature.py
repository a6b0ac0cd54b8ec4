"""Tests for the temperature chart."""

import pytest

from weatherchart.models.common import Format
from weatherchart.render.styles import strip_styles
from weatherchart.render.temperature import (
    GRAPH_HEIGHT,
    render_temperature_graph,
    scale_temperatures,
)


class TestScaleTemperatures:
    def test_rounds_half_up(self):
        assert scale_temperatures([30, 40, 50]) == [0, 4, 7]

    def test_extremes(self):
        scaled = scale_temperatures([12.0, -3.0, 7.5, 20.0])
        assert min(scaled) == 0
        assert max(scaled) == GRAPH_HEIGHT

    def test_zero_range_is_fully_filled(self):
        assert scale_temperatures([41.0, 41.0, 41.0]) == [7, 7, 7]

    def test_single_hour(self):
        assert scale_temperatures([41.0]) == [7]


class TestRenderTemperatureGraph:
    def test_marker_pattern(self, make_forecast):
        graph = strip_styles(
            render_temperature_graph(make_forecast([30, 40, 50]), Format.TTY)
        )
        assert graph.split("\n") == [
            "  H 50F      **",
            "             **",
            "             **",
            "           ****",
            "           ****",
            "           ****",
            "           ****",
            "  L 30F  ******",
        ]

    def test_eight_lines(self, dry_forecast):
        graph = render_temperature_graph(dry_forecast, Format.HTML)
        assert len(graph.split("\n")) == GRAPH_HEIGHT + 1

    def test_labels_bold(self, make_forecast):
        graph = render_temperature_graph(make_forecast([30.4, 50.5]), Format.HTML)
        lines = graph.split("\n")
        assert lines[0].startswith("<strong>  H 51F  </strong>")
        assert lines[-1].startswith("<strong>  L 30F  </strong>")
        assert lines[1].startswith(" " * 9)

    def test_baseline_always_full(self, make_forecast):
        lines = render_temperature_graph(
            make_forecast([70, 10, 40, 55]), Format.TTY
        ).split("\n")
        assert lines[-1].endswith("*" * 8)

    def test_uniform_window(self, make_forecast):
        lines = strip_styles(
            render_temperature_graph(make_forecast([41.0] * 4), Format.TTY)
        ).split("\n")
        assert lines[0] == "  H 41F  " + "*" * 8
        assert all(line.endswith("*" * 8) for line in lines)

    @pytest.mark.parametrize(
        "temps",
        [
            [44.82, 43.95, 42.65, 50.3, 32.57, 38.14],
            [-5.0, 0.0, 5.0, -2.5],
            [70.0, 70.5, 69.9],
        ],
    )
    def test_bars_grow_from_floor(self, make_forecast, temps):
        lines = strip_styles(
            render_temperature_graph(make_forecast(temps), Format.TTY)
        ).split("\n")
        rows = [line[9:] for line in lines[:GRAPH_HEIGHT]]
        # rows[0] is the top; a filled cell must be filled in every row below
        for upper, lower in zip(rows, rows[1:]):
            for col in range(0, len(upper), 2):
                if upper[col:col + 2] == "**":
                    assert lower[col:col + 2] == "**"

    def test_column_width_matches_hours(self, dry_forecast):
        for line in strip_styles(
            render_temperature_graph(dry_forecast, Format.TTY)
        ).split("\n"):
            assert len(line) == 9 + 2 * 25
