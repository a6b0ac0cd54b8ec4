"""Tests for fixed-width layout helpers."""

from weatherchart.render.layout import (
    GUTTER,
    bar_row,
    fit_left,
    fit_right,
    gutter_label,
    round_half_up,
)


class TestRoundHalfUp:
    def test_halves_round_up(self):
        assert round_half_up(3.5) == 4
        assert round_half_up(4.5) == 5
        assert round_half_up(0.5) == 1

    def test_negative_halves_toward_positive(self):
        assert round_half_up(-2.5) == -2
        assert round_half_up(-2.6) == -3

    def test_plain(self):
        assert round_half_up(44.28) == 44
        assert round_half_up(50.78) == 51

    def test_just_below_half(self):
        assert round_half_up(0.49999999999999994) == 0
        assert round_half_up(-0.5000000000000001) == -1


class TestFitRight:
    def test_pads(self):
        assert fit_right("ab", 5) == "   ab"

    def test_truncates_from_left(self):
        assert fit_right("abcdef", 4) == "cdef"

    def test_exact(self):
        assert fit_right("abcd", 4) == "abcd"

    def test_zero_width(self):
        assert fit_right("abc", 0) == ""


class TestFitLeft:
    def test_pads(self):
        assert fit_left("6h", 4) == "6h  "

    def test_truncates_from_right(self):
        assert fit_left("123h", 3) == "123"

    def test_zero_width(self):
        assert fit_left("abc", 0) == ""


class TestGutterLabel:
    def test_short_label(self):
        assert gutter_label("H 51F") == "  H 51F  "

    def test_always_nine_wide(self):
        for text in ("", "x", "R 5%", "H 100F", "L -10F", "R 100%"):
            assert len(gutter_label(text)) == len(GUTTER) == 9

    def test_long_label_loses_leading_chars(self):
        assert gutter_label("H 1000F") == "H 1000F  "
        assert gutter_label("H 10000F") == " 10000F  "


class TestBarRow:
    def test_threshold_inclusive(self):
        assert bar_row([0, 2, 3], 2) == "  ****"
        assert bar_row([], 1) == ""
