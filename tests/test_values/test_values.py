"""Tests for color and size value parsers."""

import pytest

from declay.errors import InvalidColorComponentError, InvalidSizeError
from declay.model.color import BLACK, Color
from declay.values import format_number, parse_color, parse_int, parse_size
from declay.values.colors import HexColorRecognizer, RgbColorRecognizer


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestParseColor:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("red", (255, 0, 0)),
            ("#F00", (255, 0, 0)),
            ("#FF0000", (255, 0, 0)),
            ("rgb(128,64,32)", (128, 64, 32)),
            ("", (0, 0, 0)),
            ("rgb(300,0,0)", (0, 0, 0)),
            ("#GGGGGG", (0, 0, 0)),
        ],
    )
    def test_color_table(self, text, expected):
        assert parse_color(text).as_tuple() == expected

    def test_named_colors_case_insensitive(self):
        assert parse_color("  WHITE ") == Color(255, 255, 255)
        assert parse_color("Magenta") == Color(255, 0, 255)

    def test_short_hex_duplicates_nibbles(self):
        assert parse_color("#1a2") == Color(0x11, 0xAA, 0x22)

    def test_rgb_with_spaces(self):
        assert parse_color("rgb( 1 , 2 , 3 )") == Color(1, 2, 3)

    def test_none_is_black(self):
        assert parse_color(None) is BLACK

    @pytest.mark.parametrize(
        "text",
        [
            "chartreuse",
            "#12345",
            "rgb(1,2)",
            "rgb(1.5,2,3)",
            "rgb(-1,0,0)",
            "hsl(0,0,0)",
            "rgb(１２８,0,0)",
        ],
    )
    def test_unrecognized_falls_back_to_black(self, text):
        assert parse_color(text) == BLACK

    def test_color_hex_property(self):
        assert Color(255, 0, 16).hex == "#FF0010"
        assert str(Color(0, 0, 0)) == "#000000"


class TestRecognizers:
    def test_hex_rejects_bad_digits(self):
        recognizer = HexColorRecognizer()
        assert recognizer.can_parse("#GGG")
        with pytest.raises(InvalidColorComponentError):
            recognizer.parse("#GGG")

    def test_rgb_rejects_out_of_range(self):
        with pytest.raises(InvalidColorComponentError):
            RgbColorRecognizer().parse("rgb(0, 256, 0)")

    def test_component_error_is_value_error(self):
        assert issubclass(InvalidColorComponentError, ValueError)


# ---------------------------------------------------------------------------
# Sizes
# ---------------------------------------------------------------------------


class TestParseSize:
    @pytest.mark.parametrize(
        "text, expected",
        [("100", 100.0), ("200px", 200.0), ("  50  ", 50.0), ("12.5", 12.5), (" 7px ", 7.0), ("-3", -3.0)],
    )
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "px", "10em", "1_000", "inf", "nan", "10 px", "100\npx", "１００"])
    def test_invalid(self, text):
        with pytest.raises(InvalidSizeError):
            parse_size(text)

    def test_error_carries_text(self):
        with pytest.raises(InvalidSizeError) as exc_info:
            parse_size("wide")
        assert exc_info.value.text == "wide"
        assert isinstance(exc_info.value, ValueError)


class TestParseInt:
    @pytest.mark.parametrize("text, expected", [("3", 3), ("-4", -4), ("+2", 2)])
    def test_valid(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", " 3", "3\n", "2.5", "1_0", "３"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_int(text)


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(100.0, "100"), (0.5, "0.5"), (3, "3"), (-2.25, "-2.25"), (0.0, "0"), (1e-07, "0.0000001")],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected
