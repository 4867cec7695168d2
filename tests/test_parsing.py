"""
Unit tests for dimension and colour parsing.
"""

import pytest

from logotile import parse_colour, parse_dimensions, parse_int


class TestParseInt:

    @pytest.mark.parametrize("s, expected", [("0", 0), ("42", 42), ("+7", 7), ("-3", -3)])
    def test_valid(self, s, expected):
        assert parse_int(s) == expected

    @pytest.mark.parametrize("s", ["", " 1", "1 ", "1_000", "0x10", "4.0", "-"])
    def test_invalid(self, s):
        with pytest.raises(ValueError):
            parse_int(s)


class TestParseDimensions:

    def test_width_by_height(self):
        assert parse_dimensions("800x600") == (800, 600)

    def test_single_value_is_square(self):
        assert parse_dimensions("50") == (50, 50)

    def test_single_value_not_a_number(self):
        with pytest.raises(ValueError):
            parse_dimensions("abc")

    @pytest.mark.parametrize("s", ["abcx600", "abc x600", "800x", "x600", "800xabc"])
    def test_two_part_malformed_raises(self, s):
        with pytest.raises(ValueError):
            parse_dimensions(s)

    def test_splits_on_first_x_only(self):
        with pytest.raises(ValueError, match="600x2"):
            parse_dimensions("800x600x2")


class TestParseColour:

    def test_rgb_is_opaque(self):
        assert parse_colour("10,20,30") == (10, 20, 30, 255)

    def test_missing_field(self):
        with pytest.raises(ValueError):
            parse_colour("10,20")

    def test_extra_field_fails_on_third(self):
        with pytest.raises(ValueError):
            parse_colour("10,20,30,40")

    def test_non_numeric_channel(self):
        with pytest.raises(ValueError):
            parse_colour("10,green,30")

    def test_channels_wrap_to_eight_bits(self):
        assert parse_colour("256,-1,300") == (0, 255, 44, 255)
