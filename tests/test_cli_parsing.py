"""Tests for parsing helpers, codec options and their CLI wrappers."""

import pytest

import typer

from bmp_raster_editor.core.options import (
    CodecOptions,
    PaddingMode,
    RowOrder,
    PADDING_ENV,
    ROW_ORDER_ENV,
    MAX_DIMENSION_ENV,
)
from bmp_raster_editor.pixels import Pixel


class TestParsePointCore:
    """Test the core parse_point in core/parsing.py (raises ValueError)."""

    def get_parse_point_core(self):
        from bmp_raster_editor.core.parsing import parse_point
        return parse_point

    def test_comma_and_colon(self):
        parse_point = self.get_parse_point_core()
        assert parse_point("40,60") == (40, 60)
        assert parse_point(" 1 : 2 ") == (1, 2)

    def test_hex_and_negative(self):
        parse_point = self.get_parse_point_core()
        assert parse_point("0x10,-3") == (16, -3)

    def test_invalid_raises_valueerror(self):
        parse_point = self.get_parse_point_core()
        with pytest.raises(ValueError):
            parse_point("40")
        with pytest.raises(ValueError):
            parse_point("a,b")
        with pytest.raises(ValueError):
            parse_point("1,2,3")


class TestParseColorCore:
    """Test the core parse_color in core/parsing.py."""

    def get_parse_color_core(self):
        from bmp_raster_editor.core.parsing import parse_color
        return parse_color

    def test_named(self):
        parse_color = self.get_parse_color_core()
        assert parse_color("black") == Pixel.from_rgb(0, 0, 0)
        assert parse_color("WHITE") == Pixel.from_rgb(255, 255, 255)

    def test_hex(self):
        parse_color = self.get_parse_color_core()
        assert parse_color("#FF8000") == Pixel.from_rgb(255, 128, 0)
        assert parse_color("#01020304") == Pixel.from_rgb(1, 2, 3, 4)

    def test_components(self):
        parse_color = self.get_parse_color_core()
        assert parse_color("10,20,30") == Pixel.from_rgb(10, 20, 30)
        assert parse_color("10,20,30,40").alpha == 40

    def test_invalid_raises_valueerror(self):
        parse_color = self.get_parse_color_core()
        for bad in ("", "#FFF", "1,2", "300,0,0", "purple"):
            with pytest.raises(ValueError):
                parse_color(bad)


class TestParseOptionNames:
    """Test padding/row-order alias parsing."""

    def test_padding_aliases(self):
        from bmp_raster_editor.core.parsing import parse_padding_mode
        assert parse_padding_mode("bgr") == PaddingMode.BGR_STRIDE
        assert parse_padding_mode("Pixel-Stride") == PaddingMode.PIXEL_STRIDE

    def test_row_order_aliases(self):
        from bmp_raster_editor.core.parsing import parse_row_order
        assert parse_row_order("match-header") == RowOrder.MATCH_HEADER
        assert parse_row_order("as-stored") == RowOrder.AS_STORED

    def test_invalid_names(self):
        from bmp_raster_editor.core.parsing import parse_padding_mode, parse_row_order
        with pytest.raises(ValueError):
            parse_padding_mode("none")
        with pytest.raises(ValueError):
            parse_row_order("sideways")


class TestCodecOptionsFromEnv:
    """Test environment configuration."""

    def test_defaults(self):
        options = CodecOptions.from_env({})
        assert options == CodecOptions()
        assert options.padding is PaddingMode.BGR_STRIDE
        assert options.row_order is RowOrder.MATCH_HEADER

    def test_overrides(self):
        options = CodecOptions.from_env({
            PADDING_ENV: "pixel",
            ROW_ORDER_ENV: "as_stored",
            MAX_DIMENSION_ENV: "64",
        })
        assert options.padding is PaddingMode.PIXEL_STRIDE
        assert options.row_order is RowOrder.AS_STORED
        assert options.max_dimension == 64

    def test_bad_max_dimension(self):
        with pytest.raises(ValueError):
            CodecOptions.from_env({MAX_DIMENSION_ENV: "big"})
        with pytest.raises(ValueError):
            CodecOptions.from_env({MAX_DIMENSION_ENV: "0"})


class TestCliWrappers:
    """CLI wrappers convert ValueError to typer.BadParameter."""

    def test_parse_point_bad_parameter(self):
        from bmp_raster_editor.cli import parse_point
        assert parse_point("3,4") == (3, 4)
        with pytest.raises(typer.BadParameter):
            parse_point("nope")

    def test_parse_color_bad_parameter(self):
        from bmp_raster_editor.cli import parse_color
        with pytest.raises(typer.BadParameter):
            parse_color("#GG0000")

    def test_build_options_command_line_wins(self, monkeypatch):
        from bmp_raster_editor.cli import build_options
        monkeypatch.setenv(PADDING_ENV, "pixel")
        monkeypatch.setenv(MAX_DIMENSION_ENV, "100")

        options = build_options("bgr", None)
        assert options.padding is PaddingMode.BGR_STRIDE
        assert options.max_dimension == 100

    def test_build_options_invalid(self):
        from bmp_raster_editor.cli import build_options
        with pytest.raises(typer.BadParameter):
            build_options("wide", None)
