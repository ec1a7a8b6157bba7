"""Tests for the color model (no terminal needed)."""

import pytest

from colorgrid.core import conversions
from colorgrid.core.color import BasicColor, Color, ColorKind
from colorgrid.core.formatting import format_number, web_hsl, web_oklch


class TestConversions:
    """Tests for palette and color space math."""

    def test_palette_256(self) -> None:
        assert conversions.palette_256_rgb(1) == (170, 0, 0)
        assert conversions.palette_256_rgb(16) == (0, 0, 0)
        assert conversions.palette_256_rgb(196) == (255, 0, 0)
        assert conversions.palette_256_rgb(231) == (255, 255, 255)
        assert conversions.palette_256_rgb(232) == (8, 8, 8)
        assert conversions.palette_256_rgb(255) == (238, 238, 238)

    def test_palette_256_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            conversions.palette_256_rgb(256)

    def test_rgb_to_256(self) -> None:
        assert conversions.rgb_to_256(255, 0, 0) == 196
        assert conversions.rgb_to_256(128, 128, 128) == 244
        assert conversions.rgb_to_256(255, 128, 0) == 208

    def test_hsl_primaries(self) -> None:
        assert conversions.hsl_to_rgb(0, 1, 0.5) == (255, 0, 0)
        assert conversions.hsl_to_rgb(120, 1, 0.5) == (0, 255, 0)
        assert conversions.hsl_to_rgb(240, 1, 0.5) == (0, 0, 255)
        assert conversions.hsl_to_rgb(0, 0, 1) == (255, 255, 255)

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 128, 0), (12, 200, 99), (77, 77, 78), (250, 5, 130)])
    def test_rgb_hsl_rgb_within_one(self, rgb: tuple[int, int, int]) -> None:
        back = conversions.hsl_to_rgb(*conversions.rgb_to_hsl(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back))

    def test_oklch_extremes(self) -> None:
        assert conversions.oklch_to_rgb(1.0, 0.0, 0.0) == (255, 255, 255)
        assert conversions.oklch_to_rgb(0.0, 0.0, 0.0) == (0, 0, 0)

    def test_oklch_clamps_out_of_gamut(self) -> None:
        r, g, b = conversions.oklch_to_rgb(0.5, 1.0, 90.0)
        assert all(0 <= c <= 255 for c in (r, g, b))

    @pytest.mark.parametrize("rgb", [(200, 100, 50), (0, 128, 255), (30, 30, 30)])
    def test_rgb_oklch_rgb_within_one(self, rgb: tuple[int, int, int]) -> None:
        back = conversions.oklch_to_rgb(*conversions.rgb_to_oklch(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back))

    def test_white_oklch(self) -> None:
        l, c, _ = conversions.rgb_to_oklch(255, 255, 255)
        assert l == pytest.approx(1.0, abs=1e-3)
        assert c == pytest.approx(0.0, abs=1e-3)


class TestColor:
    """Tests for the tagged Color value."""

    def test_basic_color(self) -> None:
        red = Color.from_basic(BasicColor.RED)
        assert red.kind == ColorKind.BASIC
        assert red.name() == "Red"
        assert red.canonical() == "Red"
        assert red.to_rgb() == (170, 0, 0)

    def test_basic_sgr(self) -> None:
        assert Color.from_basic(BasicColor.RED).to_sgr_bg() == "41"
        assert Color.from_basic(BasicColor.DARK_GRAY).to_sgr_bg() == "100"
        assert Color.WHITE.to_sgr_bg() == "107"
        assert Color.ORANGE.to_sgr_bg() == "48;5;214"
        assert Color.ORANGE.name() == "Orange"

    def test_basic_from_label(self) -> None:
        assert BasicColor.from_label("BrightCyan") is BasicColor.BRIGHT_CYAN
        with pytest.raises(ValueError):
            BasicColor.from_label("brightcyan")

    def test_256_color(self) -> None:
        color = Color.from_256(196)
        assert color.name() == "256:196"
        assert color.canonical() == "#ff0000"
        assert color.to_sgr_bg() == "48;5;196"
        assert color.to_sgr_bg(truecolor=False) == "48;5;196"

    def test_rgb_color(self) -> None:
        color = Color.from_rgb(255, 128, 0)
        assert color.name() == "RGB#ff8000"
        assert color.canonical() == "#ff8000"
        assert color.to_sgr_bg() == "48;2;255;128;0"
        assert color.to_sgr_bg(truecolor=False) == "48;5;208"
        assert color.background() == "\x1b[48;2;255;128;0m"

    def test_hsl_color(self) -> None:
        color = Color.from_hsl(0xAAA, 0xFF, 0x200)
        assert color.name() == "HSL#AAA_FF_200"
        assert Color.from_hsl(0, 255, 512).to_rgb() == (255, 0, 0)

    def test_oklch_color(self) -> None:
        color = Color.from_oklch(0.5, 0.1, 1.25)
        assert color.value == (0.5, 0.1, 0.25)
        assert color.name() == "OKLCH(0.500, 0.100, 0.250)"

    def test_decoded_color(self) -> None:
        color = Color.decoded("red", (255, 0, 0))
        assert color.name() == "red"
        assert color.canonical() == "#ff0000"
        assert color.to_rgb() == (255, 0, 0)

    def test_value_semantics(self) -> None:
        assert Color.from_rgb(1, 2, 3) == Color.from_rgb(1, 2, 3)
        assert Color.from_rgb(1, 2, 3) != Color.from_rgb(1, 2, 4)
        assert len({Color.from_256(5), Color.from_256(5)}) == 1

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb(256, 0, 0)
        with pytest.raises(ValueError):
            Color.from_256(-1)
        with pytest.raises(ValueError):
            Color.from_hsl(4096, 0, 0)
        with pytest.raises(ValueError):
            Color.from_oklch(1.5, 0.1, 0.0)


class TestFormatting:
    """Tests for web HSL/OKLCH strings."""

    def test_format_number(self) -> None:
        assert format_number(0.5, -1) == "0.5"
        assert format_number(1 / 3, 2) == "0.33"
        assert format_number(10, 0) == "10"
        assert format_number(-0.0001, 2) == "0.00"

    def test_web_hsl_from_rgb(self) -> None:
        assert web_hsl(Color.from_rgb(255, 0, 0), 0) == "hsl(0 100% 50%)"

    def test_web_hsl_from_fixed_point(self) -> None:
        assert web_hsl(Color.from_hsl(1024, 255, 0)) == "hsl(90.0 100.0% 0.0%)"

    def test_web_oklch_from_oklch(self) -> None:
        assert web_oklch(Color.from_oklch(0.5, 0.1, 0.25)) == "oklch(50.0% 0.1 90.0)"

    def test_web_oklch_from_rgb(self) -> None:
        text = web_oklch(Color.from_rgb(255, 0, 0), 1)
        assert text.startswith("oklch(62.8% 0.3 29.")

    def test_stable(self) -> None:
        color = Color.from_rgb(12, 200, 99)
        assert web_hsl(color, 3) == web_hsl(color, 3)
        assert web_oklch(color, -1) == web_oklch(color, -1)
