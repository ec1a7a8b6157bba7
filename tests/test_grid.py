"""Tests for the per-mode cell -> color mappers."""

import pytest

from colorgrid.core.color import BasicColor, Color
from colorgrid.explore.grid import GridParams, HELP_LINES, build_frame, color_at, legend
from colorgrid.explore.modes import Component, Mode


def params(step: int = 128, component: Component = Component.RED,
           width: int = 100, height: int = 50, show_help: bool = False) -> GridParams:
    return GridParams(step=step, component=component, width=width, height=height, show_help=show_help)


class TestModes:
    """Tests for mode and component cycling."""

    def test_next_wraps(self) -> None:
        mode = Mode.BASIC_16
        for _ in range(5):
            mode = mode.next()
        assert mode is Mode.BASIC_16

    def test_previous_wraps(self) -> None:
        assert Mode.BASIC_16.previous() is Mode.RGB_COMPONENT
        assert Mode.HSL.previous() is Mode.INDEXED_256

    def test_component_cycle(self) -> None:
        assert Component.RED.next() is Component.GREEN
        assert Component.GREEN.next() is Component.BLUE
        assert Component.BLUE.next() is Component.RED


class TestBasic16Grid:
    """Tests for the 16 basic colors page."""

    def test_swatches(self) -> None:
        p = params(height=40)
        assert color_at(Mode.BASIC_16, p, 18, 3) == Color.BLACK
        assert color_at(Mode.BASIC_16, p, 20, 3) == Color.BLACK
        assert color_at(Mode.BASIC_16, p, 18, 4) == Color.from_basic(BasicColor.RED)
        assert color_at(Mode.BASIC_16, p, 20, 18) == Color.WHITE
        assert color_at(Mode.BASIC_16, p, 18, 21) == Color.ORANGE

    def test_label_cells_have_no_color(self) -> None:
        p = params(height=40)
        assert color_at(Mode.BASIC_16, p, 17, 3) is None
        assert color_at(Mode.BASIC_16, p, 21, 3) is None
        assert color_at(Mode.BASIC_16, p, 18, 19) is None

    def test_help_only_when_requested(self) -> None:
        shown = build_frame(Mode.BASIC_16, params(height=40, show_help=True))
        hidden = build_frame(Mode.BASIC_16, params(height=40))
        assert shown.rows[23][0].text == HELP_LINES[0]
        assert 23 not in hidden.rows

    def test_short_terminal_drops_rows(self) -> None:
        frame = build_frame(Mode.BASIC_16, params(height=10))
        assert max(frame.rows) < 10
        assert color_at(Mode.BASIC_16, params(height=10), 18, 21) is None


class TestIndexed256Grid:
    """Tests for the 256-color palette page."""

    @pytest.mark.parametrize("col,row,index", [
        (2, 5, 0), (3, 5, 0), (33, 5, 15),
        (2, 9, 16), (73, 9, 51), (72, 14, 231),
        (2, 18, 232), (49, 18, 255),
    ])
    def test_cells(self, col: int, row: int, index: int) -> None:
        assert color_at(Mode.INDEXED_256, params(height=40), col, row) == Color.from_256(index)

    def test_gaps(self) -> None:
        p = params(height=40)
        assert color_at(Mode.INDEXED_256, p, 1, 5) is None
        assert color_at(Mode.INDEXED_256, p, 34, 5) is None
        assert color_at(Mode.INDEXED_256, p, 2, 7) is None

    def test_every_index_once(self) -> None:
        frame = build_frame(Mode.INDEXED_256, params(height=40))
        indexes = {c.value for c in frame.cells.values()}
        assert indexes == set(range(256))


class TestContinuousGrids:
    """Tests for the HSL, OKLCH and RGB pages."""

    def test_hsl_top_left(self) -> None:
        assert color_at(Mode.HSL, params(width=50, height=50), 1, 2) == Color.from_hsl(0, 41, 512)

    def test_hsl_bottom_row_is_saturated(self) -> None:
        color = color_at(Mode.HSL, params(width=50, height=50), 1, 49)
        assert color is not None
        assert color.value[1] == 255

    def test_hsl_hue_rounds_halves_up(self) -> None:
        p = params(width=10, height=50)
        hues = [color_at(Mode.HSL, p, col, 2).value[0] for col in range(1, 5)]
        assert hues == [0, 410, 819, 1229]

    def test_hsl_saturation_rounds_halves_up(self) -> None:
        color = color_at(Mode.HSL, params(width=10, height=24), 1, 2)
        assert color is not None
        assert color.value[1] == 77

    def test_hsl_lightness_from_step(self) -> None:
        color = color_at(Mode.HSL, params(step=255), 5, 5)
        assert color is not None
        assert color.value[2] == 1020

    def test_oklch_top_left(self) -> None:
        color = color_at(Mode.OKLCH, params(width=50, height=50), 1, 2)
        assert color == Color.from_oklch(128 / 255, 1 / 48, 0.0)

    def test_title_and_legend_rows_excluded(self) -> None:
        p = params(width=20, height=10)
        for mode in (Mode.HSL, Mode.OKLCH, Mode.RGB_COMPONENT):
            assert color_at(mode, p, 1, 1) is None
            assert color_at(mode, p, 1, 10) is None
            assert color_at(mode, p, 21, 5) is None
            assert color_at(mode, p, 20, 9) is not None

    @pytest.mark.parametrize("component,expected", [
        (Component.RED, (50, 23, 97)),
        (Component.GREEN, (23, 50, 97)),
        (Component.BLUE, (97, 23, 50)),
    ])
    def test_rgb_component(self, component: Component, expected: tuple[int, int, int]) -> None:
        p = params(step=50, component=component)
        assert color_at(Mode.RGB_COMPONENT, p, 10, 20) == Color.from_rgb(*expected)

    def test_rgb_corners_reach_full_range(self) -> None:
        p = params(step=0, width=40, height=20)
        assert color_at(Mode.RGB_COMPONENT, p, 1, 2) == Color.from_rgb(0, 0, 0)
        assert color_at(Mode.RGB_COMPONENT, p, 40, 19) == Color.from_rgb(0, 255, 255)

    def test_frame_matches_color_at(self) -> None:
        p = params(width=12, height=8)
        frame = build_frame(Mode.OKLCH, p)
        assert len(frame.cells) == 12 * 6
        assert frame.cells[(7, 4)] == color_at(Mode.OKLCH, p, 7, 4)


class TestLegend:
    """Tests for the bottom status line."""

    def test_hsl(self) -> None:
        assert legend(Mode.HSL, params(step=128)).startswith("Color: Lightness=512 x80 ")

    def test_oklch(self) -> None:
        assert legend(Mode.OKLCH, params(step=255)).startswith("Color: L=1.000 xFF ")

    def test_rgb(self) -> None:
        assert legend(Mode.RGB_COMPONENT, params(step=16, component=Component.GREEN)).startswith(
            "Color: Green=16 x10 "
        )

    def test_basic_has_none(self) -> None:
        assert legend(Mode.BASIC_16, params()) == ""
