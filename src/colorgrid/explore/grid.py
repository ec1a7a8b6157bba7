"""Map screen cells to colors for each explorer mode.

Each mode has a mapper with three pure operations:

- ``color_at(params, col, row)``: the color shown at a 1-based screen cell,
  or None for cells that are not part of the grid
- ``legend(params)``: the status line shown on the bottom row
- ``layout(params)``: the full Frame (text runs plus the cell -> color table)

The bottom screen row is reserved for the legend and is never painted.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from colorgrid.core.color import BasicColor, Color
from colorgrid.core.constants import HUE_MAX
from colorgrid.explore.modes import Component, Mode

STEP_HINT = "↑ to increase ↓ to decrease (shift for precise steps) "
HELP_LINES = (
    " Use space and arrows to navigate, mouse to see and select colors,",
    " click to copy to clipboard and save for showing at the end (Q to exit) ",
)
SATURATION_OFFSET = 8  # skip some of the grayer (low saturation) rows


def _round_half_up(value: float) -> int:
    """Round a non-negative value, halves going up (round() would go to even)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class GridParams:
    """Everything a mapper needs besides the cell coordinate."""
    step: int
    component: Component
    width: int
    height: int
    show_help: bool = False


@dataclass
class Run:
    """A run of text, optionally painted with a background color."""
    text: str
    bg: Color | None = None


@dataclass
class Frame:
    """One screen of a mode: text runs per row and the cell -> color table."""
    title: str
    height: int
    legend: str = ""
    rows: dict[int, list[Run]] = field(default_factory=dict)
    cells: dict[tuple[int, int], Color] = field(default_factory=dict)
    _next_col: dict[int, int] = field(default_factory=dict, repr=False)

    def put(self, row: int, text: str, bg: Color | None = None) -> None:
        """Append a run to a row; rows at or below the legend line are dropped."""
        if row >= self.height:
            return
        col = self._next_col.get(row, 1)
        self.rows.setdefault(row, []).append(Run(text, bg))
        if bg is not None:
            for i in range(len(text)):
                self.cells[(col + i, row)] = bg
        self._next_col[row] = col + len(text)


class GridMapper(ABC):
    """Per-mode strategy."""

    title: str = ""

    @abstractmethod
    def layout(self, params: GridParams) -> Frame:
        """Build the full frame for these parameters."""

    def color_at(self, params: GridParams, col: int, row: int) -> Color | None:
        return self.layout(params).cells.get((col, row))

    def legend(self, params: GridParams) -> str:
        return ""


class Basic16Grid(GridMapper):
    """The 16 basic colors one per row, plus the extra Orange."""

    title = "        16 Basic Colors"
    FIRST_ROW = 3

    def _put_basic(self, frame: Frame, row: int, basic: BasicColor) -> None:
        frame.put(row, f"{basic.label:>15}: ")
        frame.put(row, "   ", Color.from_basic(basic))

    def layout(self, params: GridParams) -> Frame:
        frame = Frame(self.title, params.height, self.legend(params))
        row = self.FIRST_ROW
        for basic in BasicColor:
            if basic is BasicColor.ORANGE:
                continue
            self._put_basic(frame, row, basic)
            row += 1
        frame.put(row + 1, " Extra named color")
        row += 2
        self._put_basic(frame, row, BasicColor.ORANGE)
        if params.show_help:
            for i, line in enumerate(HELP_LINES):
                frame.put(row + 2 + i, line)
        return frame


class Indexed256Grid(GridMapper):
    """16 basic slots, the 6x6x6 cube (36 per row) and the grayscale ramp."""

    title = "      256 colors"
    CUBE_ROW_LENGTH = 36

    def layout(self, params: GridParams) -> Frame:
        frame = Frame(self.title, params.height, self.legend(params))
        frame.put(3, " 16 basic colors")
        row = 5
        frame.put(row, " ")
        for i in range(16):
            frame.put(row, "  ", Color.from_256(i))
        frame.put(row + 2, " 216 cube")
        row += 3
        for i in range(16, 232):
            if (i - 16) % self.CUBE_ROW_LENGTH == 0:
                row += 1
                frame.put(row, " ")
            frame.put(row, "  ", Color.from_256(i))
        frame.put(row + 2, " Grayscale")
        row += 4
        frame.put(row, " ")
        for i in range(232, 256):
            frame.put(row, "  ", Color.from_256(i))
        return frame

    def legend(self, params: GridParams) -> str:
        return "Color: 256 palette, space or → for next mode, ← for previous "


class _ContinuousGrid(GridMapper):
    """Modes where every cell between the title and legend rows is a color."""

    FIRST_ROW = 2

    def in_grid(self, params: GridParams, col: int, row: int) -> bool:
        return 1 <= col <= params.width and self.FIRST_ROW <= row <= params.height - 1

    def layout(self, params: GridParams) -> Frame:
        frame = Frame(self.title, params.height, self.legend(params))
        for row in range(self.FIRST_ROW, params.height):
            for col in range(1, params.width + 1):
                color = self.color_at(params, col, row)
                if color is not None:
                    frame.put(row, " ", color)
        return frame


class HSLGrid(_ContinuousGrid):
    """Hue across columns, saturation down rows, lightness from the step."""

    title = "HSL colors"

    @staticmethod
    def lightness(params: GridParams) -> int:
        return params.step << 2

    def color_at(self, params: GridParams, col: int, row: int) -> Color | None:
        if not self.in_grid(params, col, row):
            return None
        available = params.height - 2
        line = row - 1
        sat = _round_half_up(255 * (line + SATURATION_OFFSET) / (available + SATURATION_OFFSET))
        hue = _round_half_up(HUE_MAX * (col - 1) / params.width)
        return Color.from_hsl(hue, sat, self.lightness(params))

    def legend(self, params: GridParams) -> str:
        return f"Color: Lightness={self.lightness(params)} x{params.step:X} {STEP_HINT}"


class OKLCHGrid(_ContinuousGrid):
    """Hue across columns, chroma down rows, lightness from the step."""

    title = "OKLCH colors"

    def color_at(self, params: GridParams, col: int, row: int) -> Color | None:
        if not self.in_grid(params, col, row):
            return None
        available = params.height - 2
        chroma = (row - 1) / available
        hue = (col - 1) / params.width
        return Color.from_oklch(params.step / 255, chroma, hue)

    def legend(self, params: GridParams) -> str:
        return f"Color: L={params.step / 255:.3f} x{params.step:X} {STEP_HINT}"


class RGBGrid(_ContinuousGrid):
    """Two channels across columns and rows, the selected component fixed."""

    title = "RGB colors"

    def color_at(self, params: GridParams, col: int, row: int) -> Color | None:
        if not self.in_grid(params, col, row):
            return None
        last_line = max(1, params.height - 3)
        last_col = max(1, params.width - 1)
        x = min(255, 255 * (col - 1) // last_col)
        y = min(255, 255 * (row - 2) // last_line)
        return Color.from_rgb(*params.component.arrange(x, y, params.step))

    def legend(self, params: GridParams) -> str:
        return f"Color: {params.component.value}={params.step} x{params.step:X} {STEP_HINT}"


MAPPERS: dict[Mode, GridMapper] = {
    Mode.BASIC_16: Basic16Grid(),
    Mode.INDEXED_256: Indexed256Grid(),
    Mode.HSL: HSLGrid(),
    Mode.OKLCH: OKLCHGrid(),
    Mode.RGB_COMPONENT: RGBGrid(),
}


def color_at(mode: Mode, params: GridParams, col: int, row: int) -> Color | None:
    return MAPPERS[mode].color_at(params, col, row)


def legend(mode: Mode, params: GridParams) -> str:
    return MAPPERS[mode].legend(params)


def build_frame(mode: Mode, params: GridParams) -> Frame:
    return MAPPERS[mode].layout(params)
