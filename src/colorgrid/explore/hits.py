"""Hit testing: which color is under the pointer, and what clicking it does."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Hashable, Mapping, Optional

from colorgrid.core.color import Color
from colorgrid.core.constants import RESET
from colorgrid.core.formatting import web_hsl, web_oklch


class CoordinateColorTable:
    """
    Cell -> color table for the frame currently on screen.

    Keys are 1-based (column, row) pairs, the same space as mouse reports.
    The table is tagged with the generation it was built for; rebuilding
    with an unchanged generation is skipped, any other generation replaces
    every entry.
    """

    def __init__(self) -> None:
        self._cells: dict[tuple[int, int], Color] = {}
        self._generation: Optional[Hashable] = None

    @property
    def generation(self) -> Optional[Hashable]:
        return self._generation

    def rebuild(self, generation: Hashable, build: Callable[[], Mapping[tuple[int, int], Color]]) -> bool:
        """Repopulate for a new generation. Returns True if the table changed."""
        if generation == self._generation:
            return False
        self._cells.clear()
        self._cells.update(build())
        self._generation = generation
        return True

    def invalidate(self) -> None:
        self._generation = None

    def lookup(self, col: int, row: int) -> Optional[Color]:
        return self._cells.get((col, row))

    def __len__(self) -> int:
        return len(self._cells)


class PointerOutcome(Enum):
    """Result of resolving a pointer event against the table."""
    CURSOR_ONLY = auto()  # Same cell and no click, or no color there
    HOVER = auto()        # Show the color under the pointer
    SELECT = auto()       # Click release: copy and save


@dataclass(frozen=True)
class ColorInfo:
    """Everything shown about a color in the status line."""
    color: Color
    name: str
    canonical: str
    hsl: str
    oklch: str

    @classmethod
    def of(cls, color: Color, rounding: int) -> ColorInfo:
        return cls(
            color=color,
            name=color.name(),
            canonical=color.canonical(),
            hsl=web_hsl(color, rounding),
            oklch=web_oklch(color, rounding),
        )

    @property
    def extra(self) -> str:
        """Suffix shown after the primary name: canonical (unless it is the name), HSL and OKLCH."""
        if self.canonical == self.name:
            return f" {self.hsl} {self.oklch}"
        return f" ({self.canonical}) {self.hsl} {self.oklch}"

    def clipboard(self, right_click: bool, any_modifier: bool) -> str:
        """Text copied on click: right click gives HSL, other modifiers OKLCH."""
        if right_click:
            return self.hsl
        if any_modifier:
            return self.oklch
        return self.canonical

    def description(self, truecolor: bool = True) -> str:
        """Saved color line: swatch, name and derived forms."""
        return f"{self.color.background(truecolor)}    {RESET} : {self.name}{self.extra}"


@dataclass(frozen=True)
class PointerResult:
    """``info`` is set for HOVER and SELECT, None for CURSOR_ONLY."""
    outcome: PointerOutcome
    info: Optional[ColorInfo] = None
    clipboard: str = ""
