"""Explorer modes and RGB components, both cyclic."""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    """Which color grid is on screen."""
    BASIC_16 = 0
    INDEXED_256 = 1
    HSL = 2
    OKLCH = 3
    RGB_COMPONENT = 4

    def next(self) -> Mode:
        members = list(Mode)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> Mode:
        members = list(Mode)
        return members[(members.index(self) - 1) % len(members)]


class Component(Enum):
    """RGB channel held fixed (at the step value) in RGB mode."""
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    def next(self) -> Component:
        members = list(Component)
        return members[(members.index(self) + 1) % len(members)]

    def arrange(self, column: int, row: int, fixed: int) -> tuple[int, int, int]:
        """Place the column-driven, row-driven and fixed values on R, G, B."""
        if self is Component.RED:
            return (fixed, column, row)
        if self is Component.GREEN:
            return (column, fixed, row)
        return (row, column, fixed)
