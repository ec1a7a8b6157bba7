"""Interaction state and the transitions driven by key and mouse events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from colorgrid.cli.core.input import Key, KeyEvent, MouseEvent
from colorgrid.explore.grid import GridParams
from colorgrid.explore.hits import ColorInfo, CoordinateColorTable, PointerOutcome, PointerResult
from colorgrid.explore.modes import Component, Mode

STEP_MIN = 0
STEP_MAX = 255
STEP_COARSE = 16
STEP_FINE = 1
DEFAULT_STEP = 128  # mid lightness for HSL/OKLCH
NO_POINTER = -1


class Action(Enum):
    """What the event loop should do after a key."""
    CONTINUE = auto()
    QUIT = auto()


@dataclass
class InteractionState:
    """
    The mutable explorer session.

    ``step`` is the lightness step in HSL/OKLCH modes and the fixed channel
    value in RGB mode. ``last_x``/``last_y`` hold the last pointer cell,
    NO_POINTER when unknown.
    """
    mode: Mode = Mode.BASIC_16
    step: int = DEFAULT_STEP
    component: Component = Component.RED
    dirty: bool = True
    rounding: int = -1
    last_x: int = NO_POINTER
    last_y: int = NO_POINTER
    show_help: bool = True

    def next_mode(self) -> None:
        self.mode = self.mode.next()
        self.dirty = True

    def prev_mode(self) -> None:
        self.mode = self.mode.previous()
        self.dirty = True

    def cycle_component(self) -> None:
        self.component = self.component.next()
        self.dirty = True

    def adjust_step(self, delta: int) -> None:
        """Change the step, clamped to 0-255."""
        self.step = max(STEP_MIN, min(STEP_MAX, self.step + delta))
        self.dirty = True

    def on_resize(self) -> None:
        self.dirty = True
        self.show_help = True

    def forget_pointer(self) -> None:
        """Force the next pointer event to refresh the status line."""
        self.last_x, self.last_y = NO_POINTER, NO_POINTER

    def grid_params(self, width: int, height: int) -> GridParams:
        return GridParams(
            step=self.step,
            component=self.component,
            width=width,
            height=height,
            show_help=self.show_help and self.mode is Mode.BASIC_16,
        )

    def generation(self, width: int, height: int) -> tuple[Mode, int, Component, int, int]:
        """Identity of the frame a coordinate table was built for."""
        return (self.mode, self.step, self.component, width, height)

    def handle_key(self, event: KeyEvent) -> Action:
        """Apply a key press. Any key marks the frame dirty."""
        self.dirty = True
        if event.char in ('q', 'Q') or event.key == Key.INTERRUPT:
            return Action.QUIT
        if event.key == Key.ESCAPE or (event.key is None and event.raw.startswith('\x1b')):
            return Action.CONTINUE
        precise = event.modifiers != 0
        if event.key == Key.LEFT:
            self.prev_mode()
        elif event.key == Key.RIGHT:
            self.next_mode()
        elif event.key == Key.UP:
            self.adjust_step(STEP_FINE if precise else STEP_COARSE)
        elif event.key == Key.DOWN:
            self.adjust_step(-(STEP_FINE if precise else STEP_COARSE))
        elif event.char == ' ':
            if self.mode is Mode.RGB_COMPONENT:
                self.cycle_component()
            else:
                self.next_mode()
        else:
            self.next_mode()
        return Action.CONTINUE

    def resolve_pointer(self, table: CoordinateColorTable, event: MouseEvent) -> PointerResult:
        """
        Look up the color under the pointer.

        Events at an unchanged cell without a click release only echo the
        cursor, as do events over cells with no color.
        """
        click = event.release
        moved = (event.x, event.y) != (self.last_x, self.last_y)
        self.last_x, self.last_y = event.x, event.y
        if not (click or moved):
            return PointerResult(PointerOutcome.CURSOR_ONLY)
        color = table.lookup(event.x, event.y)
        if color is None:
            return PointerResult(PointerOutcome.CURSOR_ONLY)
        info = ColorInfo.of(color, self.rounding)
        if click:
            return PointerResult(
                PointerOutcome.SELECT,
                info,
                info.clipboard(event.right_click, event.any_modifier),
            )
        return PointerResult(PointerOutcome.HOVER, info)
