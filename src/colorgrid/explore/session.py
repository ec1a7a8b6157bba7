"""Interactive explorer session: the event loop tying state, grids and screen."""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from colorgrid.cli.core.ansi_text import truncate
from colorgrid.cli.core.input import InputEvent, MouseEvent, ResizeEvent
from colorgrid.cli.core.terminal import TerminalSize
from colorgrid.core.constants import RESET
from colorgrid.explore.grid import Frame, Run, build_frame
from colorgrid.explore.hits import CoordinateColorTable, PointerOutcome, PointerResult
from colorgrid.explore.selection import SavedColors
from colorgrid.explore.state import Action, InteractionState

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """The display operations the session needs (implemented by Terminal)."""

    truecolor: bool

    def size(self) -> TerminalSize: ...
    def write(self, text: str) -> None: ...
    def flush(self) -> None: ...
    def clear(self) -> None: ...
    def clear_end_of_line(self) -> None: ...
    def move_to(self, row: int, col: int) -> None: ...
    def write_at(self, row: int, col: int, text: str) -> None: ...
    def write_right(self, row: int, text: str) -> None: ...
    def start_sync(self) -> None: ...
    def end_sync(self) -> None: ...
    def copy_to_clipboard(self, text: str) -> None: ...


class EventSource(Protocol):
    def read_event(self) -> InputEvent: ...


class ExplorerSession:
    """
    Single-threaded explorer loop.

    Each iteration repaints if the state is dirty, then blocks for the next
    key, mouse or resize event. Pointer events update the status line
    without a full repaint.
    """

    def __init__(
        self,
        surface: Surface,
        events: EventSource,
        state: Optional[InteractionState] = None,
        fps: float = 60.0,
    ) -> None:
        self.surface = surface
        self.events = events
        self.state = state if state is not None else InteractionState()
        self.table = CoordinateColorTable()
        self.saved = SavedColors()
        self.title = ""
        self._frame_interval = 1.0 / fps if fps > 0 else 0.0
        self._last_paint = 0.0
        self._pointer: Optional[tuple[int, int]] = None

    def run(self) -> SavedColors:
        """Run until a quit key. Returns the colors saved during the session."""
        self.state.dirty = True
        while True:
            self.repaint()
            event = self.events.read_event()
            if isinstance(event, ResizeEvent):
                self.state.on_resize()
                self.table.invalidate()
                continue
            if isinstance(event, MouseEvent):
                self.on_mouse(event)
                continue
            if self.state.handle_key(event) is Action.QUIT:
                return self.saved

    def _throttle(self) -> None:
        if self._frame_interval <= 0:
            return
        wait = self._last_paint + self._frame_interval - time.monotonic()
        if wait > 0:
            time.sleep(wait)
        self._last_paint = time.monotonic()

    def repaint(self) -> bool:
        """Redraw the current mode if dirty. Returns True if a frame was drawn."""
        if not self.state.dirty:
            return False
        self._throttle()
        size = self.surface.size()
        params = self.state.grid_params(size.cols, size.rows)
        frame = build_frame(self.state.mode, params)
        if self.table.rebuild(self.state.generation(size.cols, size.rows), lambda: frame.cells):
            logger.debug("Rebuilt color table for %s: %d cells", self.state.mode.name, len(self.table))

        surface = self.surface
        surface.start_sync()
        surface.clear()
        self._draw(frame, size)
        if params.show_help:
            self.state.show_help = False  # Only show help once per resize
        self.state.dirty = False
        self.state.forget_pointer()
        if self._pointer is not None:
            x, y = self._pointer
            self.on_mouse(MouseEvent(x=x, y=y, button=3, motion=True), flush=False)
        surface.end_sync()
        surface.flush()
        return True

    def _render_run(self, run: Run) -> str:
        if run.bg is None:
            return f"{RESET}{run.text}"
        return f"{run.bg.background(self.surface.truecolor)}{run.text}"

    def _draw(self, frame: Frame, size: TerminalSize) -> None:
        surface = self.surface
        self.title = frame.title
        surface.write_at(1, 1, frame.title)
        for row in sorted(frame.rows):
            surface.move_to(row, 1)
            surface.write("".join(self._render_run(run) for run in frame.rows[row]) + RESET)
        if frame.legend:
            surface.write_at(size.rows, 1, RESET + truncate(frame.legend, size.cols))

    def on_mouse(self, event: MouseEvent, flush: bool = True) -> PointerResult:
        """Show hover status for the cell under the pointer; save on click release."""
        self._pointer = (event.x, event.y)
        result = self.state.resolve_pointer(self.table, event)
        surface = self.surface
        info = result.info
        if info is not None:
            selected = result.outcome is PointerOutcome.SELECT
            surface.write_at(1, 1, self.title)
            surface.clear_end_of_line()
            prefix = "Copied " if selected else ""
            swatch = info.color.background(surface.truecolor)
            surface.write_right(
                1, f"{prefix}{swatch}   {event.x},{event.y}   {RESET} {info.name}{info.extra}"
            )
            if selected:
                surface.copy_to_clipboard(result.clipboard)
                if self.saved.add(info.description(surface.truecolor)):
                    logger.debug("Saved %s", info.canonical)
        surface.move_to(event.y, event.x)
        if flush:
            surface.flush()
        return result
