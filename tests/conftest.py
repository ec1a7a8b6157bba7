"""Shared fixtures: an in-memory display surface and scripted input."""

from __future__ import annotations

from typing import Iterable

import pytest

from colorgrid.cli.core.input import InputEvent
from colorgrid.cli.core.terminal import TerminalSize


class FakeSurface:
    """Records everything the session draws instead of writing to a terminal."""

    def __init__(self, rows: int = 30, cols: int = 80, truecolor: bool = True) -> None:
        self.rows = rows
        self.cols = cols
        self.truecolor = truecolor
        self.output: list[str] = []
        self.clipboard: list[str] = []
        self.cursor: tuple[int, int] = (1, 1)
        self.syncs = 0

    def size(self) -> TerminalSize:
        return TerminalSize(self.rows, self.cols)

    def write(self, text: str) -> None:
        self.output.append(text)

    def flush(self) -> None:
        pass

    def clear(self) -> None:
        self.output.append("<clear>")

    def clear_end_of_line(self) -> None:
        pass

    def move_to(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def write_at(self, row: int, col: int, text: str) -> None:
        self.move_to(row, col)
        self.write(text)

    def write_right(self, row: int, text: str) -> None:
        self.write_at(row, 1, text)

    def start_sync(self) -> None:
        self.syncs += 1

    def end_sync(self) -> None:
        pass

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard.append(text)

    @property
    def text(self) -> str:
        return "".join(self.output)


class ScriptedEvents:
    """Event source replaying a fixed list of events."""

    def __init__(self, events: Iterable[InputEvent]) -> None:
        self._events = list(events)

    def read_event(self) -> InputEvent:
        if not self._events:
            raise AssertionError("session read past the end of the script")
        return self._events.pop(0)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def scripted():
    """Factory fixture building an event source from a list of events."""
    return ScriptedEvents
