"""Terminal surface: raw mode, styled output and input events."""

from colorgrid.cli.core.terminal import Terminal, TerminalError, TerminalSize
from colorgrid.cli.core.input import (
    InputEvent,
    InputReader,
    Key,
    KeyEvent,
    MouseEvent,
    ResizeEvent,
)

__all__ = [
    "Terminal",
    "TerminalError",
    "TerminalSize",
    "InputEvent",
    "InputReader",
    "Key",
    "KeyEvent",
    "MouseEvent",
    "ResizeEvent",
]
