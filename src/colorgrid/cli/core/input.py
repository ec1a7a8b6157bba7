"""Terminal input decoded into key, mouse and resize events."""

from __future__ import annotations

import os
import re
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, Union

from colorgrid.cli.core.terminal import TerminalError

ESC = '\x1b'


class Key(Enum):
    """Keys the explorer distinguishes by name."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    INTERRUPT = auto()  # Ctrl-C, delivered as a byte in raw mode


# xterm modifier bits, as encoded in "ESC [ 1 ; (1 + bits) X"
MOD_SHIFT = 1
MOD_ALT = 2
MOD_CTRL = 4


@dataclass(frozen=True)
class KeyEvent:
    """
    One key press.

    ``key`` is set for named keys, ``char`` for printable characters.
    Unrecognized escape sequences have neither, only ``raw``.
    """
    key: Optional[Key] = None
    char: Optional[str] = None
    raw: str = ""
    modifiers: int = 0  # MOD_* bits


@dataclass(frozen=True)
class MouseEvent:
    """An SGR (1006) mouse report. Coordinates are 1-based."""
    x: int
    y: int
    button: int = 0  # 0 left, 1 middle, 2 right, 3 none (motion only)
    release: bool = False
    shift: bool = False
    meta: bool = False
    ctrl: bool = False
    motion: bool = False

    @property
    def right_click(self) -> bool:
        return self.button == 2

    @property
    def any_modifier(self) -> bool:
        return self.shift or self.meta or self.ctrl


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal window changed size."""


InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent]

_ARROWS = {'A': Key.UP, 'B': Key.DOWN, 'C': Key.RIGHT, 'D': Key.LEFT}

_CONTROL_KEYS = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
    '\x03': Key.INTERRUPT,
}

_CSI = re.compile(r'\x1b\[([0-9;<?]*)([A-Za-z~])')
_SS3 = re.compile(r'\x1bO(.)', re.DOTALL)
_MOUSE_PARAMS = re.compile(r'^<(\d+);(\d+);(\d+)$')
_MODIFIER_PARAMS = re.compile(r'^1;(\d+)$')


def _decode_mouse(params: str, final: str) -> Optional[MouseEvent]:
    m = _MOUSE_PARAMS.match(params)
    if not m or final not in 'Mm':
        return None
    code = int(m.group(1))
    return MouseEvent(
        x=int(m.group(2)),
        y=int(m.group(3)),
        button=code & 3,
        release=final == 'm',
        shift=bool(code & 4),
        meta=bool(code & 8),
        ctrl=bool(code & 16),
        motion=bool(code & 32),
    )


def _decode_csi(raw: str, params: str, final: str) -> InputEvent:
    if params.startswith('<'):
        mouse = _decode_mouse(params, final)
        if mouse is not None:
            return mouse
    elif final in _ARROWS:
        if not params:
            return KeyEvent(key=_ARROWS[final], raw=raw)
        if m := _MODIFIER_PARAMS.match(params):
            return KeyEvent(key=_ARROWS[final], raw=raw, modifiers=max(0, int(m.group(1)) - 1))
    return KeyEvent(raw=raw)


class InputReader:
    """
    Blocking event reader for a terminal in raw mode.

    Bytes are read with os.read() into a text buffer, since escape
    sequences can be split across reads. A wake-up descriptor (see signal.set_wakeup_fd)
    turns resize signals into ResizeEvents without consuming keystrokes.
    """

    ESCAPE_TIMEOUT = 0.1  # how long a lone ESC waits for the rest of a sequence
    POLL_INTERVAL = 0.025

    def __init__(self, fd: Optional[int] = None, wake_fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = fd
        self._wake_fd = wake_fd

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def feed(self, data: str) -> None:
        """Append already-read input to the buffer."""
        self._buffer += data

    def pending(self) -> Iterator[InputEvent]:
        """Yield every complete event currently buffered."""
        while (event := self._next_buffered()) is not None:
            yield event

    def read_event(self) -> InputEvent:
        """
        Block until a key, mouse or resize event is available.

        Raises:
            TerminalError: if reading the terminal fails or input is closed.
        """
        while True:
            event = self._next_buffered()
            if event is not None:
                return event
            watched = [self.fd] if self._wake_fd is None else [self.fd, self._wake_fd]
            try:
                ready, _, _ = select.select(watched, [], [])
            except InterruptedError:
                continue
            if self._wake_fd in ready:
                self._drain_wake_fd()
                return ResizeEvent()
            if self.fd in ready:
                self._read_chunk()
                if self._buffer == ESC:
                    self._await_sequence_tail()

    def _next_buffered(self) -> Optional[InputEvent]:
        """Consume and return the next event, or None once the buffer is empty."""
        while self._buffer:
            if self._buffer[0] == ESC:
                return self._take_escape()
            head, self._buffer = self._buffer[0], self._buffer[1:]
            if head in _CONTROL_KEYS:
                return KeyEvent(key=_CONTROL_KEYS[head], raw=head)
            if head.isprintable():
                return KeyEvent(char=head, raw=head)
            # other control bytes are dropped
        return None

    def _take_escape(self) -> InputEvent:
        if m := _CSI.match(self._buffer):
            self._buffer = self._buffer[m.end():]
            return _decode_csi(m.group(0), m.group(1), m.group(2))
        if m := _SS3.match(self._buffer):
            self._buffer = self._buffer[m.end():]
            final = m.group(1)
            if final in _ARROWS:
                return KeyEvent(key=_ARROWS[final], raw=m.group(0))
            return KeyEvent(raw=m.group(0))
        # A lone ESC; whatever follows is read as ordinary keys
        self._buffer = self._buffer[1:]
        return KeyEvent(key=Key.ESCAPE, raw=ESC)

    def _sequence_complete(self) -> bool:
        return bool(_CSI.match(self._buffer) or _SS3.match(self._buffer))

    def _await_sequence_tail(self) -> None:
        deadline = time.monotonic() + self.ESCAPE_TIMEOUT
        while not self._sequence_complete():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if self._has_input(min(remaining, self.POLL_INTERVAL)):
                self._read_chunk()

    def _drain_wake_fd(self) -> None:
        try:
            while os.read(self._wake_fd, 512):  # type: ignore[arg-type]
                pass
        except BlockingIOError:
            pass

    def _read_chunk(self) -> None:
        try:
            data = os.read(self.fd, 1024)
        except BlockingIOError:
            return
        except OSError as e:
            raise TerminalError(f"reading terminal input: {e}") from e
        if not data:
            raise TerminalError("terminal input closed")
        self._buffer += data.decode('utf-8', errors='replace')

    def _has_input(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
        except (ValueError, OSError):
            return False
        return bool(ready)
