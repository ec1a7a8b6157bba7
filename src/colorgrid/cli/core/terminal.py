"""Low-level terminal operations for the interactive explorer."""

from __future__ import annotations

import base64
import os
import signal
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from colorgrid.cli.core.ansi_text import visible_len


class TerminalError(OSError):
    """Terminal setup or input failure."""


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Terminal I/O for the explorer: cursor movement, styled writes,
    mouse tracking, synchronized frames and clipboard.

    Output is buffered by the underlying stream; call flush() once a
    frame or status update is complete.
    """

    def __init__(self, out: Optional[TextIO] = None, truecolor: bool = True) -> None:
        self.out = out if out is not None else sys.stdout
        self.truecolor = truecolor

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def write(self, text: str) -> None:
        self.out.write(text)

    def flush(self) -> None:
        self.out.flush()

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write('\x1b[2J\x1b[H')

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write('\x1b[0m')

    def clear_end_of_line(self) -> None:
        self.write('\x1b[K')

    def move_to(self, row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        self.write(f'\x1b[{row};{col}H')

    def write_at(self, row: int, col: int, text: str) -> None:
        self.move_to(row, col)
        self.write(text)

    def write_right(self, row: int, text: str) -> None:
        """Write text right-aligned on a row."""
        col = max(1, self.size().cols - visible_len(text) + 1)
        self.write_at(row, col, text)

    def start_sync(self) -> None:
        """Begin a synchronized update (terminal holds painting until end_sync)."""
        self.write('\x1b[?2026h')

    def end_sync(self) -> None:
        self.write('\x1b[?2026l')

    def mouse_tracking_on(self) -> None:
        """Report every mouse motion and button, SGR encoded."""
        self.write('\x1b[?1003h\x1b[?1006h')

    def mouse_tracking_off(self) -> None:
        self.write('\x1b[?1006l\x1b[?1003l')

    def copy_to_clipboard(self, text: str) -> None:
        """Set the system clipboard through the terminal (OSC 52)."""
        payload = base64.b64encode(text.encode('utf-8')).decode('ascii')
        self.write(f'\x1b]52;c;{payload}\x07')

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        import termios
        import tty
        try:
            fd = sys.stdin.fileno()
            old_settings = termios.tcgetattr(fd)
        except (ValueError, OSError, termios.error) as e:
            raise TerminalError(f"stdin is not a terminal: {e}") from e
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        self.write('\x1b[?1049h')
        self.flush()
        try:
            yield
        finally:
            self.write('\x1b[?1049l')
            self.flush()

    @staticmethod
    @contextmanager
    def resize_signals() -> Iterator[int]:
        """
        Route SIGWINCH to a pipe. Yields the read end, which becomes
        readable whenever the window is resized.
        """
        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)
        previous_handler = signal.signal(signal.SIGWINCH, lambda signum, frame: None)
        previous_fd = signal.set_wakeup_fd(write_fd)
        try:
            yield read_fd
        finally:
            signal.set_wakeup_fd(previous_fd)
            signal.signal(signal.SIGWINCH, previous_handler)
            os.close(read_fd)
            os.close(write_fd)

    @contextmanager
    def session(self) -> Iterator[int]:
        """
        Full explorer mode: raw input, alternate screen, mouse tracking and
        resize notifications. Yields the resize wake-up descriptor.
        Everything is restored on exit, including error exits.
        """
        with self.raw_mode(), self.alternate_screen(), self.resize_signals() as wake_fd:
            self.mouse_tracking_on()
            self.flush()
            try:
                yield wake_fd
            finally:
                self.mouse_tracking_off()
                self.end_sync()
                self.reset()
                self.flush()
