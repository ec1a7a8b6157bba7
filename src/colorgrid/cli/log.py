"""Logging setup: stdlib logging rendered by rich."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler


class CRLFWriter:
    """
    Text stream wrapper translating LF to CRLF.

    Raw terminal mode disables output newline translation, so log lines
    written while the explorer runs would otherwise staircase.
    """

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def write(self, text: str) -> int:
        self.out.write(text.replace("\r\n", "\n").replace("\n", "\r\n"))
        return len(text)

    def flush(self) -> None:
        self.out.flush()

    def isatty(self) -> bool:
        return self.out.isatty()

    def fileno(self) -> int:
        return self.out.fileno()


def setup_logging(level: str = "info", stream: Optional[TextIO] = None) -> None:
    """Configure root logging once for the command line entry point."""
    console = Console(file=CRLFWriter(stream if stream is not None else sys.stderr))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
