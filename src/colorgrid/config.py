"""Run-time settings for the explorer and decoder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_FPS = 60.0
DEFAULT_ROUNDING = -1  # full precision
DEFAULT_LOG_LEVEL = "info"
TRUECOLOR_VALUES = ("truecolor", "24bit")


def detect_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True if the terminal advertises 24-bit color through COLORTERM."""
    env = os.environ if environ is None else environ
    return env.get("COLORTERM", "").lower() in TRUECOLOR_VALUES


@dataclass(frozen=True)
class Settings:
    """Options collected from the command line."""
    fps: float = DEFAULT_FPS
    truecolor: bool = True
    rounding: int = DEFAULT_ROUNDING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_options(
        cls,
        fps: float = DEFAULT_FPS,
        truecolor: Optional[bool] = None,
        rounding: int = DEFAULT_ROUNDING,
        log_level: str = DEFAULT_LOG_LEVEL,
    ) -> Settings:
        """Build settings, detecting true color support when not given."""
        if truecolor is None:
            truecolor = detect_truecolor()
        return cls(fps=fps, truecolor=truecolor, rounding=rounding, log_level=log_level.lower())
