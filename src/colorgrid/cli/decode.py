"""Batch decoding of color strings given on the command line."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from colorgrid.core.constants import RESET
from colorgrid.core.decode import ColorDecodeError, decode_color
from colorgrid.explore.hits import ColorInfo

logger = logging.getLogger(__name__)


def decode_colors(
    args: Iterable[str],
    rounding: int = -1,
    truecolor: bool = True,
    out: Optional[TextIO] = None,
) -> int:
    """
    Print swatch, name, canonical, HSL and OKLCH forms for each color.

    Invalid colors are logged and skipped; the batch never aborts.
    Returns the process exit status.
    """
    args = list(args)
    logger.info("Decoding %d colors (pass no argument for interactive mode)", len(args))
    for arg in args:
        try:
            color = decode_color(arg)
        except ColorDecodeError as e:
            logger.warning("Invalid color '%s': %s", arg, e)
            continue
        info = ColorInfo.of(color, rounding)
        print(
            f" {color.background(truecolor)}    {RESET} {info.name} {info.canonical} {info.hsl} {info.oklch}",
            file=out,
        )
    return 0
