"""Measure and cut status lines that contain SGR escapes."""

from __future__ import annotations

import re

from colorgrid.core.constants import RESET

# CSI sequences: SGR, cursor movement, private modes
_CSI = re.compile(r'(\x1b\[[0-9;?<]*[A-Za-z~])')


def visible_len(text: str) -> int:
    """Number of terminal columns the text occupies, escapes excluded."""
    return len(_CSI.sub('', text))


def truncate(text: str, width: int) -> str:
    """
    Keep at most ``width`` visible characters of ``text``.

    Escapes are kept as-is; RESET is appended when anything was cut so a
    background color cannot run on past the cut.
    """
    if width <= 0:
        return ""
    kept: list[str] = []
    remaining = width
    pieces = _CSI.split(text)
    for index, piece in enumerate(pieces):
        if index % 2:
            kept.append(piece)
            continue
        if len(piece) > remaining:
            kept.append(piece[:remaining])
            return ''.join(kept) + RESET
        kept.append(piece)
        remaining -= len(piece)
    return ''.join(kept)
