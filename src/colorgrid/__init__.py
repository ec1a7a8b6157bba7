"""
colorgrid: interactive terminal color explorer

Quick Start:
    $ colorgrid                      # explore 16, 256, HSL, OKLCH and RGB grids
    $ colorgrid red '#00f' HSL#AAA_FF_200

    >>> from colorgrid import decode_color, web_oklch
    >>> print(web_oklch(decode_color("red"), 3))

Features:
    - Full screen grids of basic, 256-color, HSL, OKLCH and RGB colors
    - Arrow keys switch modes and adjust lightness / the fixed RGB channel
    - Hover to inspect a color, click to copy it (OSC 52) and save it
    - Decode CSS and explorer color strings to RGB, HSL and OKLCH forms
"""

__version__ = "0.1.0"

# Color model
from colorgrid.core.color import BasicColor, Color, ColorKind
from colorgrid.core.decode import ColorDecodeError, decode_color
from colorgrid.core.formatting import web_hsl, web_oklch

# Explorer
from colorgrid.explore.modes import Component, Mode
from colorgrid.explore.state import InteractionState

__all__ = [
    # Version
    "__version__",
    # Color model
    "BasicColor",
    "Color",
    "ColorKind",
    "ColorDecodeError",
    "decode_color",
    "web_hsl",
    "web_oklch",
    # Explorer
    "Component",
    "Mode",
    "InteractionState",
]
