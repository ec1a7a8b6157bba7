"""Color model: value types, conversions, formatting and decoding."""

from colorgrid.core.color import BasicColor, Color, ColorKind
from colorgrid.core.decode import ColorDecodeError, decode_color
from colorgrid.core.formatting import web_hsl, web_oklch

__all__ = [
    "BasicColor",
    "Color",
    "ColorKind",
    "ColorDecodeError",
    "decode_color",
    "web_hsl",
    "web_oklch",
]
