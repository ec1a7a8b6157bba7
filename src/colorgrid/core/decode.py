"""Decode user supplied color strings.

Accepts:
    - The explorer's own labels: "RGB#ff8000", "HSL#AAA_FF_200", "256:214",
      and basic color names with exact capitalization ("BrightRed")
    - CSS oklch(): "oklch(62.8% 0.25 29.2)" or "oklch(0.628 0.25 29.2)"
    - Anything Pillow's ImageColor understands: CSS color names, "#rgb",
      "#rrggbb", "rgb(...)", "hsl(...)", "hsv(...)"
"""

import re

from PIL import ImageColor

from colorgrid.core.color import BasicColor, Color


class ColorDecodeError(ValueError):
    """Raised when a color string cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__("unrecognized color syntax")
        self.text = text


_RGB_LABEL = re.compile(r'^RGB#([0-9a-fA-F]{6})$')
_HSL_LABEL = re.compile(r'^HSL#([0-9a-fA-F]{1,3})_([0-9a-fA-F]{1,2})_([0-9a-fA-F]{1,3})$')
_INDEX_LABEL = re.compile(r'^256:(\d{1,3})$')
_NUMBER = r'[-+]?(?:\d+\.?\d*|\.\d+)'
_OKLCH = re.compile(
    rf'^oklch\(\s*({_NUMBER})(%?)\s*[\s,]\s*({_NUMBER})\s*[\s,]\s*({_NUMBER})(?:deg)?\s*\)$',
    re.IGNORECASE,
)


def _decode_label(text: str) -> Color | None:
    """Decode the explorer's own primary strings."""
    if m := _RGB_LABEL.match(text):
        value = int(m.group(1), 16)
        return Color.from_rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    if m := _HSL_LABEL.match(text):
        try:
            return Color.from_hsl(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))
        except ValueError:
            return None
    if m := _INDEX_LABEL.match(text):
        index = int(m.group(1))
        return Color.from_256(index) if index <= 255 else None
    try:
        return Color.from_basic(BasicColor.from_label(text))
    except ValueError:
        return None


def _decode_oklch(text: str) -> Color | None:
    m = _OKLCH.match(text)
    if not m:
        return None
    lightness = float(m.group(1))
    if m.group(2):
        lightness /= 100
    chroma = float(m.group(3))
    hue = float(m.group(4)) / 360
    try:
        return Color.from_oklch(lightness, chroma, hue)
    except ValueError:
        return None


def decode_color(text: str) -> Color:
    """
    Parse a color string.

    Raises:
        ColorDecodeError: if the text matches no supported syntax.
    """
    text = text.strip()
    color = _decode_label(text) or _decode_oklch(text)
    if color is not None:
        return color
    try:
        rgb = ImageColor.getrgb(text)
    except ValueError as e:
        raise ColorDecodeError(text) from e
    r, g, b = rgb[:3]
    try:
        return Color.decoded(text, (r, g, b))
    except ValueError as e:
        # Pillow passes rgb() channels above 255 through unchecked
        raise ColorDecodeError(text) from e
