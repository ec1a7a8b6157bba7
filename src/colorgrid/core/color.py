"""Color representation for the explorer."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, cast

from colorgrid.core.constants import (
    ANSI_16_PALETTE,
    CSI,
    HUE_MAX,
    HUE_TURN,
    LIGHT_MAX,
    ORANGE_256,
    SAT_MAX,
)
from colorgrid.core import conversions


class ColorKind(Enum):
    """Which representation a Color carries."""
    BASIC = "basic"          # 16 named terminal colors (+ Orange)
    INDEXED_256 = "256"      # Extended 256-color palette index
    RGB = "rgb"              # 24-bit true color
    HSL = "hsl"              # Fixed-point HSL (12/8/10 bits)
    OKLCH = "oklch"          # Floating point OKLCH
    DECODED = "decoded"      # Parsed from a user string, resolved to RGB


_BASIC_LABELS = (
    "Black", "Red", "Green", "Yellow", "Blue", "Purple", "Cyan", "Gray",
    "DarkGray", "BrightRed", "BrightGreen", "BrightYellow",
    "BrightBlue", "BrightPurple", "BrightCyan", "White",
    "Orange",
)


class BasicColor(Enum):
    """The 16 basic terminal colors plus the extra Orange."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    GRAY = 7
    DARK_GRAY = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_PURPLE = 13
    BRIGHT_CYAN = 14
    WHITE = 15
    ORANGE = 16

    @property
    def label(self) -> str:
        return _BASIC_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> "BasicColor":
        """Look up a basic color by its exact label (e.g. ``BrightRed``)."""
        return cls(_BASIC_LABELS.index(label))

    @property
    def rgb(self) -> tuple[int, int, int]:
        if self is BasicColor.ORANGE:
            return conversions.palette_256_rgb(ORANGE_256)
        return ANSI_16_PALETTE[self.value]

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        if self.value < 8:
            return str(40 + self.value)
        if self.value < 16:
            return str(100 + self.value - 8)
        return f"48;5;{ORANGE_256}"


@dataclass(frozen=True)
class Color:
    """
    An immutable color value tagged with its representation.

    Every Color can be projected to RGB and described with a primary
    (display) string and a canonical (clipboard) string, whatever its kind.
    """
    kind: ColorKind
    value: BasicColor | int | tuple[int, int, int] | tuple[float, float, float]
    text: str = ""  # Original input for decoded colors

    @classmethod
    def from_basic(cls, basic: BasicColor) -> "Color":
        return cls(ColorKind.BASIC, basic)

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorKind.INDEXED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorKind.RGB, (r, g, b))

    @classmethod
    def from_hsl(cls, h: int, s: int, l: int) -> "Color":
        """Create a Color from fixed-point HSL (h: 0-4095, s: 0-255, l: 0-1023)."""
        if not (0 <= h <= HUE_MAX and 0 <= s <= SAT_MAX and 0 <= l <= LIGHT_MAX):
            raise ValueError(f"HSL values out of range, got ({h}, {s}, {l})")
        return cls(ColorKind.HSL, (h, s, l))

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> "Color":
        """Create a Color from OKLCH (l: 0-1, c: chroma >= 0, h: fraction of a turn)."""
        if not 0.0 <= l <= 1.0 or c < 0.0:
            raise ValueError(f"OKLCH values out of range, got ({l}, {c}, {h})")
        return cls(ColorKind.OKLCH, (float(l), float(c), float(h) % 1.0))

    @classmethod
    def decoded(cls, text: str, rgb: tuple[int, int, int]) -> "Color":
        """Wrap an RGB value parsed from ``text``, keeping the text as its name."""
        r, g, b = rgb
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorKind.DECODED, (r, g, b), text)

    def to_rgb(self) -> tuple[int, int, int]:
        """Project any color to 24-bit RGB."""
        if self.kind == ColorKind.BASIC:
            return cast(BasicColor, self.value).rgb
        if self.kind == ColorKind.INDEXED_256:
            return conversions.palette_256_rgb(cast(int, self.value))
        if self.kind == ColorKind.HSL:
            h, s, l = self.value  # type: ignore[misc]
            return conversions.hsl_to_rgb(h * 360 / HUE_TURN, s / SAT_MAX, l / LIGHT_MAX)
        if self.kind == ColorKind.OKLCH:
            l, c, h = self.value  # type: ignore[misc]
            return conversions.oklch_to_rgb(l, c, h * 360)
        # RGB and DECODED carry RGB already
        r, g, b = self.value  # type: ignore[misc]
        return (int(r), int(g), int(b))

    @property
    def hex(self) -> str:
        r, g, b = self.to_rgb()
        return f"#{r:02x}{g:02x}{b:02x}"

    def name(self) -> str:
        """Primary string: the label for this color in its own representation."""
        if self.kind == ColorKind.BASIC:
            return cast(BasicColor, self.value).label
        if self.kind == ColorKind.INDEXED_256:
            return f"256:{self.value}"
        if self.kind == ColorKind.RGB:
            return f"RGB{self.hex}"
        if self.kind == ColorKind.HSL:
            h, s, l = self.value  # type: ignore[misc]
            return f"HSL#{h:03X}_{s:02X}_{l:03X}"
        if self.kind == ColorKind.OKLCH:
            l, c, h = self.value  # type: ignore[misc]
            return f"OKLCH({l:.3f}, {c:.3f}, {h:.3f})"
        return self.text

    def canonical(self) -> str:
        """Clipboard default: the basic color name, otherwise the web hex form."""
        if self.kind == ColorKind.BASIC:
            return self.name()
        return self.hex

    def to_sgr_bg(self, truecolor: bool = True) -> str:
        """Return SGR parameters for this color as background."""
        if self.kind == ColorKind.BASIC:
            return cast(BasicColor, self.value).to_sgr_bg()
        if self.kind == ColorKind.INDEXED_256:
            return f"48;5;{self.value}"
        r, g, b = self.to_rgb()
        if truecolor:
            return f"48;2;{r};{g};{b}"
        return f"48;5;{conversions.rgb_to_256(r, g, b)}"

    def background(self, truecolor: bool = True) -> str:
        """Full escape sequence selecting this color as background."""
        return f"{CSI}{self.to_sgr_bg(truecolor)}m"

    # Basic color shortcuts
    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    ORANGE: ClassVar["Color"]


Color.BLACK = Color.from_basic(BasicColor.BLACK)
Color.WHITE = Color.from_basic(BasicColor.WHITE)
Color.ORANGE = Color.from_basic(BasicColor.ORANGE)
