"""Color space math: indexed palettes, HSL and OKLab/OKLCH to and from sRGB."""

from __future__ import annotations

import colorsys
import math

from colorgrid.core.constants import (
    ANSI_16_PALETTE,
    CUBE_LEVELS,
    CUBE_START,
    GRAY_BASE,
    GRAY_START,
    GRAY_STEP,
    LINEAR_TO_SRGB_TH,
    M1_INV_OKLAB,
    M1_OKLAB,
    M2_INV_OKLAB,
    M2_OKLAB,
    SRGB_DIVISOR,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SLOPE,
    SRGB_TO_LINEAR_TH,
)

RGB = tuple[int, int, int]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def to_channel(value: float) -> int:
    """Round a 0-255 float to an 8-bit channel, clamping out-of-range values."""
    return int(round(clamp(value, 0.0, 255.0)))


# -- indexed palettes -------------------------------------------------------

def palette_256_rgb(index: int) -> RGB:
    """RGB value of a 256-color palette slot."""
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    if index < CUBE_START:
        return ANSI_16_PALETTE[index]
    if index < GRAY_START:
        i = index - CUBE_START
        return (CUBE_LEVELS[i // 36], CUBE_LEVELS[(i // 6) % 6], CUBE_LEVELS[i % 6])
    level = GRAY_BASE + GRAY_STEP * (index - GRAY_START)
    return (level, level, level)


def _nearest_level(value: int) -> int:
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(CUBE_LEVELS[i] - value))


def rgb_to_256(r: int, g: int, b: int) -> int:
    """Nearest 256-color index (cube or grayscale ramp) for an RGB value."""
    ri, gi, bi = _nearest_level(r), _nearest_level(g), _nearest_level(b)
    cube = (CUBE_LEVELS[ri], CUBE_LEVELS[gi], CUBE_LEVELS[bi])
    cube_index = CUBE_START + 36 * ri + 6 * gi + bi

    avg = (r + g + b) // 3
    gray_i = int(clamp(round((avg - GRAY_BASE) / GRAY_STEP), 0, 23))
    gray_level = GRAY_BASE + GRAY_STEP * gray_i
    gray = (gray_level, gray_level, gray_level)

    def dist(c: RGB) -> int:
        return (c[0] - r) ** 2 + (c[1] - g) ** 2 + (c[2] - b) ** 2

    if dist(gray) < dist(cube):
        return GRAY_START + gray_i
    return cube_index


# -- HSL -----------------------------------------------------------------------

def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (h: degrees, s and l: 0-1) to 8-bit RGB."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, clamp(l, 0, 1), clamp(s, 0, 1))
    return (to_channel(r * 255), to_channel(g * 255), to_channel(b * 255))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 8-bit RGB to HSL (h: degrees 0-360, s and l: 0-1)."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (h * 360, s, l)


# -- OKLab / OKLCH ---------------------------------------------------------------

def srgb_to_linear(c: int) -> float:
    """Linearize an 8-bit sRGB component."""
    c_norm = clamp(c / 255, 0.0, 1.0)
    if c_norm <= SRGB_TO_LINEAR_TH:
        return c_norm / SRGB_SLOPE
    return ((c_norm + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def linear_to_srgb(value: float) -> float:
    """Gamma-encode a linear component (result in 0-1, not clamped above)."""
    value = max(value, 0.0)
    if value <= LINEAR_TO_SRGB_TH:
        return SRGB_SLOPE * value
    return SRGB_DIVISOR * (value ** (1 / SRGB_GAMMA)) - SRGB_OFFSET


def _mul(matrix: tuple[tuple[float, float, float], ...], v: tuple[float, float, float]) -> tuple[float, float, float]:
    return (
        matrix[0][0] * v[0] + matrix[0][1] * v[1] + matrix[0][2] * v[2],
        matrix[1][0] * v[0] + matrix[1][1] * v[1] + matrix[1][2] * v[2],
        matrix[2][0] * v[0] + matrix[2][1] * v[1] + matrix[2][2] * v[2],
    )


def rgb_to_oklab(r: int, g: int, b: int) -> tuple[float, float, float]:
    lms = _mul(M1_OKLAB, (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)))
    lms_ = tuple(math.copysign(abs(x) ** (1 / 3), x) for x in lms)
    return _mul(M2_OKLAB, lms_)


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """OKLab to 8-bit sRGB; out-of-gamut results are clamped per channel."""
    lms_ = _mul(M2_INV_OKLAB, (L, a, b))
    lms = (lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3)
    lin = _mul(M1_INV_OKLAB, lms)
    return tuple(to_channel(linear_to_srgb(x) * 255) for x in lin)  # type: ignore[return-value]


def oklch_to_rgb(L: float, c: float, h: float) -> RGB:
    """OKLCH (h: degrees) to 8-bit sRGB."""
    rad = math.radians(h)
    return oklab_to_rgb(L, c * math.cos(rad), c * math.sin(rad))


def rgb_to_oklch(r: int, g: int, b: int) -> tuple[float, float, float]:
    """8-bit sRGB to OKLCH (h: degrees 0-360)."""
    L, a, b_ok = rgb_to_oklab(r, g, b)
    c = math.hypot(a, b_ok)
    h = math.degrees(math.atan2(b_ok, a)) % 360
    return (L, c, h)
