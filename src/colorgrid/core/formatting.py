"""Web (CSS Color 4) string forms of derived HSL and OKLCH values."""

from colorgrid.core.color import Color, ColorKind
from colorgrid.core.constants import HUE_TURN, LIGHT_MAX, SAT_MAX
from colorgrid.core import conversions


def format_number(value: float, rounding: int) -> str:
    """
    Format a float for display.

    Negative rounding prints the shortest repr that round-trips;
    otherwise exactly ``rounding`` fractional digits are printed.
    """
    if rounding < 0:
        return repr(float(value))
    text = f"{value:.{rounding}f}"
    # Avoid "-0" / "-0.00" for values that round to zero
    if text.lstrip("-").strip("0.") == "":
        text = text.lstrip("-")
    return text


def hsl_values(color: Color) -> tuple[float, float, float]:
    """HSL of a color as (degrees, percent, percent)."""
    if color.kind == ColorKind.HSL:
        h, s, l = color.value  # type: ignore[misc]
        return (h * 360 / HUE_TURN, s * 100 / SAT_MAX, l * 100 / LIGHT_MAX)
    h, s, l = conversions.rgb_to_hsl(*color.to_rgb())
    return (h, s * 100, l * 100)


def oklch_values(color: Color) -> tuple[float, float, float]:
    """OKLCH of a color as (lightness percent, chroma, degrees)."""
    if color.kind == ColorKind.OKLCH:
        l, c, h = color.value  # type: ignore[misc]
        return (l * 100, c, h * 360)
    l, c, h = conversions.rgb_to_oklch(*color.to_rgb())
    return (l * 100, c, h)


def web_hsl(color: Color, rounding: int = -1) -> str:
    h, s, l = hsl_values(color)
    return (
        f"hsl({format_number(h, rounding)} {format_number(s, rounding)}% "
        f"{format_number(l, rounding)}%)"
    )


def web_oklch(color: Color, rounding: int = -1) -> str:
    l, c, h = oklch_values(color)
    return (
        f"oklch({format_number(l, rounding)}% {format_number(c, rounding)} "
        f"{format_number(h, rounding)})"
    )
