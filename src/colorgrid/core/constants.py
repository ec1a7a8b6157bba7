"""Shared constants for color math and ANSI output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
OSC = f"{ESC}]"
BEL = "\x07"
RESET = f"{CSI}0m"

# Classic VGA palette used as the RGB projection of the 16 basic colors
ANSI_16_PALETTE: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0), (170, 0, 0), (0, 170, 0), (170, 85, 0),
    (0, 0, 170), (170, 0, 170), (0, 170, 170), (170, 170, 170),
    (85, 85, 85), (255, 85, 85), (85, 255, 85), (255, 255, 85),
    (85, 85, 255), (255, 85, 255), (85, 255, 255), (255, 255, 255),
)

# 256-color cube channel levels (indices 16-231)
CUBE_LEVELS: tuple[int, ...] = (0, 95, 135, 175, 215, 255)
CUBE_START = 16
GRAY_START = 232
GRAY_BASE = 8
GRAY_STEP = 10

# Extra named color, shown as this 256-color index
ORANGE_256 = 214

# Fixed-point HSL domains
HUE_TURN = 4096        # H in [0, 4095]
HUE_MAX = HUE_TURN - 1
SAT_MAX = 255          # S in [0, 255]
LIGHT_MAX = 1023       # L in [0, 1023]

# sRGB transfer function
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308

# OKLab matrices (Björn Ottosson)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
M2_INV_OKLAB = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
M1_INV_OKLAB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)
