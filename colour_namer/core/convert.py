"""Colour-space conversion: hex, RGB, HSL and WCAG relative luminance.

Every function here is total. Malformed hex degrades to black instead of
raising, and everything downstream treats black as an ordinary colour.
"""

import math
import re

_HEX_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE)

BLACK_TEXT = '#000000'
WHITE_TEXT = '#FFFFFF'


def _round(value: float) -> int:
    """Round half up, so 0.5 -> 1 and 2.5 -> 3."""
    return math.floor(value + 0.5)


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' or 'rrggbb' (any case) to an RGB tuple. Invalid input gives (0, 0, 0)."""
    m = _HEX_RE.fullmatch(hex_str)
    if not m:
        return (0, 0, 0)
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert RGB (0-255) to HSL as rounded (degrees, percent, percent)."""
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (mx + mn) / 2

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return (_round(h * 360), _round(s * 100), _round(lightness * 100))


def _linearise(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def calculate_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance in [0, 1]."""
    return 0.2126 * _linearise(r) + 0.7152 * _linearise(g) + 0.0722 * _linearise(b)


def get_contrast_text(luminance: float) -> str:
    """Text colour readable on a background of the given luminance. 0.5 exactly gives white."""
    return BLACK_TEXT if luminance > 0.5 else WHITE_TEXT


def format_rgb(rgb: tuple[int, int, int]) -> str:
    return f'rgb({rgb[0]}, {rgb[1]}, {rgb[2]})'


def format_hsl(hsl: tuple[int, int, int]) -> str:
    return f'hsl({hsl[0]}, {hsl[1]}%, {hsl[2]}%)'
