"""
Conversions between hex literals, RGB components and HSL components.
Canonical colors are "#rrggbb" strings in lowercase.
"""

import math
from typing import Tuple


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(x + 0.5))


# HEX -------------------------------------------------------------

def hex_expand(text: str) -> Tuple[str, str]:
    """Split a hex literal into its canonical color and alpha digits.

    "#abc" -> ("#aabbcc", ""), "#abcd" -> ("#aabbcc", "dd"),
    "#aabbccdd" -> ("#aabbcc", "dd"). Lengths other than 4, 5, 7 and 9
    are returned unchanged with no alpha.
    """
    n = len(text)
    if n not in (4, 5, 7, 9):
        return text, ""
    h = text.lower()
    if n == 4:
        return f"#{h[1] * 2}{h[2] * 2}{h[3] * 2}", ""
    if n == 5:
        return f"#{h[1] * 2}{h[2] * 2}{h[3] * 2}", h[4] * 2
    if n == 9:
        return h[:7], h[7:]
    return h, ""


def decimal_to_hex(n: int) -> str:
    """Format 0-255 as two lowercase hex digits."""
    return format(int(clamp(n, 0, 255)), "02x")


def rgb_component_to_hex(component: str) -> str:
    """Convert "128" or "50%" to two hex digits."""
    if component.endswith("%"):
        percent = clamp(float(component[:-1]), 0, 100)
        value = round_half_up(percent / 100 * 255)
    else:
        value = int(float(component))
    return decimal_to_hex(value)


def rgb_to_hex(r: str, g: str, b: str) -> str:
    """Build a canonical color from textual rgb() components."""
    return f"#{rgb_component_to_hex(r)}{rgb_component_to_hex(g)}{rgb_component_to_hex(b)}"


def components_to_hex(r: int, g: int, b: int) -> str:
    """Build a canonical color from integer channels."""
    return f"#{decimal_to_hex(r)}{decimal_to_hex(g)}{decimal_to_hex(b)}"


def hex_to_rgb_components(hex_val: str) -> Tuple[int, int, int]:
    """Slice "#rrggbb" (or "rrggbb") into integer channels."""
    h = hex_val.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


# HSL -------------------------------------------------------------

def _wrap_unit(t: float) -> float:
    if t < 0:
        return t + 1
    if t >= 1:
        return t - 1
    return t


def _hue_to_channel(temp1: float, temp2: float, t: float) -> float:
    if 6 * t < 1:
        return temp2 + (temp1 - temp2) * 6 * t
    if 2 * t < 1:
        return temp1
    if 3 * t < 2:
        return temp2 + (temp1 - temp2) * (2 / 3 - t) * 6
    return temp2


def hsl_to_rgb(hue: float, saturation: float, luminance: float) -> Tuple[int, int, int]:
    """Convert HSL to RGB. hue in degrees, saturation and luminance in [0,1]."""
    if saturation == 0:
        value = round_half_up(luminance * 255)
        return value, value, value

    if luminance < 0.5:
        temp1 = luminance * (1 + saturation)
    else:
        temp1 = luminance + saturation - luminance * saturation
    temp2 = 2 * luminance - temp1

    h = (hue % 360) / 360
    channels = (
        _hue_to_channel(temp1, temp2, _wrap_unit(h + 1 / 3)),
        _hue_to_channel(temp1, temp2, h),
        _hue_to_channel(temp1, temp2, _wrap_unit(h - 1 / 3)),
    )
    r, g, b = (int(clamp(round_half_up(c * 255), 0, 255)) for c in channels)
    return r, g, b


def hsl_to_hex(hue: float, saturation: float, luminance: float) -> str:
    """Canonical color for hsl(); saturation and luminance are percentages."""
    return components_to_hex(*hsl_to_rgb(hue, saturation / 100, luminance / 100))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, float, float]:
    """Convert RGB channels to (hue degrees, saturation, luminance)."""
    R, G, B = r / 255, g / 255, b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    luminance = (max_val + min_val) / 2

    # achromatic, hue is meaningless
    if max_val == min_val:
        return 0, 0.0, luminance

    d = max_val - min_val
    if luminance <= 0.5:
        saturation = d / (max_val + min_val)
    else:
        saturation = d / (2 - max_val - min_val)

    if max_val == R:
        hue = (G - B) / d
    elif max_val == G:
        hue = 2 + (B - R) / d
    else:
        hue = 4 + (R - G) / d

    degrees = round_half_up(hue * 60)
    while degrees < 0:
        degrees += 360
    return degrees % 360, saturation, luminance


# ALPHA -----------------------------------------------------------

def alpha_value(text: str) -> float:
    """Opacity of "0.5", ".25" or "40%" as a fraction in [0,1]."""
    if text.endswith("%"):
        return clamp(float(text[:-1]) / 100, 0, 1)
    return clamp(float(text), 0, 1)


def hex_alpha_value(digits: str) -> float:
    """Opacity of two hex alpha digits."""
    return int(digits, 16) / 255


def alpha_to_hex(alpha: float) -> str:
    """Two hex digits for an opacity fraction."""
    return decimal_to_hex(round_half_up(clamp(alpha, 0, 1) * 255))


def format_alpha(alpha: float) -> str:
    """Opacity as CSS number text, three decimals at most."""
    return f"{round_half_up(alpha * 1000) / 1000:g}"
