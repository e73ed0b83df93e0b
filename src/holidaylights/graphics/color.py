"""Color helpers: RGB construction, parsing and brightness translation."""

from typing import Optional, Tuple
import random
import re

from holidaylights.model.cell import Color, BLACK, MAX_BRIGHTNESS

__all__ = [
    "Color",
    "BLACK",
    "random_color_value",
    "rgb",
    "format_rgb",
    "parse_rgb",
    "rgba",
    "apply_brightness",
    "blend_brightness",
    "hsv_to_rgb",
]

_RGB_PATTERN = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")
_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def random_color_value() -> int:
    """Random channel value 0-255."""
    return random.randint(0, 255)


def rgb(
    red: Optional[int] = None,
    green: Optional[int] = None,
    blue: Optional[int] = None,
) -> Color:
    """Build an RGB triple. Missing channels are random."""
    return (
        random_color_value() if red is None else red,
        random_color_value() if green is None else green,
        random_color_value() if blue is None else blue,
    )


def format_rgb(color: Color) -> str:
    """Format as a CSS-style 'rgb(r, g, b)' string."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def parse_rgb(color: str) -> Optional[Color]:
    """Parse 'rgb(r, g, b)' or '#rrggbb'.

    Returns:
        RGB tuple, or None if the string is not recognised
    """
    match = _RGB_PATTERN.search(color)
    if match:
        return (int(match.group(1)), int(match.group(2)), int(match.group(3)))

    match = _HEX_PATTERN.fullmatch(color.strip())
    if match:
        return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))

    return None


def rgba(red: int, green: int, blue: int, alpha: float) -> str:
    return f"rgba({red}, {green}, {blue}, {alpha})"


def apply_brightness(color: Color, brightness: int) -> str:
    """CSS color for a cell with brightness applied as alpha.

    Full brightness returns the plain rgb() string unchanged.
    """
    if brightness >= MAX_BRIGHTNESS:
        return format_rgb(color)
    r, g, b = color
    return rgba(r, g, b, max(0, brightness) / MAX_BRIGHTNESS)


def blend_brightness(color: Color, brightness: int) -> Color:
    """Alpha-blend a color over black, for panels without an alpha channel."""
    alpha = min(max(brightness, 0), MAX_BRIGHTNESS) / MAX_BRIGHTNESS
    r, g, b = color
    return (round(r * alpha), round(g * alpha), round(b * alpha))


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """Hue in degrees (wraps around), saturation and value in 0-1."""
    sector, fraction = divmod((hue % 360) / 60, 1)
    p = value * (1 - saturation)
    q = value * (1 - saturation * fraction)
    t = value * (1 - saturation * (1 - fraction))

    r, g, b = (
        (value, t, p),
        (q, value, p),
        (p, value, t),
        (p, q, value),
        (t, p, value),
        (value, p, q),
    )[int(sector)]
    return (round(r * MAX_BRIGHTNESS), round(g * MAX_BRIGHTNESS), round(b * MAX_BRIGHTNESS))
