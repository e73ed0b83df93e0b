"""Graphics module: layout, color and drawing helpers."""

from holidaylights.graphics.color import (
    rgb,
    format_rgb,
    parse_rgb,
    rgba,
    apply_brightness,
    blend_brightness,
    hsv_to_rgb,
    random_color_value,
)
from holidaylights.graphics.position import (
    Position,
    Positions,
    StaticPosition,
    CenterHorizontalPosition,
    CenterVerticalPosition,
    CenterPosition,
    calculate,
)
from holidaylights.graphics.primitives import (
    fill,
    draw_rect,
    draw_line,
    fill_polygon,
    point_in_polygon,
    draw_glyphs,
)

__all__ = [
    # Color
    "rgb",
    "format_rgb",
    "parse_rgb",
    "rgba",
    "apply_brightness",
    "blend_brightness",
    "hsv_to_rgb",
    "random_color_value",
    # Position
    "Position",
    "Positions",
    "StaticPosition",
    "CenterHorizontalPosition",
    "CenterVerticalPosition",
    "CenterPosition",
    "calculate",
    # Primitives
    "fill",
    "draw_rect",
    "draw_line",
    "fill_polygon",
    "point_in_polygon",
    "draw_glyphs",
]
