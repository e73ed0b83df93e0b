"""Basic drawing primitives that write Cells into a Matrix.

Every primitive clips against the matrix bounds through `Matrix.set`,
so callers can draw partially off-screen shapes freely.
"""

from typing import Dict, List, Sequence, Tuple

from holidaylights.model.cell import Cell, Color, MAX_BRIGHTNESS
from holidaylights.model.matrix import Matrix

# Type aliases
Point = Tuple[int, int]
Glyph = List[List[int]]


def fill(matrix: Matrix, color: Color, brightness: int = MAX_BRIGHTNESS) -> None:
    """Fill entire matrix with color."""
    matrix.fill(Cell(color, brightness))


def draw_rect(
    matrix: Matrix,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    brightness: int = MAX_BRIGHTNESS,
    filled: bool = True,
) -> None:
    """Draw a rectangle.

    Args:
        matrix: Target matrix
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        brightness: Cell brightness
        filled: If True, fill rectangle; if False, draw outline only
    """
    cell = Cell(color, brightness)
    for py in range(y, y + height):
        for px in range(x, x + width):
            on_edge = px in (x, x + width - 1) or py in (y, y + height - 1)
            if filled or on_edge:
                matrix.set(px, py, cell)


def draw_line(
    matrix: Matrix,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    brightness: int = MAX_BRIGHTNESS,
) -> None:
    """Draw a line using Bresenham's algorithm."""
    cell = Cell(color, brightness)

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1

    while True:
        matrix.set(x, y, cell)

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def point_in_polygon(x: float, y: float, polygon: Sequence[Point]) -> bool:
    """Ray casting test."""
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def fill_polygon(
    matrix: Matrix,
    polygon: Sequence[Point],
    color: Color,
    brightness: int = MAX_BRIGHTNESS,
) -> None:
    """Scan the polygon's bounding box and fill every pixel inside it."""
    if not polygon:
        return

    cell = Cell(color, brightness)
    min_x = max(0, min(p[0] for p in polygon))
    max_x = min(matrix.width - 1, max(p[0] for p in polygon))
    min_y = max(0, min(p[1] for p in polygon))
    max_y = min(matrix.height - 1, max(p[1] for p in polygon))

    for py in range(min_y, max_y + 1):
        for px in range(min_x, max_x + 1):
            if point_in_polygon(px, py, polygon):
                matrix.set(px, py, cell)


def draw_glyphs(
    matrix: Matrix,
    text: str,
    x: int,
    y: int,
    color: Color,
    glyphs: Dict[str, Glyph],
    spacing: int = 1,
) -> int:
    """Draw text from a bitmap glyph table.

    Unknown characters advance the cursor without drawing.

    Returns:
        Width of the drawn text in pixels
    """
    cell = Cell(color, MAX_BRIGHTNESS)
    cursor_x = x

    for char in text:
        glyph = glyphs.get(char.upper())
        if not glyph:
            cursor_x += 3 + spacing
            continue

        for row_idx, row in enumerate(glyph):
            for col_idx, pixel in enumerate(row):
                if pixel:
                    matrix.set(cursor_x + col_idx, y + row_idx, cell)

        cursor_x += len(glyph[0]) + spacing

    return cursor_x - x
