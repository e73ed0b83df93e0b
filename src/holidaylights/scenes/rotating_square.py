"""A filled square spinning once per animation cycle."""

import math
from typing import List, Optional

from holidaylights.graphics.color import hsv_to_rgb
from holidaylights.graphics.primitives import Point, draw_line, fill_polygon
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import BLACK, Cell, Color, MAX_BRIGHTNESS
from holidaylights.model.matrix import Matrix
from holidaylights.scenes.base import SCENE_SIZE

# Edge hue starts at cyan and sweeps the color wheel once per turn
EDGE_HUE = 195
FILL_COLOR: Color = (0, 150, 200)
FILL_BRIGHTNESS = 150


class RotatingSquareScene(Imager):
    """Square of `size` pixels rotating about the panel center.

    A full turn takes `frames_per_turn` frames; the outline hue turns with it.
    """

    name = "rotating-square"

    def __init__(self, size: int = 35, frames_per_turn: int = 100) -> None:
        self.size = size
        self.frames_per_turn = frames_per_turn
        self.center_x = SCENE_SIZE.width // 2
        self.center_y = SCENE_SIZE.height // 2

    def corners(self, frame: int) -> List[Point]:
        """Rotated corners in screen coordinates, clockwise from top-left."""
        angle = (frame / self.frames_per_turn) * 2 * math.pi
        half = self.size / 2
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        points = []
        for cx, cy in ((-half, -half), (half, -half), (half, half), (-half, half)):
            rx = cx * cos_a - cy * sin_a
            ry = cx * sin_a + cy * cos_a
            points.append((round(rx + self.center_x), round(ry + self.center_y)))
        return points

    def edge_color(self, frame: int) -> Color:
        return hsv_to_rgb(EDGE_HUE + 360 * frame / self.frames_per_turn, 1.0, 1.0)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        matrix = Matrix(SCENE_SIZE, lambda x, y: Cell(BLACK, MAX_BRIGHTNESS))
        corners = self.corners(frame)
        edge = self.edge_color(frame)

        for i, (x1, y1) in enumerate(corners):
            x2, y2 = corners[(i + 1) % 4]
            draw_line(matrix, x1, y1, x2, y2, edge)

        fill_polygon(matrix, corners, FILL_COLOR, FILL_BRIGHTNESS)
        return matrix
