"""Christmas tree with a star and twinkling lights."""

import math
from dataclasses import dataclass
from typing import List, Optional

from holidaylights.graphics.primitives import draw_rect
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import BLACK, Cell, Color, MAX_BRIGHTNESS
from holidaylights.model.matrix import Matrix
from holidaylights.scenes.base import SCENE_SIZE

RED: Color = (255, 0, 0)
YELLOW: Color = (255, 255, 0)
BLUE: Color = (0, 0, 255)
WHITE: Color = (255, 255, 255)

TREE_COLOR: Color = (0, 150, 0)
TRUNK_COLOR: Color = (139, 69, 19)
STAR_COLOR: Color = (255, 215, 0)

CENTER_X = 32
TREE_TOP = 10
TREE_BOTTOM = 48
TREE_HALF_WIDTH = 40

BLINK_PERIOD = 50

# Star pixels relative to its center
STAR_POINTS = [
    (0, -3), (1, -1), (3, -1), (1, 0), (2, 2), (0, 1),
    (-2, 2), (-1, 0), (-3, -1), (-1, -1), (0, 0),
]


@dataclass(frozen=True)
class Light:
    x: int
    y: int
    color: Color
    offset: int  # Phase shift within the blink period


LIGHTS: List[Light] = [
    # Top
    Light(32, 12, RED, 0), Light(28, 16, YELLOW, 15), Light(36, 16, BLUE, 30),
    # Upper middle
    Light(24, 20, WHITE, 45), Light(32, 21, RED, 10), Light(40, 20, YELLOW, 25),
    # Middle
    Light(20, 25, BLUE, 40), Light(28, 26, WHITE, 5), Light(36, 26, RED, 20),
    Light(44, 25, YELLOW, 35),
    # Lower middle
    Light(18, 31, RED, 50), Light(24, 32, BLUE, 15), Light(32, 33, YELLOW, 30),
    Light(40, 32, WHITE, 45), Light(46, 31, RED, 10),
    # Lower
    Light(16, 37, YELLOW, 25), Light(22, 38, BLUE, 40), Light(28, 39, WHITE, 5),
    Light(36, 39, RED, 20), Light(42, 38, YELLOW, 35), Light(48, 37, BLUE, 50),
    # Bottom
    Light(14, 43, WHITE, 15), Light(20, 44, RED, 30), Light(26, 45, YELLOW, 45),
    Light(32, 46, BLUE, 10), Light(38, 45, WHITE, 25), Light(44, 44, RED, 40),
    Light(50, 43, YELLOW, 5),
]


def light_brightness(frame: int, offset: int) -> float:
    """Sine blink in 0..1 with the light's phase offset."""
    cycle = ((frame + offset) % BLINK_PERIOD) / BLINK_PERIOD
    return math.sin(cycle * math.pi * 2) * 0.5 + 0.5


class ChristmasTreeScene(Imager):
    """Green triangle tree, brown trunk, gold star and blinking 2x2 lights."""

    name = "christmas-tree"

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        matrix = Matrix(SCENE_SIZE, lambda x, y: Cell(BLACK, MAX_BRIGHTNESS))

        self._draw_tree(matrix)
        draw_rect(matrix, CENTER_X - 3, 49, 6, 10, TRUNK_COLOR)
        self._draw_star(matrix)
        self._draw_lights(matrix, frame)

        return matrix

    def _draw_tree(self, matrix: Matrix) -> None:
        tree = Cell(TREE_COLOR, MAX_BRIGHTNESS)
        for y in range(TREE_TOP, TREE_BOTTOM + 1):
            progress = (y - TREE_TOP) / (TREE_BOTTOM - TREE_TOP)
            half_width = math.floor(progress * TREE_HALF_WIDTH)
            for dx in range(-half_width, half_width + 1):
                matrix.set(CENTER_X + dx, y, tree)

    def _draw_star(self, matrix: Matrix) -> None:
        star = Cell(STAR_COLOR, MAX_BRIGHTNESS)
        for dx, dy in STAR_POINTS:
            matrix.set(CENTER_X + dx, 6 + dy, star)

    def _draw_lights(self, matrix: Matrix, frame: int) -> None:
        for light in LIGHTS:
            level = light_brightness(frame, light.offset)
            # Dim phase is skipped entirely, which reads as twinkling
            if level <= 0.3:
                continue
            draw_rect(matrix, light.x, light.y, 2, 2, light.color, math.floor(level * 255))
