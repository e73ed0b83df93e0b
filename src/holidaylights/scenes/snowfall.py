"""Winter night with drifting snowflakes."""

import math
import random
from dataclasses import dataclass
from typing import List, Optional

from holidaylights.graphics.primitives import draw_rect
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import Cell, MAX_BRIGHTNESS
from holidaylights.model.matrix import Matrix
from holidaylights.scenes.base import SCENE_SIZE

GROUND_HEIGHT = 7
FLAKE_COUNT = 60


@dataclass
class Snowflake:
    x: float
    y: float
    speed: float
    size: int


def _spawn(rng: random.Random, top: int) -> Snowflake:
    return Snowflake(
        x=rng.randint(0, SCENE_SIZE.width - 1),
        y=rng.randint(top, 0),
        speed=rng.uniform(0.25, 1.0),
        size=rng.randint(1, 2),
    )


class SnowfallScene(Imager):
    """Snowflakes sway as they fall over a night sky onto white ground.

    Flakes advance once per rendered frame and respawn above the top
    edge after leaving the bottom.
    """

    name = "snowfall"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self.flakes: List[Snowflake] = [
            _spawn(self._rng, -SCENE_SIZE.height) for _ in range(FLAKE_COUNT)
        ]

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        height = SCENE_SIZE.height

        # Night sky gradient, darker at the top
        matrix = Matrix(SCENE_SIZE, lambda x, y: Cell((5, 5, int(20 + y * 0.4)), MAX_BRIGHTNESS))
        draw_rect(matrix, 0, height - GROUND_HEIGHT, SCENE_SIZE.width, GROUND_HEIGHT, (240, 240, 255))

        t = frame / 10
        for flake in self.flakes:
            x = int(flake.x + math.sin(t + flake.y * 0.1) * 2)
            y = int(flake.y)
            level = 200 + flake.size * 27
            draw_rect(matrix, x, y, flake.size, flake.size, (level, level, 255))

            flake.y += flake.speed
            if flake.y > height:
                flake.y = self._rng.randint(-10, -2)
                flake.x = self._rng.randint(0, SCENE_SIZE.width - 1)

        return matrix
