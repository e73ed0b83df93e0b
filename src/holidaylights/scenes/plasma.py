"""Classic plasma effect, computed with numpy."""

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from holidaylights.imagers.base import Imager
from holidaylights.model.matrix import Matrix
from holidaylights.scenes.base import SCENE_SIZE


def hsv_to_rgb_array(hue: NDArray, saturation: float, value: float) -> NDArray[np.uint8]:
    """Vectorized HSV to RGB; hue in degrees, returns (..., 3) uint8."""
    h = (hue % 360) / 60
    c = value * saturation
    x = c * (1 - np.abs(h % 2 - 1))
    m = value - c
    zeros = np.zeros_like(h)

    sector = np.floor(h).astype(int) % 6
    r = np.choose(sector, [c + zeros, x, zeros, zeros, x, c + zeros])
    g = np.choose(sector, [x, c + zeros, c + zeros, x, zeros, zeros])
    b = np.choose(sector, [zeros, zeros, x, c + zeros, c + zeros, x])

    rgb = np.stack([r, g, b], axis=-1) + m
    return np.clip(rgb * 255, 0, 255).astype(np.uint8)


class PlasmaScene(Imager):
    """Four summed sine fields mapped onto a rotating hue wheel."""

    name = "plasma"

    def __init__(self, speed: float = 0.1) -> None:
        self.speed = speed
        self._ys, self._xs = np.mgrid[0:SCENE_SIZE.height, 0:SCENE_SIZE.width].astype(np.float32)

    def render_buffer(self, frame: int) -> NDArray[np.uint8]:
        t = frame * self.speed
        xs, ys = self._xs, self._ys
        cx, cy = SCENE_SIZE.width / 2, SCENE_SIZE.height / 2

        v = (
            np.sin(xs / 8 + t)
            + np.sin(ys / 4 + t * 0.5)
            + np.sin((xs + ys) / 8 + t * 0.7)
            + np.sin(np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2) / 4 + t * 0.3)
        ) / 4  # -1..1

        return hsv_to_rgb_array((v + 1) * 180 + t * 30, 1.0, 0.9)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        return Matrix.from_buffer(self.render_buffer(frame))
