"""Noise imager: random colors with a left-to-right brightness ramp."""

from typing import Optional

from holidaylights.graphics.color import rgb
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import Cell, MAX_BRIGHTNESS
from holidaylights.model.dimensions import Dimensions
from holidaylights.model.matrix import Matrix


class RandomImage(Imager):
    """Fresh random colors every frame."""

    name = "random-image"

    def __init__(self, dimensions: Optional[Dimensions] = None) -> None:
        self.dimensions = dimensions or Dimensions.square(64)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        width = self.dimensions.width
        return Matrix(
            self.dimensions,
            lambda x, y: Cell(rgb(), int(MAX_BRIGHTNESS * x / width)),
        )
