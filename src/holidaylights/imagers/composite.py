"""Layered composition of Imagers into one fixed-size Matrix."""

from dataclasses import dataclass
from typing import List, Optional

from holidaylights.graphics.position import Position, Positions, calculate
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import BLACK, Cell, Color, MAX_BRIGHTNESS
from holidaylights.model.dimensions import Dimensions
from holidaylights.model.matrix import Matrix


@dataclass
class Layer:
    """One imager placed in a composite."""

    imager: Imager
    position: Position
    dimensions: Optional[Dimensions] = None  # Override; defaults to the layer's own size


class CompositeImager(Imager):
    """Merges ordered layers over a background color.

    Later layers draw on top. Every layer is clipped to the composite's
    bounds and black layer pixels are skipped, so black acts as
    transparency. All layers see the same frame and previous matrix.
    """

    name = "composite"

    def __init__(
        self,
        dimensions: Optional[Dimensions] = None,
        background_color: Color = BLACK,
    ) -> None:
        self.dimensions = dimensions or Dimensions.square(64)
        self.background_color = background_color
        self.layers: List[Layer] = []

    def add_imager(
        self,
        imager: Imager,
        position: Optional[Position] = None,
        dimensions: Optional[Dimensions] = None,
    ) -> "CompositeImager":
        """Add a layer on top of the existing ones. Returns self for chaining."""
        self.layers.append(Layer(imager, position or Positions.static(0, 0), dimensions))
        return self

    def clear(self) -> None:
        self.layers.clear()

    def pop(self) -> Optional[Layer]:
        """Remove and return the topmost layer, or None when empty."""
        if not self.layers:
            return None
        return self.layers.pop()

    def layer_count(self) -> int:
        return len(self.layers)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        background = Cell(self.background_color, MAX_BRIGHTNESS)
        result = Matrix(self.dimensions, lambda x, y: background)

        for layer in self.layers:
            layer_matrix = layer.imager.get_matrix(frame, previous_matrix)
            effective = layer.dimensions or layer_matrix.dimensions
            origin = calculate(layer.position, self.dimensions, effective)

            # Crop to both the declared size and what the imager actually returned
            width = min(effective.width, layer_matrix.width)
            height = min(effective.height, layer_matrix.height)

            for ly in range(height):
                dy = origin.y + ly
                if dy < 0 or dy >= self.dimensions.height:
                    continue
                for lx in range(width):
                    dx = origin.x + lx
                    if dx < 0 or dx >= self.dimensions.width:
                        continue
                    cell = layer_matrix.get(lx, ly)
                    if cell is None or cell.is_transparent:
                        continue
                    result.set(dx, dy, cell)

        return result
