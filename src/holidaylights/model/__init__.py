"""Value types and the pixel Matrix."""

from holidaylights.model.dimensions import Dimensions, Coordinates
from holidaylights.model.cell import Cell, Color, BLACK, WHITE, BLACK_CELL, MAX_BRIGHTNESS
from holidaylights.model.matrix import Matrix, CellInitializer

__all__ = [
    "Dimensions",
    "Coordinates",
    "Cell",
    "Color",
    "BLACK",
    "WHITE",
    "BLACK_CELL",
    "MAX_BRIGHTNESS",
    "Matrix",
    "CellInitializer",
]
