"""The pixel buffer: a fixed-size grid of Cells addressed by (x, y)."""

from typing import Callable, Iterator, List, Optional, Tuple, Union, Dict, Any

import numpy as np
from numpy.typing import NDArray

from holidaylights.model.cell import Cell, Color, BLACK_CELL, MAX_BRIGHTNESS
from holidaylights.model.dimensions import Dimensions

CellInitializer = Callable[[int, int], Cell]


class Matrix:
    """Fixed-size mutable grid of Cells.

    Width and height are set once at construction. Reads and writes
    outside the grid never raise: `get` returns None and `set` returns
    False.
    """

    def __init__(
        self,
        dimensions: Dimensions,
        initializer: Optional[CellInitializer] = None,
    ) -> None:
        self._dimensions = dimensions
        if initializer is None:
            self._cells: List[List[Cell]] = [
                [BLACK_CELL] * dimensions.width for _ in range(dimensions.height)
            ]
        else:
            self._cells = [
                [initializer(x, y) for x in range(dimensions.width)]
                for y in range(dimensions.height)
            ]

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def width(self) -> int:
        return self._dimensions.width

    @property
    def height(self) -> int:
        return self._dimensions.height

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at (x, y), or None when out of bounds."""
        if not self._dimensions.contains(x, y):
            return None
        return self._cells[y][x]

    def set(self, x: int, y: int, cell: Cell) -> bool:
        """Replace the cell at (x, y).

        Returns:
            True if written, False if (x, y) is out of bounds
        """
        if not self._dimensions.contains(x, y):
            return False
        self._cells[y][x] = cell
        return True

    def set_color(self, x: int, y: int, color: Color) -> bool:
        """Replace only the color of the cell at (x, y)."""
        cell = self.get(x, y)
        if cell is None:
            return False
        self._cells[y][x] = cell.with_color(color)
        return True

    def set_brightness(self, x: int, y: int, brightness: int) -> bool:
        """Replace only the brightness of the cell at (x, y)."""
        cell = self.get(x, y)
        if cell is None:
            return False
        self._cells[y][x] = cell.with_brightness(brightness)
        return True

    def fill(self, cell_or_initializer: Union[Cell, CellInitializer]) -> None:
        """Rewrite every cell with one value or with an initializer(x, y)."""
        if isinstance(cell_or_initializer, Cell):
            for row in self._cells:
                row[:] = [cell_or_initializer] * len(row)
            return

        for y, row in enumerate(self._cells):
            for x in range(len(row)):
                row[x] = cell_or_initializer(x, y)

    def rows(self) -> List[List[Cell]]:
        """Row-major copy of the grid."""
        return [list(row) for row in self._cells]

    def for_each(self, callback: Callable[[Cell, int, int], None]) -> None:
        for cell, x, y in self:
            callback(cell, x, y)

    def __iter__(self) -> Iterator[Tuple[Cell, int, int]]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield cell, x, y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._dimensions == other._dimensions and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Matrix({self._dimensions})"

    def copy(self) -> "Matrix":
        clone = Matrix.__new__(Matrix)
        clone._dimensions = self._dimensions
        clone._cells = self.rows()
        return clone

    # Conversion at the render boundary
    def to_buffer(self, apply_brightness: bool = True) -> NDArray[np.uint8]:
        """Convert to a (height, width, 3) uint8 array for a display.

        Brightness is applied as an alpha multiplier over black; with
        `apply_brightness=False` the raw RGB values are returned.
        """
        colors = np.zeros((self.height, self.width, 3), dtype=np.float32)
        alpha = np.ones((self.height, self.width, 1), dtype=np.float32)
        for cell, x, y in self:
            colors[y, x] = cell.color
            alpha[y, x, 0] = cell.brightness / MAX_BRIGHTNESS

        if apply_brightness:
            colors *= np.clip(alpha, 0.0, 1.0)

        return np.clip(np.rint(colors), 0, 255).astype(np.uint8)

    @classmethod
    def from_buffer(cls, buffer: NDArray[np.uint8], brightness: int = MAX_BRIGHTNESS) -> "Matrix":
        """Build a Matrix from a (height, width, 3) array."""
        h, w = buffer.shape[:2]
        return cls(
            Dimensions(w, h),
            lambda x, y: Cell(tuple(buffer[y, x, :3]), brightness),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot shape used by JSON consumers."""
        from holidaylights.graphics.color import format_rgb

        return {
            "dimensions": {"width": self.width, "height": self.height},
            "cells": [
                [{"color": format_rgb(cell.color), "brightness": cell.brightness} for cell in row]
                for row in self._cells
            ],
        }
