"""
Abstract display sink.

A display is the render boundary: it receives finished Matrices and is
the only place where cell brightness is applied to color.
"""

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray

from holidaylights.model.matrix import Matrix


class Display(ABC):
    """Abstract base class for matrix outputs."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Display width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Display height in pixels."""
        ...

    @abstractmethod
    def show(self, matrix: Matrix) -> None:
        """Present a Matrix."""
        ...

    def close(self) -> None:
        """Release display resources."""

    def to_buffer(self, matrix: Matrix, brightness: float = 1.0) -> NDArray[np.uint8]:
        """
        Convert a Matrix into a (height, width, 3) buffer sized for this display.

        Cell brightness is applied as alpha over black, then the global
        `brightness` factor (0..1). Matrices of another size are cropped
        or padded with black at the bottom/right.
        """
        source = matrix.to_buffer(apply_brightness=True)
        if brightness < 1.0:
            source = (source.astype(np.float32) * max(brightness, 0.0)).astype(np.uint8)

        if source.shape[:2] == (self.height, self.width):
            return source

        buffer = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        h = min(source.shape[0], self.height)
        w = min(source.shape[1], self.width)
        buffer[:h, :w] = source[:h, :w]
        return buffer
