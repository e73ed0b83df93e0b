"""Headless display that keeps the last frame in memory."""

import logging
from typing import Any, Dict, Optional

import numpy as np
from numpy.typing import NDArray

from holidaylights.display.base import Display
from holidaylights.model.matrix import Matrix

logger = logging.getLogger(__name__)


class BufferDisplay(Display):
    """In-memory sink for headless runs and snapshot consumers."""

    def __init__(self, width: int = 64, height: int = 64, brightness: float = 1.0) -> None:
        self._width = width
        self._height = height
        self.brightness = brightness
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self._matrix: Optional[Matrix] = None
        self.frames_shown = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def show(self, matrix: Matrix) -> None:
        np.copyto(self._buffer, self.to_buffer(matrix, self.brightness))
        self._matrix = matrix
        self.frames_shown += 1
        if self.frames_shown % 100 == 0:
            logger.debug(f"Displayed {self.frames_shown} frames")

    def get_buffer(self) -> NDArray[np.uint8]:
        """Copy of the last displayed frame."""
        return self._buffer.copy()

    def snapshot(self) -> Optional[Dict[str, Any]]:
        """Last Matrix as a JSON-ready dict, or None before the first frame."""
        if self._matrix is None:
            return None
        return self._matrix.to_dict()
