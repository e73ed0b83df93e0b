"""
Preview window for the LED matrix.

Draws each cell as a scaled square with a one-pixel gap so the window
looks like a panel.
"""

import logging
from typing import Tuple

import numpy as np

from holidaylights.display.base import Display
from holidaylights.model.matrix import Matrix

logger = logging.getLogger(__name__)

_pygame = None


def _get_pygame():
    """Lazy import pygame."""
    global _pygame
    if _pygame is None:
        import pygame
        _pygame = pygame
    return _pygame


class PygameDisplay(Display):
    """Window that mirrors the panel at `scale` screen pixels per LED."""

    BACKGROUND: Tuple[int, int, int] = (10, 10, 10)

    def __init__(
        self,
        width: int = 64,
        height: int = 64,
        scale: int = 10,
        brightness: float = 1.0,
        title: str = "Holiday Lights",
    ) -> None:
        pygame = _get_pygame()
        pygame.init()

        self._width = width
        self._height = height
        self.scale = scale
        self.brightness = brightness
        self.screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)
        self.closed = False

        logger.info(f"Preview window opened: {width}x{height} at scale {scale}")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def show(self, matrix: Matrix) -> None:
        pygame = _get_pygame()
        buffer = self.to_buffer(matrix, self.brightness)

        self.screen.fill(self.BACKGROUND)
        if self.scale == 1:
            surface = pygame.surfarray.make_surface(np.ascontiguousarray(buffer.swapaxes(0, 1)))
            self.screen.blit(surface, (0, 0))
        else:
            for y in range(self._height):
                for x in range(self._width):
                    rect = pygame.Rect(x * self.scale + 1, y * self.scale + 1, self.scale - 1, self.scale - 1)
                    pygame.draw.rect(self.screen, tuple(int(c) for c in buffer[y, x]), rect)

        pygame.display.flip()

    def pump_events(self) -> bool:
        """Process window events. Returns False once the window was closed."""
        pygame = _get_pygame()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.closed = True
        return not self.closed

    def close(self) -> None:
        _get_pygame().quit()
        logger.info("Preview window closed")
