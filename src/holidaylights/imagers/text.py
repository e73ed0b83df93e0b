"""Text as a bitmap, rasterized once by the platform TextRenderer."""

import logging
from typing import Optional, Tuple

from holidaylights.imagers.base import Imager
from holidaylights.model.cell import BLACK, WHITE, Cell, Color, MAX_BRIGHTNESS
from holidaylights.model.dimensions import Dimensions
from holidaylights.model.matrix import Matrix
from holidaylights.platform.base import RawImageData
from holidaylights.platform.context import PlatformContext, require_platform

logger = logging.getLogger(__name__)

# Pixels at or below this alpha count as background
ALPHA_THRESHOLD = 128

Bounds = Tuple[int, int, int, int]


def _empty_matrix() -> Matrix:
    return Matrix(Dimensions(1, 1), lambda x, y: Cell(BLACK, MAX_BRIGHTNESS))


def find_text_bounds(image: RawImageData) -> Optional[Bounds]:
    """Bounding box (min_x, min_y, max_x, max_y) of opaque pixels, inclusive."""
    min_x, min_y = image.width, image.height
    max_x = max_y = -1

    data = image.data
    for y in range(image.height):
        row = y * image.width * 4
        for x in range(image.width):
            if data[row + x * 4 + 3] > ALPHA_THRESHOLD:
                min_x = min(min_x, x)
                max_x = max(max_x, x)
                min_y = min(min_y, y)
                max_y = max(max_y, y)

    if max_x < 0 or max_y < 0:
        return None
    return min_x, min_y, max_x, max_y


def extract_text_matrix(image: RawImageData) -> Matrix:
    """Trim a rendered text bitmap to its opaque pixels.

    Opaque pixels keep their RGB, everything else becomes black so the
    compositor skips it.
    """
    bounds = find_text_bounds(image)
    if bounds is None:
        return _empty_matrix()

    min_x, min_y, max_x, max_y = bounds

    def cell_at(x: int, y: int) -> Cell:
        r, g, b, a = image.pixel(x + min_x, y + min_y)
        if a > ALPHA_THRESHOLD:
            return Cell((r, g, b), MAX_BRIGHTNESS)
        return Cell(BLACK, MAX_BRIGHTNESS)

    return Matrix(Dimensions(max_x - min_x + 1, max_y - min_y + 1), cell_at)


class TextImager(Imager):
    """Displays a fixed string.

    Rendering happens once, in the constructor. A failed render is
    logged and the imager then shows a single transparent pixel.
    """

    name = "text"

    def __init__(
        self,
        text: str,
        height: int,
        font_family: str = "monospace",
        color: Color = WHITE,
        platform: Optional[PlatformContext] = None,
    ) -> None:
        platform = require_platform(platform)
        self.text = text
        self.height = height
        self.font_family = font_family
        self.color = color
        self._matrix = self._render(platform)

    def _render(self, platform: PlatformContext) -> Matrix:
        try:
            result = platform.text_renderer.render_text(
                self.text,
                round(self.height),
                self.font_family,
                self.color,
            )
        except Exception as e:
            # Any backend failure degrades to the empty matrix
            logger.error(f"Failed to render text {self.text!r}: {e}")
            return _empty_matrix()

        return extract_text_matrix(result)

    @property
    def dimensions(self) -> Dimensions:
        return self._matrix.dimensions

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        return self._matrix
