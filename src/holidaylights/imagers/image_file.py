"""Imager that shows an image file scaled to fit its maximum size."""

from typing import Optional

from holidaylights.imagers.base import Imager
from holidaylights.imagers.converter import ImageToMatrixConverter
from holidaylights.model.cell import BLACK, Cell, MAX_BRIGHTNESS
from holidaylights.model.dimensions import Dimensions
from holidaylights.model.matrix import Matrix
from holidaylights.platform.context import PlatformContext, require_platform


class ImageFileImager(Imager):
    """Displays an image loaded through the platform's ImageLoader.

    Until the image arrives (or if it never does) the imager renders a
    black filler of `max_dimensions`, which composites as transparent.
    """

    name = "image-file"

    def __init__(
        self,
        image_path: str,
        max_dimensions: Optional[Dimensions] = None,
        platform: Optional[PlatformContext] = None,
    ) -> None:
        platform = require_platform(platform)
        self.image_path = image_path
        self.max_dimensions = max_dimensions or Dimensions.square(64)
        self.converter = ImageToMatrixConverter(
            platform.image_loader,
            image_path,
            self.max_dimensions,
        )

    async def wait_for_load(self) -> bool:
        return await self.converter.wait_for_load()

    def _cell_at(self, x: int, y: int) -> Cell:
        color = self.converter.get_pixel_color(x, y)
        return Cell(color if color is not None else BLACK, MAX_BRIGHTNESS)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        dimensions = self.converter.get_scaled_dimensions() or self.max_dimensions
        return Matrix(dimensions, self._cell_at)
