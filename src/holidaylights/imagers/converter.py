"""Adapter from an in-flight image load to per-pixel color lookups."""

import asyncio
import logging
from typing import Optional

from holidaylights.core.errors import AssetUnavailable
from holidaylights.model.cell import Color
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.base import ImageLoader, RawImageData

logger = logging.getLogger(__name__)


class ImageToMatrixConverter:
    """Wraps one image load and answers color lookups from its result.

    The load runs as an asyncio task. It starts at construction when an
    event loop is running, otherwise on the first lookup made from inside
    a loop (or on `wait_for_load`). Lookups never wait: until the image
    arrives every pixel is unavailable. A failed load is permanent.
    """

    def __init__(
        self,
        image_loader: ImageLoader,
        image_path: str,
        max_dimensions: Dimensions,
    ) -> None:
        self.image_loader = image_loader
        self.image_path = image_path
        self.max_dimensions = max_dimensions

        self._image: Optional[RawImageData] = None
        self._task: Optional[asyncio.Task] = None
        self._failed = False

        self._ensure_started()

    def _ensure_started(self) -> None:
        if self._task is not None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return  # No loop yet; retried on next lookup
        self._task = loop.create_task(self._load())

    async def _load(self) -> None:
        try:
            self._image = await self.image_loader.load_image(self.image_path, self.max_dimensions)
        except Exception as e:
            logger.error(f"Failed to load image: {self.image_path}: {e}")
            self._image = None
            self._failed = True

    async def wait_for_load(self) -> bool:
        """Wait for the load to finish.

        Returns:
            True if the image is available
        """
        self._ensure_started()
        if self._task is not None:
            await asyncio.shield(self._task)
        return self._image is not None

    def is_loaded(self) -> bool:
        return self._image is not None

    @property
    def failed(self) -> bool:
        return self._failed

    def get_pixel_color(self, x: int, y: int) -> Optional[Color]:
        """Color at (x, y) of the scaled image.

        Returns:
            RGB tuple, or None if not loaded, failed, or out of bounds
        """
        self._ensure_started()
        image = self._image
        if image is None:
            return None
        if x < 0 or x >= image.width or y < 0 or y >= image.height:
            return None
        r, g, b, _ = image.pixel(x, y)
        return (r, g, b)

    def get_scaled_dimensions(self) -> Optional[Dimensions]:
        """Final size once loaded, else None."""
        if self._image is None:
            return None
        return Dimensions(self._image.width, self._image.height)

    def require_dimensions(self) -> Dimensions:
        """Like get_scaled_dimensions, but raises while unavailable."""
        dimensions = self.get_scaled_dimensions()
        if dimensions is None:
            raise AssetUnavailable(f"Image not loaded: {self.image_path}")
        return dimensions
