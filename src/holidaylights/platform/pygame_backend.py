"""
pygame implementations of the platform ports.

Used by the preview window, where pygame is already initialized for
drawing and its font/image modules come for free.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from holidaylights.core.errors import ImageLoadError, TextRenderError
from holidaylights.model.cell import Color
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.base import (
    ImageLoader,
    RawImageData,
    TextRenderer,
    TextRenderResult,
    calculate_scaled_dimensions,
    candidate_paths,
)

logger = logging.getLogger(__name__)

TEXT_MARGIN = 2

# Pygame is imported lazily so the Pillow backend works without SDL
_pygame = None


def _get_pygame():
    """Lazy import pygame."""
    global _pygame
    if _pygame is None:
        import pygame
        _pygame = pygame
    return _pygame


class PygameImageLoader(ImageLoader):
    """Loads images through pygame.image."""

    def __init__(self, base_path: Optional[Path | str] = None) -> None:
        self.base_path = Path(base_path) if base_path is not None else None

    async def load_image(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        return await asyncio.to_thread(self._load_sync, image_path, max_dimensions)

    def _load_sync(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        pygame = _get_pygame()
        tried = candidate_paths(self.base_path, image_path)

        for candidate in tried:
            if not candidate.is_file():
                continue

            try:
                surface = pygame.image.load(str(candidate))
            except (pygame.error, OSError) as e:
                raise ImageLoadError(image_path, str(e)) from e

            scaled = calculate_scaled_dimensions(surface.get_width(), surface.get_height(), max_dimensions)
            if scaled.area == 0:
                raise ImageLoadError(image_path, "image has no pixels")

            size = (scaled.width, scaled.height)
            if size != surface.get_size():
                try:
                    surface = pygame.transform.smoothscale(surface, size)
                except ValueError:
                    # smoothscale only accepts 24/32-bit surfaces
                    surface = pygame.transform.scale(surface, size)

            logger.debug(f"Loaded image {candidate} scaled to {scaled}")
            data = pygame.image.tobytes(surface, "RGBA")
            return RawImageData(data=data, width=scaled.width, height=scaled.height)

        raise ImageLoadError(image_path, "tried " + ", ".join(str(p) for p in tried))


class PygameTextRenderer(TextRenderer):
    """Rasterizes text with pygame.font."""

    def __init__(self, font_path: Optional[Path | str] = None) -> None:
        self.font_path = Path(font_path) if font_path is not None else None
        self._fonts: Dict[Tuple[str, int], object] = {}

    def _load_font(self, font_size: int, font_family: str):
        pygame = _get_pygame()
        if not pygame.font.get_init():
            pygame.font.init()

        key = (font_family, font_size)
        if key not in self._fonts:
            if self.font_path:
                self._fonts[key] = pygame.font.Font(str(self.font_path), font_size)
            else:
                self._fonts[key] = pygame.font.SysFont(font_family, font_size)
        return self._fonts[key]

    def render_text(
        self,
        text: str,
        font_size: int,
        font_family: str,
        color: Color,
    ) -> TextRenderResult:
        if font_size <= 0:
            raise TextRenderError(f"Invalid font size: {font_size}")

        pygame = _get_pygame()
        try:
            font = self._load_font(font_size, font_family)
            # No background argument: per-pixel alpha, antialiased edges
            glyphs = font.render(text, True, color)
            width = glyphs.get_width() + TEXT_MARGIN * 2
            height = glyphs.get_height() + TEXT_MARGIN * 2
            canvas = pygame.Surface((width, height), pygame.SRCALPHA)
            canvas.blit(glyphs, (TEXT_MARGIN, TEXT_MARGIN))
            data = pygame.image.tobytes(canvas, "RGBA")
        except (pygame.error, OSError, ValueError) as e:
            raise TextRenderError(f"Failed to render {text!r}: {e}") from e

        return TextRenderResult(data=data, width=width, height=height)
