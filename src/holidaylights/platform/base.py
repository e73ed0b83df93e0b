"""
Abstract ports for platform-specific asset acquisition.

These interfaces define the contract that both the Pillow backend
(headless / panel) and the pygame backend (preview window) follow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from holidaylights.model.cell import Color
from holidaylights.model.dimensions import Dimensions

BYTES_PER_PIXEL = 4  # RGBA


@dataclass(frozen=True)
class RawImageData:
    """Decoded, scaled image.

    Attributes:
        data: RGBA bytes, row-major, 4 bytes per pixel
        width: Width in pixels
        height: Height in pixels
    """
    data: bytes
    width: int
    height: int

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        index = (y * self.width + x) * BYTES_PER_PIXEL
        r, g, b, a = self.data[index:index + BYTES_PER_PIXEL]
        return r, g, b, a


@dataclass(frozen=True)
class TextRenderResult(RawImageData):
    """Rasterized text as RGBA bytes on a transparent canvas."""


class ImageLoader(ABC):
    """Loads an image file and scales it to fit within a maximum size."""

    @abstractmethod
    async def load_image(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        """
        Load and scale an image.

        Args:
            image_path: Path to the image, relative paths resolve
                against the loader's base path
            max_dimensions: Bounding box the result must fit in

        Returns:
            Scaled RGBA image data

        Raises:
            ImageLoadError: If the file is missing or undecodable
        """
        ...


class TextRenderer(ABC):
    """Rasterizes a string."""

    @abstractmethod
    def render_text(
        self,
        text: str,
        font_size: int,
        font_family: str,
        color: Color,
    ) -> TextRenderResult:
        """
        Render text to RGBA pixels.

        Raises:
            TextRenderError: If rasterization fails
        """
        ...


def candidate_paths(base_path: Path | None, image_path: str) -> list[Path]:
    """Paths to try, in order, for an image reference.

    Absolute paths are used as-is. Relative ones resolve against the base
    path, then against an `assets/` directory below it.
    """
    path = Path(image_path)
    if path.is_absolute() or base_path is None:
        return [path]

    candidates = [base_path / path]
    if base_path.name != "assets":
        candidates.append(base_path / "assets" / path)
    return candidates


def calculate_scaled_dimensions(
    original_width: int,
    original_height: int,
    max_dimensions: Dimensions,
) -> Dimensions:
    """Fit an image inside `max_dimensions` keeping its aspect ratio.

    The longer source axis is clamped first and the other derived from
    the aspect ratio. If the derived axis still overflows, it is clamped
    and the first axis recomputed. Images are never enlarged.
    """
    if original_width <= 0 or original_height <= 0:
        return Dimensions(0, 0)

    aspect_ratio = original_width / original_height

    if original_width > original_height:
        width = min(original_width, max_dimensions.width)
        height = round(width / aspect_ratio)

        if height > max_dimensions.height:
            height = max_dimensions.height
            width = round(height * aspect_ratio)
    else:
        height = min(original_height, max_dimensions.height)
        width = round(height * aspect_ratio)

        if width > max_dimensions.width:
            width = max_dimensions.width
            height = round(width / aspect_ratio)

    # Rounding can overshoot by one on extreme ratios
    width = max(1, min(width, max_dimensions.width)) if max_dimensions.width else 0
    height = max(1, min(height, max_dimensions.height)) if max_dimensions.height else 0
    return Dimensions(width, height)
