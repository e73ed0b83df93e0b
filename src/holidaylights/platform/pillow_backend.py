"""
Pillow implementations of the platform ports.

Used for headless rendering and for panel output, where no window
system is available.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

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

# Transparent border around rendered text
TEXT_MARGIN = 2

# Generic CSS families mapped to fonts commonly installed with Pillow/DejaVu
FONT_FAMILIES = {
    "monospace": "DejaVuSansMono.ttf",
    "serif": "DejaVuSerif.ttf",
    "sans-serif": "DejaVuSans.ttf",
}


class PillowImageLoader(ImageLoader):
    """Decodes images with Pillow off the event loop thread."""

    def __init__(self, base_path: Optional[Path | str] = None) -> None:
        self.base_path = Path(base_path) if base_path is not None else None

    async def load_image(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        return await asyncio.to_thread(self._load_sync, image_path, max_dimensions)

    def _load_sync(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        tried = candidate_paths(self.base_path, image_path)

        for candidate in tried:
            if not candidate.is_file():
                continue

            try:
                with Image.open(candidate) as img:
                    rgba = img.convert("RGBA")
            except (OSError, UnidentifiedImageError) as e:
                raise ImageLoadError(image_path, str(e)) from e

            scaled = calculate_scaled_dimensions(rgba.width, rgba.height, max_dimensions)
            if scaled.area == 0:
                raise ImageLoadError(image_path, "image has no pixels")

            if (scaled.width, scaled.height) != rgba.size:
                rgba = rgba.resize((scaled.width, scaled.height), Image.Resampling.LANCZOS)

            logger.debug(f"Loaded image {candidate} scaled to {scaled}")
            return RawImageData(data=rgba.tobytes(), width=scaled.width, height=scaled.height)

        raise ImageLoadError(image_path, "tried " + ", ".join(str(p) for p in tried))


class PillowTextRenderer(TextRenderer):
    """Rasterizes text with Pillow's FreeType bindings."""

    def __init__(self, font_path: Optional[Path | str] = None) -> None:
        self.font_path = Path(font_path) if font_path is not None else None
        self._fonts: Dict[Tuple[str, int], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def _load_font(self, font_size: int, font_family: str):
        key = (font_family, font_size)
        if key in self._fonts:
            return self._fonts[key]

        source = str(self.font_path) if self.font_path else FONT_FAMILIES.get(font_family, font_family)
        try:
            font = ImageFont.truetype(source, font_size)
        except OSError:
            logger.debug(f"Font {source} not found, using Pillow default font")
            font = ImageFont.load_default(size=font_size)

        self._fonts[key] = font
        return font

    def render_text(
        self,
        text: str,
        font_size: int,
        font_family: str,
        color: Color,
    ) -> TextRenderResult:
        if font_size <= 0:
            raise TextRenderError(f"Invalid font size: {font_size}")

        try:
            font = self._load_font(font_size, font_family)
            measure = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
            left, top, right, bottom = measure.textbbox((0, 0), text, font=font)

            width = max(1, right - left) + TEXT_MARGIN * 2
            height = max(1, bottom - top) + TEXT_MARGIN * 2

            canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
            draw = ImageDraw.Draw(canvas)
            draw.text((TEXT_MARGIN - left, TEXT_MARGIN - top), text, font=font, fill=(*color, 255))
        except (OSError, ValueError) as e:
            raise TextRenderError(f"Failed to render {text!r}: {e}") from e

        return TextRenderResult(data=canvas.tobytes(), width=width, height=height)
