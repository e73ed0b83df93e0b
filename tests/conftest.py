"""
pytest configuration for holiday lights tests.
- Runs pygame in headless/dummy mode (no physical display required).
- Provides in-memory platform fakes so imagers can be tested without fonts or files.
"""
import asyncio
import os
from typing import Callable, Dict, List, Optional, Tuple

import pytest
from PIL import Image

# Headless SDL - must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from holidaylights.core.errors import ImageLoadError, TextRenderError
from holidaylights.model.cell import Color
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.base import (
    ImageLoader,
    RawImageData,
    TextRenderer,
    TextRenderResult,
    calculate_scaled_dimensions,
)
from holidaylights.platform.context import PlatformContext

RGBA = Tuple[int, int, int, int]


def make_rgba(width: int, height: int, pixel: Callable[[int, int], RGBA]) -> bytes:
    """Row-major RGBA bytes from a per-pixel function."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend(pixel(x, y))
    return bytes(data)


def solid_image(width: int, height: int, color: Color) -> RawImageData:
    return RawImageData(make_rgba(width, height, lambda x, y: (*color, 255)), width, height)


# ---------------------------------------------------------------------------
# Platform fakes
# ---------------------------------------------------------------------------

class FakeImageLoader(ImageLoader):
    """Serves solid-color images from memory.

    `images` maps a path to (width, height, color) before scaling. Loads
    block on `gate` until it is set, so tests can observe the not-yet-loaded state.
    """

    def __init__(self, images: Optional[Dict[str, Tuple[int, int, Color]]] = None) -> None:
        self.images = images or {}
        self.gate = asyncio.Event()
        self.gate.set()
        self.requests: List[Tuple[str, Dimensions]] = []

    async def load_image(self, image_path: str, max_dimensions: Dimensions) -> RawImageData:
        self.requests.append((image_path, max_dimensions))
        await self.gate.wait()
        if image_path not in self.images:
            raise ImageLoadError(image_path, "not found")
        width, height, color = self.images[image_path]
        scaled = calculate_scaled_dimensions(width, height, max_dimensions)
        return solid_image(scaled.width, scaled.height, color)


class FakeTextRenderer(TextRenderer):
    """Renders every string as an opaque block inside a transparent margin.

    The block is 3 pixels wide per character and `font_size` pixels tall,
    with a 2 pixel fully transparent border and a 1 pixel half-transparent
    fringe (alpha 100) on the left edge.
    """

    MARGIN = 2

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: List[Tuple[str, int, str, Color]] = []

    def render_text(self, text: str, font_size: int, font_family: str, color: Color) -> TextRenderResult:
        self.calls.append((text, font_size, font_family, color))
        if self.fail:
            raise TextRenderError("no fonts available")

        block_w = 3 * len(text)
        width = block_w + self.MARGIN * 2
        height = font_size + self.MARGIN * 2

        def pixel(x: int, y: int) -> RGBA:
            inside_y = self.MARGIN <= y < self.MARGIN + font_size
            if inside_y and self.MARGIN <= x < self.MARGIN + block_w:
                return (*color, 255)
            if inside_y and x == self.MARGIN - 1:
                return (*color, 100)
            return (0, 0, 0, 0)

        return TextRenderResult(make_rgba(width, height, pixel), width, height)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def image_loader() -> FakeImageLoader:
    return FakeImageLoader({
        "wide.png": (200, 100, (200, 10, 10)),
        "bubblegum.png": (90, 90, (255, 100, 200)),
    })


@pytest.fixture
def text_renderer() -> FakeTextRenderer:
    return FakeTextRenderer()


@pytest.fixture
def platform(image_loader: FakeImageLoader, text_renderer: FakeTextRenderer) -> PlatformContext:
    return PlatformContext(image_loader=image_loader, text_renderer=text_renderer)


@pytest.fixture
def png_path(tmp_path):
    """A 40x20 PNG: left half red, right half blue."""
    img = Image.new("RGBA", (40, 20), (255, 0, 0, 255))
    img.paste((0, 0, 255, 255), (20, 0, 40, 20))
    path = tmp_path / "split.png"
    img.save(path)
    return path
