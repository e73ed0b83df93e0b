"""
Platform context: the ImageLoader/TextRenderer pair chosen at startup.

The context is built once by the bootstrap code and handed explicitly to
every imager that loads images or renders text. It is frozen, so the
providers cannot be swapped after construction.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

from holidaylights.core.errors import ConfigurationMissing
from holidaylights.platform.base import ImageLoader, TextRenderer

logger = logging.getLogger(__name__)

Backend = Literal["pillow", "pygame"]


@dataclass(frozen=True)
class PlatformContext:
    """Platform-specific providers."""

    image_loader: ImageLoader
    text_renderer: TextRenderer

    def __post_init__(self) -> None:
        if self.image_loader is None:
            raise ConfigurationMissing("image loader")
        if self.text_renderer is None:
            raise ConfigurationMissing("text renderer")


def require_platform(platform: Optional[PlatformContext]) -> PlatformContext:
    """Fail fast when an imager is built without a platform context."""
    if platform is None:
        raise ConfigurationMissing()
    return platform


def create_platform(
    backend: Backend,
    assets_path: Optional[Path | str] = None,
    font_path: Optional[Path | str] = None,
) -> PlatformContext:
    """Build the context for a backend.

    Args:
        backend: "pillow" for headless/panel output, "pygame" for the preview window
        assets_path: Base directory for relative image paths
        font_path: Optional TTF used for every font family
    """
    if backend == "pillow":
        from holidaylights.platform.pillow_backend import PillowImageLoader, PillowTextRenderer

        context = PlatformContext(
            image_loader=PillowImageLoader(assets_path),
            text_renderer=PillowTextRenderer(font_path),
        )
    elif backend == "pygame":
        from holidaylights.platform.pygame_backend import PygameImageLoader, PygameTextRenderer

        context = PlatformContext(
            image_loader=PygameImageLoader(assets_path),
            text_renderer=PygameTextRenderer(font_path),
        )
    else:
        raise ValueError(f"Unknown platform backend: {backend}")

    logger.info(f"Platform configured: {backend} (assets: {assets_path})")
    return context
