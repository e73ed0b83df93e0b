"""Platform ports for image loading and text rasterization."""

from holidaylights.platform.base import (
    ImageLoader,
    TextRenderer,
    RawImageData,
    TextRenderResult,
    calculate_scaled_dimensions,
    candidate_paths,
)
from holidaylights.platform.context import (
    PlatformContext,
    create_platform,
    require_platform,
)

__all__ = [
    "ImageLoader",
    "TextRenderer",
    "RawImageData",
    "TextRenderResult",
    "calculate_scaled_dimensions",
    "candidate_paths",
    "PlatformContext",
    "create_platform",
    "require_platform",
]
