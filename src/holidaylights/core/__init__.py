"""Core framework components for holiday lights."""

from .errors import (
    HolidayLightsError,
    ConfigurationMissing,
    AssetUnavailable,
    ImageLoadError,
    TextRenderError,
    SceneInstantiationFailure,
    EmptySceneSet,
)

__all__ = [
    "HolidayLightsError",
    "ConfigurationMissing",
    "AssetUnavailable",
    "ImageLoadError",
    "TextRenderError",
    "SceneInstantiationFailure",
    "EmptySceneSet",
]
