"""
Error types for the holiday lights engine.

Only configuration problems and an empty scene set are fatal. Asset
problems are absorbed by the imagers, which render the transparency
sentinel instead, and a broken scene is skipped by the registry.
"""


class HolidayLightsError(Exception):
    """Base class for all engine errors."""


class ConfigurationMissing(HolidayLightsError):
    """Platform providers were not configured before they were needed."""

    def __init__(self, what: str = "platform") -> None:
        super().__init__(
            f"{what} not configured. Build a PlatformContext at startup "
            "and pass it to every imager that loads images or text."
        )
        self.what = what


class AssetUnavailable(HolidayLightsError):
    """An image or text asset is not loaded (yet, or ever)."""


class ImageLoadError(AssetUnavailable):
    """An image file could not be read or decoded."""

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Failed to load image: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class TextRenderError(AssetUnavailable):
    """The platform text renderer could not rasterize a string."""


class SceneInstantiationFailure(HolidayLightsError):
    """A scene factory raised while building its scene."""

    def __init__(self, scene_name: str, cause: BaseException) -> None:
        super().__init__(f"Failed to instantiate {scene_name}: {cause}")
        self.scene_name = scene_name
        self.cause = cause


class EmptySceneSet(HolidayLightsError):
    """Scene discovery produced nothing to animate."""

    def __init__(self) -> None:
        super().__init__("No scenes available - nothing to animate")
