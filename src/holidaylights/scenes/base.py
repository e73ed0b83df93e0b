"""Shared base for scenes built as a stack of layers."""

from abc import abstractmethod
from typing import Optional

from holidaylights.imagers.base import Imager
from holidaylights.model.dimensions import Dimensions
from holidaylights.model.matrix import Matrix
from holidaylights.platform.context import PlatformContext, require_platform

# Every scene targets the 64x64 panel
SCENE_SIZE = Dimensions.square(64)


class CompositeScene(Imager):
    """A scene that delegates to an Imager assembled once at construction."""

    def __init__(self, platform: Optional[PlatformContext] = None) -> None:
        self.imager = self.compose(require_platform(platform))

    @abstractmethod
    def compose(self, platform: PlatformContext) -> Imager:
        """Build the layer stack."""
        ...

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        return self.imager.get_matrix(frame, previous_matrix)
