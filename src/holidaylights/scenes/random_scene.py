"""Animated noise with a caption."""

from holidaylights.graphics.position import Positions
from holidaylights.imagers import CompositeImager, Imager, RandomImage, TextImager
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.base import SCENE_SIZE, CompositeScene


class RandomScene(CompositeScene):
    name = "random"

    def compose(self, platform: PlatformContext) -> Imager:
        return (
            CompositeImager(SCENE_SIZE, (10, 10, 30))
            .add_imager(RandomImage(Dimensions.square(50)), Positions.center())
            .add_imager(
                TextImager("Random", 10, "monospace", (100, 255, 100), platform=platform),
                Positions.center_horizontal(55),
            )
        )
