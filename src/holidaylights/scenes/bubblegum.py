"""Bubblegum image with a label."""

from holidaylights.graphics.position import Positions
from holidaylights.imagers import CompositeImager, ImageFileImager, Imager, TextImager
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.base import SCENE_SIZE, CompositeScene


class BubblegumScene(CompositeScene):
    name = "bubblegum"

    def compose(self, platform: PlatformContext) -> Imager:
        return (
            CompositeImager(SCENE_SIZE, (45, 45, 45))
            .add_imager(
                ImageFileImager("bubblegum.png", Dimensions.square(45), platform=platform),
                Positions.center(),
            )
            .add_imager(
                TextImager("Bubblegum", 10, "monospace", (255, 100, 200), platform=platform),
                Positions.center_horizontal(55),
            )
        )
