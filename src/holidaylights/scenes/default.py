"""Default scene: logo image, caption, and a noise patch in the corner."""

from holidaylights.graphics.position import Positions
from holidaylights.imagers import CompositeImager, ImageFileImager, Imager, RandomImage, TextImager
from holidaylights.model.cell import BLACK
from holidaylights.model.dimensions import Dimensions
from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.base import SCENE_SIZE, CompositeScene


class DefaultScene(CompositeScene):
    """
    Starting point for new scenes.

    Layers, bottom to top:
    - bubblegum.png scaled into 45x45, centered
    - "DevTalk" in green, centered horizontally at y=53
    - 15x15 random pixels at the top-left corner
    """

    name = "default"

    def compose(self, platform: PlatformContext) -> Imager:
        return (
            CompositeImager(SCENE_SIZE, BLACK)
            .add_imager(
                ImageFileImager("bubblegum.png", Dimensions.square(45), platform=platform),
                Positions.center(),
            )
            .add_imager(
                TextImager("DevTalk", 12, "monospace", (0, 255, 0), platform=platform),
                Positions.center_horizontal(53),
            )
            .add_imager(
                RandomImage(Dimensions.square(15)),
                Positions.static(0, 0),
            )
        )
