"""Two lines of greeting text."""

from holidaylights.graphics.position import Positions
from holidaylights.imagers import CompositeImager, Imager, TextImager
from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.base import SCENE_SIZE, CompositeScene


class TextScene(CompositeScene):
    name = "text"

    def compose(self, platform: PlatformContext) -> Imager:
        return (
            CompositeImager(SCENE_SIZE, (20, 20, 40))
            .add_imager(
                TextImager("Hello", 20, "serif", (255, 200, 50), platform=platform),
                Positions.center(),
            )
            .add_imager(
                TextImager("World!", 12, "monospace", (50, 200, 255), platform=platform),
                Positions.center_horizontal(50),
            )
        )
