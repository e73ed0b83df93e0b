"""The ordered list of built-in scenes."""

from functools import partial
from typing import List

from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.bubblegum import BubblegumScene
from holidaylights.scenes.christmas_tree import ChristmasTreeScene
from holidaylights.scenes.default import DefaultScene
from holidaylights.scenes.plasma import PlasmaScene
from holidaylights.scenes.random_scene import RandomScene
from holidaylights.scenes.registry import SceneEntry, SceneRegistry
from holidaylights.scenes.rotating_square import RotatingSquareScene
from holidaylights.scenes.snowfall import SnowfallScene
from holidaylights.scenes.tetris import TetrisScene
from holidaylights.scenes.text_scene import TextScene


def default_scene_entries(platform: PlatformContext) -> List[SceneEntry]:
    """Built-in scenes in playback order.

    New scenes are added here; there is no import-time registration.
    """
    return [
        SceneEntry(DefaultScene.name, partial(DefaultScene, platform)),
        SceneEntry(ChristmasTreeScene.name, ChristmasTreeScene),
        SceneEntry(RotatingSquareScene.name, RotatingSquareScene),
        SceneEntry(TetrisScene.name, TetrisScene),
        SceneEntry(BubblegumScene.name, partial(BubblegumScene, platform)),
        SceneEntry(RandomScene.name, partial(RandomScene, platform)),
        SceneEntry(TextScene.name, partial(TextScene, platform)),
        SceneEntry(SnowfallScene.name, SnowfallScene),
        SceneEntry(PlasmaScene.name, PlasmaScene),
    ]


def build_registry(platform: PlatformContext) -> SceneRegistry:
    return SceneRegistry(default_scene_entries(platform))
