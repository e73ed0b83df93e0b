"""Scenes and scene discovery."""

from holidaylights.scenes.base import CompositeScene, SCENE_SIZE
from holidaylights.scenes.bubblegum import BubblegumScene
from holidaylights.scenes.catalog import build_registry, default_scene_entries
from holidaylights.scenes.christmas_tree import ChristmasTreeScene
from holidaylights.scenes.default import DefaultScene
from holidaylights.scenes.loader import (
    AllScenesLoader,
    ModuleSceneLoader,
    iter_package_modules,
    select_scenes,
)
from holidaylights.scenes.plasma import PlasmaScene
from holidaylights.scenes.random_scene import RandomScene
from holidaylights.scenes.registry import SceneEntry, SceneFactory, SceneRegistry
from holidaylights.scenes.rotating_square import RotatingSquareScene
from holidaylights.scenes.snowfall import SnowfallScene
from holidaylights.scenes.tetris import TetrisScene
from holidaylights.scenes.text_scene import TextScene

__all__ = [
    # Discovery
    "SceneRegistry",
    "SceneEntry",
    "SceneFactory",
    "AllScenesLoader",
    "ModuleSceneLoader",
    "iter_package_modules",
    "select_scenes",
    "default_scene_entries",
    "build_registry",
    # Scenes
    "CompositeScene",
    "SCENE_SIZE",
    "DefaultScene",
    "BubblegumScene",
    "RandomScene",
    "TextScene",
    "ChristmasTreeScene",
    "RotatingSquareScene",
    "TetrisScene",
    "SnowfallScene",
    "PlasmaScene",
]
