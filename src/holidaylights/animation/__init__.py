"""Frame timing and scene playback."""

from holidaylights.animation.controller import AnimationController, FrameCallback
from holidaylights.animation.cycler import SceneCycler, MatrixCallback

__all__ = [
    "AnimationController",
    "FrameCallback",
    "SceneCycler",
    "MatrixCallback",
]
