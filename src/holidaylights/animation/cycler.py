"""Multi-scene playback on top of an AnimationController."""

import logging
from typing import Callable, List, Optional, Sequence

from holidaylights.animation.controller import AnimationController
from holidaylights.core.errors import EmptySceneSet
from holidaylights.imagers.base import Imager
from holidaylights.model.matrix import Matrix

logger = logging.getLogger(__name__)

MatrixCallback = Callable[[Matrix], None]


def scene_name(imager: Imager) -> str:
    return getattr(imager, "name", type(imager).__name__)


class SceneCycler:
    """Renders the current scene on every frame and rotates scenes.

    When the frame wraps to 0 and cycling is enabled with more than one
    scene, the next scene becomes current and starts without a previous
    matrix. Each rendered Matrix is published to `on_matrix` subscribers.
    """

    def __init__(
        self,
        imagers: Sequence[Imager],
        controller: AnimationController,
        cycling: bool = True,
    ) -> None:
        if not imagers:
            raise EmptySceneSet()

        self.imagers: List[Imager] = list(imagers)
        self.controller = controller
        self.cycling = cycling

        self._index = 0
        self._previous: Optional[Matrix] = None
        self._matrix: Optional[Matrix] = None
        self._subscribers: List[MatrixCallback] = []
        self._unsubscribe = controller.subscribe(self._on_frame)

        logger.info(f"Cycling {len(self.imagers)} scenes, starting with {scene_name(self.current_scene)}")

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_scene(self) -> Imager:
        return self.imagers[self._index]

    @property
    def matrix(self) -> Optional[Matrix]:
        """Most recently rendered Matrix, or None before the first frame."""
        return self._matrix

    def on_matrix(self, callback: MatrixCallback) -> Callable[[], None]:
        """
        Subscribe to rendered frames.

        Subscribing the same callback again has no effect.

        Returns:
            Unsubscribe function
        """
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_current_scene(self, index: int) -> None:
        """Jump to a scene; it starts without a previous matrix."""
        if not 0 <= index < len(self.imagers):
            raise IndexError(f"Scene index {index} out of range (0..{len(self.imagers) - 1})")
        self._index = index
        self._previous = None
        logger.info(f"Scene set to {scene_name(self.current_scene)}")

    def render(self, frame: int) -> Matrix:
        """Render the current scene for `frame` and publish the result."""
        matrix = self.current_scene.get_matrix(frame, self._previous)
        self._previous = matrix
        self._matrix = matrix

        for callback in list(self._subscribers):
            callback(matrix)
        return matrix

    def close(self) -> None:
        """Detach from the controller."""
        self._unsubscribe()

    def _on_frame(self, frame: int) -> None:
        if frame == 0 and self.cycling and len(self.imagers) > 1:
            self._index = (self._index + 1) % len(self.imagers)
            self._previous = None
            logger.info(f"Next scene: {scene_name(self.current_scene)}")

        self.render(frame)
