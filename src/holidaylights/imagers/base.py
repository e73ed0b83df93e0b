"""The Imager capability: anything that produces a Matrix for a frame."""

from abc import ABC, abstractmethod
from typing import Optional

from holidaylights.model.matrix import Matrix


class Imager(ABC):
    """Produces a Matrix for a given frame.

    Implementations may cache internal state (a loaded image, a game
    board) but carry no other lifecycle. `get_matrix` must never block
    and never raise for missing assets.
    """

    # Human-readable name, used in logs and scene selection
    name: str = "imager"

    @abstractmethod
    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        """
        Render one frame.

        Args:
            frame: Frame index, 0 <= frame < max_frames of the driver
            previous_matrix: Matrix returned for the previous frame, or
                None for the first frame of a scene

        Returns:
            The Matrix for this frame
        """
        ...
