"""Width/height and x/y value types."""

from typing import NamedTuple
from dataclasses import dataclass


class Coordinates(NamedTuple):
    """An x/y offset in matrix pixels."""
    x: int
    y: int


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a matrix or of an element placed on one."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be non-negative, got {self.width}x{self.height}")

    @classmethod
    def of(cls, width: int, height: int) -> "Dimensions":
        return cls(width, height)

    @classmethod
    def square(cls, size: int) -> "Dimensions":
        """Create square dimensions."""
        return cls(size, size)

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside these dimensions."""
        return 0 <= x < self.width and 0 <= y < self.height

    def center_offset(self, element: "Dimensions") -> Coordinates:
        """Offset that centers `element` inside these dimensions.

        Odd remainders are floored, so the spare pixel goes to the
        bottom/right and the element leans top/left.
        """
        return Coordinates(
            (self.width - element.width) // 2,
            (self.height - element.height) // 2,
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
