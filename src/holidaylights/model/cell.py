"""A single LED: color plus brightness."""

from typing import Tuple
from dataclasses import dataclass, replace

# Type aliases
Color = Tuple[int, int, int]

# Black doubles as "do not draw" during compositing
BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

MAX_BRIGHTNESS = 255


@dataclass(frozen=True)
class Cell:
    """One pixel of the matrix.

    Attributes:
        color: RGB triple, each channel 0-255
        brightness: 0 (off) to 255 (full), applied only at display time
    """

    color: Color = BLACK
    brightness: int = MAX_BRIGHTNESS

    def __post_init__(self) -> None:
        # Normalize numpy scalars and lists so equality with BLACK holds
        r, g, b = self.color
        object.__setattr__(self, "color", (int(r), int(g), int(b)))
        object.__setattr__(self, "brightness", int(self.brightness))

        if not all(0 <= channel <= 255 for channel in self.color):
            raise ValueError(f"Color channels must be 0-255, got {self.color}")
        if not 0 <= self.brightness <= MAX_BRIGHTNESS:
            raise ValueError(f"Brightness must be 0-{MAX_BRIGHTNESS}, got {self.brightness}")

    def with_color(self, color: Color) -> "Cell":
        return replace(self, color=color)

    def with_brightness(self, brightness: int) -> "Cell":
        return replace(self, brightness=brightness)

    @property
    def is_transparent(self) -> bool:
        """True when the compositor should skip this cell."""
        return self.color == BLACK


# Shared default; cells are immutable so one instance is enough
BLACK_CELL = Cell(BLACK, MAX_BRIGHTNESS)
