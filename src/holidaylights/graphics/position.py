"""Layout rules that place a layer inside its container.

A Position is one of four frozen variants. `calculate` dispatches on the
variant with a match statement; adding a variant without a case raises
immediately instead of silently placing the layer at the origin.
"""

from dataclasses import dataclass
from typing import Union

from holidaylights.model.dimensions import Coordinates, Dimensions


@dataclass(frozen=True)
class StaticPosition:
    """Fixed x/y origin."""
    x: int
    y: int


@dataclass(frozen=True)
class CenterHorizontalPosition:
    """Centered on the x axis at a fixed y."""
    y: int


@dataclass(frozen=True)
class CenterVerticalPosition:
    """Centered on the y axis at a fixed x."""
    x: int


@dataclass(frozen=True)
class CenterPosition:
    """Centered on both axes."""


Position = Union[StaticPosition, CenterHorizontalPosition, CenterVerticalPosition, CenterPosition]


def calculate(position: Position, container: Dimensions, element: Dimensions) -> Coordinates:
    """Compute the origin of `element` inside `container`.

    Centering floors the remainder, so on odd differences the element
    sits one pixel closer to the top/left.
    """
    match position:
        case StaticPosition(x=x, y=y):
            return Coordinates(x, y)
        case CenterHorizontalPosition(y=y):
            return Coordinates(container.center_offset(element).x, y)
        case CenterVerticalPosition(x=x):
            return Coordinates(x, container.center_offset(element).y)
        case CenterPosition():
            return container.center_offset(element)
        case _:
            raise TypeError(f"Unknown position variant: {position!r}")


# Factory helpers, read as Positions.center(), Positions.static(0, 0), ...
class Positions:
    """Constructors for the Position variants."""

    @staticmethod
    def static(x: int, y: int) -> StaticPosition:
        return StaticPosition(x, y)

    @staticmethod
    def center_horizontal(y: int) -> CenterHorizontalPosition:
        return CenterHorizontalPosition(y)

    @staticmethod
    def center_vertical(x: int) -> CenterVerticalPosition:
        return CenterVerticalPosition(x)

    @staticmethod
    def center() -> CenterPosition:
        return CenterPosition()
