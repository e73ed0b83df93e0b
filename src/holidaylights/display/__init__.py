"""Display sinks at the render boundary."""

from holidaylights.display.base import Display
from holidaylights.display.buffer import BufferDisplay
from holidaylights.display.simulator import PygameDisplay

__all__ = [
    "Display",
    "BufferDisplay",
    "PygameDisplay",
]
