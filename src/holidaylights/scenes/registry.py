"""
Scene registry.

Holds an ordered, append-only list of scene factories. Startup code
registers every entry explicitly; nothing registers itself on import.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from holidaylights.core.errors import (
    ConfigurationMissing,
    EmptySceneSet,
    SceneInstantiationFailure,
)
from holidaylights.imagers.base import Imager

logger = logging.getLogger(__name__)

SceneFactory = Callable[[], Imager]


@dataclass(frozen=True)
class SceneEntry:
    """A named scene constructor."""

    name: str
    factory: SceneFactory


class SceneRegistry:
    """Ordered collection of scene factories.

    `get_all` builds a fresh instance from every factory. A factory that
    raises is logged and skipped so one broken scene never blocks the rest.
    """

    def __init__(self, entries: Optional[Iterable[SceneEntry]] = None) -> None:
        self._entries: List[SceneEntry] = []
        if entries is not None:
            self.register_all(entries)

    def register(self, factory: SceneFactory, name: Optional[str] = None) -> None:
        """Append a scene factory."""
        if name is None:
            name = getattr(factory, "__name__", repr(factory))
        self._entries.append(SceneEntry(name, factory))
        logger.debug(f"Registered scene: {name}")

    def register_all(self, entries: Iterable[SceneEntry]) -> None:
        """Append entries in order."""
        for entry in entries:
            self.register(entry.factory, entry.name)

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def get_all(self) -> List[Imager]:
        """Instantiate every registered scene, in registration order."""
        scenes: List[Imager] = []
        for entry in self._entries:
            try:
                scenes.append(entry.factory())
            except ConfigurationMissing:
                raise  # Bootstrap bug, not a broken scene
            except Exception as e:
                failure = SceneInstantiationFailure(entry.name, e)
                logger.warning(str(failure))
        return scenes

    def require_all(self) -> List[Imager]:
        """Like get_all, but raises EmptySceneSet when nothing could be built."""
        scenes = self.get_all()
        if not scenes:
            raise EmptySceneSet()
        return scenes

    def count(self) -> int:
        """Number of registered factories (not of successful instances)."""
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
