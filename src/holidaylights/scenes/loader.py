"""
Scene discovery strategies.

Two interchangeable ways to produce the runtime scene list:
- AllScenesLoader: instantiate the entries of an explicit SceneRegistry
- ModuleSceneLoader: reflectively instantiate every Imager class whose
  name matches a pattern in modules supplied by an enumerator function
"""

import importlib
import inspect
import logging
import pkgutil
import re
from types import ModuleType
from typing import Callable, Dict, Iterable, List, Optional

from holidaylights.core.errors import (
    ConfigurationMissing,
    EmptySceneSet,
    SceneInstantiationFailure,
)
from holidaylights.imagers.base import Imager
from holidaylights.platform.context import PlatformContext
from holidaylights.scenes.registry import SceneRegistry

logger = logging.getLogger(__name__)

ModuleEnumerator = Callable[[], Dict[str, ModuleType]]


class AllScenesLoader:
    """Loads every scene registered in a SceneRegistry."""

    def __init__(self, registry: SceneRegistry) -> None:
        self.registry = registry
        self._imagers = registry.get_all()
        logger.info(f"Loaded {len(self._imagers)} scenes from registry")

    def get_imagers(self) -> List[Imager]:
        return list(self._imagers)


class ModuleSceneLoader:
    """Instantiates scene classes found in enumerated modules.

    A class qualifies when it is defined in the module, is a concrete
    Imager subclass, and its name matches `pattern`. Classes a module
    only imports (the catalog imports every scene) are skipped so each
    scene is built once, by the module that defines it. Constructors
    that take a `platform` argument receive the context.
    """

    def __init__(
        self,
        module_enumerator: ModuleEnumerator,
        pattern: str = r"Scene$",
        platform: Optional[PlatformContext] = None,
    ) -> None:
        self.pattern = re.compile(pattern)
        self.platform = platform
        self._imagers = self._load(module_enumerator())
        logger.info(f"Discovered {len(self._imagers)} scenes")

    def get_imagers(self) -> List[Imager]:
        return list(self._imagers)

    def _scene_classes(self, module: ModuleType) -> List[type]:
        classes = []
        for export_name, obj in vars(module).items():
            if not inspect.isclass(obj) or obj.__module__ != module.__name__:
                continue
            if not self.pattern.search(export_name):
                continue
            if not issubclass(obj, Imager) or inspect.isabstract(obj):
                continue
            classes.append(obj)
        return classes

    def _instantiate(self, cls: type) -> Imager:
        try:
            params = inspect.signature(cls).parameters
        except (TypeError, ValueError):
            params = {}
        if "platform" in params:
            return cls(platform=self.platform)
        return cls()

    def _load(self, modules: Dict[str, ModuleType]) -> List[Imager]:
        imagers: List[Imager] = []
        for path in sorted(modules):
            for cls in self._scene_classes(modules[path]):
                try:
                    imagers.append(self._instantiate(cls))
                except ConfigurationMissing:
                    raise
                except Exception as e:
                    logger.warning(str(SceneInstantiationFailure(cls.__name__, e)))
        return imagers


def iter_package_modules(package: ModuleType) -> ModuleEnumerator:
    """Build an enumerator that imports every module of a package."""

    def enumerate_modules() -> Dict[str, ModuleType]:
        modules: Dict[str, ModuleType] = {}
        for info in pkgutil.iter_modules(package.__path__, prefix=f"{package.__name__}."):
            if info.ispkg:
                continue
            modules[info.name] = importlib.import_module(info.name)
        return modules

    return enumerate_modules


def select_scenes(imagers: Iterable[Imager], names: Optional[List[str]]) -> List[Imager]:
    """Restrict and order scenes by name.

    With no names every scene is kept in discovery order. Unknown names
    are logged and ignored.

    Raises:
        EmptySceneSet: If nothing is left after selection
    """
    imagers = list(imagers)
    if names:
        by_name = {getattr(imager, "name", type(imager).__name__): imager for imager in imagers}
        selected = []
        for name in names:
            if name in by_name:
                selected.append(by_name[name])
            else:
                logger.warning(f"Unknown scene: {name} (available: {', '.join(by_name)})")
        imagers = selected

    if not imagers:
        raise EmptySceneSet()
    return imagers
