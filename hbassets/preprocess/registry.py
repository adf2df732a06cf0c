from __future__ import annotations

import importlib
import importlib.util
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

from .base import BasePreprocessor

__all__ = ["PreprocessorRegistry", "default_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _LazySpec:
    name: str
    module: str
    class_name: str
    libraries: Tuple[str, ...]


class PreprocessorRegistry:
    """
    Lazy registry of preprocessors.

    Preprocessors are declared by strings (module:class) together with the
    third-party libraries backing them. Nothing is imported at registration:
    library availability is probed once, on first demand, and cached as a flag.
    """

    def __init__(self):
        self._specs: Dict[str, _LazySpec] = {}
        self._classes: Dict[str, Type[BasePreprocessor]] = {}
        self._available: Dict[str, Optional[str]] = {}  # name → missing library (None if all present)

    def register_lazy(self, *, name: str, module: str, class_name: str, libraries: List[str] | Tuple[str, ...]) -> None:
        """Declare a preprocessor without importing its module."""
        self._specs[name] = _LazySpec(name=name, module=module, class_name=class_name, libraries=tuple(libraries))
        self._classes.pop(name, None)
        self._available.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._specs)

    def probe(self) -> Dict[str, bool]:
        """Check availability of every registered preprocessor. Returns name → available."""
        return {name: self.missing_library(name) is None for name in self._specs}

    def missing_library(self, name: str) -> Optional[str]:
        """First library of the preprocessor that cannot be imported, or None."""
        if name not in self._available:
            spec = self._spec(name)
            missing = None
            for lib in spec.libraries:
                if not _library_present(lib):
                    missing = lib
                    logger.warning(f"Preprocessor '{name}' disabled: library '{lib}' not found")
                    break
            self._available[name] = missing
        return self._available[name]

    def is_available(self, name: str) -> bool:
        return self.missing_library(name) is None

    def resolve(self, name: str) -> Type[BasePreprocessor]:
        """Return the preprocessor CLASS by name, importing its module on first use."""
        cls = self._classes.get(name)
        if cls is not None:
            return cls
        spec = self._spec(name)
        # Both relative (".haml") and absolute module names are supported.
        mod = importlib.import_module(spec.module, package=__package__)
        cls = getattr(mod, spec.class_name, None)
        if cls is None:
            raise RuntimeError(f"Preprocessor class '{spec.class_name}' not found in {spec.module}")
        if not issubclass(cls, BasePreprocessor):
            raise TypeError(f"{spec.module}.{spec.class_name} is not a subclass of BasePreprocessor")
        self._classes[name] = cls
        return cls

    def _spec(self, name: str) -> _LazySpec:
        spec = self._specs.get(name)
        if spec is None:
            raise KeyError(f"Unknown preprocessor '{name}'")
        return spec


def _library_present(lib: str) -> bool:
    try:
        return importlib.util.find_spec(lib) is not None
    except (ImportError, ValueError):
        return False


default_registry = PreprocessorRegistry()
