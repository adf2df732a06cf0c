from __future__ import annotations

# Public API of preprocess package:
#  • PreprocessDispatcher: picks and runs the preprocessor for a template
#  • default_registry: lazily registered built-in preprocessors
from .base import BasePreprocessor
from .dispatcher import PreprocessDispatcher
from .registry import PreprocessorRegistry, default_registry

__all__ = ["BasePreprocessor", "PreprocessDispatcher", "PreprocessorRegistry", "default_registry", "probe_preprocessors"]

# ---- Lightweight (lazy) registration of built-in preprocessors ---------------
# Backing libraries are optional; they are only looked up when probed.
default_registry.register_lazy(name="haml", module=".haml", class_name="HamlPreprocessor", libraries=["hamlpy"])
default_registry.register_lazy(name="slim", module=".slim", class_name="SlimPreprocessor", libraries=["plim", "mako"])


def probe_preprocessors() -> dict:
    """Availability of built-in preprocessors: name → bool."""
    return default_registry.probe()
