from __future__ import annotations

from typing import Any, Mapping, Optional

from .base import BasePreprocessor

__all__ = ["HamlPreprocessor"]


class HamlPreprocessor(BasePreprocessor):
    """*.hamlbars → Handlebars markup via HamlPy."""
    name = "haml"

    def render(self, source: str, scope: Any = None, locals: Optional[Mapping[str, Any]] = None) -> str:
        # HamlPy produces markup only; mustache tags pass through untouched, locals are not evaluated
        from hamlpy.compiler import Compiler

        return Compiler(options=self.options).process(source)
