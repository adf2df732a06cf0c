from __future__ import annotations

from typing import Any, Mapping, Optional

from .base import BasePreprocessor

__all__ = ["SlimPreprocessor"]


class SlimPreprocessor(BasePreprocessor):
    """*.slimbars → Handlebars markup via Plim (Slim syntax on top of Mako)."""
    name = "slim"

    def render(self, source: str, scope: Any = None, locals: Optional[Mapping[str, Any]] = None) -> str:
        from mako.template import Template
        from plim import preprocessor

        mako_source = preprocessor(source)
        return Template(mako_source, **self.options).render(**dict(locals or {}))
