from __future__ import annotations

from typing import Any, Mapping, Optional

__all__ = ["BasePreprocessor"]


class BasePreprocessor:
    """Base class of a markup preprocessor (Haml-like, Slim-like, ...)."""
    #: Preprocessor name, matches the option block in Config ('haml', 'slim')
    name: str = "base"

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        self.options = dict(options or {})

    def render(self, source: str, scope: Any = None, locals: Optional[Mapping[str, Any]] = None) -> str:
        """
        Turn preprocessor markup into plain Handlebars markup.

        Args:
            source: Raw file contents
            scope: Host evaluation scope (opaque)
            locals: Local variables supplied by the host

        Returns:
            Handlebars markup
        """
        raise NotImplementedError
