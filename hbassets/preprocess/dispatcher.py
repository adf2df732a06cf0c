from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .registry import PreprocessorRegistry, default_registry
from ..config import Config, current_config
from ..errors import MissingPreprocessorError
from ..paths import TemplatePath

__all__ = ["PreprocessDispatcher"]

logger = logging.getLogger(__name__)


class PreprocessDispatcher:
    """
    Chooses zero or one preprocessor for a template and runs it.

    Haml and Slim variants are mutually exclusive by extension,
    so at most one preprocessor ever applies to a file.
    """

    def __init__(self, config: Config | None = None, registry: PreprocessorRegistry | None = None):
        self.config = config or current_config()
        self.registry = registry or default_registry

    def render(
            self,
            source: str,
            template_path: TemplatePath,
            scope: Any = None,
            locals: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Return plain Handlebars markup for the file.

        Raises:
            MissingPreprocessorError: the file needs a preprocessor whose library is not installed
        """
        name = template_path.preprocessor
        if name is None:
            return source

        missing = self.registry.missing_library(name)
        if missing is not None:
            raise MissingPreprocessorError(name, missing)

        logger.debug(f"Preprocessing {template_path.full_path} with '{name}'")
        preprocessor = self.registry.resolve(name)(self.config.preprocessor_options(name))
        return preprocessor.render(source, scope, locals)
