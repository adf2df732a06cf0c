"""
Per-file entry point: markup in, registered-template JavaScript out.

Pipeline:
    paths → PathClassifier (TemplatePath)
    raw source → PreprocessDispatcher (Haml / Slim / as-is)
    markup → OutputComposer (compiler + code generation)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .compiler import NodeCompiler, TemplateCompiler
from .composer import compose
from .config import Config, current_config
from .paths import TemplatePath, classify, logical_path_for
from .preprocess import PreprocessDispatcher

__all__ = ["HandlebarsTemplate", "compile_template", "compile_file", "load_template"]

logger = logging.getLogger(__name__)


class HandlebarsTemplate:
    """One template file prepared for compilation."""

    default_mime_type = "application/javascript"

    def __init__(
            self,
            data: str,
            full_path: str | Path,
            logical_path: str,
            *,
            config: Config | None = None,
            compiler: TemplateCompiler | None = None,
            dispatcher: PreprocessDispatcher | None = None,
    ):
        self.data = data
        self.config = config or current_config()
        self.template_path: TemplatePath = classify(str(full_path), logical_path, self.config)
        self.compiler = compiler or NodeCompiler(self.config.compiler_command)
        self.dispatcher = dispatcher or PreprocessDispatcher(self.config)

    def render(self, scope: Any = None, locals: Optional[Mapping[str, Any]] = None) -> str:
        """
        Generate JavaScript registering this template.

        Args:
            scope: Host evaluation scope, forwarded to preprocessors
            locals: Local variables, forwarded to preprocessors

        Returns:
            Wrapped JavaScript source
        """
        source = self.dispatcher.render(self.data, self.template_path, scope, locals)
        return compose(source, self.template_path, self.config, self.compiler)


def compile_template(
        data: str,
        full_path: str | Path,
        logical_path: str,
        *,
        config: Config | None = None,
        compiler: TemplateCompiler | None = None,
        scope: Any = None,
        locals: Optional[Mapping[str, Any]] = None,
) -> str:
    """Functional shortcut for HandlebarsTemplate(...).render(...)."""
    tpl = HandlebarsTemplate(data, full_path, logical_path, config=config, compiler=compiler)
    return tpl.render(scope, locals)


def compile_file(
        path: Path,
        root: Path,
        *,
        config: Config | None = None,
        compiler: TemplateCompiler | None = None,
        locals: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Compile a template file from disk.
    The logical path is the file path relative to `root` with all extensions dropped.
    """
    template = load_template(path, root, config=config, compiler=compiler)
    return template.render(None, locals)


def load_template(
        path: Path,
        root: Path,
        *,
        config: Config | None = None,
        compiler: TemplateCompiler | None = None,
) -> HandlebarsTemplate:
    """Read a template file and classify it relative to the project root."""
    full = path.resolve()
    try:
        rel = full.relative_to(root.resolve()).as_posix()
    except ValueError:
        rel = full.name
    logger.debug(f"Loading template {full} (logical: {logical_path_for(rel)})")
    data = full.read_text(encoding="utf-8")
    return HandlebarsTemplate(data, full, logical_path_for(rel), config=config, compiler=compiler)
