"""
Selection of the output wrapper and assembly of the final JavaScript.
"""

from __future__ import annotations

import enum
import logging

from . import codegen
from .compiler import TemplateCompiler
from .config import Config
from .paths import TemplatePath

__all__ = ["Shape", "uses_framework", "select_shape", "compose"]

logger = logging.getLogger(__name__)


class Shape(str, enum.Enum):
    """Wrapper shapes of generated code."""
    FRAMEWORK = "framework"
    PARTIAL = "partial"
    TEMPLATE = "template"
    AMD_PARTIAL = "amd_partial"
    AMD_TEMPLATE = "amd_template"


def uses_framework(template_path: TemplatePath, config: Config) -> bool:
    """
    Framework (Ember) routing, first matching rule wins:
      • multiple frameworks: only files marked .ember
      • single framework: every file
      • otherwise: none
    """
    if config.multiple_frameworks and config.ember:
        return template_path.is_ember
    return config.ember


def select_shape(template_path: TemplatePath, config: Config) -> Shape:
    if uses_framework(template_path, config):
        return Shape.FRAMEWORK
    if template_path.is_partial:
        return Shape.AMD_PARTIAL if config.amd else Shape.PARTIAL
    return Shape.AMD_TEMPLATE if config.amd else Shape.TEMPLATE


def compose(source: str, template_path: TemplatePath, config: Config, compiler: TemplateCompiler) -> str:
    """
    Produce wrapped JavaScript for plain Handlebars markup.

    The framework wrapper embeds the markup itself; every other shape
    runs the compiler first. Compiler errors propagate unchanged.
    """
    shape = select_shape(template_path, config)
    logger.debug(f"{template_path.logical_path}: {shape.value} wrapper")

    if shape is Shape.FRAMEWORK:
        return codegen.framework_template(template_path.name, source)

    compiled = compiler.compile(source, config.compiler_options())

    if shape is Shape.PARTIAL:
        return codegen.partial(template_path.name, compiled)
    if shape is Shape.AMD_PARTIAL:
        return codegen.amd_partial(codegen.partial(template_path.name, compiled), config.amd_path)
    if shape is Shape.AMD_TEMPLATE:
        return codegen.amd_template(compiled, config.amd_path)
    return codegen.template(template_path.name, compiled, config.template_namespace)
