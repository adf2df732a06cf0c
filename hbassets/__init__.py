from __future__ import annotations

# Public API:
#  • HandlebarsTemplate / compile_template / compile_file: per-file compilation
#  • classify: path classification without compiling
#  • Config, load_config, configure: process-wide configuration
from .compiler import NodeCompiler, TemplateCompiler
from .config import Config, configure, current_config, load_config
from .engine import HandlebarsTemplate, compile_file, compile_template
from .errors import CompilationError, ConfigurationError, HBAssetsError, MissingPreprocessorError
from .paths import TemplatePath, classify

__all__ = [
    "HandlebarsTemplate",
    "compile_template",
    "compile_file",
    "classify",
    "TemplatePath",
    "Config",
    "load_config",
    "configure",
    "current_config",
    "TemplateCompiler",
    "NodeCompiler",
    "HBAssetsError",
    "ConfigurationError",
    "MissingPreprocessorError",
    "CompilationError",
]
