"""
Unified test infrastructure for hbassets.

Modules:
- file_utils: Utilities for creating template files
- config_builders: hbassets.yaml builders
- testing_utils: Stub compiler and fake preprocessors
- cli_utils: Running the CLI in tests
"""

from .file_utils import write, write_template
from .config_builders import create_config_yaml
from .testing_utils import StubCompiler, RecordingPreprocessor, fake_registry, COMPILED
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write", "write_template",

    # Config builders
    "create_config_yaml",

    # Testing utilities
    "StubCompiler", "RecordingPreprocessor", "fake_registry", "COMPILED",

    # CLI utilities
    "run_cli", "jload",
]
