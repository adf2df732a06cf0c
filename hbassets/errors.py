"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from HBAssetsError.

Programming errors and bugs should NOT inherit from HBAssetsError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class HBAssetsError(Exception):
    """
    Base class for all user-facing errors in hbassets.

    These errors indicate problems that the user can fix:
    configuration issues, missing optional libraries, broken templates.
    """
    pass


class ConfigurationError(HBAssetsError):
    """Invalid configuration value, type or key. Raised while resolving Config."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        prefix = f"{key}: " if key else ""
        super().__init__(prefix + message)


class MissingPreprocessorError(HBAssetsError):
    """
    A template needs a preprocessor whose backing library is not installed.
    """

    def __init__(self, preprocessor: str, library: str):
        self.preprocessor = preprocessor
        self.library = library
        super().__init__(
            f"Template requires the '{preprocessor}' preprocessor, "
            f"but its library '{library}' is not available; install it to compile this file"
        )


class CompilationError(HBAssetsError):
    """The Handlebars precompiler rejected the markup or could not be run."""
    pass


__all__ = ["HBAssetsError", "ConfigurationError", "MissingPreprocessorError", "CompilationError"]
