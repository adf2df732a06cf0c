"""
Configuration model for the template compiler.

Config is resolved once at startup (from YAML or built directly) and is
immutable afterwards: every field is read-only and mappings are copied on load.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from ..errors import ConfigurationError

# Dotted JS identifier path: "HandlebarsTemplates", "App.templates"
_NAMESPACE_RE = re.compile(r"^[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*$")


def _frozen_map(data: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class Config:
    """Process-wide compiler settings."""
    amd: bool = False
    ember: bool = False
    multiple_frameworks: bool = False
    template_namespace: str = "HandlebarsTemplates"
    path_prefix: str = "templates"
    amd_path: str = "handlebars"
    haml_options: Mapping[str, Any] = field(default_factory=_frozen_map)
    slim_options: Mapping[str, Any] = field(default_factory=_frozen_map)
    known_helpers: Tuple[str, ...] = ()
    known_helpers_only: bool = False
    chomp_underscore_for_partials: bool = False
    compiler_command: Tuple[str, ...] = ("node",)

    def __post_init__(self):
        if not _NAMESPACE_RE.match(self.template_namespace or ""):
            raise ConfigurationError(
                f"expected a dotted identifier, got {self.template_namespace!r}", "template_namespace"
            )
        # amd_path is spliced into a single-quoted JS literal
        if not self.amd_path or any(ch in self.amd_path for ch in "'\\\n\r"):
            raise ConfigurationError(f"invalid module id {self.amd_path!r}", "amd_path")
        if not self.compiler_command:
            raise ConfigurationError("must not be empty", "compiler_command")
        object.__setattr__(self, "haml_options", _frozen_map(self.haml_options))
        object.__setattr__(self, "slim_options", _frozen_map(self.slim_options))
        object.__setattr__(self, "known_helpers", tuple(self.known_helpers))
        object.__setattr__(self, "compiler_command", tuple(self.compiler_command))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Create an instance from a dictionary (from YAML), validating keys and types."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"config must be a mapping, got {type(data).__name__}")

        allowed = {f.name for f in fields(cls)}
        extras = set(data.keys()) - allowed
        if extras:
            raise ConfigurationError(f"unexpected keys: {sorted(extras)!r}")

        kwargs: Dict[str, Any] = {}
        for key in ("amd", "ember", "multiple_frameworks", "known_helpers_only", "chomp_underscore_for_partials"):
            if key in data:
                kwargs[key] = _expect(key, data[key], bool)
        for key in ("template_namespace", "path_prefix", "amd_path"):
            if key in data:
                kwargs[key] = _expect(key, data[key], str)
        for key in ("haml_options", "slim_options"):
            if key in data:
                value = data[key]
                if value is None:
                    value = {}
                kwargs[key] = _expect(key, value, Mapping)
        for key in ("known_helpers", "compiler_command"):
            if key in data:
                kwargs[key] = tuple(_str_list(key, data[key]))

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialization to a plain dictionary (for reports)."""
        return {
            "amd": self.amd,
            "ember": self.ember,
            "multiple_frameworks": self.multiple_frameworks,
            "template_namespace": self.template_namespace,
            "path_prefix": self.path_prefix,
            "amd_path": self.amd_path,
            "haml_options": dict(self.haml_options),
            "slim_options": dict(self.slim_options),
            "known_helpers": list(self.known_helpers),
            "known_helpers_only": self.known_helpers_only,
            "chomp_underscore_for_partials": self.chomp_underscore_for_partials,
            "compiler_command": list(self.compiler_command),
        }

    def compiler_options(self) -> Dict[str, Any]:
        """Options passed to Handlebars.precompile()."""
        options: Dict[str, Any] = {}
        if self.known_helpers_only:
            options["knownHelpersOnly"] = True
        if self.known_helpers:
            options["knownHelpers"] = {name: True for name in self.known_helpers}
        return options

    def preprocessor_options(self, name: str) -> Mapping[str, Any]:
        """Opaque option block for the named preprocessor ('haml' | 'slim')."""
        if name == "haml":
            return self.haml_options
        if name == "slim":
            return self.slim_options
        return _frozen_map(None)


def _expect(key: str, value: Any, typ: type) -> Any:
    if not isinstance(value, typ):
        raise ConfigurationError(f"expected {typ.__name__}, got {type(value).__name__}", key)
    return value


def _str_list(key: str, value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError("expected a list of strings", key)
    return list(value)


__all__ = ["Config"]
