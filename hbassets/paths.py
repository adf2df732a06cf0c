"""
Classification of template files by their location.

A template is described by two paths supplied by the host pipeline:
the absolute file path (carries the real extensions) and the logical path
(project-relative, extensions already dropped). Everything the compiler needs
to know about a file is derived from these two strings once per invocation.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Optional

from .config import Config, current_config

HAML_EXT = ".hamlbars"
SLIM_EXT = ".slimbars"
TEMPLATE_EXTS = (".hbs", ".handlebars", HAML_EXT, SLIM_EXT)

# ".ember" marker right before the final template suffix (or at the very end)
_EMBER_RE = re.compile(r"\.ember(?:" + "|".join(re.escape(e) for e in TEMPLATE_EXTS) + r")?$")


@dataclass(frozen=True)
class TemplatePath:
    """Facts about one template file, derived from its paths."""
    full_path: str
    logical_path: str
    is_haml: bool
    is_slim: bool
    is_partial: bool
    is_ember: bool
    relative_path: str  # logical path without the configured prefix
    name: str           # relative_path as a double-quoted JS string literal

    @property
    def preprocessor(self) -> Optional[str]:
        """'haml' | 'slim' | None"""
        if self.is_haml:
            return "haml"
        if self.is_slim:
            return "slim"
        return None

    def to_dict(self) -> dict:
        return {
            "full_path": self.full_path,
            "logical_path": self.logical_path,
            "is_haml": self.is_haml,
            "is_slim": self.is_slim,
            "is_partial": self.is_partial,
            "is_ember": self.is_ember,
            "relative_path": self.relative_path,
            "name": self.name,
        }


def is_partial(logical_path: str) -> bool:
    """True if the last path segment starts with an underscore."""
    return logical_path.rsplit("/", 1)[-1].startswith("_")


def is_ember(full_path: str) -> bool:
    return _EMBER_RE.search(full_path) is not None


def strip_prefix(logical_path: str, prefix: str) -> str:
    """
    Remove "<prefix>/" from the start of the logical path (case-insensitive).
    Paths outside the prefix are returned unchanged.
    """
    prefix = prefix.strip("/")
    if not prefix:
        return logical_path
    m = re.match(re.escape(prefix) + r"/(.*)\Z", logical_path, re.IGNORECASE | re.DOTALL)
    return m.group(1) if m else logical_path


def _chomp_partial_underscore(path: str) -> str:
    head, sep, tail = path.rpartition("/")
    return head + sep + tail[1:] if tail.startswith("_") else path


def js_string(value: str) -> str:
    """Double-quoted, escape-safe JavaScript string literal."""
    # ensure_ascii also escapes U+2028/U+2029, which are not valid inside older JS literals
    return json.dumps(value, ensure_ascii=True)


def classify(full_path: str, logical_path: str, config: Config | None = None) -> TemplatePath:
    """
    Derive a TemplatePath from the absolute and logical paths.

    Never raises for unusual input: paths without separators or known
    extensions just don't get any special classification.
    """
    cfg = config or current_config()
    full_path = str(full_path or "")
    logical_path = str(logical_path or "")

    partial = is_partial(logical_path)
    relative = strip_prefix(logical_path, cfg.path_prefix)
    if partial and cfg.chomp_underscore_for_partials:
        relative = _chomp_partial_underscore(relative)

    return TemplatePath(
        full_path=full_path,
        logical_path=logical_path,
        is_haml=full_path.endswith(HAML_EXT),
        is_slim=full_path.endswith(SLIM_EXT),
        is_partial=partial,
        is_ember=is_ember(full_path),
        relative_path=relative,
        name=js_string(relative),
    )


def logical_path_for(rel_path: str) -> str:
    """
    Logical path of a project-relative file: POSIX separators,
    every extension of the final segment dropped ("a/_row.ember.hbs" → "a/_row").
    """
    rel_path = rel_path.replace("\\", "/")
    head, sep, tail = rel_path.rpartition("/")
    # a leading dot belongs to the name, not to an extension
    dot = tail.find(".", 1)
    if dot > 0:
        tail = tail[:dot]
    return head + sep + tail


__all__ = [
    "TemplatePath",
    "classify",
    "is_partial",
    "is_ember",
    "strip_prefix",
    "js_string",
    "logical_path_for",
    "HAML_EXT",
    "SLIM_EXT",
    "TEMPLATE_EXTS",
]
