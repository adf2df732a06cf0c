from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import Config
from .paths import find_config
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

# Process-wide configuration, installed once by the host before compiling files.
_CURRENT: Optional[Config] = None


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file and return a mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigurationError(f"cannot parse {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Path | None = None, *, root: Path | None = None) -> Config:
    """
    Resolve configuration from YAML.

    Args:
        path: Explicit config file. Must exist when given.
        root: Project root used to look up hbassets.yaml (or $HBASSETS_CONFIG)
              when no explicit path is given.

    Returns:
        Validated, immutable Config. Defaults when no file is found.
    """
    if path is None and root is not None:
        path = find_config(root)
    if path is None:
        logger.debug("No config file found, using defaults")
        return Config()
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug(f"Loading config from {path}")
    return Config.from_dict(_read_yaml_map(path))


def configure(config: Config | None) -> Config:
    """
    Install the process-wide configuration. Passing None restores defaults.
    Config itself is frozen, so whatever is installed here stays read-only.
    """
    global _CURRENT
    _CURRENT = config
    return current_config()


def current_config() -> Config:
    """Process-wide configuration (defaults until configure() is called)."""
    global _CURRENT
    if _CURRENT is None:
        _CURRENT = Config()
    return _CURRENT


__all__ = ["load_config", "configure", "current_config"]
