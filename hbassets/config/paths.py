from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Single source of truth for configuration file location.
CONFIG_FILE = "hbassets.yaml"
CONFIG_ENV = "HBASSETS_CONFIG"


def config_path(root: Path) -> Path:
    """Path to the project configuration file <root>/hbassets.yaml."""
    return (root / CONFIG_FILE).resolve()


def find_config(root: Path) -> Optional[Path]:
    """
    Locate the configuration file for a project.
    $HBASSETS_CONFIG wins over <root>/hbassets.yaml; None when neither exists.
    """
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser().resolve()
    candidate = config_path(root)
    return candidate if candidate.is_file() else None


__all__ = ["CONFIG_FILE", "CONFIG_ENV", "config_path", "find_config"]
