from __future__ import annotations

from .load import configure, current_config, load_config
from .model import Config
from .paths import CONFIG_ENV, CONFIG_FILE, config_path, find_config

__all__ = [
    "Config",
    "load_config",
    "configure",
    "current_config",
    "find_config",
    "config_path",
    "CONFIG_FILE",
    "CONFIG_ENV",
]
