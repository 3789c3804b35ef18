"""splitmap configuration.

`from splitmap.core.config import Config` is the public entry point.
"""

from __future__ import annotations

from .config import Config
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import config_dir, config_file_path, profiles_dir


__all__ = [
    "Config",
    "config_dir",
    "config_file_path",
    "load_config_settings",
    "profiles_dir",
    "save_config_settings_atomic",
]
