"""Where splitmap keeps its files.

Layout under the config dir::

    config.json          user settings (see Config)
    profiles/<name>.json user keyboard profiles

Each location can be overridden from the environment, which is how the test
suite keeps away from the real user config.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

APP_DIR_NAME = "splitmap"

ENV_CONFIG_DIR = "SPLITMAP_CONFIG_DIR"
ENV_CONFIG_PATH = "SPLITMAP_CONFIG_PATH"
ENV_PROFILES_DIR = "SPLITMAP_PROFILES_DIR"


def _env_path(name: str) -> Optional[Path]:
    value = (os.environ.get(name) or "").strip()
    return Path(value).expanduser() if value else None


def config_dir() -> Path:
    """SPLITMAP_CONFIG_DIR, else $XDG_CONFIG_HOME/splitmap, else ~/.config/splitmap."""

    explicit = _env_path(ENV_CONFIG_DIR)
    if explicit is not None:
        return explicit
    base = _env_path("XDG_CONFIG_HOME") or Path.home() / ".config"
    return base / APP_DIR_NAME


def config_file_path() -> Path:
    return _env_path(ENV_CONFIG_PATH) or config_dir() / "config.json"


def profiles_dir() -> Path:
    """Directory holding user keyboard profiles; SPLITMAP_PROFILES_DIR overrides it."""

    return _env_path(ENV_PROFILES_DIR) or config_dir() / "profiles"
