"""splitmap Config implementation."""

from __future__ import annotations

import logging

from .defaults import DEFAULTS as _DEFAULTS
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import config_dir, config_file_path
from ._props import bool_prop, int_prop, str_prop

logger = logging.getLogger(__name__)


class Config:
    """Persistent user settings (``config.json``)."""

    DEFAULTS = _DEFAULTS

    def __init__(self):
        # Resolved per instance so tests can point SPLITMAP_CONFIG_DIR elsewhere.
        self.CONFIG_DIR = config_dir()
        self.CONFIG_FILE = config_file_path()
        loaded = self._load()
        self._settings = loaded if loaded is not None else self.DEFAULTS.copy()

    def _load(self, *, retries: int = 3, retry_delay: float = 0.02):
        """Load settings from file, or None if the file stays unreadable."""

        return load_config_settings(
            config_file=self.CONFIG_FILE,
            defaults=self.DEFAULTS,
            retries=retries,
            retry_delay=retry_delay,
            logger=logger,
        )

    def reload(self):
        loaded = self._load()
        # Keep the previous in-memory settings if the file was transiently unreadable.
        if loaded is not None:
            self._settings = loaded

    def _save(self):
        save_config_settings_atomic(
            config_dir=self.CONFIG_FILE.parent,
            config_file=self.CONFIG_FILE,
            settings=self._settings,
            logger=logger,
        )

    def as_dict(self) -> dict:
        return dict(self._settings)

    profile = str_prop("profile", default=str(_DEFAULTS["profile"]))
    capacity = int_prop("capacity", default=int(_DEFAULTS["capacity"]), min_v=0, max_v=4096)
    strict = bool_prop("strict", default=bool(_DEFAULTS["strict"]))
    no_op = str_prop("no_op", default=str(_DEFAULTS["no_op"]))
