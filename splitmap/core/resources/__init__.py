"""Bundled keyboard profiles.

Each profile is a JSON file next to this module. Only physically ordered
tables ship here; electrical keymaps are always derived from them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import cast


logger = logging.getLogger(__name__)

_RESOURCE_DIR = Path(__file__).resolve().parent


def _as_dict(value: object) -> dict[str, object]:
    return cast(dict[str, object], value) if isinstance(value, dict) else {}


def builtin_profile_names() -> list[str]:
    return sorted(p.stem for p in _RESOURCE_DIR.glob("*.json"))


def load_builtin_profile_data(name: str) -> dict[str, object]:
    """Return the raw JSON dict for a bundled profile, or {} if unknown."""

    path = _RESOURCE_DIR / f"{name}.json"
    if not path.is_file():
        return {}
    try:
        return _as_dict(json.loads(path.read_text(encoding="utf-8")))
    except Exception as exc:
        logger.warning("Failed to read bundled profile %s: %s", path.name, exc)
        return {}


__all__ = ["builtin_profile_names", "load_builtin_profile_data"]
