"""Profile storage.

User profiles are stored as JSON under:
  ~/.config/splitmap/profiles/<profile_name>.json

A profile file holds the matrix dimensions, the matrix-map text and the
physically ordered layers. Loading is lenient: entries with the wrong shape
are skipped rather than failing the whole file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional

from splitmap.core.config.paths import profiles_dir
from splitmap.core.matrix.types import MAX_COORDS

from .json_storage import read_json, write_json_atomic
from .model import CompiledKeymap, KeyboardProfile, Layer

logger = logging.getLogger(__name__)


def safe_profile_name(name: str) -> str:
    name = (name or "").strip().lower()
    name = re.sub(r"\s+", "_", name)
    return re.sub(r"[^a-z0-9_.-]", "", name)


def profile_path(name: str) -> Path:
    return profiles_dir() / f"{safe_profile_name(name)}.json"


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        v = int(value)
    except (TypeError, ValueError):
        return None
    return v if v > 0 else None


def _parse_layers(raw: Any) -> list[Layer]:
    out: list[Layer] = []
    if not isinstance(raw, list):
        return out
    for idx, item in enumerate(raw):
        # Accept {"name": ..., "keys": [...]} or a bare list of actions.
        if isinstance(item, dict):
            name = item.get("name")
            keys = item.get("keys")
        else:
            name, keys = None, item
        if not isinstance(keys, list):
            logger.debug("Skipping layer %d: no key list", idx)
            continue
        if not isinstance(name, str) or not name.strip():
            name = f"layer{idx}"
        out.append(Layer(name=name.strip(), keys=tuple(str(k) for k in keys)))
    return out


def profile_from_dict(
    raw: Any, *, name: str | None = None, default_capacity: int = MAX_COORDS
) -> Optional[KeyboardProfile]:
    """Build a profile from parsed JSON, or None if the essentials are missing.

    *default_capacity* applies when the profile does not declare its own.
    """

    if not isinstance(raw, dict):
        return None

    rows = _positive_int(raw.get("rows"))
    cols = _positive_int(raw.get("cols"))
    matrix_map = raw.get("matrix_map")
    if rows is None or cols is None or not isinstance(matrix_map, str):
        return None

    profile_name = raw.get("name") if isinstance(raw.get("name"), str) else None
    profile_name = safe_profile_name(profile_name or name or "") or "unnamed"

    capacity = _positive_int(raw.get("capacity")) or default_capacity
    description = raw.get("description") if isinstance(raw.get("description"), str) else ""

    return KeyboardProfile(
        name=profile_name,
        rows=rows,
        cols=cols,
        matrix_map=matrix_map,
        layers=tuple(_parse_layers(raw.get("layers"))),
        keys=_positive_int(raw.get("keys")),
        capacity=capacity,
        description=description,
    )


def load_profile_file(path: Path, *, default_capacity: int = MAX_COORDS) -> Optional[KeyboardProfile]:
    path = Path(path)
    profile = profile_from_dict(read_json(path), name=path.stem, default_capacity=default_capacity)
    if profile is None:
        logger.debug("No usable profile in %s", path)
    return profile


def load_user_profile(name: str, *, default_capacity: int = MAX_COORDS) -> Optional[KeyboardProfile]:
    p = profile_path(name)
    if not p.is_file():
        return None
    return load_profile_file(p, default_capacity=default_capacity)


def save_profile(profile: KeyboardProfile, name: str | None = None) -> Path:
    p = profile_path(name or profile.name)
    write_json_atomic(p, profile.to_dict())
    return p


def delete_profile(name: str) -> bool:
    p = profile_path(name)
    try:
        p.unlink()
        return True
    except FileNotFoundError:
        return False


def list_user_profiles() -> list[str]:
    root = profiles_dir()
    if not root.is_dir():
        return []
    return sorted(p.stem for p in root.glob("*.json") if p.is_file())


def export_compiled(compiled: CompiledKeymap, path: Path) -> Path:
    """Write the electrical keymap and hand map of *compiled* to *path*."""

    path = Path(path)
    write_json_atomic(path, compiled.to_dict())
    return path
