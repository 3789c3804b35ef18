from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path

import pytest


REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


# Safety default: during pytest, never read or write the user's real config.
os.environ.setdefault("SPLITMAP_CONFIG_DIR", tempfile.mkdtemp(prefix="splitmap-test-config-"))


CORNE_MATRIX_MAP = """
(0,0, L) (0,1, L) (0,2, L) (0,3, L) (0,4, L) (0,5, L)                        (4,5, R) (4,4, R) (4,3, R) (4,2, R) (4,1, R) (4,0, R)
(1,0, L) (1,1, L) (1,2, L) (1,3, L) (1,4, L) (1,5, L)                        (5,5, R) (5,4, R) (5,3, R) (5,2, R) (5,1, R) (5,0, R)
(2,0, L) (2,1, L) (2,2, L) (2,3, L) (2,4, L) (2,5, L)                        (6,5, R) (6,4, R) (6,3, R) (6,2, R) (6,1, R) (6,0, R)
                           (3,3, L) (3,4, L) (3,5, L)                        (7,5, R) (7,4, R) (7,3, R)
"""


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config at a fresh temp dir and drop any cached compilations."""

    from splitmap.core.profile.compile import compile_profile

    monkeypatch.setenv("SPLITMAP_CONFIG_DIR", str(tmp_path / "cfg"))
    monkeypatch.delenv("SPLITMAP_CONFIG_PATH", raising=False)
    monkeypatch.delenv("SPLITMAP_PROFILE", raising=False)
    monkeypatch.delenv("SPLITMAP_PROFILES_DIR", raising=False)
    monkeypatch.delenv("SPLITMAP_DEBUG", raising=False)
    compile_profile.cache_clear()
    yield
    compile_profile.cache_clear()


@pytest.fixture
def corne_matrix_map() -> str:
    return CORNE_MATRIX_MAP


@pytest.fixture
def profile_dict_factory():
    """Factory for raw profile dicts (the on-disk JSON shape)."""

    def _make(
        *,
        name: str = "test",
        rows: int = 2,
        cols: int = 2,
        matrix_map: str = "(0,0,L) (0,1,L) (1,0,R) (1,1,R)",
        layers: list | None = None,
        keys: int | None = 4,
        capacity: int | None = None,
    ) -> dict:
        raw = {
            "name": name,
            "rows": rows,
            "cols": cols,
            "matrix_map": matrix_map,
            "layers": layers if layers is not None else [{"name": "base", "keys": ["A", "B", "C", "D"]}],
        }
        if keys is not None:
            raw["keys"] = keys
        if capacity is not None:
            raw["capacity"] = capacity
        return raw

    return _make


@pytest.fixture
def write_user_profile(profile_dict_factory):
    """Write a profile JSON into the (temp) user profile dir; returns its path."""

    def _write(**kwargs) -> Path:
        from splitmap.core.config.paths import profiles_dir

        raw = profile_dict_factory(**kwargs)
        root = profiles_dir()
        root.mkdir(parents=True, exist_ok=True)
        path = root / f"{raw['name']}.json"
        path.write_text(json.dumps(raw), encoding="utf-8")
        return path

    return _write
