#!/usr/bin/env python3
"""Unit tests for packaging metadata and bundled resources."""

from __future__ import annotations

import re
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def _project_value(key: str) -> str:
    text = (REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    m = re.search(rf'^{key}\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
    assert m is not None, key
    return m.group(1)


def test_readme_is_the_project_readme():
    readme = _project_value("readme")

    assert readme == "README.md"
    assert "splitmap" in (REPO_ROOT / readme).read_text(encoding="utf-8")


def test_bundled_profiles_all_load():
    from splitmap.core.profile import get_profile
    from splitmap.core.resources import builtin_profile_names

    names = builtin_profile_names()

    assert names == ["corne", "grid2x2"]
    assert all(get_profile(name) is not None for name in names)
