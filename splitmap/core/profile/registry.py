from __future__ import annotations

import logging
import os
from typing import Optional

from splitmap.core.matrix.types import MAX_COORDS
from splitmap.core.resources import builtin_profile_names, load_builtin_profile_data

from .model import KeyboardProfile
from .profiles import list_user_profiles, load_user_profile, profile_from_dict, safe_profile_name

logger = logging.getLogger(__name__)


DEFAULT_PROFILE_NAME = "corne"


def load_builtin_profile(name: str, *, default_capacity: int = MAX_COORDS) -> Optional[KeyboardProfile]:
    raw = load_builtin_profile_data(safe_profile_name(name))
    if not raw:
        return None
    return profile_from_dict(raw, name=name, default_capacity=default_capacity)


def available_profiles() -> dict[str, str]:
    """Map every known profile name to where it comes from.

    A user profile with the same name as a bundled one shadows it.
    """

    out = {name: "builtin" for name in builtin_profile_names()}
    for name in list_user_profiles():
        out[name] = "user"
    return dict(sorted(out.items()))


def get_profile(name: str, *, default_capacity: int = MAX_COORDS) -> Optional[KeyboardProfile]:
    name = safe_profile_name(name)
    if not name:
        return None

    profile = load_user_profile(name, default_capacity=default_capacity)
    if profile is not None:
        logger.debug("Profile '%s' loaded from user profiles.", name)
        return profile

    profile = load_builtin_profile(name, default_capacity=default_capacity)
    if profile is not None:
        logger.debug("Profile '%s' loaded from bundled resources.", name)
    return profile


def select_profile(
    *,
    requested: Optional[str] = None,
    configured: Optional[str] = None,
    default_capacity: int = MAX_COORDS,
) -> Optional[KeyboardProfile]:
    """Select a keyboard profile.

    Order of precedence:
    - explicit `requested`
    - env `SPLITMAP_PROFILE`
    - `configured` (usually Config.profile)
    - the built-in default

    Returns None if the chosen name does not resolve to a profile; there is no
    silent fallback once a name has been given.
    """

    name = (requested or os.environ.get("SPLITMAP_PROFILE") or configured or DEFAULT_PROFILE_NAME).strip()
    profile = get_profile(name, default_capacity=default_capacity)
    if profile is None:
        logger.debug("Profile '%s' not found.", name)
    return profile
