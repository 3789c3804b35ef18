from __future__ import annotations

from .compile import compile_profile
from .model import CompiledKeymap, KeyboardProfile, Layer
from .profiles import (
    delete_profile,
    export_compiled,
    list_user_profiles,
    load_profile_file,
    profile_from_dict,
    save_profile,
)
from .registry import DEFAULT_PROFILE_NAME, available_profiles, get_profile, select_profile


__all__ = [
    "DEFAULT_PROFILE_NAME",
    "CompiledKeymap",
    "KeyboardProfile",
    "Layer",
    "available_profiles",
    "compile_profile",
    "delete_profile",
    "export_compiled",
    "get_profile",
    "list_user_profiles",
    "load_profile_file",
    "profile_from_dict",
    "save_profile",
    "select_profile",
]
