"""Default configuration values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Keyboard profile used when neither the CLI nor SPLITMAP_PROFILE names one.
    "profile": "corne",
    # Upper bound on parsed coordinates; extra tokens are ignored.
    "capacity": 42,
    # When True, compiling a profile fails on any validation issue instead of
    # logging it and continuing with the lenient result.
    "strict": False,
    # Action written to electrical cells no key maps to.
    "no_op": "No",
}
