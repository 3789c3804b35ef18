from __future__ import annotations

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Any


def _normalize(loaded: dict[str, Any]) -> dict[str, Any]:
    """Tidy values users commonly hand-edit; unknown keys pass through."""

    profile = loaded.get("profile")
    if isinstance(profile, str):
        loaded["profile"] = profile.strip().lower()

    no_op = loaded.get("no_op")
    if isinstance(no_op, str):
        loaded["no_op"] = no_op.strip()

    # JSON has no int/float split for hand-written files ("capacity": 42.0).
    capacity = loaded.get("capacity")
    if isinstance(capacity, float) and capacity.is_integer():
        loaded["capacity"] = int(capacity)

    return loaded


def load_config_settings(
    *,
    config_file: Path,
    defaults: dict[str, Any],
    retries: int = 3,
    retry_delay: float = 0.02,
    logger,
) -> dict[str, Any] | None:
    """Read ``config.json`` and merge it over *defaults*.

    A missing file yields a copy of *defaults*. A file that does not decode
    is retried, since another process may be halfway through replacing it.
    Returns None when it still cannot be read.
    """

    if not config_file.exists():
        return dict(defaults)

    attempts = max(1, retries)
    last_error: Exception | None = None
    for attempt in range(attempts):
        try:
            loaded = json.loads(config_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            last_error = e
            if attempt + 1 < attempts:
                time.sleep(retry_delay)
            continue
        except OSError as e:
            last_error = e
            break

        if not isinstance(loaded, dict):
            loaded = {}
        return {**defaults, **_normalize(loaded)}

    logger.warning("Failed to load config %s: %s", config_file, last_error)
    return None


def save_config_settings_atomic(*, config_dir: Path, config_file: Path, settings: dict[str, Any], logger) -> None:
    """Write *settings* next to *config_file* and swap it into place."""

    tmp_path: str | None = None
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".config-", suffix=".json", dir=str(config_dir))
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, config_file)
        tmp_path = None
    except OSError as e:
        logger.warning("Failed to save config %s: %s", config_file, e)
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            try:
                os.unlink(tmp_path)
            except OSError as exc:
                logger.debug("Failed to remove temp config file %s: %s", tmp_path, exc)
