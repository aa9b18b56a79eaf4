"""Locate the patternctl.toml that applies to a working directory."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "patternctl.toml"
CONFIG_ENV_VAR = "PATTERNCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest patternctl.toml at or above *start* (default: cwd).

    When ``PATTERNCTL_CONFIG`` is set it is the only candidate: a path
    that is not a file yields None instead of falling back to the search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
