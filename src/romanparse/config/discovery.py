"""Locate ``romanparse.toml``.

``ROMANPARSE_CONFIG`` names the file outright; otherwise the directory
tree is searched upward from the starting point. The ``--config`` flag
bypasses discovery entirely (see :meth:`RomanSettings.from_cli`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "romanparse.toml"
CONFIG_ENV_VAR = "ROMANPARSE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An env var pointing at a missing file disables discovery rather than
    falling back to the walk-up search.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        candidate = Path(override)
        return candidate if candidate.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
