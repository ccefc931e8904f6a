"""Config file discovery.

Walk-up finder locates ``projboard.toml``, the way git finds ``.git/``.
The ``PROJBOARD_CONFIG`` env var and the ``--config`` flag override it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "projboard.toml"
CONFIG_ENV_VAR = "PROJBOARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``projboard.toml``.

    ``PROJBOARD_CONFIG`` wins when set; a dangling env path yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent
