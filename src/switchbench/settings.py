"""Process environment for the ``switchbench`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_ENV_LOADED = False


def load_environment(dotenv_path: Optional[Path] = None) -> None:
    """Read ``.env`` (for ``LOG_LEVEL``) on the first call; later calls are no-ops."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(dotenv_path)
    _ENV_LOADED = True
