"""JSON event lines for benchmark runs."""

from __future__ import annotations

import json
import logging
from typing import Any


def structured_log(level: int, **payload: Any) -> None:
    """Log ``payload`` as one sorted-key JSON object, e.g. ``{"event": "benchmark_complete", ...}``."""

    logging.getLogger().log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True))
