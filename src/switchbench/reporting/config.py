"""Reporting configuration models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class ReportConfig:
    """Where the optional JSON summary and CSV timings are written."""

    path: Optional[Path] = None
    csv_path: Optional[Path] = None
