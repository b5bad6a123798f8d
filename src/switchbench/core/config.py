"""Configuration dataclasses for a SwitchBench run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from switchbench.reporting.config import ReportConfig


@dataclass(slots=True)
class BenchmarkConfig:
    """Inputs for the timing harness."""

    test_value: int = 6
    loop_count: int = 1_000_000
    pause_on_exit: bool = False


@dataclass(slots=True)
class RunConfig:
    """Aggregate configuration for a benchmark run."""

    benchmark: "BenchmarkConfig"
    report: "ReportConfig"
