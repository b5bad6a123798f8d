"""Summary report generation utilities."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import pandas as pd

from switchbench.core.harness import BenchmarkResult
from switchbench.reporting.config import ReportConfig

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["label", "elapsed_ms", "loop_count", "test_value"]


def results_dataframe(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
    """Tabulate benchmark results, one row per lookup form."""

    rows = [
        {
            "label": result.label,
            "elapsed_ms": result.elapsed_ms,
            "loop_count": result.loop_count,
            "test_value": result.test_value,
        }
        for result in results
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def _fastest(df: pd.DataFrame) -> Optional[str]:
    if df.empty:
        return None
    best = df["elapsed_ms"].min()
    winners = df.loc[df["elapsed_ms"] == best, "label"].tolist()
    return winners[0] if len(winners) == 1 else "tie"


def _ratio(df: pd.DataFrame) -> Optional[float]:
    if df.empty:
        return None
    fastest = int(df["elapsed_ms"].min())
    slowest = int(df["elapsed_ms"].max())
    if fastest == 0:
        return None
    return round(slowest / fastest, 3)


def generate_summary_report(
    results: Sequence[BenchmarkResult],
    *,
    outputs_agree: bool,
    config_payload: Mapping[str, Any],
    report_config: ReportConfig,
) -> Dict[str, Any]:
    """Generate an in-memory summary report and optionally persist it."""

    df = results_dataframe(results)
    first = results[0] if results else None

    summary: Dict[str, Any] = {
        "inputs": {
            "test_value": first.test_value if first else None,
            "loop_count": first.loop_count if first else 0,
        },
        "timings": {str(row.label): int(row.elapsed_ms) for row in df.itertuples(index=False)},
        "fastest": _fastest(df),
        "ratio": _ratio(df),
        "outputs_agree": bool(outputs_agree),
        "config": dict(config_payload),
    }

    if report_config.path:
        report_config.path.parent.mkdir(parents=True, exist_ok=True)
        with report_config.path.open("w", encoding="utf-8") as handle:
            json.dump(summary, handle, ensure_ascii=False, indent=2)
        logger.info("Summary report written to %s", report_config.path)

    return summary


__all__ = ["generate_summary_report", "results_dataframe"]
