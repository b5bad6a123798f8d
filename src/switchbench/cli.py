"""
1. Loads a `.env` file (if present) so `LOG_LEVEL` can be set outside the shell.
2. Parses the command line arguments and builds a `RunConfig` via `build_run_config`,
   merging CLI overrides with defaults from `config.yaml`.
3. Checks that both lookup forms agree on the test value and the catalogue before timing them.
4. Runs the timing harness, which prints one line per lookup form:
   - `Switch-Case Time: <N> ms`
   - `Switch Expression Time: <N> ms`
5. Optionally writes:
   - A JSON summary report (`--report-path`).
   - A CSV of the raw timings (`--csv-path`).
6. Optionally waits for Enter before exiting (`--pause`).
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from switchbench.core.config import RunConfig
from switchbench.core.configuration import build_run_config
from switchbench.core.harness import run_benchmark, wait_for_exit
from switchbench.core.mapping import default_sweep, find_mismatches
from switchbench.reporting.summary import generate_summary_report, results_dataframe
from switchbench.settings import load_environment
from switchbench.utils.io import save_dataframe
from switchbench.utils.logging import structured_log


def parse_args(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time an if/elif lookup against a match statement")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"), help="Path to configuration YAML")
    parser.add_argument("--test-value", type=int, default=None, help="Product number passed to each lookup")
    parser.add_argument("--loop-count", type=int, default=None, help="Number of timed calls per lookup")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    parser.add_argument("--report-path", type=Path, default=None, help="Path to summary report JSON")
    parser.add_argument("--csv-path", type=Path, default=None, help="Path to timings CSV")
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "WARNING"))
    return parser.parse_args(args)


def _config_payload(run_config: RunConfig) -> Dict[str, Any]:
    report = run_config.report
    return {
        "test_value": run_config.benchmark.test_value,
        "loop_count": run_config.benchmark.loop_count,
        "pause_on_exit": run_config.benchmark.pause_on_exit,
        "report_path": str(report.path) if report.path else None,
        "csv_path": str(report.csv_path) if report.csv_path else None,
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_environment()
    args = parse_args(argv)

    # Logs go to stderr; stdout carries only the timing lines.
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    run_config = build_run_config(args)
    benchmark_cfg = run_config.benchmark

    mismatches = find_mismatches(dict.fromkeys([benchmark_cfg.test_value, *default_sweep()]))
    if mismatches:
        structured_log(logging.WARNING, event="mapper_mismatch", values=mismatches)

    results = run_benchmark(benchmark_cfg)

    report_cfg = run_config.report
    summary = generate_summary_report(
        results,
        outputs_agree=not mismatches,
        config_payload=_config_payload(run_config),
        report_config=report_cfg,
    )
    if report_cfg.csv_path:
        save_dataframe(results_dataframe(results), report_cfg.csv_path)
        logger.info("Saved timings to %s", report_cfg.csv_path)

    structured_log(
        logging.INFO,
        event="benchmark_complete",
        timings=summary["timings"],
        fastest=summary["fastest"],
        ratio=summary["ratio"],
    )

    if benchmark_cfg.pause_on_exit:
        wait_for_exit()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
