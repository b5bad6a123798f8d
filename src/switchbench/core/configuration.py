"""Configuration loading utilities for benchmark runs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from switchbench.core.config import BenchmarkConfig, RunConfig
from switchbench.reporting.config import ReportConfig


def _load_yaml_config(path: Optional[Path]) -> Dict[str, Any]:
    """
    - Opens and safely parses a YAML file into a Python dictionary.
    - Returns an empty dict if the file is missing.
    - Raises ``ValueError`` when the document is not a mapping.
    """
    if path and path.exists():
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
        if not isinstance(payload, dict):
            raise ValueError(f"Invalid YAML config structure at {path}")
        return payload
    return {}


def _optional_path(value: Any) -> Optional[Path]:
    return Path(value) if value else None


def _int_setting(payload: Dict[str, Any], key: str, default: int, config_path: Optional[Path]) -> int:
    # Booleans are ints in Python but never a valid count or product number.
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid '{key}' in {config_path}: {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid '{key}' in {config_path}: {value!r}") from exc


def _bool_setting(payload: Dict[str, Any], key: str, default: bool, config_path: Optional[Path]) -> bool:
    value = payload.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{key}' in {config_path}: {value!r}")
    return value


def build_run_config(args: argparse.Namespace) -> RunConfig:
    # Load the YAML configuration and overlay CLI overrides.
    config_path = Path(args.config) if getattr(args, "config", None) else None
    yaml_payload = _load_yaml_config(config_path)

    # Benchmark Configuration
    defaults = BenchmarkConfig()
    benchmark_cfg = BenchmarkConfig(
        test_value=_int_setting(yaml_payload, "test_value", defaults.test_value, config_path),
        loop_count=_int_setting(yaml_payload, "loop_count", defaults.loop_count, config_path),
        pause_on_exit=_bool_setting(yaml_payload, "pause_on_exit", defaults.pause_on_exit, config_path),
    )
    if getattr(args, "test_value", None) is not None:
        benchmark_cfg.test_value = int(args.test_value)
    if getattr(args, "loop_count", None) is not None:
        benchmark_cfg.loop_count = int(args.loop_count)
    if getattr(args, "pause", False):
        benchmark_cfg.pause_on_exit = True
    if benchmark_cfg.loop_count < 0:
        raise ValueError(f"loop_count must be non-negative, got {benchmark_cfg.loop_count}")

    # Reporting Configuration
    report_section = yaml_payload.get("report", {}) or {}
    if not isinstance(report_section, dict):
        raise ValueError(f"Invalid 'report' section in {config_path}")
    report_cfg = ReportConfig(
        path=_optional_path(report_section.get("path")),
        csv_path=_optional_path(report_section.get("csv_path")),
    )
    if getattr(args, "report_path", None):
        report_cfg.path = Path(args.report_path)
    if getattr(args, "csv_path", None):
        report_cfg.csv_path = Path(args.csv_path)

    return RunConfig(benchmark=benchmark_cfg, report=report_cfg)
