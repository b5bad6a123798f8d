"""Wall-clock timing harness for the product lookup functions."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from switchbench.core.config import BenchmarkConfig
from switchbench.core.mapping import MAPPERS, Mapper

logger = logging.getLogger(__name__)


class Stopwatch:
    """Restartable timer over a monotonic clock measured in seconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._elapsed = 0.0

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._elapsed += max(0.0, self._clock() - self._started_at)
            self._started_at = None

    def reset(self) -> None:
        self._started_at = None
        self._elapsed = 0.0

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def elapsed_ms(self) -> int:
        """Whole milliseconds accumulated, including a running interval."""

        elapsed = self._elapsed
        if self._started_at is not None:
            elapsed += max(0.0, self._clock() - self._started_at)
        return int(elapsed * 1000)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing for one lookup form."""

    label: str
    elapsed_ms: int
    loop_count: int
    test_value: int


def time_mapper(mapper: Mapper, test_value: int, loop_count: int, stopwatch: Stopwatch) -> int:
    """Call ``mapper(test_value)`` ``loop_count`` times and return the elapsed milliseconds."""

    stopwatch.restart()
    for _ in range(loop_count):
        mapper(test_value)
    stopwatch.stop()
    return stopwatch.elapsed_ms


def run_benchmark(
    config: BenchmarkConfig,
    mappers: Sequence[Tuple[str, Mapper]] = MAPPERS,
    *,
    stream: Optional[TextIO] = None,
    stopwatch: Optional[Stopwatch] = None,
) -> List[BenchmarkResult]:
    """Time every mapper in order, printing ``"<Label> Time: <N> ms"`` after each pass."""

    out = stream if stream is not None else sys.stdout
    watch = stopwatch or Stopwatch()
    results: List[BenchmarkResult] = []
    for label, mapper in mappers:
        logger.debug("Timing %s over %d iterations", label, config.loop_count)
        elapsed_ms = time_mapper(mapper, config.test_value, config.loop_count, watch)
        print(f"{label} Time: {elapsed_ms} ms", file=out)
        results.append(
            BenchmarkResult(
                label=label,
                elapsed_ms=elapsed_ms,
                loop_count=config.loop_count,
                test_value=config.test_value,
            )
        )
    return results


def wait_for_exit(prompt: str = "", input_fn: Callable[[str], str] = input) -> None:
    """Block until the user presses Enter."""

    try:
        input_fn(prompt)
    except EOFError:
        logger.debug("Standard input closed; not waiting for Enter")


__all__ = ["BenchmarkResult", "Stopwatch", "run_benchmark", "time_mapper", "wait_for_exit"]
