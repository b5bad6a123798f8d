"""Tests for the timing harness."""

import io
import re

from switchbench.core.config import BenchmarkConfig
from switchbench.core.harness import Stopwatch, run_benchmark, time_mapper, wait_for_exit
from switchbench.core.mapping import MAPPERS

LINE_PATTERN = re.compile(r"^(Switch-Case|Switch Expression) Time: (\d+) ms$")


class FakeClock:
    """Clock that advances by ``step`` seconds on every read."""

    def __init__(self, step: float = 0.0) -> None:
        self.now = 100.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


def _counting_mapper(calls):
    def _mapper(value):
        calls.append(value)
        return "counted"

    return _mapper


def test_stopwatch_restart_discards_previous_interval():
    clock = FakeClock(step=0.25)
    watch = Stopwatch(clock)

    watch.start()
    watch.stop()
    assert watch.elapsed_ms == 250

    watch.restart()
    watch.stop()
    assert watch.elapsed_ms == 250
    assert not watch.is_running


def test_time_mapper_calls_mapper_exactly_loop_count_times():
    calls = []

    elapsed = time_mapper(_counting_mapper(calls), 6, 1000, Stopwatch())

    assert len(calls) == 1000
    assert set(calls) == {6}
    assert isinstance(elapsed, int)
    assert elapsed >= 0


def test_run_benchmark_prints_one_line_per_mapper_in_order():
    config = BenchmarkConfig(test_value=6, loop_count=1000)
    stream = io.StringIO()

    results = run_benchmark(config, stream=stream)

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    matches = [LINE_PATTERN.match(line) for line in lines]
    assert all(matches)
    assert [m.group(1) for m in matches] == ["Switch-Case", "Switch Expression"]
    assert [r.label for r in results] == [label for label, _ in MAPPERS]
    assert all(r.elapsed_ms >= 0 and r.loop_count == 1000 and r.test_value == 6 for r in results)


def test_run_benchmark_invokes_each_substitute_loop_count_times():
    first_calls, second_calls = [], []
    mappers = (
        ("Switch-Case", _counting_mapper(first_calls)),
        ("Switch Expression", _counting_mapper(second_calls)),
    )

    run_benchmark(BenchmarkConfig(test_value=6, loop_count=1000), mappers, stream=io.StringIO())

    assert len(first_calls) == 1000
    assert len(second_calls) == 1000


def test_zero_loop_count_prints_zero_durations_without_calls():
    calls = []
    mappers = (
        ("Switch-Case", _counting_mapper(calls)),
        ("Switch Expression", _counting_mapper(calls)),
    )
    stream = io.StringIO()

    results = run_benchmark(
        BenchmarkConfig(test_value=6, loop_count=0),
        mappers,
        stream=stream,
        stopwatch=Stopwatch(FakeClock(step=0.0)),
    )

    assert calls == []
    assert stream.getvalue().splitlines() == [
        "Switch-Case Time: 0 ms",
        "Switch Expression Time: 0 ms",
    ]
    assert [r.elapsed_ms for r in results] == [0, 0]


def test_wait_for_exit_tolerates_closed_stdin():
    prompts = []

    def _closed(prompt):
        prompts.append(prompt)
        raise EOFError

    wait_for_exit("bye", input_fn=_closed)

    assert prompts == ["bye"]
