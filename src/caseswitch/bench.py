"""Benchmark harness: Switch dispatch vs a hand-written if/elif chain.

Both runners dispatch the same generated integers over the same three
range branches plus a default, and record each branch's work into a
WorkSink so the side effects stay observable::

    0 <= v <= 100 -> do_work(1)
    v > 100       -> do_work(2)
    v < 0         -> do_work(3)
    otherwise     -> do_work(4)
"""

from __future__ import annotations

import logging
import random
import time
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from caseswitch.engine.switch import Switch

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1_000_000
DEFAULT_LOW = -50
DEFAULT_HIGH = 150


@dataclass
class WorkSink:
    """Externally visible record of the work each branch performed."""

    last: int = 0
    counts: Counter = field(default_factory=Counter)

    def do_work(self, work_id: int) -> None:
        self.last = work_id
        self.counts[work_id] += 1

    def reset(self) -> None:
        self.last = 0
        self.counts.clear()

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings of one benchmark run.

    Attributes:
        iterations: Number of values dispatched by each runner.
        if_chain_ms: Wall-clock duration of the if/elif runner.
        switch_ms: Wall-clock duration of the Switch runner.
        if_chain_counts: Work ids recorded by the if/elif runner.
        switch_counts: Work ids recorded by the Switch runner.
    """

    iterations: int
    if_chain_ms: float
    switch_ms: float
    if_chain_counts: dict[int, int]
    switch_counts: dict[int, int]

    @property
    def ratio(self) -> float | None:
        """Switch time divided by if/elif time; None if the latter is 0."""
        if self.if_chain_ms <= 0:
            return None
        return self.switch_ms / self.if_chain_ms

    @property
    def consistent(self) -> bool:
        """Both runners performed exactly the same work."""
        return self.if_chain_counts == self.switch_counts


def generate_values(
    n: int,
    seed: int | None = None,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> list[int]:
    """Uniform random integers in ``[low, high]``. Seeded runs repeat."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(n)]


def run_if_chain(values: Sequence[int], sink: WorkSink) -> None:
    for value in values:
        if 0 <= value <= 100:
            sink.do_work(1)
        elif value > 100:
            sink.do_work(2)
        elif value < 0:
            sink.do_work(3)
        else:
            sink.do_work(4)


def run_switch(values: Sequence[int], sink: WorkSink) -> None:
    for value in values:
        with Switch(value) as sw:
            sw.add_case(lambda val: 0 <= val <= 100, lambda: sink.do_work(1))
            sw.add_case(lambda val: val > 100, lambda: sink.do_work(2))
            sw.add_case(lambda val: val < 0, lambda: sink.do_work(3))
            sw.add_default(lambda: sink.do_work(4))
            sw.evaluate()


def _timed_ms(runner, values: Sequence[int], sink: WorkSink) -> float:
    start = time.perf_counter()
    runner(values, sink)
    return (time.perf_counter() - start) * 1000.0


def run_benchmark(
    iterations: int = DEFAULT_ITERATIONS,
    seed: int | None = None,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> BenchmarkResult:
    """Time both runners over the same generated values."""
    values = generate_values(iterations, seed=seed, low=low, high=high)
    sink = WorkSink()

    if_ms = _timed_ms(run_if_chain, values, sink)
    if_counts = dict(sink.counts)
    logger.debug("if/elif chain: %d values in %.1f ms", iterations, if_ms)

    sink.reset()
    switch_ms = _timed_ms(run_switch, values, sink)
    switch_counts = dict(sink.counts)
    logger.debug("Switch: %d values in %.1f ms", iterations, switch_ms)

    return BenchmarkResult(
        iterations=iterations,
        if_chain_ms=if_ms,
        switch_ms=switch_ms,
        if_chain_counts=if_counts,
        switch_counts=switch_counts,
    )
