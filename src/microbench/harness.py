"""Benchmark harness: measurement engine and comparison driver.

Usage::

    bench = Benchmark()
    bench.compare({"fast": fast_fn, "slow": slow_fn}, iterations=5).print_results()

Every run is synchronous and sequential.  For each workload the harness:

1. Validates the iteration count (before any side effect).
2. Collects garbage so deferred reclamation does not leak into timings.
3. Calls the workload ``warmup`` times without measuring.
4. Measures each iteration: counters, clock, call, clock, counters.
5. Aggregates the samples and appends the result to the result set.

A workload that raises aborts its own run; the exception reaches the
caller unchanged and nothing is recorded for that workload.  Results of
workloads that already finished are kept.
"""

from __future__ import annotations

import gc
import logging
import time
from collections.abc import Callable, Mapping

from microbench.config import HarnessConfig, is_valid_iteration_count, validate_config
from microbench.errors import InvalidConfigError, InvalidIterationCountError
from microbench.memory import AllocationCounter, default_counter
from microbench.results import AggregateResult, IterationSample, aggregate

log = logging.getLogger("microbench")

Workload = Callable[[], object]


class Benchmark:
    """Runs workloads and holds their aggregate results.

    Mutating methods return ``self`` so calls can be chained.  Creating a
    Benchmark with an invalid config raises InvalidConfigError.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        counter: AllocationCounter | None = None,
    ) -> None:
        self.config = config or HarnessConfig()
        fatal = [e for e in validate_config(self.config) if e.severity == "error"]
        if fatal:
            raise InvalidConfigError(fatal)
        self.counter: AllocationCounter = counter or default_counter(self.config.trace_memory)
        self._results: list[AggregateResult] = []

    @property
    def results(self) -> list[AggregateResult]:
        """The result set, in execution order until a report sorts it."""
        return self._results

    # -- measurement ---------------------------------------------------------

    def run(self, name: str, workload: Workload, iterations: int | None = None) -> Benchmark:
        """Measure *workload* for *iterations* calls and record the result.

        Args:
            name: Display name for the report.
            workload: Zero-argument callable; its return value is ignored.
            iterations: Measured calls.  Defaults to ``config.iterations``.

        Returns:
            This Benchmark.

        Raises:
            InvalidIterationCountError: If *iterations* is not a positive int.
        """
        if iterations is None:
            iterations = self.config.iterations
        _check_iterations(iterations)

        log.info("Starting: %s", name)

        if self.config.collect_garbage:
            gc.collect()

        for _ in range(self.config.warmup):
            workload()

        samples = self._measure(workload, iterations)
        result = aggregate(name, samples)
        self._results.append(result)

        log.debug(
            "Result for %s: total %.6fs, avg %.6fs, %d bytes, %d allocs per iteration",
            name,
            result.total_time_s,
            result.average_time_s,
            result.memory_bytes,
            result.alloc_count,
        )
        log.info("Done: %s", name)
        return self

    def _measure(self, workload: Workload, iterations: int) -> list[IterationSample]:
        """Time each iteration and record its allocation deltas."""
        samples: list[IterationSample] = []
        with self.counter.session():
            for _ in range(iterations):
                before = self.counter.snapshot()
                start = time.perf_counter_ns()
                workload()
                duration = time.perf_counter_ns() - start
                grown = self.counter.since(before)
                samples.append(
                    IterationSample(
                        duration_ns=duration,
                        allocated_bytes=grown.allocated_bytes,
                        allocations=grown.allocations,
                    )
                )
        return samples

    # -- comparison ----------------------------------------------------------

    def compare(
        self,
        workloads: Mapping[str, Workload],
        iterations: int | None = None,
    ) -> Benchmark:
        """Run every workload in *workloads* with the same iteration count.

        The order in which workloads run is not part of the contract.

        Returns:
            This Benchmark, holding one result per completed workload.
        """
        if iterations is None:
            iterations = self.config.iterations
        _check_iterations(iterations)

        log.info("Comparing %d workloads, %d iterations each", len(workloads), iterations)
        for name, workload in workloads.items():
            self.run(name, workload, iterations)
        return self

    def clear(self) -> Benchmark:
        """Drop all recorded results."""
        self._results.clear()
        return self

    def print_results(self) -> None:
        """Sort the result set by average time and print the report."""
        from microbench.display import print_results

        print_results(self._results)


def _check_iterations(iterations: object) -> None:
    if not is_valid_iteration_count(iterations):
        raise InvalidIterationCountError(iterations)
