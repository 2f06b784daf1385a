"""Benchmark result data structures.

Hierarchy::

    IterationSample (one measured call, discarded after aggregation)
      → aggregate() → AggregateResult (one per workload run)

All durations are integer nanoseconds from ``time.perf_counter_ns``.
Averages use floor division, so an average is the truncated mean: a
total of 100 ms over 5 iterations gives exactly 20 ms, while 7 ns over
2 iterations gives 3 ns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from microbench.errors import InvalidIterationCountError

_BYTES_PER_MB = 1024 * 1024


# ---------------------------------------------------------------------------
# Iteration-level sample
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IterationSample:
    """Measurements for a single workload call."""

    duration_ns: int
    allocated_bytes: int  # Clamped to >= 0
    allocations: int  # Clamped to >= 0


# ---------------------------------------------------------------------------
# Aggregate result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AggregateResult:
    """Reduced statistics for all measured iterations of one workload."""

    name: str
    total_time_ns: int
    iterations: int
    average_time_ns: int
    memory_bytes: int  # Mean peak bytes allocated per iteration
    alloc_count: int  # Mean live allocator blocks gained per iteration

    @property
    def total_time_s(self) -> float:
        return self.total_time_ns / 1e9

    @property
    def average_time_s(self) -> float:
        return self.average_time_ns / 1e9

    @property
    def memory_mb(self) -> float:
        """Mean bytes allocated per iteration, in megabytes."""
        return self.memory_bytes / _BYTES_PER_MB


def aggregate(name: str, samples: Sequence[IterationSample]) -> AggregateResult:
    """Reduce per-iteration samples to an AggregateResult.

    Args:
        name: Display name of the workload.
        samples: One sample per measured iteration.

    Returns:
        AggregateResult whose ``iterations`` equals ``len(samples)``.

    Raises:
        InvalidIterationCountError: If *samples* is empty.
    """
    count = len(samples)
    if count == 0:
        raise InvalidIterationCountError(count)

    total_ns = sum(s.duration_ns for s in samples)
    total_bytes = sum(s.allocated_bytes for s in samples)
    total_allocs = sum(s.allocations for s in samples)

    return AggregateResult(
        name=name,
        total_time_ns=total_ns,
        iterations=count,
        average_time_ns=total_ns // count,
        memory_bytes=total_bytes // count,
        alloc_count=total_allocs // count,
    )
