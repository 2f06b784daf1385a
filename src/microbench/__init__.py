"""microbench: compare the speed and allocations of small Python workloads."""

from __future__ import annotations

__version__ = "0.1.0"

from microbench.errors import (  # noqa: E402
    BenchmarkError,
    InvalidConfigError,
    InvalidIterationCountError,
    NoResultsError,
)
from microbench.harness import Benchmark  # noqa: E402
from microbench.results import AggregateResult  # noqa: E402

__all__ = [
    "AggregateResult",
    "Benchmark",
    "BenchmarkError",
    "InvalidConfigError",
    "InvalidIterationCountError",
    "NoResultsError",
    "__version__",
]
