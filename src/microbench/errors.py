"""Exception types raised by the benchmark harness.

Workload exceptions are never wrapped: they reach the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from microbench.config import ValidationError


class BenchmarkError(Exception):
    """Base class for harness usage errors."""


class InvalidIterationCountError(BenchmarkError, ValueError):
    """Raised when an iteration count is zero, negative, or not an int."""

    def __init__(self, iterations: object) -> None:
        super().__init__(f"Iteration count must be a positive integer (got {iterations!r}).")
        self.iterations = iterations


class InvalidConfigError(BenchmarkError, ValueError):
    """Raised when a HarnessConfig has validation errors."""

    def __init__(self, errors: list[ValidationError]) -> None:
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Invalid harness configuration: {details}")
        self.errors = errors


class NoResultsError(BenchmarkError):
    """Raised when a report is requested for an empty result set."""

    def __init__(self) -> None:
        super().__init__("No benchmark results to report. Run or compare workloads first.")
