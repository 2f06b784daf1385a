"""Terminal display formatting for benchmark results.

The report is a fixed-width table sorted by average time, followed by
the fastest workload and how much slower each other workload is::

    Benchmark Results:
    Test Name            Total Time      Iterations      Avg Time  ...
    fibonacci(25)        52.31ms         5               10.46ms   ...

    Fastest test: fibonacci(25)
    primes(1000000) is 3.20x slower than fibonacci(25)
"""

from __future__ import annotations

import math

import click

from microbench.errors import NoResultsError
from microbench.results import AggregateResult

_HEADERS = ("Test Name", "Total Time", "Iterations", "Avg Time", "Memory (MB)", "Allocs")
_ROW_FORMAT = "{:<20s} {:<15s} {:<15s} {:<15s} {:<15s} {:<15s}"


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


def format_time(nanoseconds: int, precision: int = 2) -> str:
    """Format a duration in nanoseconds with adaptive units."""
    if nanoseconds < 1_000:
        return f"{nanoseconds}ns"
    if nanoseconds < 1_000_000:
        return f"{nanoseconds / 1_000:.{precision}f}µs"
    if nanoseconds < 1_000_000_000:
        return f"{nanoseconds / 1_000_000:.{precision}f}ms"
    seconds = nanoseconds / 1_000_000_000
    if seconds < 60:
        return f"{seconds:.{precision}f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m{seconds - minutes * 60:.{precision}f}s"


def _format_ratio(ratio: float) -> str:
    if math.isinf(ratio):
        return "inf"
    return f"{ratio:.2f}"


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def sort_results(results: list[AggregateResult]) -> list[AggregateResult]:
    """Sort *results* in place by average time, fastest first.

    The sort is stable, so ties keep their execution order.
    """
    results.sort(key=lambda r: r.average_time_ns)
    return results


def slowdown_ratio(result: AggregateResult, fastest: AggregateResult) -> float:
    """How many times slower *result* is than *fastest*, by average time.

    A zero fastest average (a clock too coarse to see the workload) gives
    1.0 against another zero and ``inf`` against anything slower.
    """
    if fastest.average_time_ns == 0:
        return 1.0 if result.average_time_ns == 0 else math.inf
    return result.average_time_ns / fastest.average_time_ns


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


def format_results(results: list[AggregateResult]) -> str:
    """Sort *results* in place and format the comparison report.

    Raises:
        NoResultsError: If *results* is empty.
    """
    if not results:
        raise NoResultsError()

    sort_results(results)

    lines: list[str] = ["Benchmark Results:", _ROW_FORMAT.format(*_HEADERS).rstrip()]
    for r in results:
        row = _ROW_FORMAT.format(
            r.name,
            format_time(r.total_time_ns),
            str(r.iterations),
            format_time(r.average_time_ns),
            f"{r.memory_mb:.2f}",
            str(r.alloc_count),
        )
        lines.append(row.rstrip())

    fastest = results[0]
    lines.append("")
    lines.append(f"Fastest test: {fastest.name}")
    for r in results[1:]:
        ratio = slowdown_ratio(r, fastest)
        lines.append(f"{r.name} is {_format_ratio(ratio)}x slower than {fastest.name}")

    return "\n".join(lines)


def print_results(results: list[AggregateResult]) -> None:
    """Sort *results* in place and print the report to stdout."""
    click.echo()
    click.echo(format_results(results))
