"""Sample CPU-bound workloads for exercising the harness."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from microbench.harness import Benchmark, Workload


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number, computed by naive recursion."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return all primes less than or equal to *n*."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    i = 2
    while i * i <= n:
        if is_prime[i]:
            for j in range(i * i, n + 1, i):
                is_prime[j] = False
        i += 1
    return [i for i, prime in enumerate(is_prime) if prime]


# ---------------------------------------------------------------------------
# Named samples
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SampleWorkload:
    """A sample function plus the argument used when none is given."""

    label: str  # Display prefix, e.g. "fibonacci" -> "fibonacci(45)"
    func: Callable[[int], object]
    default_arg: int
    description: str = ""

    def display_name(self, arg: int | None = None) -> str:
        return f"{self.label}({self.default_arg if arg is None else arg})"

    def bind(self, arg: int | None = None) -> Workload:
        """Return a zero-argument callable computing ``func(arg)``."""
        value = self.default_arg if arg is None else arg
        func = self.func

        def workload() -> None:
            func(value)

        return workload


SAMPLE_WORKLOADS: dict[str, SampleWorkload] = {
    "fibonacci": SampleWorkload(
        label="fibonacci",
        func=fibonacci,
        default_arg=45,
        description="Recursive Fibonacci number",
    ),
    "primes": SampleWorkload(
        label="primes",
        func=sieve_of_eratosthenes,
        default_arg=1_000_000,
        description="Sieve of Eratosthenes up to N",
    ),
}


def build_registry(selections: list[tuple[str, int | None]]) -> dict[str, Workload]:
    """Build a workload registry from ``(sample_name, arg)`` pairs.

    Raises:
        KeyError: If a sample name is unknown.
    """
    registry: dict[str, Workload] = {}
    for sample_name, arg in selections:
        sample = SAMPLE_WORKLOADS[sample_name]
        registry[sample.display_name(arg)] = sample.bind(arg)
    return registry


def example_registry() -> dict[str, Workload]:
    """The two example workloads with their default arguments."""
    return build_registry([(name, None) for name in SAMPLE_WORKLOADS])


def example_usage(iterations: int = 5) -> Benchmark:
    """Compare the example workloads and print the report."""
    bench = Benchmark()
    bench.compare(example_registry(), iterations).print_results()
    return bench
