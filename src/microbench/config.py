"""Harness configuration and validation.

Configuration comes from keyword arguments or CLI options; there is no
configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# HarnessConfig
# ---------------------------------------------------------------------------


@dataclass
class HarnessConfig:
    """Settings shared by every run of a Benchmark."""

    iterations: int = 5  # Measured iterations per workload
    warmup: int = 1  # Unmeasured calls before measuring
    collect_garbage: bool = True  # gc.collect() before each run
    trace_memory: bool = True  # Use tracemalloc for byte counts


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation error."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


def is_valid_iteration_count(iterations: object) -> bool:
    """Whether *iterations* is a positive int (bools are rejected)."""
    return isinstance(iterations, int) and not isinstance(iterations, bool) and iterations >= 1


def validate_config(config: HarnessConfig) -> list[ValidationError]:
    """Validate a harness configuration.

    Returns a list of validation errors.  Empty list means valid.
    """
    errors: list[ValidationError] = []

    if not is_valid_iteration_count(config.iterations):
        errors.append(
            ValidationError(
                field="iterations",
                message=f"Need at least 1 measured iteration (got {config.iterations!r}).",
            )
        )

    if config.warmup < 0:
        errors.append(
            ValidationError(
                field="warmup",
                message=f"Warmup iterations cannot be negative (got {config.warmup}).",
            )
        )
    elif config.warmup == 0:
        errors.append(
            ValidationError(
                field="warmup",
                message="No warm-up call: one-time setup costs will be measured.",
                severity="warning",
            )
        )

    return errors
