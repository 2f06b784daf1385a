"""Command-line interface for microbench.

Subcommands:
    microbench run     Compare sample workloads and print the report
    microbench list    List the sample workloads
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from microbench import __version__
from microbench.config import HarnessConfig, validate_config
from microbench.errors import BenchmarkError
from microbench.logging import setup_logging

log = logging.getLogger("microbench")


def _parse_workloads(
    ctx: click.Context,
    param: click.Parameter,
    value: tuple[str, ...],
) -> list[tuple[str, int | None]]:
    """Parse repeated ``NAME`` or ``NAME=ARG`` workload selections."""
    from microbench.workloads import SAMPLE_WORKLOADS

    selections: list[tuple[str, int | None]] = []
    for spec in value:
        name, sep, raw_arg = spec.partition("=")
        name = name.strip()
        if name not in SAMPLE_WORKLOADS:
            raise click.BadParameter(
                f"Unknown workload '{name}'. Available: {', '.join(SAMPLE_WORKLOADS)}",
                ctx=ctx,
                param=param,
            )
        arg: int | None = None
        if sep:
            try:
                arg = int(raw_arg)
            except ValueError:
                raise click.BadParameter(
                    f"Argument for '{name}' must be an integer (got '{raw_arg}').",
                    ctx=ctx,
                    param=param,
                ) from None
        selections.append((name, arg))
    return selections


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """microbench — Compare the speed and allocations of Python workloads."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--iterations",
    type=int,
    default=5,
    show_default=True,
    help="Measured iterations per workload.",
)
@click.option(
    "--warmup",
    type=int,
    default=1,
    show_default=True,
    help="Unmeasured calls before measuring.",
)
@click.option(
    "--workload",
    "workloads",
    multiple=True,
    callback=_parse_workloads,
    help="Sample workload as NAME or NAME=ARG (repeatable, default: all).",
)
@click.option("--no-gc", is_flag=True, default=False, help="Skip gc.collect() before each run.")
@click.option(
    "--no-trace-memory",
    is_flag=True,
    default=False,
    help="Count allocator blocks only; report 0 MB instead of tracing bytes.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show detailed output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show errors.")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Also write a DEBUG log to this file.",
)
def run(
    iterations: int,
    warmup: int,
    workloads: list[tuple[str, int | None]],
    no_gc: bool,
    no_trace_memory: bool,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Benchmark sample workloads and rank them by average time.

    A workload that raises is not caught: the command stops with a
    traceback and a non-zero exit code.

    \b
    Examples:
        microbench run
        microbench run --iterations 3 --workload fibonacci=25 --workload primes=100000
    """
    from microbench.harness import Benchmark
    from microbench.workloads import build_registry, example_registry

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    config = HarnessConfig(
        iterations=iterations,
        warmup=warmup,
        collect_garbage=not no_gc,
        trace_memory=not no_trace_memory,
    )
    errors = validate_config(config)
    for w in (e for e in errors if e.severity == "warning"):
        log.warning("Config warning: %s: %s", w.field, w.message)
    fatal = [e for e in errors if e.severity == "error"]
    if fatal:
        for e in fatal:
            click.echo(f"Error: {e.field}: {e.message}", err=True)
        raise SystemExit(1)

    registry = build_registry(workloads) if workloads else example_registry()

    bench = Benchmark(config)
    try:
        bench.compare(registry, config.iterations).print_results()
    except BenchmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@main.command("list")
def list_cmd() -> None:
    """List the sample workloads and their default arguments."""
    from microbench.workloads import SAMPLE_WORKLOADS

    for name, sample in SAMPLE_WORKLOADS.items():
        click.echo(f"{name:<12s} {sample.display_name():<18s} {sample.description}")
