"""caseswitch bench -- time Switch dispatch against an if/elif chain."""

from __future__ import annotations

import click

from caseswitch.bench import DEFAULT_HIGH, DEFAULT_ITERATIONS, DEFAULT_LOW, run_benchmark
from caseswitch.cli.formatting import format_benchmark, format_error, get_console


@click.command()
@click.option(
    "--iterations",
    "-n",
    type=click.IntRange(min=0),
    default=DEFAULT_ITERATIONS,
    show_default=True,
    envvar="CASESWITCH_BENCH_ITERATIONS",
    help="Number of generated values to dispatch.",
)
@click.option("--seed", type=int, default=None, help="Random seed for the generated values.")
@click.option("--low", type=int, default=DEFAULT_LOW, show_default=True, help="Smallest generated value.")
@click.option("--high", type=int, default=DEFAULT_HIGH, show_default=True, help="Largest generated value.")
def bench(iterations: int, seed: int | None, low: int, high: int) -> None:
    """Dispatch N random integers through both runners and compare timings."""
    console = get_console()
    try:
        result = run_benchmark(iterations, seed=seed, low=low, high=high)
    except ValueError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
    format_benchmark(result, console)
