"""Rich formatting helpers for the caseswitch CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from caseswitch.bench import BenchmarkResult


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_heading(text: str, console: Console, style: str | None = None) -> None:
    console.print(escape(text), style=style, highlight=False, soft_wrap=True)


def format_line(text: str, console: Console, style: str | None = None) -> None:
    """Print one line of demo output verbatim (no markup, no wrapping)."""
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def format_benchmark(result: BenchmarkResult, console: Console) -> None:
    """Display benchmark timings as a table, followed by a consistency line."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Runner", style="cyan")
    table.add_column("Time (ms)", justify="right", style="green")
    table.add_column("Work 1/2/3/4", justify="right", style="dim")

    table.add_row(
        "if/elif chain",
        f"{result.if_chain_ms:.1f}",
        _counts(result.if_chain_counts),
    )
    table.add_row(
        "Switch",
        f"{result.switch_ms:.1f}",
        _counts(result.switch_counts),
    )

    console.print(f"Iterations: {result.iterations}", highlight=False)
    console.print(table)

    if result.ratio is not None:
        console.print(f"Switch / if-elif: [yellow]{result.ratio:.2f}x[/yellow]", highlight=False)
    if result.consistent:
        console.print("[green]Both runners performed identical work.[/green]")
    else:
        console.print("[red]Runners disagree on the work performed.[/red]")


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def _counts(counts: dict[int, int]) -> str:
    return "/".join(str(counts.get(i, 0)) for i in (1, 2, 3, 4))
