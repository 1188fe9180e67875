"""caseswitch demo -- the classic range, substring and no-default examples."""

from __future__ import annotations

import click
from rich.console import Console

from caseswitch.cli.formatting import format_heading, format_line, get_console
from caseswitch.syntax import switch

HIGHLIGHT = "bold cyan"


def demo_int_range(console: Console, value: int = 50) -> None:
    format_heading(f"Testing int value = {value}", console)

    with switch(value) as sw:
        @sw.case("0 <= val <= 100")
        def _():
            format_line("Value is in range [0, 100]", console)

        @sw.case("val > 100")
        def _():
            format_line("Value is greater than 100", console)

        @sw.case("val < 0")
        def _():
            format_line("Value is less than 0", console)

        @sw.default
        def _():
            format_line("Unexpected value (default)", console)

    format_line("---", console)


def demo_substring(console: Console, text: str = "Hello Gerard!", name: str = "Gerard") -> None:
    format_heading(f'Testing string value = "{text}"', console, style=HIGHLIGHT)

    with switch(text) as sw:
        @sw.case("name in val")
        def _():
            format_line(
                f"Hi {name}! This is a predicate switch, so any operator works in a case.",
                console,
                style=HIGHLIGHT,
            )

        @sw.case(lambda val: len(val) > 10)
        def _():
            format_line("Long string", console, style=HIGHLIGHT)

        @sw.default
        def _():
            format_line(f"Other string: {text}", console, style=HIGHLIGHT)

    format_line("---", console, style=HIGHLIGHT)


def demo_no_default(console: Console, value: int = 10) -> None:
    format_heading(f"Testing int value = {value} without DEFAULT", console)

    with switch(value) as sw:
        sw.case("val == 10").then(lambda: format_line("Value is 10", console))
        sw.case("val > 10").then(lambda: format_line("Value is greater than 10", console))


@click.command()
def demo() -> None:
    """Run the example dispatches and print what fires."""
    console = get_console()
    demo_int_range(console)
    demo_substring(console)
    demo_no_default(console)
