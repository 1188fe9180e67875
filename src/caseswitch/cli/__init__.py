"""caseswitch CLI -- demo and benchmark commands.

This module is NEVER imported from caseswitch/__init__.py.
It is only loaded via the ``caseswitch`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install caseswitch[cli]"
    ) from None


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    envvar="CASESWITCH_VERBOSE",
    help="Log every dispatch decision at DEBUG level.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """caseswitch: runtime predicate dispatch."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands after cli group is defined
from caseswitch.cli.commands.bench import bench  # noqa: E402
from caseswitch.cli.commands.demo import demo  # noqa: E402

cli.add_command(demo)
cli.add_command(bench)
