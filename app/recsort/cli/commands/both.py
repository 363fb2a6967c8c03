"""Combined prune-then-organize command."""

import typer

from recsort.cli.commands.organize import execute_organize
from recsort.cli.commands.prune import execute_prune
from recsort.cli.types import is_quiet
from recsort.utils.formatting import console

app = typer.Typer(
    name="all",
    help="Remove small files, then organize.",
    invoke_without_command=True,
)


def execute_both(quiet: bool = False) -> None:
    """Run the prune flow followed by the organize flow."""
    execute_prune(quiet=quiet)
    console.print()
    execute_organize(quiet=quiet)


@app.callback(invoke_without_command=True)
def run_all(ctx: typer.Context) -> None:
    """Remove files smaller than 20 KB, then organize what is left.

    Examples:
        recsort all
    """
    if ctx.invoked_subcommand is not None:
        return

    execute_both(quiet=is_quiet(ctx))
