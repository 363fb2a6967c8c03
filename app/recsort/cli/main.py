"""Main CLI application entry point.

Defines the Typer application and global options. Running recsort
without a subcommand opens the interactive menu.
"""

from typing import Annotated

import typer

from recsort import __version__
from recsort.cli.commands import both, menu, organize, prune
from recsort.utils.log import setup_logging

# Create main Typer app
app = typer.Typer(
    name="recsort",
    help="Tidy a file-recovery dump: drop tiny files, sort the rest by extension.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"recsort version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print failures and the summary.",
        ),
    ] = False,
) -> None:
    """recsort - tidy the current directory tree.

    Removes files smaller than 20 KB, moves every other file into a
    folder named after its extension, and deletes directories left
    empty. Always works on the current working directory.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    setup_logging(verbose=verbose)

    if ctx.invoked_subcommand is None:
        menu.run_menu(quiet=quiet)


# Register commands
app.add_typer(prune.app, name="prune")
app.add_typer(organize.app, name="organize")
app.add_typer(both.app, name="all")


if __name__ == "__main__":
    app()
