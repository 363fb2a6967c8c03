"""Interactive menu shown when recsort runs without a subcommand."""

import typer

from recsort.cli.commands.both import execute_both
from recsort.cli.commands.organize import execute_organize
from recsort.cli.commands.prune import execute_prune
from recsort.cli.types import MenuChoice
from recsort.utils.formatting import console, print_error


def _print_menu() -> None:
    """Print the menu options."""
    console.print("[bold_header]=== PhotoRec File Organizer ===[/]\n")
    console.print(f"{MenuChoice.PRUNE.value}. Remove files smaller than 20 KB")
    console.print(f"{MenuChoice.ORGANIZE.value}. Organize files by extension")
    console.print(f"{MenuChoice.BOTH.value}. Both (remove small files, then organize)")


def run_menu(quiet: bool = False) -> None:
    """Prompt for an option and dispatch to the chosen flow.

    Args:
        quiet: Suppress successful per-item lines.

    Raises:
        typer.Exit: With code 1 on an invalid choice; nothing on disk
            is touched in that case.
    """
    _print_menu()
    answer = typer.prompt("\nChoose an option (1-3)", default="", show_default=False)

    try:
        choice = MenuChoice(answer.strip())
    except ValueError:
        print_error("Invalid option!")
        raise typer.Exit(code=1) from None

    if choice == MenuChoice.PRUNE:
        execute_prune(quiet=quiet)
    elif choice == MenuChoice.ORGANIZE:
        execute_organize(quiet=quiet)
    else:
        execute_both(quiet=quiet)
