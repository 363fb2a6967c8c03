"""Organize command.

Sorts every file under the current working directory into extension
folders at the top level and removes directories left empty.
"""

import typer

from recsort.cli.display import print_organize_report, print_organize_start
from recsort.cli.types import is_quiet, require_root
from recsort.core.config import DEFAULT_CONFIG, RecsortConfig
from recsort.organizer.models import OrganizeReport
from recsort.organizer.organizer import Organizer

app = typer.Typer(
    name="organize",
    help="Sort files into extension folders.",
    invoke_without_command=True,
)


def execute_organize(
    quiet: bool = False,
    config: RecsortConfig = DEFAULT_CONFIG,
) -> OrganizeReport:
    """Resolve the root, organize it and print the report.

    Args:
        quiet: Suppress successful per-item lines.
        config: Run configuration.

    Returns:
        The OrganizeReport for the run.

    Raises:
        typer.Exit: If the working root cannot be resolved.
    """
    root = require_root()
    print_organize_start(str(root))

    report = Organizer(config).run(root)

    print_organize_report(report, quiet=quiet)
    return report


@app.callback(invoke_without_command=True)
def organize(ctx: typer.Context) -> None:
    """Sort files into extension folders and remove empty directories.

    Known extensions (png, jpg, jpeg, zip, mov, gif, mp3, mp4, mkv) get
    a folder of the same name; everything else goes to "others". Files
    with a name already taken in their folder are renamed photo_1.png,
    photo_2.png, and so on.

    Examples:
        recsort organize
    """
    if ctx.invoked_subcommand is not None:
        return

    execute_organize(quiet=is_quiet(ctx))
