"""Prune command.

Deletes every file below the size threshold under the current
working directory.
"""

import typer

from recsort.cli.display import print_prune_report, print_prune_start
from recsort.cli.types import is_quiet, require_root
from recsort.core.config import DEFAULT_CONFIG, RecsortConfig
from recsort.organizer.models import PruneReport
from recsort.organizer.pruner import Pruner

app = typer.Typer(
    name="prune",
    help="Remove files smaller than 20 KB.",
    invoke_without_command=True,
)


def execute_prune(quiet: bool = False, config: RecsortConfig = DEFAULT_CONFIG) -> PruneReport:
    """Resolve the root, prune it and print the report.

    Args:
        quiet: Suppress successful per-file lines.
        config: Run configuration.

    Returns:
        The PruneReport for the run.

    Raises:
        typer.Exit: If the working root cannot be resolved.
    """
    root = require_root()
    print_prune_start(config.min_size_bytes, str(root))

    report = Pruner(config).run(root)

    print_prune_report(report, quiet=quiet)
    return report


@app.callback(invoke_without_command=True)
def prune(ctx: typer.Context) -> None:
    """Remove files smaller than 20 KB from the current directory tree.

    Ignored directories (target, src, .git, node_modules) are never
    entered, and Cargo.toml / Cargo.lock are never deleted. Files of
    exactly 20 KB are kept. There is no confirmation step.

    Examples:
        recsort prune
    """
    if ctx.invoked_subcommand is not None:
        return

    execute_prune(quiet=is_quiet(ctx))
