"""Rich display functions for prune and organize reports.

Prints the per-item progress lines and the summary table for each
operation.
"""

from rich.markup import escape
from rich.table import Table

from recsort.core.paths import display_path, display_text, relative_display
from recsort.organizer.models import ActionKind, ItemResult, OrganizeReport, PruneReport
from recsort.utils.formatting import (
    console,
    err_console,
    format_size,
    print_header,
    print_warning,
)


def _print_failure(result: ItemResult, root_label: str | None = None) -> None:
    """Print one failed action to stderr."""
    verb = {
        ActionKind.DELETE: "removing",
        ActionKind.CREATE: "creating",
        ActionKind.MOVE: "moving",
        ActionKind.REMOVE_DIR: "removing",
        ActionKind.READ: "reading",
    }[result.kind]
    label = escape(display_text(root_label or str(result.path)))
    error = escape(display_text(result.error or "Unknown error"))
    err_console.print(f"  [error]\\[ERROR][/] {verb} {label}: {error}")


def _create_summary_table(rows: list[tuple[str, str]]) -> Table:
    """Create a two-column summary table."""
    table = Table(
        title="Summary",
        show_header=False,
        border_style="border",
    )
    table.add_column("Metric", style="bold_header")
    table.add_column("Value", justify="right")
    for metric, value in rows:
        table.add_row(metric, value)
    return table


def print_prune_start(threshold: int, root: str) -> None:
    """Print the header shown before pruning starts."""
    print_header(f"Removing files smaller than {format_size(threshold)}")
    console.print(f"Scanning directory: [path]{escape(display_path(root))}[/]\n")


def print_prune_report(report: PruneReport, quiet: bool = False) -> None:
    """Print per-file progress and the prune summary.

    Args:
        report: Result of the prune run.
        quiet: Suppress successful per-file lines (failures still print).
    """
    for result in report.results:
        if result.failed:
            _print_failure(result)
        elif not quiet:
            path = escape(display_path(result.path))
            console.print(f"[removed]Removed:[/] {path} ({result.size_bytes} bytes)")

    console.print()
    console.print(
        _create_summary_table(
            [
                ("Files removed", str(report.removed_count)),
                (
                    "Total size freed",
                    f"{report.bytes_freed} bytes ({report.kib_freed:.2f} KB)",
                ),
                ("Errors encountered", str(report.error_count)),
            ]
        )
    )
    if report.error_count:
        print_warning(f"{report.error_count} error(s) encountered; see the lines above")


def print_organize_start(root: str) -> None:
    """Print the header shown before organizing starts."""
    print_header("Organizing files by extension")
    console.print(f"Working in: [path]{escape(display_path(root))}[/]\n")


def print_organize_report(report: OrganizeReport, quiet: bool = False) -> None:
    """Print per-phase progress and the organize summary.

    Args:
        report: Result of the organize run.
        quiet: Suppress successful per-item lines (failures still print).
    """
    root = report.root

    console.print("Creating target directories...")
    for result in report.provisioned:
        name = result.path.name
        if result.failed:
            _print_failure(result, name)
        elif not quiet:
            console.print(f"  [created]\\[OK][/] {escape(display_text(name))}")

    console.print("\nScanning files...")
    for result in report.scan_errors:
        _print_failure(result)
    console.print(f"Found {len(report.tasks)} files to organize\n")

    console.print("Moving files...")
    for result in report.moves:
        if result.failed:
            _print_failure(result)
        elif not quiet and result.destination is not None:
            folder = display_text(result.destination.parent.name)
            name = display_text(result.path.name)
            final = display_text(result.destination.name)
            renamed = f" (as {final})" if final != name else ""
            console.print(f"  {escape(name)} [moved]->[/] {escape(folder)}/{escape(renamed)}")

    console.print("\nRemoving empty directories...")
    for result in report.cleanup:
        if result.failed:
            _print_failure(result)
        elif not quiet:
            console.print(f"  [removed]Removed:[/] {escape(relative_display(result.path, root))}")

    console.print()
    console.print(
        _create_summary_table(
            [
                ("Files moved", str(report.moved_count)),
                ("Files skipped", str(report.skipped_count)),
                ("Empty directories removed", str(report.removed_dirs_count)),
            ]
        )
    )
    if report.errors:
        print_warning(f"{len(report.errors)} error(s) encountered; see the lines above")
