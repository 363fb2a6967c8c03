"""CLI commands for recsort.

This package contains all subcommand implementations.
"""

from recsort.cli.commands import both, menu, organize, prune

__all__ = ["both", "menu", "organize", "prune"]
