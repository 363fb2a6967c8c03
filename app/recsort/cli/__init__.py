"""CLI package for recsort.

This package contains the Typer application and all subcommands.
"""

from recsort.cli.main import app

__all__ = ["app"]
