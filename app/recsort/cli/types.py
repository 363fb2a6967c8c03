"""Shared types and helpers for CLI commands.

This module provides the menu choices and the helpers used by every
command to read global options and resolve the working root.
"""

from enum import Enum
from pathlib import Path

import typer
from rich.markup import escape

from recsort.core.errors import RootResolutionError
from recsort.core.paths import display_text, resolve_root
from recsort.utils.formatting import print_error


class MenuChoice(str, Enum):
    """Options offered by the interactive menu."""

    PRUNE = "1"
    ORGANIZE = "2"
    BOTH = "3"


def is_quiet(ctx: typer.Context) -> bool:
    """Read the global --quiet flag from the context."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return bool(obj.get("quiet", False))


def require_root() -> Path:
    """Resolve the working root or exit.

    Returns:
        Absolute path of the current working directory.

    Raises:
        typer.Exit: With code 1 if the root cannot be resolved.
    """
    try:
        return resolve_root()
    except RootResolutionError as e:
        print_error(escape(display_text(str(e))))
        raise typer.Exit(code=1) from e
