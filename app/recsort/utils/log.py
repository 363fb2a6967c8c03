"""Logging setup for the recsort CLI.

Component modules log through ``logging.getLogger(__name__)``; the CLI
attaches a single Rich handler to the package logger on stderr.
"""

import logging

from rich.logging import RichHandler

from recsort.utils.formatting import err_console

LOGGER_NAME = "recsort"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; existing handlers are replaced.

    Args:
        verbose: Log at DEBUG instead of ERROR. Per-item failures are
            already printed by the CLI, so WARNING records only show up
            in verbose mode.

    Returns:
        The configured ``recsort`` logger.
    """
    level = logging.DEBUG if verbose else logging.ERROR
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%H:%M:%S]",
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
