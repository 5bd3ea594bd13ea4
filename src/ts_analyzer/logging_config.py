"""
Logging setup for ts-analyzer.

Library modules only ever call ``get_logger(__name__)``; handlers are
installed once by the CLI through ``setup_logging``. Records go to stderr
through rich so that stdout stays free for ``--json`` output.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "ts_analyzer"

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level; ``quiet`` wins."""
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Install a rich stderr handler (and optionally a file handler).

    Args:
        verbose: Log DEBUG and above, with timestamps and source locations
        quiet: Log ERROR and above only
        log_file: Append plain-text records to this file as well

    Returns:
        The ``ts_analyzer`` package logger
    """
    level = level_for(verbose, quiet)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        to_file = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(to_file)

    # force=True replaces handlers left by an earlier call in the same process
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``ts_analyzer`` namespace; bare names are prefixed."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
