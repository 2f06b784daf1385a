"""Logging for microbench.

Everything logs to the ``microbench`` logger.  The console handler
writes bare messages to stderr, so "Starting: fibonacci(45)" and
"Done: fibonacci(45)" appear between the user's command and the report
on stdout without a level prefix.  A log file, when requested, gets
every record with timestamps, including the per-run DEBUG summaries.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "microbench"
_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console and optional file handlers to the microbench logger.

    Calling this again replaces the handlers from the previous call, which
    lets one process run the CLI several times (as the tests do).

    Args:
        verbose: Show per-run DEBUG summaries on the console.
        quiet: Show only warnings and errors.  *verbose* wins if both are set.
        log_file: Also write every record, at DEBUG, to this file.

    Returns:
        The ``microbench`` logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    console = logging.StreamHandler()
    console.setLevel(_console_level(verbose, quiet))
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
