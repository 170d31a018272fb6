"""Logging setup for the podexport CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "INFO",
) -> logging.Logger:
    """Configure the ``podexport`` logger.

    Console output goes to stderr through rich. A plain-text file handler is
    added when ``log_file`` is given.

    Args:
        verbose: Log at DEBUG level
        log_file: Optional file to also write logs to
        level: Base level name when not verbose

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("podexport")
    logger.setLevel(logging.DEBUG if verbose else level)

    # Re-running (e.g. repeated CliRunner invocations) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
