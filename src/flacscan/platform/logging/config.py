"""Package logger setup: rich console output plus an optional rotating log file."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import ScanRichHandler


LOGGER_NAME: Final[str] = "flacscan"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Reset the ``flacscan`` logger handlers.

    Args:
        log_file: Rotating log file (10 MiB x 5). Console only when None.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the file handler.
        console: Rich console to render to. Defaults to stderr.

    Returns:
        logging.Logger: The package logger.
    """

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if console is None:
        console = Console(stderr=True, soft_wrap=True)
    rich_handler = ScanRichHandler(console=console)
    rich_handler.setLevel(console_level)
    package_logger.addHandler(rich_handler)

    if log_file is not None:
        target = Path(log_file).expanduser().resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            target, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        package_logger.addHandler(file_handler)

    return package_logger


# The CLI attaches the log file once configuration has been loaded.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
