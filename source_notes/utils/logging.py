"""Logging setup for source-notes.

Configures the ``source_notes`` logger with a console handler and an
optional file handler. Console output goes to stderr because the
``preview`` and ``tree`` commands print their results on stdout.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "source_notes"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers are removed first, so calling this once per CLI
    invocation never duplicates log lines.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_format: Format string for log records.
        log_file: Optional path of a file that receives the same records.

    Returns:
        The configured ``source_notes`` logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.propagate = False

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(numeric_level)
    formatter = logging.Formatter(log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging initialized at level %s", level)
    return package_logger
