import logging
import sys

from storefront.infrastructure.config import DEFAULT_LOG_FORMAT


def configure_logging(level: str = "INFO", format_string: str = DEFAULT_LOG_FORMAT) -> None:
    """Send all log records to stderr through a single handler.

    Called once by the CLI entry point; library modules only create
    loggers and never touch handlers.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)
