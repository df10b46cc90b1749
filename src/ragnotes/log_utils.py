# src/ragnotes/log_utils.py
"""Logging setup for applications built on ragnotes.

The library itself only creates module loggers; call configure_logging()
from the application entry point (the CLI does this).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

NOISY_LOGGERS = ("LiteLLM", "litellm", "httpx", "httpcore", "chromadb", "urllib3")


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure root logging with a single stderr handler and ISO timestamps."""
    root_logger = logging.getLogger()
    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
