"""
Logging configuration for the Jira client.

Usage:
    from jira_lookup.core.logging import setup_logging, get_logger

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write to stdout.

    Meant to be called once by whatever embeds the client. Unknown level
    names fall back to INFO.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Request lines from the transport are noise next to our own diagnostics
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for *name* (usually ``__name__``)."""
    return logging.getLogger(name)
