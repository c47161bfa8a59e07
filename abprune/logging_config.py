"""Logging configuration for the alpha-beta tree solver."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_installed_handler: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_LOG_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'


def setup_logging(level: str = "INFO", format_json: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to output logs in JSON format
        stream: Destination stream, stdout when omitted. The CLI passes
            stderr so that stdout only carries search results.
    """
    global _installed_handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    if format_json:
        formatter = logging.Formatter(JSON_LOG_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)

    # Replace rather than stack handlers when called more than once.
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    _installed_handler = handler

    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


__all__ = ["setup_logging"]
