"""Logging helpers.

Modules grab a named logger with ``get_logger(__name__)``; the CLI
entry point calls ``configure_logging`` once.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=_FORMAT)
    logging.getLogger("medistore").setLevel(level.upper())
