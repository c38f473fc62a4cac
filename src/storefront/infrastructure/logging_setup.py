"""Console logging for the storefront package."""

from __future__ import annotations

import logging

LOGGER_NAME = "storefront"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one console handler to the package logger.

    Calling it again only updates the level; handlers are never stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger
