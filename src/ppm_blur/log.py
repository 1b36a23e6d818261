"""Logging setup for ppm_blur."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the root ppm_blur logger (stderr only)."""

    logger = logging.getLogger("ppm_blur")
    # one handler per process, bound to the current stderr
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False
    return logger


def get_logger(name: str = "ppm_blur") -> logging.Logger:
    """Return a logger under the ppm_blur namespace."""

    return logging.getLogger(name)
