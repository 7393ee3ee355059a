"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

LEVEL = logging.INFO
LOGGER_NAME = "seqstats"
FORMAT = '[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s'
DATEFMT = '%Y-%m-%d %H:%M:%S %z'

def setup_logging(level: int | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Call once from the application that uses the toolkit; the library never
    configures logging on import. Later calls are no-ops.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return logger

    # Create a standard formatter with gunicorn-like brackets
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    # Configure stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Only the package logger is touched, the root logger stays with the app
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(LEVEL if level is None else level)
    logger.propagate = False  # Handled here, keep records off the root logger

    setup_logging._configured = True  # type: ignore[attr-defined]
    return logger
