"""Opt-in logging setup for applications using fp-jax.

The package itself only attaches a ``NullHandler`` to the ``fp_jax`` logger;
nothing here runs at import.
"""

import logging
import os
import sys

__all__ = ["setup_logger"]


def setup_logger(
    name: str = "fp_jax",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to ``name`` and return the logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL),
            defaults to the FP_JAX_LOG_LEVEL environment variable
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("FP_JAX_LOG_LEVEL", "INFO")
    format_string = format_string or "%(asctime)s %(name)s %(levelname)s: %(message)s"

    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    return logger
