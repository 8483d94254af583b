"""Logging setup for applications embedding the analytics core.

Library modules only create named loggers under ``strategy_analytics`` and
never attach handlers; scripts call ``setup_logging`` once.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "strategy_analytics"

DEFAULT_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


def setup_logging(
    log_level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call, so the
    example scripts can re-run it with a different level.

    Args:
        log_level: Level name ("debug", "INFO", ...) or a logging constant
        log_file: Optional path; parent directories are created
        log_format: Format string (defaults to DEFAULT_FORMAT)

    Returns:
        The ``strategy_analytics`` logger

    Example:
        >>> setup_logging("DEBUG")
        >>> aggregate_strategy(legs, market)  # logs per-leg Greeks and curve size
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT, datefmt='%H:%M:%S')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Keep analytics output out of the host application's root handlers
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the package namespace.

    Accepts a short name ("payoff") or a module ``__name__``
    ("strategy_analytics.analytics.payoff"); both land under the package logger.
    """
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
