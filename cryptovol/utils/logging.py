"""
Logging configuration for the cryptovol package.

Every module logs through ``logging.getLogger(__name__)``; those loggers
are children of the ``cryptovol`` logger configured here, so one call
routes estimator, comparison and report messages to the same handlers.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional


LOGGER_NAME = "cryptovol"

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console: bool = True
) -> logging.Logger:
    """
    Configure the ``cryptovol`` package logger.

    Calling it again replaces the handlers from the previous call. DVOL
    values are logged at DEBUG, skipped comparison methods at WARNING and
    assembled reports at INFO.

    Args:
        log_file: Path to a log file, which always receives DEBUG records.
            If None, only console logging.
        log_level: Level name for the logger and console handler
        console: Whether to log to stderr

    Returns:
        Configured package logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        _attach(logger, logging.StreamHandler(), level)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file), logging.DEBUG)

    return logger


def setup_logging_from_config(config: Mapping[str, Any]) -> logging.Logger:
    """
    Configure logging from the ``logging`` section of config.yaml.

    Recognized keys: ``level``, ``console`` and ``file``.
    """
    log_config = config.get('logging') or {}
    return setup_logging(
        log_file=log_config.get('file'),
        log_level=log_config.get('level', 'INFO'),
        console=log_config.get('console', True),
    )
