"""
Logging setup for the gateway.

The root logger gets one console handler, plus a daily file handler when
a log directory is configured (LOG_DIR). Calling setup_logging again
replaces the handlers it installed earlier instead of stacking new ones.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every HTTP round trip
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "google")

_HANDLER_PREFIX = "gateway."


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        log_level: Level name for the root logger; unknown names fall back to INFO
        log_dir: Directory for gateway_YYYYMMDD.log files; console only if None

    Returns:
        The root logger
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    handlers[0].set_name(f"{_HANDLER_PREFIX}console")

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"gateway_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(f"{_HANDLER_PREFIX}file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; pass __name__."""
    return logging.getLogger(name)
