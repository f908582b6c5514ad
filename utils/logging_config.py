# utils/logging_config.py
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger: stderr output plus an optional log file.

    Calling it again replaces the previously installed handlers.

    Args:
        level: Root logging level (e.g., logging.INFO, logging.DEBUG).
        log_file: Optional path that receives a copy of every record.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if root.hasHandlers():
        root.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return the logger called *name*, set to *level*."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
